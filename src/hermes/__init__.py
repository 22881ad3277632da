# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from urllib.parse import urlunsplit

from . import interfaces
from .exceptions import InvalidURL
from .interfaces import FieldPosition

__version__ = "0.1.0"

# RFC 3986 section 3.2.2 reg-name: unreserved, pct-encoded and sub-delims.
_REG_NAME = re.compile(r"^(?:[A-Za-z0-9\-._~!$&'()*+,;=]|%[0-9A-Fa-f]{2})+$")
_IPV6_LITERAL = re.compile(r"^[0-9A-Fa-f:.]*:[0-9A-Fa-f:.]*$")


@dataclass(kw_only=True, frozen=True)
class URI(interfaces.URI):
    """The absolute target of one request.

    Construction fails with :py:class:`InvalidURL` when ``host`` or ``port`` could
    not appear in a URL, so an instance always builds to a well-formed string.
    """

    scheme: str = "https"
    host: str
    """A domain name, an IPv4 address or an unbracketed IPv6 address."""

    port: int | None = None
    path: str | None = None
    """Already percent-encoded path, starting with ``/``."""

    query: str | None = None
    """Already encoded query string, without the leading ``?``."""

    def __post_init__(self) -> None:
        if not (_REG_NAME.match(self.host) or _IPV6_LITERAL.match(self.host)):
            raise InvalidURL(reason=f"Invalid host: {self.host!r}")
        if self.port is not None and not 0 <= self.port <= 65535:
            raise InvalidURL(reason=f"Invalid port: {self.port}")

    @property
    def netloc(self) -> str:
        """``host[:port]``, with IPv6 hosts wrapped in brackets."""
        host = f"[{self.host}]" if ":" in self.host else self.host
        return host if self.port is None else f"{host}:{self.port}"

    def build(self) -> str:
        return urlunsplit(
            (self.scheme, self.netloc, self.path or "", self.query or "", "")
        )

    def __str__(self) -> str:
        return self.build()


class Field(interfaces.Field):
    """One named header, holding every value received or to be sent for it."""

    def __init__(
        self,
        *,
        name: str,
        values: Iterable[str] | None = None,
        kind: FieldPosition = FieldPosition.HEADER,
    ):
        self.name = name
        self.values: list[str] = list(values or ())
        self.kind = kind

    def add(self, value: str) -> None:
        self.values.append(value)

    def as_tuples(self) -> list[tuple[str, str]]:
        """One ``(name, value)`` pair per value, as sent on the wire."""
        return [(self.name, value) for value in self.values]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Field):
            return False
        return (self.name, self.values, self.kind) == (
            other.name,
            other.values,
            other.kind,
        )

    def __repr__(self) -> str:
        return f"Field(name={self.name!r}, values={self.values!r}, kind={self.kind!r})"


class Fields(interfaces.Fields):
    """Ordered header collection keyed by lower-cased field name.

    Setting a field replaces any entry whose name differs only in case, and the
    replacement's own casing is what gets sent.
    """

    def __init__(self, initial: Iterable[interfaces.Field] | None = None):
        self.entries: dict[str, interfaces.Field] = {}
        for fld in initial or ():
            key = fld.name.lower()
            if key in self.entries:
                raise ValueError(f"Field {key!r} appears more than once.")
            self.entries[key] = fld

    def set_field(self, field: interfaces.Field) -> None:
        self[field.name] = field

    def __setitem__(self, name: str, field: interfaces.Field) -> None:
        key = name.lower()
        if key != field.name.lower():
            raise ValueError(f"Key {name!r} does not match field name {field.name!r}")
        # Re-insert so the entry takes the new name's casing and position.
        self.entries.pop(key, None)
        self.entries[key] = field

    def get(
        self, key: str, default: interfaces.Field | None = None
    ) -> interfaces.Field | None:
        return self.entries.get(key.lower(), default)

    def __getitem__(self, name: str) -> interfaces.Field:
        return self.entries[name.lower()]

    def get_by_type(self, kind: FieldPosition) -> list[interfaces.Field]:
        return [fld for fld in self.entries.values() if fld.kind is kind]

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Fields) and self.entries == other.entries

    def __iter__(self) -> Iterator[interfaces.Field]:
        return iter(self.entries.values())

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, key: str) -> bool:
        return key.lower() in self.entries

    def __repr__(self) -> str:
        return f"Fields({list(self.entries.values())!r})"


def tuples_to_fields(
    tuples: Iterable[tuple[str, str]], *, kind: FieldPosition = FieldPosition.HEADER
) -> Fields:
    """Group ``(name, value)`` pairs into :py:class:`Fields`, merging repeated names
    case-insensitively."""
    fields = Fields()
    for name, value in tuples:
        if (existing := fields.get(name)) is not None:
            existing.add(value)
        else:
            fields[name] = Field(name=name, values=[value], kind=kind)
    return fields
