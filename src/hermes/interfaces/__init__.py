#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Protocol


class URI(Protocol):
    """Where a request is sent."""

    scheme: str
    host: str
    port: int | None
    path: str | None
    query: str | None

    @property
    def netloc(self) -> str: ...

    def build(self) -> str:
        """Render as ``{scheme}://{host}:{port}{path}?{query}``, omitting unset
        parts."""
        ...


class FieldPosition(Enum):
    """Where a field is carried in an HTTP message."""

    HEADER = 0
    TRAILER = 1


class Field(Protocol):
    name: str
    values: list[str]
    kind: FieldPosition

    def add(self, value: str) -> None: ...

    def as_tuples(self) -> list[tuple[str, str]]: ...


class Fields(Protocol):
    """Fields of a message, looked up by case-insensitive name."""

    entries: dict[str, Field]

    def set_field(self, field: Field) -> None:
        """Add ``field``, replacing any field of the same name."""
        ...

    def get(self, key: str, default: Field | None = None) -> Field | None: ...

    def __setitem__(self, name: str, field: Field) -> None: ...

    def __getitem__(self, name: str) -> Field: ...

    def __iter__(self) -> Iterator[Field]: ...

    def __len__(self) -> int: ...

    def __contains__(self, key: str) -> bool: ...

    def get_by_type(self, kind: FieldPosition) -> list[Field]: ...


@dataclass(kw_only=True)
class HTTPRequestConfiguration:
    """Request-level HTTP configuration.

    :param read_timeout: Seconds to wait for the next read on an open connection
        before the transport gives up.
    :param timeout: Deadline, in seconds, for the whole call including reading the
        response body. The call is cancelled and fails with ``TimedOut`` once it
        passes.
    """

    read_timeout: float | None = None
    timeout: float | None = None
