# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from collections.abc import Mapping
from dataclasses import dataclass, field

from .. import interfaces as http_interfaces
from .interfaces import StreamingBlob
from .utils import read_streaming_blob_async


@dataclass(kw_only=True)
class HTTPRequest:
    """HTTP primitives for an Exchange to construct a version agnostic HTTP message.

    Implements :py:class:`.interfaces.HTTPRequest`.
    """

    destination: http_interfaces.URI
    body: StreamingBlob = field(repr=False, default=b"")
    method: str
    fields: http_interfaces.Fields

    async def consume_body_async(self) -> bytes:
        """Iterate over request body and return as bytes."""
        return await read_streaming_blob_async(self.body)


# HTTPResponse implements interfaces.HTTPResponse but cannot be explicitly
# annotated to reflect this because doing so causes Python to raise an AttributeError.
# See https://github.com/python/typing/discussions/903#discussioncomment-4866851 for
# details.
@dataclass(kw_only=True)
class HTTPResponse:
    """Basic implementation of :py:class:`.interfaces.HTTPResponse`.

    Implementations of :py:class:`.interfaces.HTTPClient` may return instances of this
    class or of custom response implementations.
    """

    body: StreamingBlob = field(repr=False, default=b"")
    """The response payload as iterable of chunks of bytes."""

    status: int
    """The 3 digit response status code (1xx, 2xx, 3xx, 4xx, 5xx)."""

    fields: http_interfaces.Fields
    """HTTP header and trailer fields."""

    reason: str | None = None
    """Optional string provided by the server explaining the status."""

    async def consume_body_async(self) -> bytes:
        """Iterate over response body and return as bytes."""
        return await read_streaming_blob_async(self.body)


@dataclass(kw_only=True, frozen=True)
class ResponseMetadata:
    """Status and headers of a completed response, returned alongside its body."""

    status: int
    """The 3 digit response status code."""

    headers: Mapping[str, str]
    """Response headers by field name. Only the first value of each field is kept."""

    reason: str | None = None
    """Optional string provided by the server explaining the status."""

    @classmethod
    def from_fields(
        cls, *, status: int, fields: http_interfaces.Fields, reason: str | None = None
    ) -> "ResponseMetadata":
        headers: dict[str, str] = {}
        for fld in fields.get_by_type(http_interfaces.FieldPosition.HEADER):
            if fld.values:
                headers.setdefault(fld.name, fld.values[0])
        return cls(status=status, headers=headers, reason=reason)

    def get_header(self, name: str, default: str | None = None) -> str | None:
        """Look up a header value, ignoring the case of ``name``."""
        lowered = name.lower()
        for key, value in self.headers.items():
            if key.lower() == lowered:
                return value
        return default
