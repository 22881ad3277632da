#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
from collections.abc import AsyncIterable
from dataclasses import dataclass
from typing import Protocol, TypeAlias, runtime_checkable

from ...interfaces import URI, Fields, HTTPRequestConfiguration


@runtime_checkable
class AsyncByteStream(Protocol):
    """Anything with an awaitable ``read``, such as an async file."""

    async def read(self, size: int = -1) -> bytes: ...


# Every shape a request or response payload may take.
StreamingBlob: TypeAlias = bytes | bytearray | AsyncByteStream | AsyncIterable[bytes]


class HTTPRequest(Protocol):
    destination: URI
    method: str
    fields: Fields
    body: StreamingBlob

    async def consume_body_async(self) -> bytes:
        """Read the whole payload."""
        ...


class HTTPResponse(Protocol):
    @property
    def status(self) -> int: ...

    @property
    def fields(self) -> Fields: ...

    @property
    def body(self) -> StreamingBlob: ...

    @property
    def reason(self) -> str | None: ...

    async def consume_body_async(self) -> bytes:
        """Read the whole payload."""
        ...


@dataclass(kw_only=True, frozen=True)
class ClientErrorInfo:
    """How a transport classifies one of its own failures.

    A failure with every flag unset is still a transport failure, just not one with
    a dedicated error type.
    """

    is_timeout_error: bool = False
    """The operation timed out."""

    is_connect_error: bool = False
    """The host could not be reached, resolved or connected to."""

    is_offline_error: bool = False
    """No network is available at all."""


class HTTPClient(Protocol):
    """The transport a :py:class:`hermes.client.Courrier` sends through.

    One instance serves every call of a client, so ``send`` must allow any number
    of requests in flight at once.
    """

    async def send(
        self,
        request: HTTPRequest,
        *,
        request_config: HTTPRequestConfiguration | None = None,
    ) -> HTTPResponse:
        """Send ``request`` and return once the response status and headers are
        available.

        :param request: The request to send.
        :param request_config: Configuration for this request only.
        """
        ...

    def get_error_info(self, exception: Exception) -> ClientErrorInfo:
        """Classify an exception raised while sending a request.

        :param exception: The exception raised by :py:meth:`send` or while reading
            the response body.
        """
        ...
