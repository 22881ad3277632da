#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
from itertools import chain
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    # pyright doesn't like optional imports. This is reasonable because if we use these
    # in type hints then they'd result in runtime errors.
    import aiohttp

try:
    import aiohttp  # noqa: F811

    HAS_AIOHTTP = True
except ImportError:
    HAS_AIOHTTP = False  # type: ignore

from .. import tuples_to_fields
from ..exceptions import MissingDependencyError
from ..interfaces import FieldPosition, HTTPRequestConfiguration
from . import HTTPResponse
from .interfaces import ClientErrorInfo, HTTPClient, HTTPRequest
from .utils import get_os_error_info


def _assert_aiohttp() -> None:
    if not HAS_AIOHTTP:
        raise MissingDependencyError(
            "Attempted to use aiohttp component, but aiohttp is not installed."
        )


class AIOHTTPClient(HTTPClient):
    """Implementation of :py:class:`.interfaces.HTTPClient` using aiohttp.

    A single ``aiohttp.ClientSession`` backs every request sent through an instance.
    It is opened on the first request, since aiohttp sessions must be created inside
    a running event loop, and stays open until :py:meth:`close`.
    """

    def __init__(self) -> None:
        _assert_aiohttp()
        self._session: "aiohttp.ClientSession | None" = None

    def _get_session(self) -> "aiohttp.ClientSession":
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession()
        return self._session

    async def send(
        self,
        request: HTTPRequest,
        *,
        request_config: HTTPRequestConfiguration | None = None,
    ) -> HTTPResponse:
        """Send HTTP request using aiohttp client.

        :param request: The request including destination URI, fields, payload.
        :param request_config: Configuration specific to this request.
        """
        headers = list(
            chain.from_iterable(
                fld.as_tuples()
                for fld in request.fields.get_by_type(FieldPosition.HEADER)
            )
        )

        extra: dict[str, Any] = {}
        if request_config is not None and request_config.read_timeout is not None:
            extra["timeout"] = aiohttp.ClientTimeout(
                sock_read=request_config.read_timeout
            )

        # The query is already encoded in the order it was given, so the full URL
        # is passed rather than handing aiohttp a params mapping.
        async with self._get_session().request(
            method=request.method,
            url=request.destination.build(),
            headers=headers,
            data=request.body or None,
            **extra,
        ) as resp:
            return HTTPResponse(
                status=resp.status,
                fields=tuples_to_fields(resp.headers.items()),
                body=await resp.read(),
                reason=resp.reason,
            )

    def get_error_info(self, exception: Exception) -> ClientErrorInfo:
        """Classify aiohttp and OS level failures.

        :param exception: The exception raised while sending a request.
        """
        if isinstance(exception, aiohttp.ClientConnectorError):
            info = get_os_error_info(exception.os_error)
            if info.is_offline_error or info.is_timeout_error:
                return info
            return ClientErrorInfo(is_connect_error=True)
        if isinstance(exception, aiohttp.ServerTimeoutError):
            return ClientErrorInfo(is_timeout_error=True)
        return get_os_error_info(exception)

    async def close(self) -> None:
        """Close the underlying session, if one was opened."""
        if self._session is not None and not self._session.closed:
            await self._session.close()
