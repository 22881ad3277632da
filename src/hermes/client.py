#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
import asyncio
import logging
from collections.abc import Callable, Mapping
from typing import Any, Self, TypeAlias

from . import URI, Field, Fields
from .aio import HTTPRequest, ResponseMetadata
from .aio.aiohttp import AIOHTTPClient
from .aio.interfaces import HTTPClient
from .aio.types import ProgressReader
from .config import Config
from .endpoints import Endpoint
from .exceptions import (
    CannotConnectToHost,
    InvalidURL,
    NetworkError,
    NotConnectedToInternet,
    ServerError,
    TimedOut,
    Unknown,
)
from .interfaces import HTTPRequestConfiguration
from .types import FileType, Method, Scheme
from .utils import join_query_params, quote_path, split_host_name

_LOGGER = logging.getLogger(__name__)

ProgressCallback: TypeAlias = Callable[[float], None]
"""Called with the fraction of an upload sent so far, between 0 and 1."""


class Courrier:
    """Sends requests to a single host and normalizes every failure into a
    :py:class:`hermes.exceptions.NetworkError`.

    The transport is resolved once and shared by every call made through this
    instance, so calls may run concurrently. A transport passed in ``config`` is
    left open by :py:meth:`close`; the default aiohttp transport is closed.

    ``upload_progress`` and ``is_uploading`` describe the most recent upload. They are
    instance-wide, so concurrent uploads on the same instance overwrite each other's
    values. Pass ``on_progress`` to :py:meth:`upload` to follow one upload reliably.

    .. code-block:: python

        async with Courrier(Scheme.HTTPS, "httpbin.org") as courrier:
            body, metadata = await courrier.request(Method.GET, Endpoint("/get"))
    """

    def __init__(
        self,
        scheme: Scheme,
        host: str,
        *,
        config: Config | None = None,
    ) -> None:
        """
        :param scheme: The scheme of every request.
        :param host: The host, optionally with a port as ``host:port``.
        :param config: Headers, credentials and the transport to use.
        """
        self.scheme = scheme
        self.host = host
        self._config = config or Config()
        self._default_transport: AIOHTTPClient | None = None
        self._transport: HTTPClient
        if self._config.http_client is None:
            self._default_transport = self._transport = AIOHTTPClient()
        else:
            self._transport = self._config.http_client

        self.upload_progress: float = 0.0
        self.is_uploading: bool = False

    @property
    def config(self) -> Config:
        return self._config

    async def request(
        self,
        method: Method,
        endpoint: Endpoint,
        body: bytes | None = None,
        headers: Mapping[str, str] | None = None,
        *,
        request_config: HTTPRequestConfiguration | None = None,
    ) -> tuple[bytes, ResponseMetadata]:
        """Send an HTTP request.

        :param method: The HTTP method. The body is only sent for POST and PUT.
        :param endpoint: The path and query parameters of the request.
        :param body: The request payload.
        :param headers: Headers that are added, or that replace the defaults.
        :param request_config: Configuration for this call only.
        :raises NetworkError: If the URL cannot be built, the transport fails, or the
            response status is 300 or above.
        :returns: The response body and its metadata.
        """
        fields = self._default_fields(content_type=self._config.content_type)
        self._apply_auth(fields)
        self._apply_headers(fields, headers)

        request = HTTPRequest(
            destination=self._resolve_uri(endpoint, include_query=True),
            method=method.value,
            fields=fields,
            body=body if method.has_body and body is not None else b"",
        )
        return await self._send(request, request_config)

    async def upload(
        self,
        endpoint: Endpoint,
        file_name: str,
        file_type: FileType,
        data: bytes,
        headers: Mapping[str, str] | None = None,
        *,
        on_progress: ProgressCallback | None = None,
        request_config: HTTPRequestConfiguration | None = None,
    ) -> tuple[bytes, ResponseMetadata]:
        """Upload a payload as the raw body of a POST request.

        Query parameters of ``endpoint`` are not sent. The payload is not multipart
        encoded.

        :param endpoint: The path to upload to.
        :param file_name: Sent in the filename header, with the extension of
            ``file_type`` appended unless already present.
        :param file_type: Determines the ``Content-Type`` of the upload.
        :param data: The payload.
        :param headers: Headers that are added, or that replace the defaults.
        :param on_progress: Called with the fraction sent as the transport consumes
            the payload, and with ``1.0`` once the upload completes or fails. If the
            upload fails, an exception from this final call is logged and the
            upload's error is raised instead.
        :param request_config: Configuration for this call only.
        :raises NetworkError: Same as :py:meth:`request`.
        :returns: The response body and its metadata.
        """
        destination = self._resolve_uri(endpoint, include_query=False)

        fields = self._default_fields(content_type=None)
        fields.set_field(
            Field(
                name=self._config.filename_header,
                values=[_file_name_with_extension(file_name, file_type)],
            )
        )
        fields.set_field(Field(name="Content-Type", values=[file_type.content_type]))
        fields.set_field(Field(name="Content-Length", values=[str(len(data))]))
        self._apply_auth(fields)
        self._apply_headers(fields, headers)

        def report(sent: int, total: int) -> None:
            progress = sent / total
            self.upload_progress = progress
            if on_progress is not None:
                on_progress(progress)

        request = HTTPRequest(
            destination=destination,
            method=Method.POST.value,
            fields=fields,
            body=ProgressReader(data, report),
        )

        self.upload_progress = 0.0
        self.is_uploading = True
        try:
            result = await self._send(request, request_config)
        except BaseException:
            self._finish_upload()
            if on_progress is not None:
                # The failure of the upload is what the caller sees.
                try:
                    on_progress(1.0)
                except Exception:
                    _LOGGER.warning("Upload progress callback failed", exc_info=True)
            raise

        self._finish_upload()
        if on_progress is not None:
            on_progress(1.0)
        return result

    @property
    def http_client(self) -> HTTPClient:
        """The transport requests are sent through."""
        return self._transport

    async def close(self) -> None:
        """Close the transport if this instance created it."""
        if self._default_transport is not None:
            await self._default_transport.close()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    def _finish_upload(self) -> None:
        self.is_uploading = False
        self.upload_progress = 1.0

    def _resolve_uri(self, endpoint: Endpoint, *, include_query: bool) -> URI:
        """Assemble the URL of a request.

        :raises InvalidURL: If the port is not a number, the path is not absolute, or
            the host contains characters not allowed in a URL.
        """
        host, *rest = split_host_name(self.host)
        port = None
        if rest:
            port_str = rest[0]
            if not (port_str.isascii() and port_str.isdigit()):
                raise InvalidURL(reason=f"Invalid port: {port_str!r}")
            port = int(port_str)

        path = endpoint.path
        if path and not path.startswith("/"):
            raise InvalidURL(reason=f"Path must start with '/': {path!r}")

        query = None
        if include_query and endpoint.query_params:
            query = join_query_params(endpoint.query_params)

        return URI(
            scheme=self.scheme.value,
            host=host,
            port=port,
            path=quote_path(path) or None,
            query=query,
        )

    def _default_fields(self, *, content_type: str | None) -> Fields:
        fields = Fields()
        fields.set_field(Field(name="User-Agent", values=[self._config.user_agent]))
        if content_type is not None:
            fields.set_field(Field(name="Content-Type", values=[content_type]))
        fields.set_field(Field(name="Accept", values=[self._config.accept]))
        fields.set_field(Field(name="Connection", values=[self._config.connection]))
        return fields

    def _apply_auth(self, fields: Fields) -> None:
        if self._config.api_key is not None:
            fields.set_field(Field(name="api-key", values=[self._config.api_key]))
        if self._config.token is not None:
            fields.set_field(Field(name="Authorization", values=[self._config.token]))

    def _apply_headers(self, fields: Fields, headers: Mapping[str, str] | None) -> None:
        for name, value in (headers or {}).items():
            fields.set_field(Field(name=name, values=[value]))

    async def _send(
        self,
        request: HTTPRequest,
        request_config: HTTPRequestConfiguration | None,
    ) -> tuple[bytes, ResponseMetadata]:
        request_config = request_config or self._config.http_request_config
        deadline = request_config.timeout if request_config is not None else None

        _LOGGER.debug(
            "Making a %s request to %s", request.method, request.destination.build()
        )

        try:
            async with asyncio.timeout(deadline):
                response = await self._transport.send(
                    request, request_config=request_config
                )
                body = await response.consume_body_async()
        except Exception as e:
            error = self._handle_http_error(e)
            if error is e:
                raise
            raise error from e

        if response.status > 299:
            _LOGGER.debug(
                "Request to %s failed with status %s",
                request.destination.build(),
                response.status,
            )
            raise ServerError(status_code=response.status)

        return body, ResponseMetadata.from_fields(
            status=response.status, fields=response.fields, reason=response.reason
        )

    def _handle_http_error(self, error: Exception) -> NetworkError:
        """Convert any failure of a call to a :py:class:`NetworkError`.

        :param error: The exception to convert.
        """
        if isinstance(error, NetworkError):
            return error

        info = self._transport.get_error_info(error)
        if info.is_offline_error:
            return NotConnectedToInternet()
        if info.is_timeout_error or isinstance(error, TimeoutError):
            return TimedOut()
        if info.is_connect_error:
            return CannotConnectToHost(cause=error)
        return Unknown(cause=error)


def _file_name_with_extension(file_name: str, file_type: FileType) -> str:
    extension = file_type.extension
    if not extension or file_name.lower().endswith(extension):
        return file_name
    return f"{file_name}{extension}"
