#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
import errno
import socket
from asyncio import sleep
from collections.abc import AsyncIterable, Iterable
from typing import TypeVar

from .interfaces import AsyncByteStream, ClientErrorInfo, StreamingBlob

E = TypeVar("E")

_OFFLINE_ERRNOS = frozenset({errno.ENETUNREACH, errno.ENETDOWN})


async def async_list(lst: Iterable[E]) -> AsyncIterable[E]:
    """Turn an Iterable into an AsyncIterable."""
    for x in lst:
        await sleep(0)
        yield x


async def read_streaming_blob_async(body: StreamingBlob) -> bytes:
    """Asynchronously reads a streaming blob into bytes.

    :param body: The streaming blob to read from.
    """
    match body:
        case bytes():
            return body
        case bytearray():
            return bytes(body)
        case AsyncByteStream():
            return await body.read()
        case AsyncIterable():
            full = b""
            async for chunk in body:
                full += chunk
            return full
        case _:
            raise TypeError(f"Expected type {StreamingBlob}, but was {type(body)}")


def get_os_error_info(error: BaseException) -> ClientErrorInfo:
    """Classify an operating-system level network failure.

    ``TimeoutError`` is checked first since it is itself an ``OSError``.

    :param error: The exception to classify.
    """
    if isinstance(error, TimeoutError):
        return ClientErrorInfo(is_timeout_error=True)
    if isinstance(error, OSError) and error.errno in _OFFLINE_ERRNOS:
        return ClientErrorInfo(is_offline_error=True)
    if isinstance(error, ConnectionError | socket.gaierror):
        return ClientErrorInfo(is_connect_error=True)
    return ClientErrorInfo()
