#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
import errno
import socket
from io import BytesIO

import pytest

from hermes.aio.interfaces import ClientErrorInfo
from hermes.aio.utils import (
    async_list,
    get_os_error_info,
    read_streaming_blob_async,
)


class _AsyncReader:
    def __init__(self, data: bytes) -> None:
        self._data = BytesIO(data)

    async def read(self, size: int = -1) -> bytes:
        return self._data.read(size)


@pytest.mark.parametrize(
    "body",
    [b"payload", bytearray(b"payload"), _AsyncReader(b"payload")],
)
async def test_read_streaming_blob(body: bytes) -> None:
    assert await read_streaming_blob_async(body) == b"payload"


async def test_read_streaming_blob_async_iterable() -> None:
    assert await read_streaming_blob_async(async_list([b"pay", b"load"])) == b"payload"


async def test_read_streaming_blob_rejects_other_types() -> None:
    with pytest.raises(TypeError):
        await read_streaming_blob_async("payload")  # type: ignore


@pytest.mark.parametrize(
    "error,expected",
    [
        (TimeoutError("timed out"), ClientErrorInfo(is_timeout_error=True)),
        (
            OSError(errno.ENETUNREACH, "Network is unreachable"),
            ClientErrorInfo(is_offline_error=True),
        ),
        (
            OSError(errno.ENETDOWN, "Network is down"),
            ClientErrorInfo(is_offline_error=True),
        ),
        (
            ConnectionRefusedError(errno.ECONNREFUSED, "Connection refused"),
            ClientErrorInfo(is_connect_error=True),
        ),
        (
            socket.gaierror(socket.EAI_NONAME, "Name or service not known"),
            ClientErrorInfo(is_connect_error=True),
        ),
        (ValueError("bad URL"), ClientErrorInfo()),
    ],
)
def test_get_os_error_info(error: Exception, expected: ClientErrorInfo) -> None:
    assert get_os_error_info(error) == expected
