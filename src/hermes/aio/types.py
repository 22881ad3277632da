#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
from collections.abc import AsyncIterator, Callable
from typing import TypeAlias

# The default chunk size for iterating upload payloads.
_DEFAULT_CHUNK_SIZE = 64 * 1024

ProgressListener: TypeAlias = Callable[[int, int], None]
"""Called with ``(bytes_sent, bytes_total)``."""


class ProgressReader:
    """An async iterable over an in-memory payload that reports how much of it has
    been consumed.

    A transport pulls the next chunk only once the previous one has been written, so
    the listener is called for a chunk when the following chunk is requested, or when
    iteration finishes.
    """

    def __init__(
        self,
        data: bytes | bytearray,
        listener: ProgressListener,
        *,
        chunk_size: int = _DEFAULT_CHUNK_SIZE,
    ) -> None:
        """
        :param data: The payload to send.
        :param listener: Called with the running byte count after each chunk.
        :param chunk_size: The maximum size of each chunk.
        """
        if chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        self._data = bytes(data)
        self._listener = listener
        self._chunk_size = chunk_size

    def __len__(self) -> int:
        return len(self._data)

    def __aiter__(self) -> AsyncIterator[bytes]:
        return self.iter_chunks()

    async def iter_chunks(self) -> AsyncIterator[bytes]:
        total = len(self._data)
        sent = 0
        for start in range(0, total, self._chunk_size):
            chunk = self._data[start : start + self._chunk_size]
            yield chunk
            sent += len(chunk)
            self._listener(sent, total)
