#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
from enum import Enum


class Method(Enum):
    """HTTP request methods."""

    GET = "GET"
    HEAD = "HEAD"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    CONNECT = "CONNECT"
    OPTIONS = "OPTIONS"
    TRACE = "TRACE"
    PATCH = "PATCH"

    @property
    def has_body(self) -> bool:
        """Whether a request body is attached for this method.

        Only ``POST`` and ``PUT`` carry a body. Any body given with another method is
        dropped.
        """
        return self in (Method.POST, Method.PUT)

    def __str__(self) -> str:
        return self.value


class Scheme(Enum):
    """URL schemes a :py:class:`hermes.client.Courrier` can talk to."""

    HTTP = "http"
    HTTPS = "https"

    def __str__(self) -> str:
        return self.value


class FileType(Enum):
    """Type of an uploaded file.

    Determines the ``Content-Type`` of the upload and the extension appended to the
    file name.
    """

    JPG = "jpg"
    JPEG = "jpeg"
    PNG = "png"
    HEIC = "heic"
    MP3 = "mp3"
    MP4 = "mp4"
    WEBA = "weba"
    WEBM = "webm"
    WEBP = "webp"
    JSON = "json"
    ANY = "any"

    @property
    def content_type(self) -> str:
        return _CONTENT_TYPES.get(self, "application/octet-stream")

    @property
    def extension(self) -> str:
        """The file suffix including the dot, or ``""`` for ``ANY``."""
        if self is FileType.ANY:
            return ""
        return f".{self.value}"


_CONTENT_TYPES = {
    FileType.JPG: "image/jpeg",
    FileType.JPEG: "image/jpeg",
    FileType.PNG: "image/png",
    FileType.HEIC: "image/heic",
    FileType.MP3: "audio/mpeg",
    FileType.MP4: "video/mp4",
    FileType.WEBA: "audio/webm",
    FileType.WEBM: "video/webm",
    FileType.WEBP: "image/webp",
    FileType.JSON: "application/json",
}
