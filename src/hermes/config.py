#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
from dataclasses import dataclass, field

from . import __version__
from .aio.interfaces import HTTPClient
from .interfaces import HTTPRequestConfiguration

DEFAULT_USER_AGENT = f"hermes-python/{__version__}"
FILENAME_HEADER = "X-Filename"


@dataclass(kw_only=True)
class Config:
    """Configuration for a :py:class:`hermes.client.Courrier`."""

    http_client: HTTPClient | None = None
    """The transport every request is sent through.

    It must support concurrent in-flight requests. When unset, each ``Courrier``
    creates its own :py:class:`hermes.aio.aiohttp.AIOHTTPClient` and closes it in
    ``Courrier.close``. A transport given here belongs to the caller and is never
    closed by the ``Courrier``.
    """

    http_request_config: HTTPRequestConfiguration | None = None
    """Request configuration used when a call does not supply its own."""

    user_agent: str = DEFAULT_USER_AGENT
    content_type: str = "application/json"
    accept: str = "application/json"
    connection: str = "close"

    api_key: str | None = field(default=None, repr=False)
    """Sent as the ``api-key`` header when set."""

    token: str | None = field(default=None, repr=False)
    """Sent verbatim as the ``Authorization`` header when set."""

    filename_header: str = FILENAME_HEADER
    """Header carrying the file name of an upload."""
