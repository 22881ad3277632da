#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0

from hermes import URI, tuples_to_fields
from hermes.aio import HTTPRequest


def create_test_request(
    method: str = "GET",
    host: str = "httpbin.org",
    path: str | None = None,
    headers: list[tuple[str, str]] | None = None,
    body: bytes = b"",
) -> HTTPRequest:
    """Create test HTTPRequest with defaults.

    :param method: HTTP method (GET, POST, etc.)
    :param host: Host name (e.g., "httpbin.org")
    :param path: Optional path (e.g., "/get")
    :param headers: Optional headers as list of (name, value) tuples
    :param body: Request body as bytes
    :return: Configured HTTPRequest for testing
    """
    return HTTPRequest(
        destination=URI(host=host, path=path),
        method=method,
        fields=tuples_to_fields(headers or []),
        body=body,
    )
