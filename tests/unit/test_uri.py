#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0

import pytest

from hermes import URI
from hermes.exceptions import InvalidURL


@pytest.mark.parametrize(
    "uri,expected",
    [
        (URI(host="httpbin.org"), "https://httpbin.org"),
        (
            URI(scheme="http", host="localhost", port=8080, path="/get", query="a=1"),
            "http://localhost:8080/get?a=1",
        ),
        (URI(host="127.0.0.1", path="/status/404"), "https://127.0.0.1/status/404"),
        (URI(host="2001:db8::1", port=443, path="/"), "https://[2001:db8::1]:443/"),
        (URI(host="0", path="/get"), "https://0/get"),
    ],
)
def test_build(uri: URI, expected: str) -> None:
    assert uri.build() == expected
    assert str(uri) == expected


def test_netloc() -> None:
    assert URI(host="httpbin.org").netloc == "httpbin.org"
    assert URI(host="httpbin.org", port=8443).netloc == "httpbin.org:8443"
    assert URI(host="::1").netloc == "[::1]"


@pytest.mark.parametrize("host", ["", "local host", "exa/mple.com", "host?x", "a#b"])
def test_invalid_host(host: str) -> None:
    with pytest.raises(InvalidURL):
        URI(host=host)


@pytest.mark.parametrize("port", [-1, 65536])
def test_invalid_port(port: int) -> None:
    with pytest.raises(InvalidURL) as exc_info:
        URI(host="localhost", port=port)
    assert exc_info.value.reason == f"Invalid port: {port}"


def test_port_bounds_are_inclusive() -> None:
    assert URI(host="localhost", port=0).port == 0
    assert URI(host="localhost", port=65535).port == 65535


def test_uri_equality() -> None:
    assert URI(host="a.com", path="/x") == URI(host="a.com", path="/x")
    assert URI(host="a.com", path="/x") != URI(host="a.com", path="/y")
