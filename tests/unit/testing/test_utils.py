#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0

from hermes.testing import create_test_request


def test_create_test_request_defaults() -> None:
    request = create_test_request()

    assert request.method == "GET"
    assert request.destination.host == "httpbin.org"
    assert request.destination.path is None
    assert request.body == b""
    assert len(request.fields) == 0


def test_create_test_request_custom_values() -> None:
    request = create_test_request(
        method="POST",
        host="api.example.com",
        path="/upload",
        headers=[("Content-Type", "application/json"), ("api-key", "secret")],
        body=b'{"key": "value"}',
    )

    assert request.method == "POST"
    assert request.destination.host == "api.example.com"
    assert request.destination.path == "/upload"
    assert request.fields["content-type"].values == ["application/json"]
    assert request.fields["api-key"].values == ["secret"]
    assert request.body == b'{"key": "value"}'
