#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
from dataclasses import FrozenInstanceError

import pytest

from hermes.endpoints import Endpoint


def test_endpoint_defaults() -> None:
    endpoint = Endpoint("/get")
    assert endpoint.path == "/get"
    assert endpoint.query_params == ()


def test_query_params_keep_order() -> None:
    endpoint = Endpoint("/get", [("b", "2"), ("a", "1"), ("b", "3")])
    assert endpoint.query_params == (("b", "2"), ("a", "1"), ("b", "3"))


def test_endpoint_is_immutable() -> None:
    params = [("hermes", "test")]
    endpoint = Endpoint("/get", params)
    params.append(("other", "value"))

    assert endpoint.query_params == (("hermes", "test"),)
    with pytest.raises(FrozenInstanceError):
        endpoint.path = "/post"  # type: ignore


def test_endpoint_equality() -> None:
    assert Endpoint("/get", [("a", "1")]) == Endpoint("/get", (("a", "1"),))
