# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

"""Utilities for testing code that sends requests through hermes."""

from .mockhttp import MockHTTPClient, MockHTTPClientError
from .utils import create_test_request

__all__ = (
    "MockHTTPClient",
    "MockHTTPClientError",
    "create_test_request",
)
