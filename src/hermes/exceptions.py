#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
from dataclasses import dataclass


class HermesError(Exception):
    """Base exception type for all exceptions raised by hermes."""


class MissingDependencyError(HermesError):
    """Exception type raised when a feature that requires a missing optional dependency
    is called."""


class NetworkError(HermesError):
    """Base exception for every failure of a request or upload.

    The set of subclasses is closed. Each one renders a stable, human-readable
    message through ``str()``.
    """

    @property
    def message(self) -> str:
        return str(self)


@dataclass(kw_only=True)
class ServerError(NetworkError):
    """A response was received but its status code was 300 or above."""

    status_code: int

    def __post_init__(self) -> None:
        super().__init__(f"server error - {self.status_code}")


class InvalidURL(NetworkError):
    """The scheme, host, port and path could not be assembled into a URL.

    Raised before anything is sent.
    """

    def __init__(self, *, reason: str | None = None) -> None:
        super().__init__("invalid url")
        self.reason = reason
        """Why assembly failed. Diagnostic only, not part of the message."""


class TimedOut(NetworkError):
    """The transport or the request deadline timed out."""

    def __init__(self) -> None:
        super().__init__("request timed out")


class NotConnectedToInternet(NetworkError):
    """The transport reported that no network is available."""

    def __init__(self) -> None:
        super().__init__("not connected to the internet")


@dataclass(kw_only=True)
class CannotConnectToHost(NetworkError):
    """The host could not be reached."""

    cause: BaseException
    """The original transport failure."""

    def __post_init__(self) -> None:
        super().__init__(f"cannot connect to host - {self.cause}")


@dataclass(kw_only=True)
class Unknown(NetworkError):
    """Any failure that is not otherwise classified."""

    cause: BaseException
    """The original failure."""

    def __post_init__(self) -> None:
        super().__init__(f"unexpected error - {self.cause}")
