#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
from collections.abc import Sequence
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Endpoint:
    """The target of a single request, relative to a client's scheme and host.

    :param path: The URL path, for example ``/get``. It must not contain a scheme,
        host or port.
    :param query_params: Ordered ``(name, value)`` query parameters. Order is kept on
        the wire.
    """

    path: str
    query_params: Sequence[tuple[str, str]] = field(default=())

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "query_params",
            tuple((name, value) for name, value in self.query_params),
        )
