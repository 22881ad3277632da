#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
from collections.abc import Iterable
from urllib.parse import quote as urlquote


def split_host_name(host: str) -> list[str]:
    """Split a ``host[:port]`` string into its host and port.

    Only the first colon is considered and the port is not validated, so IPv6
    literals do not split meaningfully. Validation happens when the URL is built.

    :param host: The host string, optionally followed by ``:port``.
    :returns: ``[host]`` if there is no colon, otherwise ``[host, port]``.
    """
    name, sep, port = host.partition(":")
    if not sep:
        return [host]
    return [name, port]


def join_query_params(
    params: Iterable[tuple[str, str | None]], prefix: str = ""
) -> str:
    """Join a list of query parameter key-value tuples.

    :param params: The list of key-value query parameter tuples.
    :param prefix: An optional query prefix.
    """
    query: str = prefix
    for param in params:
        if query:
            query += "&"
        if param[1] is None:
            query += urlquote(param[0], safe="")
        else:
            query += f"{urlquote(param[0], safe='')}={urlquote(param[1], safe='')}"
    return query


def quote_path(path: str) -> str:
    """Percent-encode a URL path, keeping ``/`` and the characters RFC 3986 allows
    in a path segment."""
    return urlquote(path, safe="/:@!$&'()*+,;=-._~")
