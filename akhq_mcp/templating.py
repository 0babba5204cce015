"""
Endpoint templating.

Turns an endpoint template such as ``/api/{cluster}/topic/{topicName}/data``
plus a flat parameter mapping into the request path sent upstream.

Routing rules:
    - A parameter named by a ``{placeholder}`` is substituted into the path.
    - Every other non-null parameter goes to the query string, in the order
      it appears in the mapping. Lists repeat the key once per element
      (``topics=a&topics=b``), which is the convention AKHQ expects.
    - The reserved ``body`` key is request payload and never reaches the URL.

Values are encoded the way JavaScript's ``encodeURIComponent`` does, so
reserved characters, non-ASCII text and braces always come out escaped.

Usage:
    path = parameterize_endpoint(
        "/api/{cluster}/topic/{topicName}/data",
        {"cluster": "local", "topicName": "orders", "partition": 0},
    )
    # "/api/local/topic/orders/data?partition=0"
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

BODY_KEY = "body"

_PLACEHOLDER = re.compile(r"\{([^}]+)\}")

# Characters encodeURIComponent leaves alone on top of quote()'s own set
_UNRESERVED = "!~*'()"


class TemplatingError(ValueError):
    """Base error for endpoint resolution."""


class MissingPathParameterError(TemplatingError):
    """Raised when a placeholder has no value to substitute."""

    def __init__(self, name: str):
        super().__init__(f"Missing required parameter: {name}")
        self.name = name


def placeholders(template: str) -> list[str]:
    """Placeholder names in the order they appear in ``template``."""
    return _PLACEHOLDER.findall(template)


def encode_component(value: Any) -> str:
    """Percent-encode a single URL component."""
    return quote(stringify(value), safe=_UNRESERVED)


def stringify(value: Any) -> str:
    """
    Canonical string form of a parameter value.

    Booleans become ``true``/``false`` and integral floats drop their
    fractional part, matching how the upstream API spells them.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, float):
        return repr(value)
    if isinstance(value, (list, tuple)):
        return ",".join(stringify(item) for item in value)
    return str(value)


def parameterize_endpoint(template: str, parameters: Mapping[str, Any]) -> str:
    """
    Resolve ``template`` against ``parameters``.

    Args:
        template: Endpoint path with ``{name}`` placeholders
        parameters: Parameter values keyed by name

    Returns:
        Path with placeholders substituted and the query string appended

    Raises:
        MissingPathParameterError: If a placeholder has no value
    """
    path_names = set(placeholders(template))

    def substitute(match: re.Match[str]) -> str:
        name = match.group(1)
        value = None if name == BODY_KEY else parameters.get(name)
        if value is None:
            raise MissingPathParameterError(name)
        return encode_component(value)

    path = _PLACEHOLDER.sub(substitute, template)

    pairs: list[str] = []
    for key, value in parameters.items():
        if key in path_names or key == BODY_KEY or value is None:
            continue

        encoded_key = quote(key, safe=_UNRESERVED)
        if isinstance(value, (list, tuple)):
            pairs.extend(f"{encoded_key}={encode_component(item)}" for item in value)
        else:
            pairs.append(f"{encoded_key}={encode_component(value)}")

    if pairs:
        path += "?" + "&".join(pairs)

    return path
