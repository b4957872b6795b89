"""URL, query parameter and header encoding for outgoing requests."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

import httpx

from rawg_service.http_types import HTTPHeaders, HTTPParameters

_HEADER_NAME = re.compile(r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+")
_UNSAFE_URL_CHARS = re.compile(r"[\s\x00-\x1f\x7f]")
_ALLOWED_SCHEMES = {"http", "https"}


class EncodingError(ValueError):
    """Base error for request encoding failures."""


class EndpointError(EncodingError):
    """Raised when base URL plus endpoint is not a valid absolute URL."""


class ParameterEncodingError(EncodingError):
    """Raised when parameters cannot be encoded into a query string."""


class HeaderEncodingError(EncodingError):
    """Raised when headers cannot be applied to a request."""


def build_url(base_url: str, endpoint: str) -> httpx.URL:
    """Concatenate base URL and endpoint into an absolute URL."""
    raw = f"{base_url}{endpoint}"
    if not raw or _UNSAFE_URL_CHARS.search(raw):
        raise EndpointError(f"invalid endpoint: {raw!r}")
    try:
        url = httpx.URL(raw)
    except (httpx.InvalidURL, TypeError) as exc:
        raise EndpointError(f"invalid endpoint: {raw!r}") from exc
    if url.scheme not in _ALLOWED_SCHEMES or not url.host:
        raise EndpointError(f"invalid endpoint: {raw!r}")
    return url


def stringify_value(value: Any) -> str:
    """Render one parameter value as query text."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return repr(value)
    raise ParameterEncodingError(f"unsupported parameter value type: {type(value).__name__}")


def encode_parameters(url: httpx.URL, parameters: HTTPParameters | None) -> httpx.URL:
    """Replace the URL query with `parameters`, keeping mapping order.

    A query already present on the URL is overwritten, not merged. `None` or an
    empty mapping leaves the URL untouched.
    """
    if parameters is None:
        return url
    if not isinstance(parameters, Mapping):
        raise ParameterEncodingError("parameters must be a mapping")
    if not parameters:
        return url

    items: list[tuple[str, str]] = []
    for key, value in parameters.items():
        if not isinstance(key, str) or not key:
            raise ParameterEncodingError(f"invalid parameter name: {key!r}")
        items.append((key, stringify_value(value)))
    try:
        return url.copy_with(params=httpx.QueryParams(items))
    except (httpx.InvalidURL, TypeError) as exc:
        raise ParameterEncodingError(f"failed to encode parameters: {exc}") from exc


def encode_headers(headers: HTTPHeaders | None) -> dict[str, str]:
    """Return header fields to send; values that are not strings are dropped."""
    if headers is None:
        return {}
    if not isinstance(headers, Mapping):
        raise HeaderEncodingError("headers must be a mapping")

    out: dict[str, str] = {}
    for key, value in headers.items():
        if not isinstance(key, str) or not _HEADER_NAME.fullmatch(key):
            raise HeaderEncodingError(f"invalid header name: {key!r}")
        if not isinstance(value, str):
            continue
        if "\r" in value or "\n" in value or not value.isascii():
            raise HeaderEncodingError(f"invalid value for header {key}")
        out[key] = value
    return out
