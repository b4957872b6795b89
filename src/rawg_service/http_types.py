"""HTTP method and request value types."""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from typing import Any


class HTTPMethod(StrEnum):
    """Methods accepted by the request executor."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


ParamValue = str | int | float | bool

# Query parameters keep insertion order; header values that are not `str` are dropped.
HTTPParameters = Mapping[str, ParamValue]
HTTPHeaders = Mapping[str, Any]
