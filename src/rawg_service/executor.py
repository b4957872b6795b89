"""Async request executor for the RAWG REST API."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from functools import lru_cache
from typing import Any

import httpx
from pydantic import TypeAdapter, ValidationError

from rawg_service.encoding import (
    EndpointError,
    HeaderEncodingError,
    ParameterEncodingError,
    build_url,
    encode_headers,
    encode_parameters,
)
from rawg_service.errors import ErrorKind, Result
from rawg_service.http_types import HTTPHeaders, HTTPMethod, HTTPParameters
from rawg_service.settings import DEFAULT_BASE_URL, Settings

logger = logging.getLogger(__name__)

Completion = Callable[[Result[Any]], None]


@lru_cache(maxsize=128)
def _cached_adapter(target: Any) -> TypeAdapter[Any]:
    return TypeAdapter(target)


def _adapter(target: Any) -> TypeAdapter[Any]:
    try:
        return _cached_adapter(target)
    except TypeError:
        # unhashable targets
        return TypeAdapter(target)


def _loggable_url(url: httpx.URL) -> str:
    if "key" in url.params:
        return str(url.copy_remove_param("key"))
    return str(url)


def is_success_status(status_code: int) -> bool:
    """Accepted status range, upper bound exclusive."""
    return 200 <= status_code < 299


class RequestExecutor:
    """Builds, sends and decodes one request per call against a fixed base URL."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        timeout_s: float | None = None,
        default_headers: dict[str, str] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout_s = timeout_s
        self._default_headers = dict(default_headers or {})
        self._transport = transport

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> RequestExecutor:
        headers = {"User-Agent": settings.user_agent} if settings.user_agent else {}
        return cls(
            settings.base_url,
            timeout_s=settings.timeout_s,
            default_headers=headers,
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    def _client(self) -> httpx.AsyncClient:
        kwargs: dict[str, Any] = {"headers": self._default_headers}
        if self._timeout_s is not None:
            kwargs["timeout"] = httpx.Timeout(self._timeout_s)
        if self._transport is not None:
            kwargs["transport"] = self._transport
        return httpx.AsyncClient(**kwargs)

    def _fail(
        self,
        kind: ErrorKind,
        endpoint: str,
        *,
        status_code: int | None = None,
        detail: object = None,
    ) -> Result[Any]:
        logger.warning(
            "request failed endpoint=%s kind=%s status=%s detail=%s",
            endpoint,
            kind.name,
            status_code,
            detail,
        )
        return Result.failure(kind, status_code=status_code)

    async def execute(
        self,
        endpoint: str,
        target: Any,
        *,
        parameters: HTTPParameters | None = None,
        headers: HTTPHeaders | None = None,
        method: HTTPMethod | str = HTTPMethod.GET,
        body: bytes | None = None,
    ) -> Result[Any]:
        """Send one request and decode the JSON body into `target`.

        Every failure is returned as an error result; nothing is dispatched when
        the URL, parameters or headers cannot be encoded.
        """
        http_method = HTTPMethod(method)
        try:
            url = build_url(self._base_url, endpoint)
        except EndpointError as exc:
            return self._fail(ErrorKind.INVALID_ENDPOINT, endpoint, detail=exc)
        try:
            url = encode_parameters(url, parameters)
        except ParameterEncodingError as exc:
            return self._fail(ErrorKind.ENCODING_PARAMETERS_ERROR, endpoint, detail=exc)
        try:
            header_fields = encode_headers(headers)
        except HeaderEncodingError as exc:
            return self._fail(ErrorKind.ENCODING_HEADERS_ERROR, endpoint, detail=exc)

        logger.debug("dispatch %s %s", http_method.value, _loggable_url(url))
        try:
            async with self._client() as client:
                response = await client.request(
                    http_method.value,
                    url,
                    content=body,
                    headers=header_fields,
                )
        except httpx.HTTPError as exc:
            return self._fail(ErrorKind.API_ERROR, endpoint, detail=exc)

        status_code = response.status_code
        if not is_success_status(status_code):
            return self._fail(ErrorKind.INVALID_RESPONSE, endpoint, status_code=status_code)
        if not response.content:
            return self._fail(ErrorKind.NO_DATA, endpoint, status_code=status_code)
        try:
            value = _adapter(target).validate_json(response.content)
        except ValidationError as exc:
            return self._fail(
                ErrorKind.DECODER_ERROR,
                endpoint,
                status_code=status_code,
                detail=f"{exc.error_count()} validation error(s)",
            )

        logger.debug("completed %s %s status=%s", http_method.value, endpoint, status_code)
        return Result.success(value, status_code=status_code)

    def submit(
        self,
        endpoint: str,
        target: Any,
        completion: Completion,
        **kwargs: Any,
    ) -> asyncio.Task[Result[Any]]:
        """Schedule `execute` on the running loop and call `completion` once with its result.

        An unknown `method` raises `ValueError` here, before anything is scheduled.
        """
        kwargs["method"] = HTTPMethod(kwargs.get("method", HTTPMethod.GET))
        task = asyncio.get_running_loop().create_task(self.execute(endpoint, target, **kwargs))

        def _deliver(finished: asyncio.Task[Result[Any]]) -> None:
            if finished.cancelled() or finished.exception() is not None:
                return
            completion(finished.result())

        task.add_done_callback(_deliver)
        return task
