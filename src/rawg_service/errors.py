"""Error taxonomy and result type for RAWG requests."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Generic, TypeVar

T = TypeVar("T")


class ErrorKind(StrEnum):
    """Closed set of request failure categories."""

    API_ERROR = "API Error"
    INVALID_ENDPOINT = "Invalid Endpoint"
    INVALID_RESPONSE = "Invalid Response"
    NO_DATA = "Response No Data"
    DECODER_ERROR = "Decoding Response Error"
    ENCODING_HEADERS_ERROR = "Encoding Headers Error"
    ENCODING_PARAMETERS_ERROR = "Encoding Parameters Error"


class ServiceError(RuntimeError):
    """Raised when an error result is unwrapped."""

    def __init__(self, kind: ErrorKind, *, status_code: int | None = None) -> None:
        self.kind = kind
        self.status_code = status_code
        message = kind.value
        if status_code is not None:
            message = f"{message} (status {status_code})"
        super().__init__(message)


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of one request: a decoded value or an error kind, never both."""

    value: T | None = None
    error: ErrorKind | None = None
    status_code: int | None = None

    @classmethod
    def success(cls, value: T, *, status_code: int | None = None) -> Result[T]:
        return cls(value=value, status_code=status_code)

    @classmethod
    def failure(cls, kind: ErrorKind, *, status_code: int | None = None) -> Result[T]:
        return cls(error=kind, status_code=status_code)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the decoded value or raise `ServiceError` for a failure."""
        if self.error is not None:
            raise ServiceError(self.error, status_code=self.status_code)
        return self.value  # type: ignore[return-value]
