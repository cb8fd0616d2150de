"""
Result type returned by every settings/identity store operation.

Store operations never raise: failures are logged and folded into a
StoreResult whose status lets callers tell a missing row apart from a bad
request, a permission problem, or a backend that could not be reached.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, Optional, TypeVar

import httpx
from postgrest.exceptions import APIError

T = TypeVar("T")

# postgrest: "JSON object requested, multiple (or no) rows returned"
NO_ROWS_CODE = "PGRST116"
PERMISSION_DENIED_CODE = "42501"


class StoreStatus(str, Enum):
    OK = "ok"
    NOT_FOUND = "not_found"
    VALIDATION_ERROR = "validation_error"
    PERMISSION_DENIED = "permission_denied"
    TRANSPORT_ERROR = "transport_error"


@dataclass(frozen=True)
class StoreResult(Generic[T]):
    status: StoreStatus
    value: Optional[T] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == StoreStatus.OK

    @property
    def not_found(self) -> bool:
        return self.status == StoreStatus.NOT_FOUND

    @classmethod
    def success(cls, value: Any = None) -> "StoreResult":
        return cls(StoreStatus.OK, value=value)

    @classmethod
    def missing(cls, message: str = "Not found") -> "StoreResult":
        return cls(StoreStatus.NOT_FOUND, error=message)

    @classmethod
    def invalid(cls, message: str) -> "StoreResult":
        return cls(StoreStatus.VALIDATION_ERROR, error=message)


def classify_error(exc: Exception) -> StoreStatus:
    """Map a backend exception onto a StoreStatus."""
    if isinstance(exc, APIError):
        code = str(exc.code or "")
        if code == NO_ROWS_CODE:
            return StoreStatus.NOT_FOUND
        if code == PERMISSION_DENIED_CODE or code in ("401", "403") or code.startswith("PGRST3"):
            return StoreStatus.PERMISSION_DENIED
        if code.startswith("23") or code.startswith("22") or code.startswith("PGRST1"):
            return StoreStatus.VALIDATION_ERROR
        return StoreStatus.TRANSPORT_ERROR
    if isinstance(exc, httpx.HTTPStatusError):
        if exc.response.status_code in (401, 403):
            return StoreStatus.PERMISSION_DENIED
        return StoreStatus.TRANSPORT_ERROR
    return StoreStatus.TRANSPORT_ERROR


def error_message(exc: Exception) -> str:
    """Message safe to log or return: postgrest details/hint may echo row values."""
    if isinstance(exc, APIError):
        return exc.message or f"Database error {exc.code or 'unknown'}"
    return str(exc) or exc.__class__.__name__


def describe_error(exc: Exception) -> str:
    code = exc.code if isinstance(exc, APIError) else None
    if code:
        return f"{error_message(exc)} (code={code})"
    return error_message(exc)


def from_exception(exc: Exception) -> StoreResult:
    return StoreResult(classify_error(exc), error=error_message(exc))


def require(**fields: Optional[str]) -> Optional[StoreResult]:
    """Return a validation failure for the first blank field, else None."""
    for name, value in fields.items():
        if value is None or not str(value).strip():
            return StoreResult.invalid(f"{name} is required")
    return None
