"""
Response envelope models for the v2 API.

Every v2 endpoint wraps its payload in the same structure: a success flag,
an optional result and optional structured errors.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, List, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class KeyValue:
    """Single key/value pair attached to an error."""
    key: str
    value: str

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "KeyValue":
        return cls(key=data["key"], value=str(data["value"]))


@dataclass(frozen=True)
class ErrorDetail:
    """Structured validation or business error returned by v2 endpoints."""
    key: str
    description: str
    error_data: List[KeyValue]

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "ErrorDetail":
        return cls(
            key=data["key"],
            description=data["description"],
            error_data=[KeyValue.from_json(item) for item in data.get("errorData") or []],
        )

    def __str__(self) -> str:
        return f"{self.key}: {self.description}"


@dataclass(frozen=True)
class ResultEnvelope(Generic[T]):
    """
    Uniform v2 response wrapper.

    A response with success=False is a normal result, not a client error.
    Callers must check `success` before using `result`; the type does not
    guarantee that `result` is present when `success` is True.
    """
    success: bool
    result: Optional[T] = None
    errors: Optional[List[ErrorDetail]] = None

    @classmethod
    def from_json(
        cls,
        data: Dict[str, Any],
        parse_result: Callable[[Any], T],
    ) -> "ResultEnvelope[T]":
        """
        Decode an envelope, delegating the payload to `parse_result`.

        Raises:
            KeyError, TypeError, ValueError: If the envelope shape is invalid
        """
        success = data["success"]
        if not isinstance(success, bool):
            raise TypeError(f"'success' must be a boolean, got {type(success).__name__}")

        raw_result = data.get("result")
        raw_errors = data.get("errors")

        return cls(
            success=success,
            result=parse_result(raw_result) if raw_result is not None else None,
            errors=[ErrorDetail.from_json(item) for item in raw_errors]
            if raw_errors is not None else None,
        )

    def error_messages(self) -> List[str]:
        """Human-readable error lines, empty when there are none."""
        return [str(error) for error in self.errors or []]
