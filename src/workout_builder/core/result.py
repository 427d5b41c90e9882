"""Result type for service-level error reporting."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of a service call: a value or an error message.

    Example:
        result = service.get_exercises(muscles, equipment, limit)
        if result.is_err:
            raise HTTPException(status_code=500, detail=result.error)
        groups = result.unwrap()
    """

    _value: T | None = None
    _error: str | None = None

    @classmethod
    def ok(cls, value: T) -> "Result[T]":
        """Create a successful result."""
        return cls(_value=value)

    @classmethod
    def err(cls, error: str) -> "Result[T]":
        """Create a failed result."""
        return cls(_error=error)

    @property
    def is_ok(self) -> bool:
        return self._error is None

    @property
    def is_err(self) -> bool:
        return self._error is not None

    @property
    def error(self) -> str | None:
        """The error message, or None on success."""
        return self._error

    def unwrap(self) -> T:
        """Return the value.

        Raises:
            ValueError: If the result is an error.
        """
        if self._error is not None:
            raise ValueError(self._error)
        return self._value  # type: ignore

    def map(self, fn: Callable[[T], U]) -> "Result[U]":
        """Apply ``fn`` to a successful value, passing errors through."""
        if self._error is not None:
            return Result.err(self._error)
        return Result.ok(fn(self._value))  # type: ignore
