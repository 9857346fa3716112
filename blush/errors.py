# blush/errors.py

from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class BlushError(Exception):
    """Base class for failures surfaced to API callers as {"message": ...}."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(BlushError):
    status_code = 400


class ConflictError(BlushError):
    status_code = 409


class AuthenticationError(BlushError):
    status_code = 401


class PastTimeError(BlushError):
    status_code = 400


class SlotConflictError(BlushError):
    status_code = 400


class InternalError(BlushError):
    status_code = 500


class Result(Generic[T]):
    """Outcome of a credential or booking operation: a value or a BlushError."""

    def __init__(self, value: Optional[T] = None, error: Optional[BlushError] = None):
        self.value = value
        self.error = error

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: BlushError) -> "Result[T]":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        if self.error is not None:
            raise self.error
        return self.value

    def __repr__(self):
        if self.ok:
            return f"Result(value={self.value!r})"
        return f"Result(error={self.error!r})"
