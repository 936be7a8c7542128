"""
Structured error types for unstable book generation.

Every failure in a run is fatal: there are no retries and no partial
success. The hierarchy exists so that the CLI boundary can report *what*
failed (the operation and the path) together with the underlying cause.

Architecture:
    ::

        BookGenError  (message, cause)
             │
             ├── UsageError                 bad invocation input
             ├── ConfigError                unreadable / invalid settings
             ├── BookIOError                directory / file operation failed
             └── InconsistentRegistryError  registry contents contradict themselves

Usage:
    from unstable_book_gen.errors import io_operation

    with io_operation("create file", path):
        path.write_text(content, encoding="utf-8")
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from enum import Enum
from pathlib import Path
from typing import Any


class ErrorCategory(str, Enum):
    """Standard error categories used for logging and reporting."""

    USAGE = "USAGE"
    CONFIG = "CONFIG"
    IO = "IO"
    DATA = "DATA"
    INTERNAL = "INTERNAL"


class BookGenError(Exception):
    """
    Base class for all unstable book generation errors.

    Examples:
        >>> error = BookGenError("something broke")
        >>> error.category
        <ErrorCategory.INTERNAL: 'INTERNAL'>
        >>> error.to_dict()["error_type"]
        'BookGenError'

        Chaining the original exception:

        >>> try:
        ...     raise PermissionError("denied")
        ... except PermissionError as e:
        ...     error = BookGenError("write failed", cause=e)
        >>> error.__cause__
        PermissionError('denied')
    """

    default_category: ErrorCategory = ErrorCategory.INTERNAL

    def __init__(self, message: str, *, cause: BaseException | None = None):
        super().__init__(message)
        self.message = message
        self.category = self.default_category
        self.cause = cause

        if cause is not None:
            self.__cause__ = cause

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging."""
        result: dict[str, Any] = {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "category": self.category.value,
        }
        if self.cause is not None:
            result["cause"] = str(self.cause)
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, category={self.category.value})"


class UsageError(BookGenError):
    """The tool was invoked with missing or invalid input paths."""

    default_category = ErrorCategory.USAGE


class ConfigError(BookGenError):
    """Settings could not be loaded or failed validation."""

    default_category = ErrorCategory.CONFIG


class BookIOError(BookGenError):
    """
    A file-system operation failed.

    The message names the operation and the path, followed by the
    underlying cause, e.g. ``create file out/foo-bar.md failed with
    [Errno 13] Permission denied``.
    """

    default_category = ErrorCategory.IO

    def __init__(self, operation: str, path: Path | str, cause: BaseException):
        self.operation = operation
        self.path = Path(path)
        super().__init__(f"{operation} {self.path} failed with {cause}", cause=cause)

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["operation"] = self.operation
        result["path"] = str(self.path)
        return result


class InconsistentRegistryError(BookGenError):
    """A feature registry contradicts itself or the reconciliation input."""

    default_category = ErrorCategory.DATA

    def __init__(self, feature: str, message: str | None = None):
        self.feature = feature
        super().__init__(message or f"Feature {feature!r} is not present in its registry")


@contextmanager
def io_operation(operation: str, path: Path | str) -> Iterator[None]:
    """
    Convert any ``OSError`` raised inside the block into ``BookIOError``.

    Args:
        operation: Human readable operation name ("create file", "read dir", ...)
        path: Path the operation acts on
    """
    try:
        yield
    except OSError as e:
        raise BookIOError(operation, path, e) from e
