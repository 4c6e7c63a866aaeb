from __future__ import annotations


class ContextError(Exception):
    """Base error for s3_context."""


class InvalidPathError(ContextError, ValueError):
    """Raised when a path literal does not start with the expected prefix."""

    def __init__(self, expected_prefix: str, given_path: object) -> None:
        super().__init__(f"Invalid path: expected prefix {expected_prefix!r}, got {given_path!r}")
        self.expected_prefix = expected_prefix
        self.given_path = given_path


class VerificationFailedError(ContextError):
    """Raised when a context could not be confirmed empty before deletion."""


class NotEmptyError(ContextError):
    """Raised when deleting a context that still contains items."""

    def __init__(self, items: list[object]) -> None:
        super().__init__(f"Cannot delete context; it's not empty ({len(items)} items)")
        self.items = items


class ConversionError(ContextError):
    """Raised when a stored key cannot be converted back into a spec."""

    def __init__(self, key: str) -> None:
        super().__init__(f"Cannot convert key to spec: {key}")
        self.key = key
