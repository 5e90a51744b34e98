"""Exceptions raised by HAL models."""


class HALError(Exception):
    """Base class for all HAL model errors."""


class InvalidArgumentError(HALError, ValueError):
    """Raised when a setter or accessor receives an unusable value."""


class InvalidCollectionError(HALError, TypeError):
    """Raised when a collection is built around a non-iterable source."""


class DomainError(HALError, RuntimeError):
    """Raised when an operation conflicts with state already set on a model."""


def type_name(value: object) -> str:
    """Return the name used to describe a received value in error messages."""
    if value is None:
        return "None"
    return type(value).__name__
