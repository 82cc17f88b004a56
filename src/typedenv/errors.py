"""Error hierarchy for typedenv."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

__all__ = [
    "TypedEnvError",
    "ConfigError",
    "DefaultsNotFoundError",
    "DefaultsStructureError",
    "DefaultsEmptyError",
    "TypeConversionError",
    "ErrorCodes",
]


class TypedEnvError(Exception):
    """Base error for all typedenv errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.cause = cause
        self.timestamp = datetime.now(timezone.utc).isoformat()

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class ConfigError(TypedEnvError):
    """Raised when accessor options are invalid."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(code="CONFIG_INVALID", message=message, **kwargs)


class DefaultsNotFoundError(TypedEnvError):
    """Raised when a defaults resource cannot be found or loaded."""

    def __init__(self, specifier: str, reason: str | None = None, **kwargs: Any) -> None:
        message = f"Cannot find defaults module: {specifier}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(
            code="DEFAULTS_NOT_FOUND",
            message=message,
            details={"specifier": specifier, "reason": reason},
            **kwargs,
        )

    @property
    def specifier(self) -> str:
        """The path or module name that could not be loaded."""
        return self.details["specifier"]


class DefaultsStructureError(TypedEnvError):
    """Raised when a defaults resource has no usable ``defaults`` field."""

    def __init__(self, specifier: str, reason: str = "Missing 'defaults' field", **kwargs: Any) -> None:
        super().__init__(
            code="DEFAULTS_STRUCTURE_INVALID",
            message=f"Defaults module structure wrong in '{specifier}': {reason}",
            details={"specifier": specifier, "reason": reason},
            **kwargs,
        )

    @property
    def specifier(self) -> str:
        """The path or module name with the bad structure."""
        return self.details["specifier"]


class DefaultsEmptyError(TypedEnvError):
    """Raised when the ``defaults`` field of a resource has no keys."""

    def __init__(self, specifier: str, **kwargs: Any) -> None:
        super().__init__(
            code="DEFAULTS_EMPTY",
            message=f"Defaults module has no keys: {specifier}",
            details={"specifier": specifier},
            **kwargs,
        )

    @property
    def specifier(self) -> str:
        """The path or module name whose defaults were empty."""
        return self.details["specifier"]


class TypeConversionError(TypedEnvError):
    """Raised when a value cannot be converted to the requested type."""

    def __init__(self, value: Any, target: str, **kwargs: Any) -> None:
        super().__init__(
            code="TYPE_CONVERSION_ERROR",
            message=f"Cannot convert {value!r} to {target}",
            details={"value": value, "target": target},
            **kwargs,
        )

    @property
    def value(self) -> Any:
        """The value that failed to convert."""
        return self.details["value"]

    @property
    def target(self) -> str:
        """The requested type name ('int' or 'float')."""
        return self.details["target"]


class ErrorCodes:
    """All typedenv error codes as constants.

    Example:
        if error.code == ErrorCodes.DEFAULTS_EMPTY:
            use_environment_only()
    """

    CONFIG_INVALID = "CONFIG_INVALID"
    DEFAULTS_NOT_FOUND = "DEFAULTS_NOT_FOUND"
    DEFAULTS_STRUCTURE_INVALID = "DEFAULTS_STRUCTURE_INVALID"
    DEFAULTS_EMPTY = "DEFAULTS_EMPTY"
    TYPE_CONVERSION_ERROR = "TYPE_CONVERSION_ERROR"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")
