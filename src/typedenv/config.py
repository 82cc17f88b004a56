"""Accessor construction options."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from typedenv.errors import ConfigError

__all__ = ["AccessorOptions"]


class AccessorOptions(BaseModel):
    """Options recognized by :class:`~typedenv.accessor.EnvAccessor`.

    Attributes:
        prefix: Namespace segment prepended to every variable name.
        prefix_separator: String placed between prefix and name.
        strict_errors: Raise on failures when True, return None when False.

    Unknown option names are rejected. The camelCase spellings
    ``prefixSeparator`` and ``strictErrors`` are accepted as aliases.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True, strict=True)

    prefix: str = ""
    prefix_separator: str = Field(default="_", alias="prefixSeparator")
    strict_errors: bool = Field(default=True, alias="strictErrors")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> AccessorOptions:
        """Build options from a plain mapping, raising ConfigError if invalid."""
        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            raise ConfigError(f"Options must be a mapping, got {type(data).__name__}")
        try:
            return cls.model_validate(dict(data))
        except ValidationError as exc:
            problems = "; ".join(
                f"{'.'.join(str(p) for p in err['loc']) or '<root>'}: {err['msg']}" for err in exc.errors()
            )
            raise ConfigError(
                f"Invalid accessor options: {problems}",
                details={"errors": exc.errors(include_url=False)},
                cause=exc,
            ) from exc
