"""typedenv - Typed access to environment variables with loadable defaults."""

from __future__ import annotations

# Core
from typedenv.accessor import EnvAccessor

# Config
from typedenv.config import AccessorOptions

# Defaults providers
from typedenv.providers import (
    DefaultsProvider,
    JsonFileProvider,
    MappingProvider,
    PythonModuleProvider,
    YamlFileProvider,
    resolve_provider,
)

# Errors
from typedenv.errors import (
    ConfigError,
    DefaultsEmptyError,
    DefaultsNotFoundError,
    DefaultsStructureError,
    ErrorCodes,
    TypeConversionError,
    TypedEnvError,
)

__version__ = "0.1.0"

__all__ = [
    # Core
    "EnvAccessor",
    # Config
    "AccessorOptions",
    # Defaults providers
    "DefaultsProvider",
    "PythonModuleProvider",
    "JsonFileProvider",
    "YamlFileProvider",
    "MappingProvider",
    "resolve_provider",
    # Errors
    "ErrorCodes",
    "TypedEnvError",
    "ConfigError",
    "DefaultsNotFoundError",
    "DefaultsStructureError",
    "DefaultsEmptyError",
    "TypeConversionError",
]
