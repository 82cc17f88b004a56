"""Defaults providers: load a ``defaults`` mapping from an external resource."""

from __future__ import annotations

import importlib
import importlib.util
import json
import logging
import pathlib
import re
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

import yaml

from typedenv.errors import DefaultsEmptyError, DefaultsNotFoundError, DefaultsStructureError

__all__ = [
    "DEFAULTS_FIELD",
    "DefaultsProvider",
    "PythonModuleProvider",
    "JsonFileProvider",
    "YamlFileProvider",
    "MappingProvider",
    "resolve_provider",
]

logger = logging.getLogger(__name__)

DEFAULTS_FIELD = "defaults"

_DOTTED_NAME = re.compile(r"^[A-Za-z_]\w*(\.[A-Za-z_]\w*)*$")


def _extract_defaults(container: Any, specifier: str) -> Mapping[str, Any]:
    """Pull the ``defaults`` field out of a loaded resource and validate it."""
    if isinstance(container, Mapping):
        if DEFAULTS_FIELD not in container:
            raise DefaultsStructureError(specifier)
        defaults = container[DEFAULTS_FIELD]
    else:
        if not hasattr(container, DEFAULTS_FIELD):
            raise DefaultsStructureError(specifier)
        defaults = getattr(container, DEFAULTS_FIELD)

    if not isinstance(defaults, Mapping):
        raise DefaultsStructureError(
            specifier, reason=f"'defaults' must be a mapping, got {type(defaults).__name__}"
        )
    if len(defaults) == 0:
        raise DefaultsEmptyError(specifier)
    return defaults


class DefaultsProvider(ABC):
    """Loads a non-empty mapping exposed under a ``defaults`` field."""

    @abstractmethod
    def load(self, specifier: str) -> Mapping[str, Any]:
        """Return the defaults mapping found at specifier.

        Raises:
            DefaultsNotFoundError: The resource cannot be found or loaded.
            DefaultsStructureError: The resource has no usable 'defaults' field.
            DefaultsEmptyError: The 'defaults' mapping has no keys.
        """


class PythonModuleProvider(DefaultsProvider):
    """Loads a Python module by file path or dotted import name."""

    def load(self, specifier: str) -> Mapping[str, Any]:
        if specifier.endswith(".py"):
            module = self._import_from_file(pathlib.Path(specifier))
        else:
            try:
                module = importlib.import_module(specifier)
            except ImportError as exc:
                raise DefaultsNotFoundError(specifier, reason=str(exc), cause=exc) from exc
            except Exception as exc:
                raise DefaultsNotFoundError(
                    specifier, reason=f"Failed to import module: {exc}", cause=exc
                ) from exc
        return _extract_defaults(module, specifier)

    def _import_from_file(self, file_path: pathlib.Path) -> Any:
        if not file_path.is_file():
            raise DefaultsNotFoundError(str(file_path), reason="File does not exist")

        module_name = f"typedenv_defaults_{file_path.stem}"
        spec = importlib.util.spec_from_file_location(module_name, str(file_path))
        if spec is None or spec.loader is None:
            raise DefaultsNotFoundError(str(file_path), reason="Cannot create import spec")

        module = importlib.util.module_from_spec(spec)
        try:
            spec.loader.exec_module(module)
        except Exception as exc:
            raise DefaultsNotFoundError(
                str(file_path), reason=f"Failed to import module: {exc}", cause=exc
            ) from exc
        return module


class _DataFileProvider(DefaultsProvider):
    """Shared read-and-parse flow for data file formats."""

    def load(self, specifier: str) -> Mapping[str, Any]:
        path = pathlib.Path(specifier)
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise DefaultsNotFoundError(specifier, reason=str(exc), cause=exc) from exc

        data = self._parse(content, specifier)
        if data is None:
            raise DefaultsStructureError(specifier, reason="File is empty")
        return _extract_defaults(data, specifier)

    @abstractmethod
    def _parse(self, content: str, specifier: str) -> Any: ...


class JsonFileProvider(_DataFileProvider):
    """Loads a JSON file whose top-level object holds a ``defaults`` key."""

    def _parse(self, content: str, specifier: str) -> Any:
        try:
            return json.loads(content)
        except ValueError as exc:
            raise DefaultsNotFoundError(specifier, reason=f"JSON parse error: {exc}", cause=exc) from exc


class YamlFileProvider(_DataFileProvider):
    """Loads a YAML file whose top-level mapping holds a ``defaults`` key."""

    def _parse(self, content: str, specifier: str) -> Any:
        try:
            return yaml.safe_load(content)
        except yaml.YAMLError as exc:
            raise DefaultsNotFoundError(specifier, reason=f"YAML parse error: {exc}", cause=exc) from exc


class MappingProvider(DefaultsProvider):
    """Serves defaults from an in-memory object or mapping.

    The wrapped source must expose ``defaults`` either as a key or as an
    attribute, exactly like a loaded module would.
    """

    def __init__(self, source: Any) -> None:
        self._source = source

    def load(self, specifier: str = "<memory>") -> Mapping[str, Any]:
        return _extract_defaults(self._source, specifier)


_SUFFIX_PROVIDERS: dict[str, type[DefaultsProvider]] = {
    ".py": PythonModuleProvider,
    ".json": JsonFileProvider,
    ".yaml": YamlFileProvider,
    ".yml": YamlFileProvider,
}


def resolve_provider(specifier: str) -> DefaultsProvider:
    """Pick a provider for a path or dotted module name.

    File suffixes select the format. A bare dotted name is imported as a
    Python module.
    """
    suffix = pathlib.PurePath(specifier).suffix.lower()
    provider_cls = _SUFFIX_PROVIDERS.get(suffix)
    if provider_cls is None and _DOTTED_NAME.match(specifier):
        provider_cls = PythonModuleProvider
    if provider_cls is not None:
        logger.debug("Resolved %s for defaults %s", provider_cls.__name__, specifier)
        return provider_cls()
    raise DefaultsNotFoundError(specifier, reason="Unsupported defaults resource type")
