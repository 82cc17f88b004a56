"""EnvAccessor: typed reads of environment variables with defaults and prefixing."""

from __future__ import annotations

import asyncio
import logging
import os
from collections.abc import Callable, Mapping
from typing import Any

from typedenv.coercion import has_value, is_truthy, to_array, to_float, to_int, to_string
from typedenv.config import AccessorOptions
from typedenv.errors import TypedEnvError
from typedenv.providers import DefaultsProvider, resolve_provider

__all__ = ["EnvAccessor"]

logger = logging.getLogger(__name__)


class EnvAccessor:
    """Resolves variable names to typed values.

    Lookup order for a name is fixed: the loaded defaults table (truthy
    values only), then the live environment (presence, so an empty string
    counts), then the caller's fallback. A resolved value that is falsy,
    including the string ``"0"``, is treated as unset and replaced by the
    fallback.

    With ``strict_errors`` enabled (the default) failures raise
    :class:`~typedenv.errors.TypedEnvError` subclasses. After :meth:`quiet`
    the same failures are logged and the call returns ``None``, which makes
    a misconfigured variable indistinguishable from a missing one.

    Args:
        options: AccessorOptions, a mapping of option names, or None.
        environ: Mapping to read variables from. Defaults to ``os.environ``,
            read on every lookup.
    """

    def __init__(
        self,
        options: AccessorOptions | Mapping[str, Any] | None = None,
        *,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        if not isinstance(options, AccessorOptions):
            options = AccessorOptions.from_mapping(options)
        self._prefix = options.prefix
        self._prefix_separator = options.prefix_separator
        self._strict_errors = options.strict_errors
        self._environ: Mapping[str, str] = os.environ if environ is None else environ
        self._defaults: Mapping[str, Any] = {}
        self._defaults_loaded = False

    # -- Properties --

    @property
    def prefix(self) -> str:
        return self._prefix

    @property
    def prefix_separator(self) -> str:
        return self._prefix_separator

    @property
    def strict_errors(self) -> bool:
        return self._strict_errors

    @property
    def defaults(self) -> Mapping[str, Any]:
        """The current defaults table. Empty until load_defaults succeeds."""
        return self._defaults

    @property
    def defaults_loaded(self) -> bool:
        return self._defaults_loaded

    # -- Defaults --

    async def load_defaults(self, file_path: str, *, provider: DefaultsProvider | None = None) -> None:
        """Load a defaults table and replace the current one.

        The resource at file_path must expose a non-empty mapping under a
        field named ``defaults``. The table is replaced only on success. The
        loaded mapping is kept by reference; mutating it afterwards has
        undefined effect on lookups.

        Args:
            file_path: A ``.py``, ``.json``, ``.yaml`` or ``.yml`` path, or a
                dotted module name.
            provider: Loader to use instead of resolving one from file_path.

        Raises:
            DefaultsNotFoundError: The resource cannot be found or loaded.
            DefaultsStructureError: The resource has no 'defaults' mapping.
            DefaultsEmptyError: The 'defaults' mapping has no keys.
        """
        try:
            if provider is None:
                provider = resolve_provider(file_path)
            defaults = await asyncio.to_thread(provider.load, file_path)
        except TypedEnvError as exc:
            self._fail(exc)
            return None

        self._defaults = defaults
        self._defaults_loaded = True
        logger.info("Loaded %d defaults from %s", len(defaults), file_path)
        return None

    # -- Resolution --

    def key_for(self, name: str) -> str:
        """Return the effective key for name after prefix composition."""
        if self._prefix:
            return f"{self._prefix}{self._prefix_separator}{name}"
        return name

    def _resolve(self, name: str) -> Any:
        key = self.key_for(name)

        value = self._defaults.get(key)
        if has_value(value):
            logger.debug("Resolved %s from defaults table", key)
            return value

        value = self._environ.get(key)
        if value is not None:
            logger.debug("Resolved %s from environment", key)
            return value
        return None

    def _get_typed(self, name: str, default: Any, convert: Callable[[Any], Any]) -> Any:
        value = self._resolve(name)
        if not is_truthy(value):
            value = default
        if not is_truthy(value):
            return None

        try:
            return convert(value)
        except TypedEnvError as exc:
            exc.details.setdefault("key", self.key_for(name))
            return self._fail(exc)

    def _fail(self, exc: TypedEnvError) -> None:
        if self._strict_errors:
            raise exc
        logger.warning("Suppressed error in quiet mode: %s", exc)
        return None

    # -- Typed getters --

    def get_string(self, name: str, default: str | None = None) -> str | None:
        """Return the variable as a string, or None when unset."""
        return self._get_typed(name, default, to_string)

    def get_int(self, name: str, default: int | None = None) -> int | None:
        """Return the variable as an int.

        Note that a value of ``"0"`` counts as unset and yields default.

        Raises:
            TypeConversionError: The value has no leading integer (strict mode).
        """
        return self._get_typed(name, default, to_int)

    def get_int_or_any(self, name: str, default: Any = None) -> int | Any:
        """Same as get_int with a looser result type."""
        return self._get_typed(name, default, to_int)

    def get_float(self, name: str, default: float | None = None) -> float | None:
        """Return the variable as a float.

        Raises:
            TypeConversionError: The value has no leading number (strict mode).
        """
        return self._get_typed(name, default, to_float)

    def get_array(self, name: str, default: list[Any] | None = None) -> list[Any] | None:
        """Return the variable as a list: a JSON array, or comma-separated parts."""
        return self._get_typed(name, default, to_array)

    # -- Error mode --

    def quiet(self) -> None:
        """Suppress errors for the rest of this accessor's lifetime."""
        self._strict_errors = False

    def __repr__(self) -> str:
        return (
            f"EnvAccessor(prefix={self._prefix!r}, prefix_separator={self._prefix_separator!r}, "
            f"strict_errors={self._strict_errors!r}, defaults_loaded={self._defaults_loaded!r})"
        )
