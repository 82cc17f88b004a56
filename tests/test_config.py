"""Tests for AccessorOptions and accessor construction."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from typedenv.accessor import EnvAccessor
from typedenv.config import AccessorOptions
from typedenv.errors import ConfigError, ErrorCodes


class TestAccessorOptions:
    def test_defaults(self):
        opts = AccessorOptions()
        assert opts.prefix == ""
        assert opts.prefix_separator == "_"
        assert opts.strict_errors is True

    def test_none_gives_defaults(self):
        assert AccessorOptions.from_mapping(None) == AccessorOptions()

    def test_snake_case_names(self):
        opts = AccessorOptions.from_mapping({"prefix": "APP", "prefix_separator": "-", "strict_errors": False})
        assert (opts.prefix, opts.prefix_separator, opts.strict_errors) == ("APP", "-", False)

    def test_camel_case_aliases(self):
        opts = AccessorOptions.from_mapping({"prefixSeparator": ".", "strictErrors": False})
        assert opts.prefix_separator == "."
        assert opts.strict_errors is False

    def test_unknown_option_rejected(self):
        with pytest.raises(ConfigError) as exc_info:
            AccessorOptions.from_mapping({"prefx": "APP"})
        assert exc_info.value.code == ErrorCodes.CONFIG_INVALID
        assert "prefx" in exc_info.value.message

    def test_wrong_type_rejected(self):
        with pytest.raises(ConfigError):
            AccessorOptions.from_mapping({"prefix": 5})

    def test_non_mapping_rejected(self):
        with pytest.raises(ConfigError):
            AccessorOptions.from_mapping("APP")  # type: ignore[arg-type]

    def test_frozen(self):
        opts = AccessorOptions()
        with pytest.raises(ValidationError):
            opts.prefix = "X"  # type: ignore[misc]


class TestAccessorConstruction:
    def test_no_options(self):
        acc = EnvAccessor()
        assert acc.prefix == ""
        assert acc.prefix_separator == "_"
        assert acc.strict_errors is True
        assert acc.defaults_loaded is False
        assert dict(acc.defaults) == {}

    def test_options_instance(self):
        acc = EnvAccessor(AccessorOptions(prefix="SVC"))
        assert acc.prefix == "SVC"

    def test_mapping_options(self):
        acc = EnvAccessor({"prefix": "SVC", "strictErrors": False})
        assert acc.prefix == "SVC"
        assert acc.strict_errors is False

    def test_invalid_options_raise(self):
        with pytest.raises(ConfigError):
            EnvAccessor({"throwOnError": False})
