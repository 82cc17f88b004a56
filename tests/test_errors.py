"""Tests for the typedenv error hierarchy."""

from __future__ import annotations

import pytest

from typedenv.errors import (
    ConfigError,
    DefaultsEmptyError,
    DefaultsNotFoundError,
    DefaultsStructureError,
    ErrorCodes,
    TypeConversionError,
    TypedEnvError,
)


@pytest.mark.parametrize(
    "error, code",
    [
        (ConfigError("bad"), ErrorCodes.CONFIG_INVALID),
        (DefaultsNotFoundError("x.py"), ErrorCodes.DEFAULTS_NOT_FOUND),
        (DefaultsStructureError("x.py"), ErrorCodes.DEFAULTS_STRUCTURE_INVALID),
        (DefaultsEmptyError("x.py"), ErrorCodes.DEFAULTS_EMPTY),
        (TypeConversionError("abc", "int"), ErrorCodes.TYPE_CONVERSION_ERROR),
    ],
)
def test_codes_and_base_class(error, code):
    assert isinstance(error, TypedEnvError)
    assert error.code == code
    assert str(error) == f"[{code}] {error.message}"
    assert error.timestamp


def test_not_found_reason_in_message():
    err = DefaultsNotFoundError("x.py", reason="File does not exist")
    assert "x.py" in err.message
    assert "File does not exist" in err.message
    assert err.details["reason"] == "File does not exist"


def test_cause_is_kept():
    cause = ValueError("inner")
    err = DefaultsNotFoundError("x.json", cause=cause)
    assert err.cause is cause


def test_conversion_error_message():
    err = TypeConversionError("abc", "float")
    assert err.message == "Cannot convert 'abc' to float"


def test_error_codes_immutable():
    with pytest.raises(AttributeError):
        ErrorCodes().DEFAULTS_EMPTY = "other"
