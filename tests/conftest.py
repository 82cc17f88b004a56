"""Shared test fixtures for the typedenv test suite."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from typedenv.accessor import EnvAccessor


@pytest.fixture
def environ() -> dict[str, str]:
    """An isolated environment mapping injected into accessors."""
    return {}


@pytest.fixture
def accessor(environ: dict[str, str]) -> EnvAccessor:
    return EnvAccessor(environ=environ)


@pytest.fixture
def prefixed_accessor(environ: dict[str, str]) -> EnvAccessor:
    return EnvAccessor({"prefix": "APP"}, environ=environ)


@pytest.fixture
def write_file(tmp_path: Path) -> Callable[[str, str], str]:
    """Write content to a file under tmp_path and return its path as str."""

    def _write(name: str, content: str) -> str:
        path = tmp_path / name
        path.write_text(content)
        return str(path)

    return _write
