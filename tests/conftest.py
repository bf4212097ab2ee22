"""Shared fixtures for notes_site tests."""

from __future__ import annotations

import typing as typ
from textwrap import dedent

import pytest

from notes_site.config import build_default_site_config

if typ.TYPE_CHECKING:
    from pathlib import Path

    from notes_site.config import SiteConfig


@pytest.fixture
def site_config() -> SiteConfig:
    """Return a fresh copy of the default site configuration."""
    return build_default_site_config()


@pytest.fixture
def source_root(tmp_path: Path) -> Path:
    """Return an empty site source directory inside ``tmp_path``."""
    root = tmp_path / "docs"
    root.mkdir()
    return root


@pytest.fixture
def write_yaml(tmp_path: Path) -> typ.Callable[[str], Path]:
    """Return a helper that writes dedented YAML to ``tmp_path/site.yaml``."""

    def _write(text: str) -> Path:
        path = tmp_path / "site.yaml"
        path.write_text(dedent(text).strip() + "\n", encoding="utf-8")
        return path

    return _write
