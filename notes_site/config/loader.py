"""Load optional YAML overrides on top of the default site configuration."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from ruamel.yaml import YAML

from .defaults import build_default_site_config
from .helpers import (
    _build_nav,
    _build_search,
    _build_sidebar,
    _build_social_links,
    _merge_footer,
    _optional_str,
    _require_mapping,
)
from .models import MarkdownOptions, SiteConfig, SiteConfigError, ThemeConfig

if typ.TYPE_CHECKING:
    from pathlib import Path

OVERRIDABLE_FIELDS = ("title", "description", "base", "out_dir", "lang")


def load_site_config(
    path: Path | None = None,
    *,
    overrides: typ.Mapping[str, str | None] | None = None,
) -> SiteConfig:
    """Build the site configuration, applying file and keyword overrides.

    Parameters
    ----------
    path : Path or None, optional
        YAML file whose top-level sections replace the defaults from
        :func:`~notes_site.config.defaults.build_default_site_config`. When
        ``None`` the defaults are used as-is.
    overrides : Mapping[str, str | None] or None, optional
        Scalar overrides (``title``, ``description``, ``base``, ``out_dir``,
        ``lang``) applied last; ``None`` values are ignored so CLI flags that
        were not supplied leave the configuration untouched.

    Returns
    -------
    SiteConfig
        A new, unvalidated configuration. Run
        :func:`~notes_site.config.validation.validate_site_config` before
        handing it to the generator.

    Raises
    ------
    FileNotFoundError
        If ``path`` is given but does not exist.
    TypeError
        If the top-level YAML structure is not a mapping.
    SiteConfigError
        If a section has the wrong shape or an override names an unknown field.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> config = load_site_config(overrides={"base": "/notes/"})
    >>> config.base
    '/notes/'
    """
    config = build_default_site_config()
    if path is not None:
        config = _apply_file(config, _read_yaml(path))
    if overrides:
        config = apply_overrides(config, overrides)
    return config


def apply_overrides(
    config: SiteConfig, overrides: typ.Mapping[str, str | None]
) -> SiteConfig:
    """Return a copy of ``config`` with the non-``None`` scalar overrides set."""
    changes: dict[str, str] = {}
    for key, value in overrides.items():
        if key not in OVERRIDABLE_FIELDS:
            allowed = ", ".join(OVERRIDABLE_FIELDS)
            msg = f"Cannot override '{key}'. Overridable fields: {allowed}"
            raise SiteConfigError(msg)
        if value is not None:
            changes[key] = value
    return dc.replace(config, **changes) if changes else config


def _read_yaml(path: Path) -> dict[str, typ.Any]:
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    return dict(loaded)


def _apply_file(config: SiteConfig, raw: typ.Mapping[str, typ.Any]) -> SiteConfig:
    """Replace each section of ``config`` that ``raw`` defines."""
    changes: dict[str, typ.Any] = {}
    for key in OVERRIDABLE_FIELDS:
        if key not in raw:
            continue
        value = raw[key]
        if key == "lang":
            changes[key] = _optional_str(value)
        else:
            changes[key] = "" if value is None else str(value).strip()
    if "markdown" in raw:
        markdown = _require_mapping(raw["markdown"] or {}, "markdown")
        changes["markdown"] = MarkdownOptions(
            breaks=bool(markdown.get("breaks", config.markdown.breaks))
        )
    if "theme" in raw:
        changes["theme"] = _merge_theme(config.theme, raw["theme"] or {})
    return dc.replace(config, **changes)


def _merge_theme(base: ThemeConfig, payload: object) -> ThemeConfig:
    data = _require_mapping(payload, "theme")
    return ThemeConfig(
        nav=_build_nav(data["nav"]) if "nav" in data else base.nav,
        sidebar=_build_sidebar(data["sidebar"]) if "sidebar" in data else base.sidebar,
        footer=_merge_footer(base.footer, data.get("footer")),
        social_links=(
            _build_social_links(data["social_links"])
            if "social_links" in data
            else base.social_links
        ),
        search=_build_search(data["search"]) if "search" in data else base.search,
    )


__all__ = ["OVERRIDABLE_FIELDS", "apply_overrides", "load_site_config"]
