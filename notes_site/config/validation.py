"""Fail-fast validation of a :class:`SiteConfig` before the generator runs.

The generator only notices broken nav/sidebar wiring when a reader clicks a
dead link, so every structural invariant is checked here and reported in one
:class:`SiteConfigError`. Checks never touch the content tree; see
:mod:`notes_site.content` for that.

Examples
--------
>>> from notes_site.config import build_default_site_config
>>> collect_config_issues(build_default_site_config())
[]
"""

from __future__ import annotations

import typing as typ
from pathlib import Path
from urllib.parse import urlsplit

from .._constants import SEARCH_CREDENTIALS, SEARCH_PROVIDERS, SOCIAL_ICONS
from .models import SiteConfig, SiteConfigError

if typ.TYPE_CHECKING:
    from .models import SearchConfig, SocialLink, ThemeConfig


def collect_config_issues(
    config: SiteConfig, *, source_root: Path | None = None
) -> list[str]:
    """Return one message per violated invariant, in a stable order.

    Parameters
    ----------
    config : SiteConfig
        Configuration to check.
    source_root : Path or None, optional
        Directory holding the site sources; ``out_dir`` is resolved against it
        to make sure a build cannot overwrite its own inputs. Defaults to the
        current working directory.

    Returns
    -------
    list[str]
        Empty when the configuration is consistent.
    """
    issues: list[str] = []
    if not config.title.strip():
        issues.append("title must not be empty.")
    if not (config.base.startswith("/") and config.base.endswith("/")):
        issues.append(f"base '{config.base}' must start and end with '/'.")
    issues.extend(_nav_issues(config.theme))
    issues.extend(_sidebar_issues(config.theme))
    issues.extend(_social_issues(config.theme.social_links))
    issues.extend(_search_issues(config.theme.search))
    issues.extend(_out_dir_issues(config.out_dir, source_root or Path.cwd()))
    return issues


def validate_site_config(
    config: SiteConfig, *, source_root: Path | None = None
) -> SiteConfig:
    """Return ``config`` unchanged, or raise listing every invariant it breaks.

    Raises
    ------
    SiteConfigError
        If :func:`collect_config_issues` reports anything.
    """
    issues = collect_config_issues(config, source_root=source_root)
    if issues:
        details = "\n".join(f"  - {issue}" for issue in issues)
        msg = f"Invalid site configuration ({len(issues)} issue(s)):\n{details}"
        raise SiteConfigError(msg)
    return config


def _link_issue(link: str, where: str) -> str | None:
    if not link:
        return f"{where} has an empty link."
    if not link.startswith("/"):
        return f"{where} link '{link}' must start with '/'."
    return None


def _nav_issues(theme: ThemeConfig) -> list[str]:
    issues: list[str] = []
    for index, item in enumerate(theme.nav):
        issue = _link_issue(item.link, f"nav[{index}] '{item.text}'")
        if issue:
            issues.append(issue)
    return issues


def _sidebar_issues(theme: ThemeConfig) -> list[str]:
    issues: list[str] = []
    nav_links = set(theme.nav_links())
    for prefix, groups in theme.sidebar.items():
        if not prefix.startswith("/"):
            issues.append(f"sidebar key '{prefix}' must start with '/'.")
        if prefix not in nav_links:
            issues.append(
                f"sidebar key '{prefix}' has no nav entry linking to it."
            )
        for group in groups:
            where = f"sidebar['{prefix}'] group '{group.text}'"
            if not group.text.strip():
                issues.append(f"sidebar['{prefix}'] has a group without a label.")
            if not group.items:
                issues.append(f"{where} has no items.")
            for item in group.items:
                issue = _link_issue(item.link, f"{where} item '{item.text}'")
                if issue:
                    issues.append(issue)
    return issues


def _social_issues(links: tuple[SocialLink, ...]) -> list[str]:
    issues: list[str] = []
    for link in links:
        if link.icon not in SOCIAL_ICONS:
            known = ", ".join(sorted(SOCIAL_ICONS))
            issues.append(f"social icon '{link.icon}' is not one of: {known}.")
        parts = urlsplit(link.link)
        if parts.scheme not in {"http", "https"} or not parts.netloc:
            issues.append(f"social link '{link.link}' must be an http(s) URL.")
    return issues


def _search_issues(search: SearchConfig) -> list[str]:
    if search.provider not in SEARCH_PROVIDERS:
        known = ", ".join(sorted(SEARCH_PROVIDERS))
        return [f"search provider '{search.provider}' is not one of: {known}."]
    return [
        f"search provider '{search.provider}' requires option '{key}'."
        for key in SEARCH_CREDENTIALS[search.provider]
        if not search.options.get(key)
    ]


def _out_dir_issues(out_dir: str, source_root: Path) -> list[str]:
    if not out_dir.strip():
        return ["out_dir must not be empty."]
    root = source_root.resolve()
    target = (source_root / out_dir).resolve()
    if target == root:
        return [f"out_dir '{out_dir}' resolves to the source root '{root}'."]
    if root.is_relative_to(target):
        return [f"out_dir '{out_dir}' contains the source root '{root}'."]
    return []


__all__ = ["collect_config_issues", "validate_site_config"]
