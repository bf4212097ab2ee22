"""Utility helpers shared by the notes_site configuration loader."""

from __future__ import annotations

import typing as typ

from .models import (
    Footer,
    NavItem,
    SearchConfig,
    SidebarGroup,
    SidebarItem,
    SiteConfigError,
    SocialLink,
)


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _require_str(payload: typ.Mapping[str, object], key: str, where: str) -> str:
    """Return ``payload[key]`` as a non-empty string or raise."""
    text = _optional_str(payload.get(key))
    if text is None:
        msg = f"{where} requires a non-empty '{key}'."
        raise SiteConfigError(msg)
    return text


def _require_list(value: object, where: str) -> list[object]:
    match value:
        case list() as items:
            return items
        case _:
            msg = f"{where} must be a list."
            raise SiteConfigError(msg)


def _require_mapping(value: object, where: str) -> typ.Mapping[str, typ.Any]:
    match value:
        case dict() as data:
            return data
        case _:
            msg = f"{where} must be a mapping."
            raise SiteConfigError(msg)


def _build_nav(entries: object) -> tuple[NavItem, ...]:
    """Build navigation entries, keeping their declared order."""
    nav: list[NavItem] = []
    for entry in _require_list(entries, "theme.nav"):
        data = _require_mapping(entry, "theme.nav entry")
        nav.append(
            NavItem(
                text=_require_str(data, "text", "theme.nav entry"),
                link=_require_str(data, "link", "theme.nav entry"),
            )
        )
    return tuple(nav)


def _build_sidebar_group(prefix: str, payload: object) -> SidebarGroup:
    where = f"theme.sidebar['{prefix}'] group"
    data = _require_mapping(payload, where)
    items: list[SidebarItem] = []
    for entry in _require_list(data.get("items", []), f"{where} items"):
        item = _require_mapping(entry, f"{where} item")
        items.append(
            SidebarItem(
                text=_require_str(item, "text", f"{where} item"),
                link=_require_str(item, "link", f"{where} item"),
            )
        )
    match data.get("collapsed"):
        case None:
            collapsed = None
        case bool() as flag:
            collapsed = flag
        case other:
            msg = f"{where} 'collapsed' must be true or false, not {other!r}."
            raise SiteConfigError(msg)
    return SidebarGroup(
        text=_require_str(data, "text", where),
        items=tuple(items),
        collapsed=collapsed,
    )


def _build_sidebar(payload: object) -> dict[str, tuple[SidebarGroup, ...]]:
    """Build the prefix-to-groups sidebar mapping."""
    sidebar: dict[str, tuple[SidebarGroup, ...]] = {}
    for prefix, groups in _require_mapping(payload, "theme.sidebar").items():
        sidebar[str(prefix)] = tuple(
            _build_sidebar_group(str(prefix), group)
            for group in _require_list(groups, f"theme.sidebar['{prefix}']")
        )
    return sidebar


def _build_social_links(entries: object) -> tuple[SocialLink, ...]:
    if entries is None:
        return ()
    links: list[SocialLink] = []
    for entry in _require_list(entries, "theme.social_links"):
        data = _require_mapping(entry, "theme.social_links entry")
        links.append(
            SocialLink(
                icon=_require_str(data, "icon", "theme.social_links entry"),
                link=_require_str(data, "link", "theme.social_links entry"),
            )
        )
    return tuple(links)


def _merge_footer(base: Footer, override: object) -> Footer:
    """Merge an override footer mapping into the base Footer."""
    if override is None:
        return base
    data = _require_mapping(override, "theme.footer")
    return Footer(
        message=(
            _require_str(data, "message", "theme.footer")
            if "message" in data
            else base.message
        ),
        copyright=(
            _require_str(data, "copyright", "theme.footer")
            if "copyright" in data
            else base.copyright
        ),
    )


def _build_search(payload: object) -> SearchConfig:
    """Build a SearchConfig from ``provider`` and an optional ``options`` block."""
    data = _require_mapping(payload, "theme.search")
    provider = _optional_str(data.get("provider")) or "local"
    raw_options = data.get("options") or {}
    options = {
        str(key): str(value)
        for key, value in _require_mapping(raw_options, "theme.search.options").items()
        if value is not None
    }
    return SearchConfig(provider=provider, options=options)


__all__ = [
    "_build_nav",
    "_build_search",
    "_build_sidebar",
    "_build_social_links",
    "_merge_footer",
    "_optional_str",
    "_require_mapping",
]
