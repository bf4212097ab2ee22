"""Typed dataclasses describing the learning-notes site configuration."""

from __future__ import annotations

import dataclasses as dc
import types
import typing as typ


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(frozen=True, slots=True)
class MarkdownOptions:
    """Markdown-rendering toggles passed through to the generator."""

    breaks: bool = False


@dc.dataclass(frozen=True, slots=True)
class NavItem:
    """Top navigation bar entry."""

    text: str
    link: str


@dc.dataclass(frozen=True, slots=True)
class SidebarItem:
    """Single page link inside a sidebar group."""

    text: str
    link: str


@dc.dataclass(frozen=True, slots=True)
class SidebarGroup:
    """Labelled category of sidebar pages, rendered in declaration order."""

    text: str
    items: tuple[SidebarItem, ...]
    collapsed: bool | None = None


@dc.dataclass(frozen=True, slots=True)
class SocialLink:
    """Icon link shown in the navigation bar."""

    icon: str
    link: str


@dc.dataclass(frozen=True, slots=True)
class Footer:
    """Footer copy."""

    message: str
    copyright: str


@dc.dataclass(frozen=True, slots=True)
class SearchConfig:
    """Search provider selection.

    ``options`` carries provider-specific settings; the ``local`` provider
    needs none, ``algolia`` needs its application credentials.
    """

    provider: str = "local"
    options: typ.Mapping[str, str] = dc.field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "options", types.MappingProxyType(dict(self.options)))


@dc.dataclass(frozen=True, slots=True)
class ThemeConfig:
    """Navigation, sidebar, and chrome settings for the default theme."""

    nav: tuple[NavItem, ...]
    sidebar: typ.Mapping[str, tuple[SidebarGroup, ...]]
    footer: Footer
    social_links: tuple[SocialLink, ...] = ()
    search: SearchConfig = dc.field(default_factory=SearchConfig)

    def __post_init__(self) -> None:
        object.__setattr__(self, "sidebar", types.MappingProxyType(dict(self.sidebar)))

    def nav_links(self) -> list[str]:
        """Return the nav ``link`` targets in display order."""
        return [item.link for item in self.nav]

    def groups_for(self, prefix: str) -> tuple[SidebarGroup, ...]:
        """Return the sidebar groups registered under ``prefix``."""
        try:
            return self.sidebar[prefix]
        except KeyError as exc:
            available = ", ".join(sorted(self.sidebar))
            msg = f"Unknown sidebar prefix '{prefix}'. Known prefixes: {available}"
            raise KeyError(msg) from exc


@dc.dataclass(frozen=True, slots=True)
class SiteConfig:
    """Root configuration handed to the static-site generator."""

    title: str
    description: str
    theme: ThemeConfig
    markdown: MarkdownOptions = dc.field(default_factory=MarkdownOptions)
    base: str = "/"
    out_dir: str = "../dist"
    lang: str | None = None

    def iter_links(self) -> typ.Iterator[tuple[str, str]]:
        """Yield ``(label, link)`` for every nav entry and sidebar page."""
        for item in self.theme.nav:
            yield item.text, item.link
        for groups in self.theme.sidebar.values():
            for group in groups:
                for page in group.items:
                    yield page.text, page.link


__all__ = [
    "Footer",
    "MarkdownOptions",
    "NavItem",
    "SearchConfig",
    "SidebarGroup",
    "SidebarItem",
    "SiteConfig",
    "SiteConfigError",
    "SocialLink",
    "ThemeConfig",
]
