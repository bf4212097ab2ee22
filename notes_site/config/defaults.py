"""The learning-notes site configuration as literal data.

:func:`build_default_site_config` is the provider consumed at build start. It
performs no validation and no I/O, so calling it twice yields equal values.
Nav entries and sidebar groups keep their declared order because the
generator renders them in sequence.
"""

from __future__ import annotations

from .models import (
    Footer,
    MarkdownOptions,
    NavItem,
    SearchConfig,
    SidebarGroup,
    SidebarItem,
    SiteConfig,
    ThemeConfig,
)


def _group(text: str, *pages: tuple[str, str]) -> SidebarGroup:
    return SidebarGroup(
        text=text,
        items=tuple(SidebarItem(text=label, link=link) for label, link in pages),
    )


def build_default_site_config() -> SiteConfig:
    """Return the configuration for the front-end learning-notes site.

    Returns
    -------
    SiteConfig
        Fresh, immutable configuration with the ``/Language/`` and ``/Tool/``
        sections, local search, and ``../dist`` as the build output.

    Examples
    --------
    >>> config = build_default_site_config()
    >>> config.theme.nav_links()
    ['/', '/Language/', '/Tool/']
    >>> config == build_default_site_config()
    True
    """
    theme = ThemeConfig(
        nav=(
            NavItem(text="首页", link="/"),
            NavItem(text="语言", link="/Language/"),
            NavItem(text="工具", link="/Tool/"),
        ),
        sidebar={
            "/Language/": (
                _group(
                    "JavaScript",
                    ("JavaScript基础", "/Language/JavaScript/JavaScript/"),
                    ("ES6", "/Language/JavaScript/ES6/"),
                    ("ES7-10", "/Language/JavaScript/ES7-10/"),
                ),
                _group(
                    "Node",
                    ("Node基础", "/Language/Node/Node/"),
                    ("MongoDB", "/Language/Node/MongoDB/"),
                    ("爬虫", "/Language/Node/Reptiles爬虫/"),
                ),
            ),
            "/Tool/": (
                _group(
                    "Vue",
                    ("Vue基础", "/Tool/Vue/Vue_base/"),
                    ("Vue MVVM", "/Tool/Vue/Vue_mvvm/"),
                    ("Vuex", "/Tool/Vue/Vuex/"),
                ),
                _group(
                    "其他工具",
                    ("Axios", "/Tool/Axios/"),
                    ("Webpack", "/Tool/Webpack/"),
                    ("Git", "/Tool/Git/"),
                    ("SSO", "/Tool/SSO/"),
                ),
            ),
        },
        # Add e.g. SocialLink(icon="github", link=...) once the repo is public.
        social_links=(),
        footer=Footer(message="MIT Licensed", copyright="Copyright © 2022 xiaoyu"),
        search=SearchConfig(provider="local"),
    )
    return SiteConfig(
        title="学习记录文档",
        description="前端技术学习记录",
        theme=theme,
        markdown=MarkdownOptions(breaks=False),
        base="/",
        out_dir="../dist",
    )


__all__ = ["build_default_site_config"]
