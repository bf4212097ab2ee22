"""Build, override, and validate the learning-notes site configuration.

This subpackage owns the configuration contract handed to the static-site
generator. :func:`build_default_site_config` returns the site's literal
settings, :func:`load_site_config` layers an optional ``site.yaml`` and scalar
overrides on top, and :func:`validate_site_config` checks every nav/sidebar
invariant before the generator is allowed to run.

Examples
--------
>>> from notes_site.config import load_site_config, validate_site_config
>>> site = validate_site_config(load_site_config())
>>> [group.text for group in site.theme.groups_for("/Tool/")]
['Vue', '其他工具']
"""

from .defaults import build_default_site_config
from .loader import OVERRIDABLE_FIELDS, apply_overrides, load_site_config
from .models import (
    Footer,
    MarkdownOptions,
    NavItem,
    SearchConfig,
    SidebarGroup,
    SidebarItem,
    SiteConfig,
    SiteConfigError,
    SocialLink,
    ThemeConfig,
)
from .validation import collect_config_issues, validate_site_config

__all__ = [
    "OVERRIDABLE_FIELDS",
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
    "apply_overrides",
    "build_default_site_config",
    "collect_config_issues",
    "load_site_config",
    "validate_site_config",
]
