"""Common literal values used across notes_site.

These constants keep file locations and identifier sets centralized so the
loader, validator, exporter, and tests can import the same values without
drifting. Intended for internal use within the notes_site package.

Examples
--------
>>> from notes_site import _constants
>>> "local" in _constants.SEARCH_PROVIDERS
True
>>> _constants.GENERATOR_CONFIG_PATH.as_posix()
'.vitepress/config.mjs'
"""

from pathlib import Path

DEFAULT_OVERRIDES_FILE = Path("config/site.yaml")
GENERATOR_CONFIG_PATH = Path(".vitepress/config.mjs")
GENERATOR_TEMPLATE = "config.mjs.jinja"

SEARCH_PROVIDERS: frozenset[str] = frozenset({"local", "algolia"})
SEARCH_CREDENTIALS: dict[str, tuple[str, ...]] = {
    "local": (),
    "algolia": ("app_id", "api_key", "index_name"),
}

SOCIAL_ICONS: frozenset[str] = frozenset(
    {
        "discord",
        "facebook",
        "github",
        "gitlab",
        "instagram",
        "linkedin",
        "mastodon",
        "npm",
        "slack",
        "twitter",
        "x",
        "youtube",
    }
)
