"""Hand the site configuration to the static-site generator.

The generator reads a JavaScript config module, so this module converts a
:class:`~notes_site.config.SiteConfig` into the generator's camelCase payload
and writes it either as ``.vitepress/config.mjs`` (through the
``config.mjs.jinja`` template) or as a JSON document.

Typical usage mirrors the build pipeline:

>>> from notes_site.config import load_site_config
>>> builder = GeneratorConfigBuilder(load_site_config())
>>> output_path = builder.run()  # doctest: +SKIP
>>> print(output_path)  # doctest: +SKIP
.vitepress/config.mjs
"""

from __future__ import annotations

import json
import typing as typ
from pathlib import Path

import msgspec.json as msgspec_json
from jinja2 import Environment, FileSystemLoader

from ._constants import GENERATOR_CONFIG_PATH, GENERATOR_TEMPLATE

if typ.TYPE_CHECKING:
    from .config import SidebarGroup, SiteConfig


def _group_payload(group: SidebarGroup) -> dict[str, typ.Any]:
    payload: dict[str, typ.Any] = {"text": group.text}
    if group.collapsed is not None:
        payload["collapsed"] = group.collapsed
    payload["items"] = [{"text": item.text, "link": item.link} for item in group.items]
    return payload


def to_generator_payload(config: SiteConfig) -> dict[str, typ.Any]:
    """Return ``config`` as the nested mapping the generator expects.

    Keys follow the generator's camelCase names and appear in declaration
    order; optional settings that are unset are omitted.

    Examples
    --------
    >>> from notes_site.config import build_default_site_config
    >>> payload = to_generator_payload(build_default_site_config())
    >>> list(payload)
    ['title', 'description', 'markdown', 'themeConfig', 'base', 'outDir']
    >>> payload["themeConfig"]["search"]
    {'provider': 'local'}
    """
    theme = config.theme
    search: dict[str, typ.Any] = {"provider": theme.search.provider}
    if theme.search.options:
        search["options"] = dict(theme.search.options)
    payload: dict[str, typ.Any] = {
        "title": config.title,
        "description": config.description,
    }
    if config.lang is not None:
        payload["lang"] = config.lang
    payload["markdown"] = {"breaks": config.markdown.breaks}
    payload["themeConfig"] = {
        "nav": [{"text": item.text, "link": item.link} for item in theme.nav],
        "sidebar": {
            prefix: [_group_payload(group) for group in groups]
            for prefix, groups in theme.sidebar.items()
        },
        "socialLinks": [
            {"icon": link.icon, "link": link.link} for link in theme.social_links
        ],
        "footer": {
            "message": theme.footer.message,
            "copyright": theme.footer.copyright,
        },
        "search": search,
    }
    payload["base"] = config.base
    payload["outDir"] = config.out_dir
    return payload


def dump_json(config: SiteConfig) -> bytes:
    """Encode the generator payload as UTF-8 JSON."""
    return msgspec_json.encode(to_generator_payload(config))


class GeneratorConfigBuilder:
    """Render the generator's ``config.mjs`` module from a SiteConfig."""

    def __init__(
        self,
        config: SiteConfig,
        *,
        output: Path | None = None,
        templates_dir: Path | None = None,
    ) -> None:
        """Initialize the builder and Jinja environment.

        Parameters
        ----------
        config : SiteConfig
            Configuration to serialize; it is expected to be validated already.
        output : Path, optional
            Destination file. Defaults to ``.vitepress/config.mjs`` relative to
            the working directory.
        templates_dir : Path, optional
            Directory containing Jinja templates. Defaults to
            ``notes_site/templates``.
        """
        self.config = config
        self.output = output or GENERATOR_CONFIG_PATH
        self.templates_dir = templates_dir or Path(__file__).parent / "templates"
        self.env = Environment(
            loader=FileSystemLoader(self.templates_dir),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self.env.filters["js"] = _to_js_literal
        self.template = self.env.get_template(GENERATOR_TEMPLATE)

    def render(self) -> str:
        """Return the module source, always newline-terminated."""
        source = self.template.render(payload=to_generator_payload(self.config))
        if not source.endswith("\n"):
            source += "\n"
        return source

    def run(self) -> Path:
        """Render and write the config module, returning the output path."""
        self.output.parent.mkdir(parents=True, exist_ok=True)
        self.output.write_text(self.render(), encoding="utf-8")
        return self.output


def _to_js_literal(value: object) -> str:
    """Format ``value`` as an indented JavaScript literal (JSON is valid JS)."""
    return json.dumps(value, ensure_ascii=False, indent=2)


__all__ = ["GeneratorConfigBuilder", "dump_json", "to_generator_payload"]
