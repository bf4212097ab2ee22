"""Cyclopts CLI entrypoint for the learning-notes site configuration.

The ``notes-site`` console script prints, validates, and exports the
configuration consumed by the static-site generator, and can check that every
nav and sidebar link has a markdown page behind it. Typical usage is running
``notes-site export`` before ``vitepress build`` so the generator always sees a
validated ``.vitepress/config.mjs``.

Examples
--------
Validate the defaults against the current directory:

>>> from notes_site.cli import main
>>> main()  # doctest: +SKIP

Export to a custom location:

>>> from notes_site.cli import app
>>> app(["export", "--output", "site/.vitepress/config.mjs"])  # doctest: +SKIP
"""

from __future__ import annotations

import sys
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from ._constants import DEFAULT_OVERRIDES_FILE
from .config import load_site_config, validate_site_config
from .content import find_missing_pages
from .exporter import GeneratorConfigBuilder, dump_json

if typ.TYPE_CHECKING:
    from .config import SiteConfig

app = App(name="notes-site", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]

ConfigOption = typ.Annotated[
    Path | None,
    Parameter(
        help="YAML overrides file (defaults to config/site.yaml when present)",
        env_var="INPUT_CONFIG",
    ),
]
SourceRootOption = typ.Annotated[
    Path,
    Parameter(help="Directory holding the markdown sources", env_var="INPUT_SOURCE_ROOT"),
]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:
            return str(path)
    return str(path)


def _load(
    config: Path | None,
    *,
    title: str | None = None,
    description: str | None = None,
    base: str | None = None,
    out_dir: str | None = None,
) -> SiteConfig:
    """Load ``config``, falling back to ``config/site.yaml`` when it exists."""
    if config is None and DEFAULT_OVERRIDES_FILE.exists():
        config = DEFAULT_OVERRIDES_FILE
    return load_site_config(
        config,
        overrides={
            "title": title,
            "description": description,
            "base": base,
            "out_dir": out_dir,
        },
    )


@app.command(help="Print the generator payload as JSON.")
def show(
    *,
    config: ConfigOption = None,
    title: typ.Annotated[str | None, Parameter(env_var="INPUT_TITLE")] = None,
    description: typ.Annotated[str | None, Parameter(env_var="INPUT_DESCRIPTION")] = None,
    base: typ.Annotated[str | None, Parameter(env_var="INPUT_BASE")] = None,
    out_dir: typ.Annotated[str | None, Parameter(env_var="INPUT_OUT_DIR")] = None,
) -> None:
    """Print the configuration exactly as the generator would receive it."""
    site = _load(
        config, title=title, description=description, base=base, out_dir=out_dir
    )
    print(dump_json(site).decode("utf-8"))


@app.command(help="Check nav/sidebar consistency, link shapes, and the output dir.")
def validate(
    *,
    config: ConfigOption = None,
    source_root: SourceRootOption = Path("."),
    title: typ.Annotated[str | None, Parameter(env_var="INPUT_TITLE")] = None,
    description: typ.Annotated[str | None, Parameter(env_var="INPUT_DESCRIPTION")] = None,
    base: typ.Annotated[str | None, Parameter(env_var="INPUT_BASE")] = None,
    out_dir: typ.Annotated[str | None, Parameter(env_var="INPUT_OUT_DIR")] = None,
) -> None:
    """Validate the configuration.

    Parameters
    ----------
    config : Path or None, optional
        YAML overrides file (``INPUT_CONFIG``); built-in settings when omitted.
    source_root : Path, optional
        Directory the ``out_dir`` is resolved against.
    title, description, base, out_dir : str or None, optional
        Scalar overrides applied after the YAML file, as for ``export``.

    Raises
    ------
    SiteConfigError
        If any invariant is violated; the message lists every issue.
    """
    site = _load(
        config, title=title, description=description, base=base, out_dir=out_dir
    )
    validate_site_config(site, source_root=source_root)
    print("ok")


@app.command(help="Write the generator config module (or JSON) after validating.")
def export(
    *,
    config: ConfigOption = None,
    output: typ.Annotated[
        Path | None,
        Parameter(help="Destination file", env_var="INPUT_OUTPUT"),
    ] = None,
    fmt: typ.Annotated[
        typ.Literal["mjs", "json"],
        Parameter(name="--format", help="Output format", env_var="INPUT_FORMAT"),
    ] = "mjs",
    source_root: SourceRootOption = Path("."),
    skip_validation: bool = False,
    title: typ.Annotated[str | None, Parameter(env_var="INPUT_TITLE")] = None,
    description: typ.Annotated[str | None, Parameter(env_var="INPUT_DESCRIPTION")] = None,
    base: typ.Annotated[str | None, Parameter(env_var="INPUT_BASE")] = None,
    out_dir: typ.Annotated[str | None, Parameter(env_var="INPUT_OUT_DIR")] = None,
) -> None:
    """Export the configuration for the generator.

    Parameters
    ----------
    config : Path or None, optional
        YAML overrides file (``INPUT_CONFIG``).
    output : Path or None, optional
        Destination; defaults to ``<source_root>/.vitepress/config.mjs`` for
        ``mjs`` and ``<source_root>/.vitepress/config.json`` for ``json``.
    fmt : {"mjs", "json"}, optional
        Output format.
    source_root : Path, optional
        Site source directory.
    skip_validation : bool, optional
        Write even when the configuration is invalid.
    title, description, base, out_dir : str or None, optional
        Scalar overrides applied after the YAML file.

    Raises
    ------
    SiteConfigError
        If validation fails and ``skip_validation`` is not set.
    """
    site = _load(
        config, title=title, description=description, base=base, out_dir=out_dir
    )
    if not skip_validation:
        validate_site_config(site, source_root=source_root)

    if fmt == "json":
        target = output or source_root / ".vitepress" / "config.json"
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(dump_json(site) + b"\n")
    else:
        target = GeneratorConfigBuilder(
            site, output=output or source_root / ".vitepress" / "config.mjs"
        ).run()
    print(f"wrote {_format_path(target)}")


@app.command(name="check-content", help="Report nav/sidebar links with no markdown page.")
def check_content(
    *,
    source_root: SourceRootOption = Path("."),
    config: ConfigOption = None,
) -> None:
    """Report every configured link whose markdown page is missing.

    Exits with status 1 when any page is missing.
    """
    missing = find_missing_pages(_load(config), source_root)
    for page in missing:
        print(f"missing {page.link} ({page.label}): expected {_format_path(page.expected)}")
    if missing:
        sys.exit(1)
    print("ok")


def main() -> None:
    """Invoke the Cyclopts application that powers the ``notes-site`` command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
