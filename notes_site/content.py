"""Check that nav and sidebar links resolve to markdown pages on disk.

The generator maps a route to a markdown file relative to the source root:
``/`` is ``index.md``, a trailing slash means ``<dir>/index.md``, anything else
is ``<path>.md``. This module applies the same mapping and reports the links
whose page is missing. It only reads the filesystem.

Examples
--------
>>> from pathlib import Path
>>> route_to_markdown("/Tool/Vue/Vuex/").as_posix()
'Tool/Vue/Vuex/index.md'
>>> route_to_markdown("/about.html").as_posix()
'about.md'
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path, PurePosixPath
from urllib.parse import unquote, urlsplit

if typ.TYPE_CHECKING:
    from .config import SiteConfig


@dc.dataclass(frozen=True, slots=True)
class MissingPage:
    """A configured link with no markdown page behind it."""

    label: str
    link: str
    expected: Path


def route_to_markdown(link: str) -> PurePosixPath:
    """Return the markdown path, relative to the source root, for ``link``."""
    path = unquote(urlsplit(link).path)
    if path.endswith("/") or not path:
        return PurePosixPath(path.lstrip("/")) / "index.md"
    relative = PurePosixPath(path.lstrip("/"))
    if relative.suffix == ".html":
        relative = relative.with_suffix("")
    return relative.with_name(f"{relative.name}.md")


def find_missing_pages(config: SiteConfig, source_root: Path) -> list[MissingPage]:
    """List every nav/sidebar link whose markdown page does not exist.

    Parameters
    ----------
    config : SiteConfig
        Configuration whose links are checked.
    source_root : Path
        Directory holding the markdown tree (the generator's source directory).

    Returns
    -------
    list[MissingPage]
        Missing pages in nav-then-sidebar order, each link reported once.

    Raises
    ------
    FileNotFoundError
        If ``source_root`` is not an existing directory.
    """
    if not source_root.is_dir():
        msg = f"Source root '{source_root}' is not a directory."
        raise FileNotFoundError(msg)

    missing: list[MissingPage] = []
    seen: set[str] = set()
    for label, link in config.iter_links():
        if link in seen:
            continue
        seen.add(link)
        expected = source_root.joinpath(*route_to_markdown(link).parts)
        if not expected.is_file():
            missing.append(MissingPage(label=label, link=link, expected=expected))
    return missing


__all__ = ["MissingPage", "find_missing_pages", "route_to_markdown"]
