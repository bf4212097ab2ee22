"""Configuration provider for the front-end learning-notes site.

This package builds the settings object (navigation, sidebar, footer, search,
output directory) that the static-site generator consumes, validates it, and
exports it as the generator's config module.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from notes_site import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
