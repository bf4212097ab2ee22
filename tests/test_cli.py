"""Tests for the ``notes-site`` CLI commands, invoked as plain functions."""

from __future__ import annotations

import typing as typ

import msgspec.json as msgspec_json
import pytest

from notes_site import cli
from notes_site.config import SiteConfigError
from notes_site.content import route_to_markdown

if typ.TYPE_CHECKING:
    from pathlib import Path

    from notes_site.config import SiteConfig


def test_show_prints_payload_with_overrides(capsys: pytest.CaptureFixture[str]) -> None:
    """show prints the JSON payload, applying scalar overrides."""
    cli.show(base="/notes/", title="Notes")
    payload = msgspec_json.decode(capsys.readouterr().out)
    assert payload["base"] == "/notes/"
    assert payload["title"] == "Notes"
    assert payload["outDir"] == "../dist"


def test_validate_prints_ok(
    source_root: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """The default configuration validates cleanly."""
    cli.validate(source_root=source_root)
    assert capsys.readouterr().out.strip() == "ok"


def test_validate_raises_on_inconsistent_file(
    source_root: Path, write_yaml: typ.Callable[[str], Path]
) -> None:
    """A sidebar prefix missing from nav fails validation."""
    path = write_yaml(
        """
        theme:
          nav:
            - {text: Home, link: /}
        """
    )
    with pytest.raises(SiteConfigError, match="'/Tool/' has no nav entry"):
        cli.validate(config=path, source_root=source_root)


def test_export_writes_mjs_by_default(
    source_root: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """export writes .vitepress/config.mjs under the source root."""
    cli.export(source_root=source_root)
    target = source_root / ".vitepress" / "config.mjs"
    assert target.is_file()
    assert "defineConfig" in target.read_text(encoding="utf-8")
    assert capsys.readouterr().out.startswith("wrote ")


def test_export_json_to_explicit_output(source_root: Path, tmp_path: Path) -> None:
    """The json format writes the payload to the requested path."""
    output = tmp_path / "out" / "site.json"
    cli.export(source_root=source_root, output=output, fmt="json", out_dir="../public")
    payload = msgspec_json.decode(output.read_bytes())
    assert payload["outDir"] == "../public"


def test_export_refuses_invalid_configuration(source_root: Path) -> None:
    """An out_dir pointing at the sources stops the export."""
    with pytest.raises(SiteConfigError, match="out_dir"):
        cli.export(source_root=source_root, out_dir=".")
    assert not (source_root / ".vitepress").exists()


def test_export_skip_validation_writes_anyway(source_root: Path) -> None:
    """skip_validation lets a known-bad configuration through."""
    cli.export(source_root=source_root, out_dir=".", skip_validation=True)
    assert (source_root / ".vitepress" / "config.mjs").is_file()


def test_check_content_exits_when_pages_missing(
    source_root: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Missing pages are listed and the command exits with status 1."""
    with pytest.raises(SystemExit) as excinfo:
        cli.check_content(source_root=source_root)
    assert excinfo.value.code == 1
    out = capsys.readouterr().out
    assert "missing / (首页)" in out
    assert "missing /Tool/SSO/ (SSO)" in out


def test_check_content_ok_for_complete_tree(
    site_config: SiteConfig, source_root: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """A complete content tree reports ok."""
    for _, link in site_config.iter_links():
        page = source_root / route_to_markdown(link).as_posix()
        page.parent.mkdir(parents=True, exist_ok=True)
        page.write_text("# page\n", encoding="utf-8")
    cli.check_content(source_root=source_root)
    assert capsys.readouterr().out.strip() == "ok"


def test_validate_applies_scalar_overrides(source_root: Path) -> None:
    """validate sees the same overrides export would, so both reject them."""
    with pytest.raises(SiteConfigError, match="out_dir"):
        cli.validate(source_root=source_root, out_dir=".")
    with pytest.raises(SiteConfigError, match="base 'notes'"):
        cli.validate(source_root=source_root, base="notes")
