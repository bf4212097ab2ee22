"""Behaviour tests for nav/sidebar referential consistency.

These scenarios build a minimal configuration around a single ``/Tool/``
sidebar and check that validation passes only while a nav entry links to the
sidebar's prefix. They are backed by ``features/sidebar_consistency.feature``.

Usage:
    pytest tests/bdd/test_sidebar_consistency.py -v
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

import pytest
from pytest_bdd import given, parsers, scenarios, then, when

from notes_site.config import (
    NavItem,
    SidebarGroup,
    SidebarItem,
    SiteConfigError,
    build_default_site_config,
    validate_site_config,
)

FEATURE_FILE = (
    Path(__file__).resolve().parents[2] / "features" / "sidebar_consistency.feature"
)
scenarios(FEATURE_FILE)

ScenarioState = dict[str, typ.Any]


@pytest.fixture
def scenario_state() -> ScenarioState:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {}


@given(
    parsers.parse(
        'a site config with a "{prefix}" sidebar holding "{text}" at "{link}"'
    )
)
def given_sidebar(
    scenario_state: ScenarioState, prefix: str, text: str, link: str
) -> None:
    """Start from the defaults with a single-group sidebar and a home-only nav."""
    base = build_default_site_config()
    group = SidebarGroup(text="Vue", items=(SidebarItem(text=text, link=link),))
    theme = dc.replace(
        base.theme,
        nav=(NavItem(text="首页", link="/"),),
        sidebar={prefix: (group,)},
    )
    scenario_state["config"] = dc.replace(base, theme=theme)


@given(parsers.parse('a nav entry "{text}" linking to "{link}"'))
def given_nav_entry(scenario_state: ScenarioState, text: str, link: str) -> None:
    """Append a nav entry to the scenario's configuration."""
    config = scenario_state["config"]
    theme = dc.replace(config.theme, nav=(*config.theme.nav, NavItem(text=text, link=link)))
    scenario_state["config"] = dc.replace(config, theme=theme)


@when("I validate the site config")
def when_validate(scenario_state: ScenarioState, tmp_path: Path) -> None:
    """Run validation, recording either the result or the raised error."""
    try:
        scenario_state["result"] = validate_site_config(
            scenario_state["config"], source_root=tmp_path
        )
    except SiteConfigError as exc:
        scenario_state["error"] = exc


@then("validation succeeds")
def then_validation_succeeds(scenario_state: ScenarioState) -> None:
    """Verify no error was raised and the config came back unchanged."""
    assert "error" not in scenario_state, f"unexpected error: {scenario_state.get('error')}"
    assert scenario_state["result"] is scenario_state["config"]


@then(parsers.parse('validation fails mentioning "{message}"'))
def then_validation_fails(scenario_state: ScenarioState, message: str) -> None:
    """Verify validation raised and the message names the broken invariant."""
    error = scenario_state.get("error")
    assert error is not None, "expected validation to raise SiteConfigError"
    assert message in str(error), f"expected {message!r} in {str(error)!r}"
