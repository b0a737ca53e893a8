"""Resolver: expansion, validation and import ordering."""

from __future__ import annotations

import logging
from pathlib import Path, PurePosixPath
from unittest.mock import patch

import pytest

from froala_bundle.catalog import PLUGIN_CSS, PLUGINS
from froala_bundle.config import ToolSettings, resolve_options
from froala_bundle.context import fastboot_scope
from froala_bundle.discovery import build_index
from froala_bundle.errors import InvalidSelectorTypeError, MissingAssetsError
from froala_bundle.resolver import (
    AssetImport,
    build_import_plan,
    expand,
    register_imports,
    resolve_categories,
    resolve_category,
)
from froala_bundle.selector import All, Disabled, Named
from tests.helpers import BASE_IMPORTS, NODE, RecordingSink, write_library

pytestmark = pytest.mark.unit


def _cfg(**options: object):
    return resolve_options([options], warn=False)


def _paths(plan: list[AssetImport]) -> list[str]:
    return [item.path for item in plan][len(BASE_IMPORTS) :]


# --- expansion / per-category resolution ---


def test_all_expands_to_every_discovered_name(library: Path) -> None:
    index = build_index(library, PLUGINS)

    assert expand(All(), index) == ["align", "charCounter", "table", "embedly"]
    assert expand(Disabled(), index) == []


def test_named_resolves_and_collects_missing(library: Path) -> None:
    result = resolve_category(Named(("table", "nope", "table")), build_index(library, PLUGINS))

    assert result.resolved_paths == (
        PurePosixPath("js/plugins/table.min.js"),
        PurePosixPath("js/plugins/table.min.js"),
    )
    assert result.missing == ("nope",)
    assert result.fatal is True


def test_optional_category_missing_is_not_fatal(library: Path) -> None:
    result = resolve_category(Named(("align",)), build_index(library, PLUGIN_CSS))

    assert result.resolved_paths == ()
    assert result.missing == ("align",)
    assert result.fatal is False


def test_two_plugins_resolve_with_nothing_missing(tmp_path: Path) -> None:
    write_library(
        tmp_path,
        {
            "js/plugins": ("table.min.js",),
            "js/third_party": ("charCounter.min.js",),
            "css/plugins": (),
            "css/third_party": (),
        },
    )

    results = resolve_categories(_cfg(plugins=True), tmp_path)

    assert [r.category for r in results] == [PLUGINS, PLUGIN_CSS]
    assert results[0].resolved_paths == (
        PurePosixPath("js/plugins/table.min.js"),
        PurePosixPath("js/third_party/charCounter.min.js"),
    )
    assert results[0].missing == ()
    assert results[1].resolved_paths == ()


# --- full plan ---


def test_plan_with_nothing_requested_is_base_files_only(tool: ToolSettings) -> None:
    plan = build_import_plan(_cfg(), tool)

    assert [item.path for item in plan] == BASE_IMPORTS
    assert [item.category for item in plan] == ["base", "base", "base", "shim"]


def test_disabled_category_does_no_discovery(tool: ToolSettings) -> None:
    with patch("froala_bundle.resolver.build_index") as spy:
        build_import_plan(_cfg(plugins=False, languages=[], themes=""), tool)

    spy.assert_not_called()


def test_plugins_true_imports_every_script_then_every_stylesheet(tool: ToolSettings) -> None:
    plan = build_import_plan(_cfg(plugins=True), tool)

    assert _paths(plan) == [
        f"{NODE}/js/plugins/align.min.js",
        f"{NODE}/js/plugins/charCounter.min.js",
        f"{NODE}/js/plugins/table.min.js",
        f"{NODE}/js/third_party/embedly.min.js",
        f"{NODE}/css/plugins/charCounter.css",
        f"{NODE}/css/plugins/table.css",
        f"{NODE}/css/third_party/embedly.css",
    ]


def test_named_plugin_without_stylesheet_still_builds(tool: ToolSettings) -> None:
    plan = build_import_plan(_cfg(plugins=["align", "table"]), tool)

    assert _paths(plan) == [
        f"{NODE}/js/plugins/align.min.js",
        f"{NODE}/js/plugins/table.min.js",
        f"{NODE}/css/plugins/table.css",
    ]
    assert [i.category for i in plan][len(BASE_IMPORTS) :] == [
        "Plugin(s)",
        "Plugin(s)",
        "Plugin CSS",
    ]


@pytest.mark.parametrize("value", ["table", ["table"]])
def test_string_and_list_selectors_are_equivalent(tool: ToolSettings, value: object) -> None:
    plan = build_import_plan(_cfg(plugins=value), tool)

    assert _paths(plan) == [f"{NODE}/js/plugins/table.min.js", f"{NODE}/css/plugins/table.css"]


def test_categories_follow_registration_order(tool: ToolSettings) -> None:
    plan = build_import_plan(_cfg(themes="dark", languages=["fr"], plugins="embedly"), tool)

    assert _paths(plan) == [
        f"{NODE}/js/third_party/embedly.min.js",
        f"{NODE}/css/third_party/embedly.css",
        f"{NODE}/js/languages/fr.js",
        f"{NODE}/css/themes/dark.css",
    ]


@pytest.mark.parametrize(
    ("options", "label", "missing"),
    [
        ({"plugins": "nonexistent"}, "Plugin(s)", ("nonexistent",)),
        ({"languages": ["de", "xx", "yy"]}, "Language(s)", ("xx", "yy")),
        ({"themes": True, "plugins": ["table", "ghost"]}, "Plugin(s)", ("ghost",)),
        ({"themes": "royal"}, "Themes(s)", ("royal",)),
    ],
)
def test_missing_required_files_abort(
    tool: ToolSettings, options: dict[str, object], label: str, missing: tuple[str, ...]
) -> None:
    with pytest.raises(MissingAssetsError) as exc:
        build_import_plan(_cfg(**options), tool)

    err = exc.value
    assert err.label == label
    assert err.missing == missing
    assert f"{label} specified are missing" in str(err)
    assert f"({', '.join(missing)})" in str(err)


def test_invalid_selector_type_names_category(tool: ToolSettings) -> None:
    with pytest.raises(InvalidSelectorTypeError, match="Language\\(s\\) option is an invalid type"):
        build_import_plan(_cfg(languages=42), tool)


def test_custom_node_path_prefixes_every_file(library: Path) -> None:
    tool = ToolSettings(library_root=library, node_path="assets/froala")

    plan = build_import_plan(_cfg(languages="de"), tool)

    assert plan[0].path == "assets/froala/js/froala_editor.min.js"
    assert plan[-1].path == "assets/froala/js/languages/de.js"


# --- fastboot ---


def test_fastboot_skips_every_category(tool: ToolSettings) -> None:
    cfg = _cfg(plugins="nonexistent", languages=42)

    with fastboot_scope():
        plan = build_import_plan(cfg, tool)

    assert [item.path for item in plan] == BASE_IMPORTS


def test_explicit_fastboot_argument_overrides_scope(tool: ToolSettings) -> None:
    with fastboot_scope():
        plan = build_import_plan(_cfg(themes="gray"), tool, fastboot=False)

    assert _paths(plan) == [f"{NODE}/css/themes/gray.css"]


# --- registration ---


def test_register_imports_calls_sink_once_per_path_in_order() -> None:
    plan = [AssetImport("base", "a.js"), AssetImport("shim", "b.js"), AssetImport("x", "a.js")]
    sink = RecordingSink()

    assert register_imports(plan, sink) == 3
    assert sink.paths == ["a.js", "b.js", "a.js"]


def test_fastboot_short_circuit_is_logged(
    tool: ToolSettings, caplog: pytest.LogCaptureFixture
) -> None:
    with caplog.at_level(logging.INFO, logger="froala_bundle"):
        build_import_plan(_cfg(plugins=True), tool, fastboot=True)

    assert "fastboot build" in caplog.text


def test_stray_dotfiles_do_not_break_plugins_true(library: Path, tool: ToolSettings) -> None:
    write_library(library, {"js/plugins": (".DS_Store",), "css/plugins": (".DS_Store",)})

    plan = build_import_plan(_cfg(plugins=True), tool)

    assert f"{NODE}/js/plugins/align.min.js" in _paths(plan)
    assert not any(".DS_Store" in path for path in _paths(plan))
