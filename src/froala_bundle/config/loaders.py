# src/froala_bundle/config/loaders.py

"""Configuration loaders for environment and files.

Pure data loading: every function returns plain dictionaries (or lists of
them) that the core merges. No validation happens here.

Layout understood in pyproject.toml::

    [tool.froala-bundle]
    library_root = "node_modules/froala-editor"

    [tool.froala-bundle.options]          # the root application's block
    plugins = ["table", "charCounter"]

    [[tool.froala-bundle.nested]]         # intermediate levels, innermost first
    plugins = true
"""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

import tomllib

from . import utils

log = logging.getLogger(__name__)

# Meta/control variables that steer resolution but aren't settings
META_ENV_FIELDS = {"pyproject_path", "debug_config", "fastboot"}

# Tables under [tool.froala-bundle] that hold addon options, not tool settings
OPTION_TABLES = {"options", "nested"}


# --- Environment Loading ---


def load_env() -> Mapping[str, Any]:
    """Load tool settings from ``FROALA_BUNDLE_*`` environment variables.

    Meta variables (pyproject path, debug, fastboot) are skipped. Values stay
    strings; the ToolSettings schema coerces them.
    """
    config: dict[str, Any] = {}
    for key, value in os.environ.items():
        if not key.startswith(utils.ENV_PREFIX):
            continue
        field_name = key[len(utils.ENV_PREFIX) :].lower()
        if field_name in META_ENV_FIELDS:
            continue
        config[field_name] = value
    return config


# --- File loading helpers ---


def _read_toml(path: Path) -> dict[str, Any]:
    """Read a TOML file, returning an empty dict when missing or unreadable."""
    if not path.exists():
        return {}

    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        log.debug("Ignoring unreadable config file %s: %s", path, e)
        return {}


def _tool_table(path: Path | None = None) -> dict[str, Any]:
    data = _read_toml(path or utils.get_pyproject_path())
    table = data.get("tool", {}).get(utils.CONFIG_TOOL_NAME, {})
    return table if isinstance(table, dict) else {}


def load_pyproject_settings(path: Path | None = None) -> Mapping[str, Any]:
    """Tool settings from ``[tool.froala-bundle]``, excluding option tables."""
    return {k: v for k, v in _tool_table(path).items() if k not in OPTION_TABLES}


def load_pyproject_blocks(path: Path | None = None) -> list[Mapping[str, Any] | None]:
    """Option blocks declared in pyproject.toml, innermost first, root last.

    Returns an empty list when the file declares no options at all, so the
    caller can tell "nothing declared" apart from "an empty root block".
    """
    table = _tool_table(path)
    nested = table.get("nested", [])
    if isinstance(nested, dict):
        nested = [nested]
    blocks: list[Mapping[str, Any] | None] = [
        b if isinstance(b, dict) else None for b in nested
    ]
    root = table.get("options")
    if root is None and not blocks:
        return []
    blocks.append(root if isinstance(root, dict) else None)
    return blocks
