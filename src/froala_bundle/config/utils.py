# src/froala_bundle/config/utils.py

"""Configuration utilities and shared functionality.

Pure helpers that can be imported from anywhere in the config package
without creating circular imports: environment variable names, path
resolution and the debug flag.
"""

from __future__ import annotations

import os
from pathlib import Path

# --- Constants ---

ADDON_NAME = "ember-froala-editor"
CONFIG_TOOL_NAME = "froala-bundle"

ENV_PREFIX = "FROALA_BUNDLE_"

PYPROJECT_PATH_VAR = "FROALA_BUNDLE_PYPROJECT_PATH"
DEBUG_CONFIG_VAR = "FROALA_BUNDLE_DEBUG_CONFIG"
FASTBOOT_VAR = "FROALA_BUNDLE_FASTBOOT"

_TRUTHY = {"1", "true", "yes", "on"}


# --- Path Utilities ---


def get_pyproject_path() -> Path:
    """Return path to the consuming project's pyproject.toml.

    ``FROALA_BUNDLE_PYPROJECT_PATH`` overrides the cwd-based default.
    """
    if override := os.environ.get(PYPROJECT_PATH_VAR):
        return Path(override)
    return Path.cwd() / "pyproject.toml"


# --- Environment Utilities ---


def env_flag(name: str) -> bool:
    """Return True when the environment variable holds a truthy value."""
    return os.environ.get(name, "").strip().lower() in _TRUTHY


def should_emit_debug() -> bool:
    """Return True when the provenance audit should be emitted as a warning."""
    return env_flag(DEBUG_CONFIG_VAR)


def field_spec_hint(field: str) -> str:
    """Return a compact hint for setting an addon option."""
    return (
        f"Set [tool.{CONFIG_TOOL_NAME}.options] {field} in pyproject.toml, "
        f"or '{ADDON_NAME}': {{ {field}: ... }} in the host build file."
    )
