"""Pytest configuration and fixtures.

Provides environment isolation, a fake asset library on disk and a recording
import sink. Isolation fixtures are autouse unless noted.
"""

from __future__ import annotations

from contextlib import suppress
import logging
import os
from typing import TYPE_CHECKING

import pytest

from froala_bundle.config import ToolSettings
from tests.helpers import DEFAULT_LIBRARY, RecordingSink, write_library

if TYPE_CHECKING:
    from pathlib import Path

# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def block_dotenv(request, monkeypatch):
    """Prevent python-dotenv from loading project .env files during tests.

    Opt-out: @pytest.mark.allow_dotenv
    """
    if request.node.get_closest_marker("allow_dotenv"):
        return
    with suppress(Exception):
        monkeypatch.setattr(
            "dotenv.load_dotenv", lambda *_args, **_kwargs: False, raising=False
        )
        monkeypatch.setattr(
            "froala_bundle.cli.load_dotenv",
            lambda *_args, **_kwargs: False,
            raising=False,
        )


@pytest.fixture(autouse=True)
def isolate_env(request, monkeypatch, tmp_path):
    """Clear FROALA_BUNDLE_* variables and point pyproject lookups at tmp_path.

    Opt-out: @pytest.mark.allow_env_pollution
    """
    if request.node.get_closest_marker("allow_env_pollution"):
        return
    for key in list(os.environ.keys()):
        if key.startswith("FROALA_BUNDLE_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("FROALA_BUNDLE_PYPROJECT_PATH", str(tmp_path / "pyproject.toml"))


@pytest.fixture(scope="session", autouse=True)
def library_debug_logging():
    """Let caplog and failure reports show the library's debug records."""
    logging.getLogger("froala_bundle").setLevel(logging.DEBUG)


# =============================================================================
# Fake library
# =============================================================================


@pytest.fixture
def library(tmp_path: Path) -> Path:
    """A froala-editor package tree with a few plugins, languages and themes."""
    root = tmp_path / "node_modules" / "froala-editor"
    write_library(root, DEFAULT_LIBRARY)
    return root


@pytest.fixture
def tool(library: Path) -> ToolSettings:
    return ToolSettings(library_root=library)


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()
