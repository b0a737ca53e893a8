"""Test helpers (small, reusable doubles).

Keep this file tiny: a fake library writer and a sink that records what the
addon registers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping
    from pathlib import Path

NODE = "node_modules/froala-editor"

DEFAULT_LIBRARY: dict[str, tuple[str, ...]] = {
    "js": ("froala_editor.min.js",),
    "css": ("froala_editor.css", "froala_style.css"),
    "js/plugins": ("align.min.js", "charCounter.min.js", "table.min.js"),
    "js/third_party": ("embedly.min.js",),
    "css/plugins": ("charCounter.css", "table.css"),
    "css/third_party": ("embedly.css",),
    "js/languages": ("de.js", "fr.js"),
    "css/themes": ("dark.css", "gray.css"),
}

BASE_IMPORTS = [
    f"{NODE}/js/froala_editor.min.js",
    f"{NODE}/css/froala_editor.css",
    f"{NODE}/css/froala_style.css",
    "vendor/shims/froala-editor.js",
]


def write_library(root: Path, layout: Mapping[str, Iterable[str]]) -> Path:
    """Create empty files under ``root``; every key is a directory."""
    for directory, names in layout.items():
        target = root / directory
        target.mkdir(parents=True, exist_ok=True)
        for name in names:
            (target / name).write_text("", encoding="utf-8")
    return root


@dataclass
class RecordingSink:
    """Import sink that remembers every registered path."""

    paths: list[str] = field(default_factory=list)

    def __call__(self, path: str) -> None:
        self.paths.append(path)

    @property
    def extras(self) -> list[str]:
        """Registered paths beyond the always-on base files and shim."""
        return self.paths[len(BASE_IMPORTS) :]
