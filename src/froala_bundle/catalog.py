"""Static description of the asset library layout."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePosixPath


@dataclass(frozen=True, slots=True)
class AssetCategory:
    """One kind of optional asset and where to find it.

    ``search_dirs`` are relative to the library root. When two directories
    hold a file with the same name, the later directory wins.
    """

    label: str
    option: str
    search_dirs: tuple[PurePosixPath, ...]
    extension: str
    optional: bool = False


# Always registered, in this order, before any category
BASE_FILES: tuple[PurePosixPath, ...] = (
    PurePosixPath("js/froala_editor.min.js"),
    PurePosixPath("css/froala_editor.css"),
    PurePosixPath("css/froala_style.css"),
)

PLUGINS = AssetCategory(
    label="Plugin(s)",
    option="plugins",
    search_dirs=(PurePosixPath("js/plugins"), PurePosixPath("js/third_party")),
    extension=".min.js",
)

# Not every plugin ships a stylesheet
PLUGIN_CSS = AssetCategory(
    label="Plugin CSS",
    option="plugins",
    search_dirs=(PurePosixPath("css/plugins"), PurePosixPath("css/third_party")),
    extension=".css",
    optional=True,
)

LANGUAGES = AssetCategory(
    label="Language(s)",
    option="languages",
    search_dirs=(PurePosixPath("js/languages"),),
    extension=".js",
)

THEMES = AssetCategory(
    label="Themes(s)",
    option="themes",
    search_dirs=(PurePosixPath("css/themes"),),
    extension=".css",
)

CATALOG: tuple[AssetCategory, ...] = (PLUGINS, PLUGIN_CSS, LANGUAGES, THEMES)
