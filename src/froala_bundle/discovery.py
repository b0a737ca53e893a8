"""Discovery: index the files a category can choose from."""

from __future__ import annotations

from dataclasses import dataclass
import logging
import os
from typing import TYPE_CHECKING

from froala_bundle.errors import AssetDiscoveryError

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping
    from pathlib import Path, PurePosixPath

    from froala_bundle.catalog import AssetCategory

log = logging.getLogger(__name__)


def bare_name(file_name: str) -> str:
    """Strip every extension: ``table.min.js`` -> ``table``."""
    return file_name.split(".")[0]


@dataclass(frozen=True)
class DiscoveredFileIndex:
    """Files found for one category, keyed by file name.

    Values are paths relative to the library root. Built per build, never
    cached; a later search directory overwrites an earlier one on collision.
    """

    category: AssetCategory
    files: Mapping[str, PurePosixPath]

    def __contains__(self, file_name: object) -> bool:
        return file_name in self.files

    def __iter__(self) -> Iterator[str]:
        return iter(self.files)

    def __len__(self) -> int:
        return len(self.files)

    def lookup(self, name: str) -> PurePosixPath | None:
        """Relative path of ``name`` + the category extension, if discovered."""
        return self.files.get(name + self.category.extension)

    def bare_names(self) -> list[str]:
        """Unique bare names in discovery order."""
        seen: dict[str, None] = {}
        for file_name in self.files:
            seen.setdefault(bare_name(file_name), None)
        return list(seen)


def _list_dir(path: Path) -> list[str]:
    # Sorted so discovery order does not depend on the filesystem
    try:
        return sorted(os.listdir(path))
    except OSError as e:
        raise AssetDiscoveryError(
            f"Cannot list asset directory {path}: {e.strerror or e}",
            hint="Install froala-editor or point FROALA_BUNDLE_LIBRARY_ROOT at it.",
        ) from e


def build_index(library_root: Path, category: AssetCategory) -> DiscoveredFileIndex:
    """List the immediate entries of every search directory of ``category``.

    Entries without a bare name (dotfiles) are skipped.

    Raises:
        AssetDiscoveryError: If a search directory cannot be listed.
    """
    files: dict[str, PurePosixPath] = {}
    for search_dir in category.search_dirs:
        for file_name in _list_dir(library_root.joinpath(*search_dir.parts)):
            if not bare_name(file_name):
                continue  # dotfiles such as .DS_Store
            files[file_name] = search_dir / file_name
    log.debug(
        "Discovered %d file(s) for %s in %s",
        len(files),
        category.label,
        ", ".join(str(d) for d in category.search_dirs),
    )
    return DiscoveredFileIndex(category=category, files=files)
