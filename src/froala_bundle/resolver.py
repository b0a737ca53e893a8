"""Asset resolution: effective options in, ordered import list out.

Resolution happens in two phases. ``build_import_plan`` classifies, discovers,
expands and validates every category and raises before anything is
registered; ``register_imports`` then hands each path to the host's sink.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
import logging
from pathlib import PurePosixPath
from typing import TYPE_CHECKING

from froala_bundle.catalog import BASE_FILES, CATALOG
from froala_bundle.config.utils import ADDON_NAME
from froala_bundle.context import is_fastboot
from froala_bundle.discovery import build_index
from froala_bundle.errors import MissingAssetsError
from froala_bundle.selector import All, Disabled, Named, Selector, classify

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence
    from pathlib import Path

    from froala_bundle.catalog import AssetCategory
    from froala_bundle.config.core import FrozenConfig, ToolSettings
    from froala_bundle.discovery import DiscoveredFileIndex

log = logging.getLogger(__name__)

ImportSink = Callable[[str], object]


@dataclass(frozen=True, slots=True)
class ResolutionResult:
    """Outcome of resolving one category against its index."""

    category: AssetCategory
    resolved_paths: tuple[PurePosixPath, ...]
    missing: tuple[str, ...]

    @property
    def fatal(self) -> bool:
        """Missing files abort the build only for required categories."""
        return bool(self.missing) and not self.category.optional


@dataclass(frozen=True, slots=True)
class AssetImport:
    """One file to register with the host, tagged with where it came from."""

    category: str
    path: str


def expand(selector: Selector, index: DiscoveredFileIndex) -> list[str]:
    """Bare names requested by ``selector``."""
    match selector:
        case All():
            return index.bare_names()
        case Named(names=names):
            return list(names)
        case Disabled():
            return []
    raise TypeError(f"Unknown selector: {selector!r}")  # pragma: no cover


def resolve_category(selector: Selector, index: DiscoveredFileIndex) -> ResolutionResult:
    """Look up every requested name; never raises for missing files."""
    resolved: list[PurePosixPath] = []
    missing: list[str] = []
    for name in expand(selector, index):
        rel = index.lookup(name)
        if rel is None:
            missing.append(name)
        else:
            resolved.append(rel)
    return ResolutionResult(
        category=index.category,
        resolved_paths=tuple(resolved),
        missing=tuple(missing),
    )


def resolve_categories(
    config: FrozenConfig,
    library_root: Path,
    *,
    categories: Sequence[AssetCategory] = CATALOG,
    addon_name: str = ADDON_NAME,
) -> list[ResolutionResult]:
    """Resolve every enabled category, in catalog order.

    Disabled categories are skipped before discovery.

    Raises:
        InvalidSelectorTypeError: If an option value has an unsupported type.
        MissingAssetsError: If a required category lacks requested files.
        AssetDiscoveryError: If a search directory cannot be listed.
    """
    results: list[ResolutionResult] = []
    for category in categories:
        selector = classify(
            config.get(category.option), label=category.label, addon_name=addon_name
        )
        if isinstance(selector, Disabled):
            log.debug("Skipping %s: nothing requested", category.label)
            continue

        result = resolve_category(selector, build_index(library_root, category))
        if result.fatal:
            raise MissingAssetsError(category.label, addon_name, result.missing)
        if result.missing:
            log.debug(
                "Optional %s not found for: %s",
                category.label,
                ", ".join(result.missing),
            )
        results.append(result)
    return results


def build_import_plan(
    config: FrozenConfig,
    tool: ToolSettings,
    *,
    addon_name: str = ADDON_NAME,
    fastboot: bool | None = None,
) -> list[AssetImport]:
    """Every file to register for this build, in registration order.

    Order: core script, core stylesheets, shim, then each enabled category
    (plugin scripts, plugin stylesheets, languages, themes).
    """
    node_path = PurePosixPath(tool.node_path)
    plan = [AssetImport("base", str(node_path / rel)) for rel in BASE_FILES]
    plan.append(AssetImport("shim", tool.shim_path))

    if fastboot is None:
        fastboot = is_fastboot()
    if fastboot:
        log.info("%s: fastboot build, skipping plugins, languages and themes", addon_name)
        return plan

    for result in resolve_categories(config, tool.library_root, addon_name=addon_name):
        plan.extend(
            AssetImport(result.category.label, str(node_path / rel))
            for rel in result.resolved_paths
        )
    return plan


def register_imports(plan: Iterable[AssetImport], sink: ImportSink) -> int:
    """Hand each planned path to ``sink`` exactly once, in order."""
    count = 0
    for item in plan:
        sink(item.path)
        count += 1
    log.debug("Registered %d import(s)", count)
    return count
