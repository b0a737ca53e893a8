"""FroalaAddon: the object the host build calls into.

The host creates one addon per consumer level, calls ``init`` with the
versions of its tooling, then ``included`` once per build with the object
that includes the addon and a sink that registers files for bundling.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from froala_bundle.config import (
    ADDON_NAME,
    option_blocks,
    resolve_options,
    resolve_tool_settings,
)
from froala_bundle.resolver import build_import_plan, register_imports
from froala_bundle.versions import check_versions

if TYPE_CHECKING:
    from collections.abc import Mapping

    from froala_bundle.config import (
        ConsumerNode,
        FrozenConfig,
        SourceMap,
        ToolSettings,
    )
    from froala_bundle.config.hierarchy import OptionsHolder
    from froala_bundle.resolver import AssetImport, ImportSink

log = logging.getLogger(__name__)


class FroalaAddon:
    """Merges options across the consumer chain and registers asset imports."""

    name = ADDON_NAME

    def __init__(self, node: ConsumerNode, *, tool: ToolSettings | None = None):
        self.node = node
        self._tool = tool

    @property
    def tool(self) -> ToolSettings:
        if self._tool is None:
            self._tool = resolve_tool_settings()
        return self._tool

    def init(self, installed_versions: Mapping[str, str | None]) -> None:
        """Abort early when the host tooling is too old."""
        check_versions(installed_versions, addon_name=self.name)

    def effective_options(
        self, included: OptionsHolder | None = None, *, warn: bool = True
    ) -> tuple[FrozenConfig, SourceMap]:
        """Merged options for this build and where each one came from."""
        blocks = option_blocks(self.node, self.name, included=included)
        return resolve_options(blocks, explain=True, warn=warn)

    def included(
        self, included: OptionsHolder | None, sink: ImportSink
    ) -> list[AssetImport]:
        """Resolve the requested assets and register them with ``sink``.

        Nothing is registered if resolution fails.

        Returns:
            The registered imports, in registration order.
        """
        config, _sources = self.effective_options(included)
        plan = build_import_plan(config, self.tool, addon_name=self.name)
        register_imports(plan, sink)
        log.debug("%s: %d file(s) imported", self.name, len(plan))
        return plan
