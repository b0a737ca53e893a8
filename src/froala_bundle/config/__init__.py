# src/froala_bundle/config/__init__.py

"""Option merging for the Froala Editor addon.

Options are resolved once per build: the consumer chain is flattened into
option blocks, folded with root-wins precedence, and frozen into a
FrozenConfig that the asset resolver consumes.

Key exports:
- option_blocks: Flatten the host's consumer chain into ordered blocks
- resolve_options: Fold blocks into an immutable FrozenConfig
- resolve_tool_settings: Library location and import prefixes
"""

# ruff: noqa: I001

from .core import (
    OPTION_FIELDS,
    FrozenConfig,
    FieldOrigin,
    Origin,
    PluginsDefaultChangedWarning,
    Settings,
    SourceMap,
    ToolSettings,
    audit_lines,
    audit_text,
    resolve_options,
    resolve_tool_settings,
    summarize_origins,
    to_dict,
    was_field_overridden,
)
from .hierarchy import ConsumerNode, HostApp, chain, option_blocks
from .loaders import load_pyproject_blocks
from .utils import ADDON_NAME, field_spec_hint

__all__ = [  # noqa: RUF022
    # Main API
    "option_blocks",
    "resolve_options",
    "resolve_tool_settings",
    "FrozenConfig",
    "ToolSettings",
    # Hierarchy
    "ConsumerNode",
    "HostApp",
    "chain",
    # Schema and provenance
    "ADDON_NAME",
    "OPTION_FIELDS",
    "Settings",
    "Origin",
    "FieldOrigin",
    "SourceMap",
    "PluginsDefaultChangedWarning",
    "was_field_overridden",
    "field_spec_hint",
    # Audit helpers
    "audit_lines",
    "audit_text",
    "summarize_origins",
    "to_dict",
    # Files
    "load_pyproject_blocks",
]
