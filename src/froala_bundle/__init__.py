"""froala-bundle: build-time option merging and asset resolution for Froala Editor.

Public API:
    - FroalaAddon: host-facing entry point (init / included)
    - resolve_options(): fold consumer option blocks into a FrozenConfig
    - build_import_plan(): ordered list of files to bundle
    - fastboot_scope(): server-side-rendering execution context
"""

from __future__ import annotations

import logging

from froala_bundle.addon import FroalaAddon
from froala_bundle.config import (
    ADDON_NAME,
    ConsumerNode,
    FrozenConfig,
    HostApp,
    PluginsDefaultChangedWarning,
    ToolSettings,
    option_blocks,
    resolve_options,
    resolve_tool_settings,
)
from froala_bundle.context import fastboot_scope, is_fastboot
from froala_bundle.errors import (
    AssetDiscoveryError,
    ConfigurationError,
    FroalaBundleError,
    InvalidSelectorTypeError,
    MissingAssetsError,
    VersionGateError,
)
from froala_bundle.resolver import AssetImport, build_import_plan, register_imports

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("froala-bundle")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the host configures logging.
logging.getLogger("froala_bundle").addHandler(logging.NullHandler())

__all__ = [
    "ADDON_NAME",
    "AssetDiscoveryError",
    "AssetImport",
    "ConfigurationError",
    "ConsumerNode",
    "FroalaAddon",
    "FroalaBundleError",
    "FrozenConfig",
    "HostApp",
    "InvalidSelectorTypeError",
    "MissingAssetsError",
    "PluginsDefaultChangedWarning",
    "ToolSettings",
    "VersionGateError",
    "build_import_plan",
    "fastboot_scope",
    "is_fastboot",
    "option_blocks",
    "register_imports",
    "resolve_options",
    "resolve_tool_settings",
]
