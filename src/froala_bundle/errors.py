"""Exception hierarchy for froala-bundle."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence


class FroalaBundleError(Exception):
    """Base exception for all froala-bundle errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class ConfigurationError(FroalaBundleError):
    """Addon options could not be turned into a valid asset selection."""


class InvalidSelectorTypeError(ConfigurationError):
    """An option value is not a boolean, a string or a list of strings."""

    def __init__(self, label: str, addon_name: str, value: object) -> None:
        super().__init__(
            f"{addon_name}: {label} option is an invalid type, "
            "ensure it is either a boolean (all or none), "
            "string (just one), or array (specific list)",
            hint=f"Got {type(value).__name__}: {value!r}",
        )
        self.label = label
        self.addon_name = addon_name
        self.value = value


class MissingAssetsError(ConfigurationError):
    """Requested files of a required category were not found on disk."""

    def __init__(self, label: str, addon_name: str, missing: Sequence[str]) -> None:
        super().__init__(
            f"{addon_name}: {label} specified are missing, "
            f"make sure they are spelled correctly ({', '.join(missing)})",
            hint="Names are file names without extension, e.g. 'table' or 'charCounter'.",
        )
        self.label = label
        self.addon_name = addon_name
        self.missing = tuple(missing)


class AssetDiscoveryError(FroalaBundleError):
    """A search directory of the asset library could not be listed."""


class VersionGateError(FroalaBundleError):
    """Host tooling is older than the supported minimum."""

    def __init__(self, message: str, *, tool: str, found: str | None) -> None:
        super().__init__(
            message,
            hint=f"Found {tool} {found}." if found else f"{tool} is not installed.",
        )
        self.tool = tool
        self.found = found
