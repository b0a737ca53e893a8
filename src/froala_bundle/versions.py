"""Version gate for host build tooling."""

from __future__ import annotations

from typing import TYPE_CHECKING

from packaging.version import InvalidVersion, Version

from froala_bundle.config.utils import ADDON_NAME
from froala_bundle.errors import VersionGateError

if TYPE_CHECKING:
    from collections.abc import Mapping

# tool -> (exclusive floor, first supported release shown to users)
MINIMUM_VERSIONS: dict[str, tuple[str, str]] = {
    "ember-cli": ("3.19.0", "3.20.0"),
    "ember-source": ("3.19.0", "3.20.0"),
}

_DISPLAY_NAMES = {"ember-cli": "ember-cli", "ember-source": "ember.js"}


def check_versions(
    installed: Mapping[str, str | None],
    minimums: Mapping[str, tuple[str, str]] = MINIMUM_VERSIONS,
    *,
    addon_name: str = ADDON_NAME,
) -> None:
    """Require every tool in ``minimums`` to be strictly above its floor.

    Raises:
        VersionGateError: On the first tool that is missing, unparseable or
            not above its floor.
    """
    for tool, (floor, first_supported) in minimums.items():
        message = (
            f"{addon_name}: Minimum {_DISPLAY_NAMES.get(tool, tool)} "
            f"version is {first_supported}"
        )
        found = installed.get(tool)
        if not found:
            raise VersionGateError(message, tool=tool, found=None)
        try:
            ok = Version(found) > Version(floor)
        except InvalidVersion as e:
            raise VersionGateError(message, tool=tool, found=found) from e
        if not ok:
            raise VersionGateError(message, tool=tool, found=found)
