"""Execution-context flag for server-side rendering ("fastboot") builds.

In a server-side build only the base library files and the shim are
registered. The flag is scoped with a context variable so concurrent or
nested builds never see each other's setting; ``FROALA_BUNDLE_FASTBOOT``
enables it for the whole process.
"""

from __future__ import annotations

from contextlib import contextmanager
import contextvars
from typing import TYPE_CHECKING

from froala_bundle.config.utils import FASTBOOT_VAR, env_flag

if TYPE_CHECKING:
    from collections.abc import Generator

_FASTBOOT: contextvars.ContextVar[bool | None] = contextvars.ContextVar(
    "fastboot", default=None
)


def is_fastboot() -> bool:
    """Return True when running in a server-side-rendering build."""
    scoped = _FASTBOOT.get()
    if scoped is not None:
        return scoped
    return env_flag(FASTBOOT_VAR)


@contextmanager
def fastboot_scope(enabled: bool = True) -> Generator[bool]:
    """Set the server-side-rendering flag for the duration of the block.

    Example:
        with fastboot_scope():
            addon.included(app, sink)  # registers base files only
    """
    token = _FASTBOOT.set(enabled)
    try:
        yield enabled
    finally:
        _FASTBOOT.reset(token)
