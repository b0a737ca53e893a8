# src/froala_bundle/config/hierarchy.py

"""Boundary adapter between the host's consumer tree and the option merge.

The host framework hands the addon a live object graph: the addon instance,
the project or addon that includes it, that one's parent, and so on up to
the root project. Any level may carry an ``app`` whose ``options`` map holds
blocks keyed by addon name. This module flattens that graph into the plain
ordered list of blocks that ``resolve_options`` folds.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
import logging
from typing import Any, Protocol

log = logging.getLogger(__name__)


class OptionsHolder(Protocol):
    """Anything exposing an ``options`` mapping keyed by addon name."""

    options: Mapping[str, Any] | None


@dataclass
class HostApp:
    """The host application object of a consumer level."""

    options: Mapping[str, Any] | None = None


@dataclass
class ConsumerNode:
    """One level of the nesting chain, as provided by the host."""

    parent: ConsumerNode | None = None
    app: OptionsHolder | None = None
    name: str = field(default="")


def option_blocks(
    node: ConsumerNode,
    addon_name: str,
    included: OptionsHolder | None = None,
) -> list[Mapping[str, Any] | None]:
    """Collect option blocks from ``node`` up to the top-level app.

    At each level the app in effect is that level's own ``app``, or the one
    seen at the previous level (initially ``included``, the object the host
    passed to the addon). The walk climbs only while the parent itself has a
    parent, so the root project is never visited directly and the block of
    the top-level app is the last entry.

    Returns:
        One entry per visited level, innermost first; ``None`` where the level
        declared nothing for ``addon_name``.
    """
    blocks: list[Mapping[str, Any] | None] = []
    app = included
    current = node
    while True:
        app = current.app or app
        blocks.append(_block_for(app, addon_name))
        parent = current.parent
        if parent is None or parent.parent is None:
            break
        current = parent
    return blocks


def _block_for(app: OptionsHolder | None, addon_name: str) -> Mapping[str, Any] | None:
    if app is None or not app.options:
        return None
    block = app.options.get(addon_name)
    if block and not isinstance(block, Mapping):
        log.debug("Ignoring non-mapping %s options: %r", addon_name, block)
        return None
    return block or None


def chain(*apps: OptionsHolder | None) -> ConsumerNode:
    """Build a consumer chain from apps listed innermost first.

    The returned node is the addon's own level; the last app is attached to
    the level directly below the root project.
    """
    root = ConsumerNode(name="project")
    node = root
    for app in reversed(apps):
        node = ConsumerNode(parent=node, app=app)
    return node
