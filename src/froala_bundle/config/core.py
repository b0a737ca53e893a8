# src/froala_bundle/config/core.py

"""Option merging and tool settings for the Froala Editor addon.

This module implements the merge half of the build:
- Schema defaults for the addon options (Settings)
- Immutable effective options handed to the resolver (FrozenConfig)
- Root-wins folding of the option blocks found in the consumer chain
- Provenance tracking per key (SourceMap) for audits
- Tool settings (library location, import prefix) resolved from files and env
"""

from __future__ import annotations

from collections.abc import Mapping
from contextlib import suppress
from dataclasses import dataclass
from enum import Enum
from functools import cache
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Literal, overload
import warnings

from pydantic import BaseModel, Field, ValidationError, field_validator

from froala_bundle.errors import ConfigurationError

from .utils import ADDON_NAME, should_emit_debug

if TYPE_CHECKING:
    from collections.abc import Sequence

# --- Schema (Pydantic wall) ---

OPTION_FIELDS = ("plugins", "languages", "themes")


class Settings(BaseModel):
    """Addon option schema and defaults.

    Values are deliberately untyped here: merging never fails, and the
    resolver classifies each value with the category label it belongs to.
    """

    plugins: Any = Field(default=False)
    languages: Any = Field(default=False)
    themes: Any = Field(default=False)

    model_config = {"extra": "allow"}  # Unknown keys pass through the merge


@cache
def _default_settings() -> dict[str, Any]:
    return Settings().model_dump()


class ToolSettings(BaseModel):
    """Where the asset library lives and how its files are registered."""

    library_root: Path = Field(
        default_factory=lambda: Path.cwd() / "node_modules" / "froala-editor"
    )
    node_path: str = Field(default="node_modules/froala-editor", min_length=1)
    shim_path: str = Field(default="vendor/shims/froala-editor.js", min_length=1)

    model_config = {"extra": "forbid"}

    @field_validator("node_path", "shim_path", mode="before")
    @classmethod
    def normalize_posix(cls, v: Any) -> Any:
        """Registered paths are posix and never end with a separator."""
        if isinstance(v, str):
            return v.strip().replace("\\", "/").rstrip("/")
        return v

    @field_validator("library_root", mode="before")
    @classmethod
    def expand_user(cls, v: Any) -> Any:
        if isinstance(v, str):
            return Path(v.strip()).expanduser()
        return v


# --- Immutable runtime payload ---


def _freeze_value(value: Any) -> Any:
    if isinstance(value, list):
        return tuple(value)
    return value


@dataclass(frozen=True)
class FrozenConfig:
    """Effective addon options for one build.

    List values are stored as tuples so the payload cannot be mutated after
    the merge; unknown keys are kept in ``extra`` and never consulted.
    """

    plugins: Any
    languages: Any
    themes: Any
    extra: Mapping[str, Any]

    def get(self, field: str) -> Any:
        """Return the raw value of one option field."""
        return getattr(self, field)


# --- Audit types ---


class Origin(str, Enum):
    """Where an effective option value came from."""

    DEFAULT = "default"
    NESTED = "nested"
    ROOT = "root"


@dataclass(frozen=True)
class FieldOrigin:
    """Tracks the origin of an option value within the consumer chain."""

    origin: Origin
    depth: int | None = None  # index into the block list, 0 = innermost


SourceMap = dict[str, FieldOrigin]


class PluginsDefaultChangedWarning(FutureWarning):
    """The 'plugins' option was never set and now defaults to no plugins."""


PLUGINS_DEFAULT_MESSAGE = (
    f"{ADDON_NAME}: The default value for the 'plugins' option has change "
    "from 'true' to 'false'. "
    f"Please update '{ADDON_NAME}.plugins' in 'ember-cli-build.js' to indicate "
    "which plugin(s) you need; string = one plugin name, array = multiple plugin "
    "names, true = all plugins, false = no plugins."
)


# --- Public resolution API ---


@overload
def resolve_options(
    blocks: Sequence[Mapping[str, Any] | None],
    *,
    explain: Literal[True],
    warn: bool = ...,
) -> tuple[FrozenConfig, SourceMap]: ...


@overload
def resolve_options(
    blocks: Sequence[Mapping[str, Any] | None],
    *,
    explain: Literal[False] = ...,
    warn: bool = ...,
) -> FrozenConfig: ...


def resolve_options(
    blocks: Sequence[Mapping[str, Any] | None],
    *,
    explain: bool = False,
    warn: bool = True,
) -> FrozenConfig | tuple[FrozenConfig, SourceMap]:
    """Merge option blocks from the consumer chain into one FrozenConfig.

    ``blocks`` is ordered innermost first; the last entry belongs to the root
    application and therefore wins over every intermediate level. ``None``
    entries, and anything that is not a mapping, mark levels that declared
    nothing.

    Args:
        blocks: Option blocks scoped to this addon, innermost first.
        explain: If True, also return the SourceMap.
        warn: Emit PluginsDefaultChangedWarning when no block sets 'plugins'.

    Returns:
        FrozenConfig, or (FrozenConfig, SourceMap) if explain=True.
    """
    merged, sources = _resolve_layers(blocks)

    if warn and not any(isinstance(b, Mapping) and "plugins" in b for b in blocks):
        warnings.warn(PLUGINS_DEFAULT_MESSAGE, PluginsDefaultChangedWarning, stacklevel=2)

    frozen = _freeze(Settings.model_validate(merged), merged)

    if should_emit_debug():
        with suppress(Exception):
            warnings.warn(
                "Option audit\n" + "\n".join(audit_lines(frozen, sources)),
                stacklevel=2,
            )

    return (frozen, sources) if explain else frozen


# --- Internal helpers (pure & tiny) ---


def _freeze(settings: Settings, merged: Mapping[str, Any]) -> FrozenConfig:
    known_fields = set(Settings.model_fields.keys())
    extra = {k: _freeze_value(v) for k, v in merged.items() if k not in known_fields}
    return FrozenConfig(
        plugins=_freeze_value(settings.plugins),
        languages=_freeze_value(settings.languages),
        themes=_freeze_value(settings.themes),
        extra=MappingProxyType(extra),
    )


def _resolve_layers(
    blocks: Sequence[Mapping[str, Any] | None],
) -> tuple[dict[str, Any], SourceMap]:
    """Shallow last-wins merge over defaults, recording where each key came from."""
    out: dict[str, Any] = {}
    src: SourceMap = {}

    for k, v in _default_settings().items():
        out[k] = v
        src[k] = FieldOrigin(origin=Origin.DEFAULT)

    root_index = len(blocks) - 1
    for depth, block in enumerate(blocks):
        if not isinstance(block, Mapping) or not block:
            continue
        origin = Origin.ROOT if depth == root_index else Origin.NESTED
        for k, v in block.items():
            out[k] = v
            src[k] = FieldOrigin(origin=origin, depth=depth)

    return out, src


# --- Minimal audit helpers ---


def _origin_label(where: FieldOrigin) -> str:
    match where.origin:
        case Origin.NESTED:
            return f"nested:{where.depth}"
        case _:
            return str(where.origin.value)


def audit_lines(cfg: FrozenConfig, sources: SourceMap) -> list[str]:
    """Human-readable origin per option, known fields first then extras."""
    lines: list[str] = []
    for field in OPTION_FIELDS:
        fo = sources.get(field)
        if fo is None:
            continue
        lines.append(f"{field}: {_origin_label(fo)}")
    for k in sorted(k for k in cfg.extra if k in sources):
        lines.append(f"{k}: {_origin_label(sources[k])} (unused)")
    return lines


def audit_text(cfg: FrozenConfig, sources: SourceMap) -> str:
    """Format audit as a single string suitable for printing/logging."""
    return "\n".join(audit_lines(cfg, sources))


def summarize_origins(sources: SourceMap) -> dict[str, int]:
    """Count how many keys originated from each kind of level."""
    counts: dict[str, int] = {}
    for fo in sources.values():
        key = fo.origin.value
        counts[key] = counts.get(key, 0) + 1
    return counts


def was_field_overridden(sources: SourceMap, field: str) -> bool:
    """Return True if a key's value did not come from defaults."""
    fo = sources.get(field)
    return bool(fo and fo.origin is not Origin.DEFAULT)


def to_dict(cfg: FrozenConfig) -> dict[str, Any]:
    """Plain JSON-friendly view of the effective options."""

    def _plain(v: Any) -> Any:
        return list(v) if isinstance(v, tuple) else v

    return {
        "plugins": _plain(cfg.plugins),
        "languages": _plain(cfg.languages),
        "themes": _plain(cfg.themes),
        "extra": {k: _plain(v) for k, v in cfg.extra.items()},
    }


# --- Tool settings ---

_DOTENV_LOADED: bool = False


def _try_load_dotenv() -> None:
    """Load a .env file from the working directory once per process.

    Tolerant like the rest of the loaders: a missing or unreadable file
    leaves the environment untouched.
    """
    global _DOTENV_LOADED
    if _DOTENV_LOADED:
        return
    try:
        from dotenv import find_dotenv, load_dotenv

        load_dotenv(find_dotenv(usecwd=True))
    except Exception:
        # A broken .env never blocks a build
        _DOTENV_LOADED = True
        return
    _DOTENV_LOADED = True


def resolve_tool_settings(
    overrides: Mapping[str, Any] | None = None, *, pyproject: Path | None = None
) -> ToolSettings:
    """Resolve tool settings: defaults < pyproject < env < overrides.

    Raises:
        ConfigurationError: If a setting has an invalid value.
    """
    _try_load_dotenv()

    from .loaders import load_env, load_pyproject_settings

    merged: dict[str, Any] = {}
    for layer in (load_pyproject_settings(pyproject), load_env(), overrides or {}):
        merged.update(layer)

    try:
        return ToolSettings.model_validate(merged)
    except ValidationError as e:
        err = e.errors()[0]
        loc = ".".join(str(p) for p in err.get("loc", ()))
        msg = err.get("msg")
        raise ConfigurationError(
            f"Tool settings validation failed: {loc}: {msg}",
            hint="Check [tool.froala-bundle] in pyproject.toml and FROALA_BUNDLE_* variables.",
        ) from e
