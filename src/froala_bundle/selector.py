"""Selector: the classified form of a category's option value."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import StrictBool, StrictStr, TypeAdapter, ValidationError

from froala_bundle.errors import InvalidSelectorTypeError


@dataclass(frozen=True, slots=True)
class Disabled:
    """Nothing requested; the category is skipped without discovery."""


@dataclass(frozen=True, slots=True)
class All:
    """Every file discovered for the category."""


@dataclass(frozen=True, slots=True)
class Named:
    """An explicit list of bare names, kept verbatim (duplicates included)."""

    names: tuple[str, ...]


Selector = Disabled | All | Named

_RAW_SELECTOR = TypeAdapter(
    StrictBool | StrictStr | list[StrictStr] | tuple[StrictStr, ...]
)


def classify(value: Any, *, label: str, addon_name: str) -> Selector:
    """Turn a raw option value into a Selector.

    ``False``, ``""`` and an empty list all mean nothing was requested.

    Raises:
        InvalidSelectorTypeError: If the value is not a boolean, a string or
            a list of strings.
    """
    try:
        raw = _RAW_SELECTOR.validate_python(value, strict=True)
    except ValidationError as e:
        raise InvalidSelectorTypeError(label, addon_name, value) from e

    if raw is True:
        return All()
    if raw is False or not raw:
        return Disabled()
    if isinstance(raw, str):
        return Named((raw,))
    return Named(tuple(raw))
