from __future__ import annotations

from enum import Enum
from typing import Any

from beartype import beartype


@beartype
def effective_type(source: Any, declared: type | None = None) -> type | None:
    """Resolve the type a subject should be inspected through.

    Args:
        source (Any): A class, an instance, or ``None``.
        declared (type | None): Type to fall back to when ``source`` is ``None``.

    Returns:
        type | None: ``source`` itself when it is a class, the runtime type of
        an instance, otherwise ``declared``.
    """

    if isinstance(source, type):
        return source
    if source is not None:
        return type(source)
    return declared


@beartype
def is_enum_type(cls: type) -> bool:
    """Return whether ``cls`` is an enumeration."""

    return issubclass(cls, Enum)


@beartype
def enum_constant_name(value: Any) -> str | None:
    """Return the declared name of the constant holding ``value``.

    Composite flag values and non-enum values have no declared constant and
    yield ``None``. Aliases resolve to the canonical constant's name.
    """

    if not isinstance(value, Enum):
        return None
    name = value.name
    if name is None or name not in type(value).__members__:
        return None
    return name
