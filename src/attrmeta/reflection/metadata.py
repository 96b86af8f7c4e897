from __future__ import annotations

from typing import Any, TypeVar

from beartype import beartype

from attrmeta.attributes.base import Attribute, attached_attributes

TAttribute = TypeVar("TAttribute", bound=Attribute)


@beartype
def get_attributes(
    target: Any,
    kind: type[TAttribute],
    *,
    inherit: bool = False,
) -> tuple[TAttribute, ...]:
    """Collect attributes of one kind attached to a class or callable.

    Args:
        target (Any): Class, function or function wrapper to inspect.
        kind (type[TAttribute]): Attribute class to match, subclasses included.
        inherit (bool): For class targets, also walk base classes and include
            attributes whose kind is declared ``inherited``. Single-valued
            kinds already supplied by a more derived class are not repeated.

    Returns:
        tuple[TAttribute, ...]: Matching attributes, most derived first.
    """

    collected = [item for item in attached_attributes(target) if isinstance(item, kind)]
    if not inherit or not isinstance(target, type):
        return tuple(collected)

    for base in target.__mro__[1:]:
        for item in attached_attributes(base):
            usage = type(item)
            if not isinstance(item, kind) or not usage.inherited:
                continue
            if not usage.allow_multiple and any(
                type(existing) is usage for existing in collected
            ):
                continue
            collected.append(item)
    return tuple(collected)


@beartype
def get_attribute(
    target: Any,
    kind: type[TAttribute],
    *,
    inherit: bool = False,
) -> TAttribute | None:
    """Return the first attribute of ``kind`` on ``target`` or ``None``."""

    matches = get_attributes(target, kind, inherit=inherit)
    return matches[0] if matches else None
