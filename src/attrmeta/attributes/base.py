from __future__ import annotations

import functools
import logging
from typing import Any, ClassVar, TypeVar

from attrmeta.utils.errors import AttributeUsageError

ATTRIBUTES_SLOT = "__attributes__"

_logger = logging.getLogger(__name__)

_Target = TypeVar("_Target")


class Attribute:
    """Base class for declarative metadata attached to classes and members.

    An attribute instance is a decorator. Applied to a class, function,
    property, static/class method or cached property, it records itself in the
    target's own namespace so that lookups never see a base class's entries
    unless they explicitly ask for inherited ones. Fields, constants and enum
    constants carry attributes through ``typing.Annotated`` instead.

    Attributes:
        allow_multiple (bool): Whether one declaration may carry several
            instances of this kind.
        inherited (bool): Whether inherited lookups on derived classes see
            instances of this kind declared on a base class.
    """

    allow_multiple: ClassVar[bool] = True
    inherited: ClassVar[bool] = True

    def __call__(self, target: _Target) -> _Target:
        attach_attribute(target, self)
        return target


def attribute_holder(target: Any) -> Any:
    """Return the object whose namespace stores attributes for ``target``.

    Wrappers without a writable namespace of their own (properties, static and
    class methods, cached properties) delegate to the function they wrap.
    """

    if isinstance(target, property):
        return target.fget
    if isinstance(target, (staticmethod, classmethod)):
        return target.__func__
    if isinstance(target, functools.cached_property):
        return target.func
    return target


def attached_attributes(target: Any) -> tuple[Attribute, ...]:
    """Return attributes declared directly on ``target`` in declaration order."""

    holder = attribute_holder(target)
    if holder is None:
        return ()
    try:
        namespace = vars(holder)
    except TypeError:
        return ()
    return tuple(namespace.get(ATTRIBUTES_SLOT, ()))


def attach_attribute(target: Any, attribute: Attribute) -> None:
    """Record ``attribute`` on ``target``.

    Args:
        target (Any): Class, function or function wrapper being decorated.
        attribute (Attribute): Attribute instance to attach.

    Raises:
        AttributeUsageError: If the target cannot carry attributes, or if the
            attribute kind is single-valued and already present.
    """

    holder = attribute_holder(target)
    current = attached_attributes(target)
    if not type(attribute).allow_multiple and any(
        type(existing) is type(attribute) for existing in current
    ):
        raise AttributeUsageError(
            f"Duplicate {type(attribute).__name__} on {_describe(holder)}; "
            "this attribute kind allows a single instance per declaration."
        )
    try:
        setattr(holder, ATTRIBUTES_SLOT, (*current, attribute))
    except (AttributeError, TypeError) as exc:
        raise AttributeUsageError(
            f"Cannot attach {type(attribute).__name__} to {_describe(holder)}."
        ) from exc
    _logger.debug("Attached %r to %s", attribute, _describe(holder))


def _describe(target: Any) -> str:
    name = getattr(target, "__qualname__", None)
    if isinstance(name, str):
        return name
    return repr(target)
