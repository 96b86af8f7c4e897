from __future__ import annotations

import builtins
import functools
import inspect
import sys
import types
from collections import ChainMap
from dataclasses import dataclass
from enum import Enum, Flag, auto
from typing import Annotated, Any, ClassVar, Final, TypeVar, get_args, get_origin

from beartype import beartype

from attrmeta.attributes.base import Attribute, attached_attributes

from .types import is_enum_type

TAttribute = TypeVar("TAttribute", bound=Attribute)


class MemberKind(Enum):
    """Category of a declared member."""

    FIELD = "field"
    PROPERTY = "property"
    METHOD = "method"
    CONSTANT = "constant"
    ENUM_CONSTANT = "enum_constant"
    NESTED_TYPE = "nested_type"


class MemberScope(Flag):
    """Binding categories a member search covers.

    A member matches when both its static/instance binding and its
    public/non-public visibility are included in the scope.
    """

    INSTANCE = auto()
    STATIC = auto()
    PUBLIC = auto()
    NON_PUBLIC = auto()
    ALL = INSTANCE | STATIC | PUBLIC | NON_PUBLIC

    def includes(self, *, is_static: bool, is_public: bool) -> bool:
        binding = MemberScope.STATIC if is_static else MemberScope.INSTANCE
        visibility = MemberScope.PUBLIC if is_public else MemberScope.NON_PUBLIC
        return bool(self & binding) and bool(self & visibility)


@dataclass(frozen=True)
class MemberInfo:
    """One member declared directly on a class.

    Attributes:
        name (str): Declared member name.
        kind (MemberKind): Member category.
        owner (type): Class declaring the member.
        is_static (bool): Whether the member binds to the class.
        is_public (bool): Whether the name is public (no leading underscore).
        attributes (tuple[Attribute, ...]): Attributes declared on the member.
    """

    name: str
    kind: MemberKind
    owner: type
    is_static: bool
    is_public: bool
    attributes: tuple[Attribute, ...] = ()

    def get_attributes(self, kind: type[TAttribute]) -> tuple[TAttribute, ...]:
        """Return the member's attributes that are instances of ``kind``."""

        return tuple(item for item in self.attributes if isinstance(item, kind))

    def get_attribute(self, kind: type[TAttribute]) -> TAttribute | None:
        """Return the member's first attribute of ``kind`` or ``None``."""

        matches = self.get_attributes(kind)
        return matches[0] if matches else None


@beartype
def declared_members(
    cls: type,
    scope: MemberScope = MemberScope.ALL,
) -> tuple[MemberInfo, ...]:
    """List the members a class declares itself.

    Inherited members are not included. Enum constants come first on enum
    types, then annotated names, then the remaining class namespace entries in
    definition order. Dunder names are never members.

    Args:
        cls (type): Class to inspect.
        scope (MemberScope): Binding categories to include.

    Returns:
        tuple[MemberInfo, ...]: Members in the requested scope.
    """

    hints = _own_annotations(cls)
    namespace = vars(cls)
    enum_members = cls.__members__ if is_enum_type(cls) else {}

    members: list[MemberInfo] = []
    for name in dict.fromkeys([*enum_members, *hints, *namespace]):
        if _is_dunder(name) or _skip_enum_name(cls, name):
            continue
        member = _describe_member(cls, name, hints, namespace, enum_members)
        if scope.includes(is_static=member.is_static, is_public=member.is_public):
            members.append(member)
    return tuple(members)


@beartype
def find_members(
    cls: type,
    name: str,
    scope: MemberScope = MemberScope.ALL,
    *,
    ignore_case: bool = False,
) -> tuple[MemberInfo, ...]:
    """Return declared members called ``name``.

    Args:
        cls (type): Class to inspect.
        name (str): Member name to look for.
        scope (MemberScope): Binding categories to include.
        ignore_case (bool): Compare names after ``str.lower``, so ``"STRASSE"``
            does not match ``"straße"``.

    Returns:
        tuple[MemberInfo, ...]: Matching members in declaration order.
    """

    if ignore_case:
        wanted = name.lower()
        return tuple(
            member
            for member in declared_members(cls, scope)
            if member.name.lower() == wanted
        )
    return tuple(member for member in declared_members(cls, scope) if member.name == name)


def _describe_member(
    cls: type,
    name: str,
    hints: dict[str, Any],
    namespace: Any,
    enum_members: Any,
) -> MemberInfo:
    is_public = not name.startswith("_")

    def build(kind: MemberKind, is_static: bool, attributes: tuple[Attribute, ...]) -> MemberInfo:
        return MemberInfo(
            name=name,
            kind=kind,
            owner=cls,
            is_static=is_static,
            is_public=is_public,
            attributes=attributes,
        )

    if name in enum_members:
        return build(MemberKind.ENUM_CONSTANT, True, _hint_attributes(hints.get(name)))

    if name in hints:
        hint = hints[name]
        attributes = _hint_attributes(hint)
        if _hint_has(hint, Final):
            return build(MemberKind.CONSTANT, True, attributes)
        return build(MemberKind.FIELD, _hint_has(hint, ClassVar), attributes)

    value = namespace[name]
    if isinstance(value, (staticmethod, classmethod)):
        return build(MemberKind.METHOD, True, attached_attributes(value))
    if isinstance(value, (property, functools.cached_property)):
        return build(MemberKind.PROPERTY, False, attached_attributes(value))
    if inspect.isfunction(value):
        return build(MemberKind.METHOD, False, attached_attributes(value))
    if isinstance(value, type):
        return build(MemberKind.NESTED_TYPE, True, attached_attributes(value))
    if isinstance(value, types.MemberDescriptorType):
        return build(MemberKind.FIELD, False, ())
    if name.lstrip("_").isupper():
        return build(MemberKind.CONSTANT, True, ())
    return build(MemberKind.FIELD, True, ())


def _own_annotations(cls: type) -> dict[str, Any]:
    if sys.version_info >= (3, 14):
        import annotationlib

        raw = annotationlib.get_annotations(
            cls, format=annotationlib.Format.FORWARDREF
        )
    else:
        raw = inspect.get_annotations(cls)
    return {name: _evaluate_hint(cls, hint) for name, hint in raw.items()}


def _evaluate_hint(cls: type, hint: Any) -> Any:
    """Evaluate a postponed annotation in the scope of its owner.

    Names the owner's scope cannot supply, such as locals of the function that
    declared the class, evaluate to stand-ins so ``Annotated`` metadata still
    comes through. A string that does not evaluate at all yields ``None`` and
    carries no attributes.
    """

    if not isinstance(hint, str):
        return hint
    module = sys.modules.get(cls.__module__)
    fallback = ChainMap(vars(module) if module is not None else {}, vars(builtins))
    try:
        return eval(hint, {}, _HintScope(vars(cls), fallback))  # noqa: S307
    # an unevaluable hint carries no attributes; the other members still resolve
    except Exception:  # noqa: BLE001
        return None


class _HintScope(dict):
    """Class namespace that falls back to module globals, then to stand-ins."""

    def __init__(self, namespace: Any, fallback: ChainMap) -> None:
        super().__init__(namespace)
        self._fallback = fallback

    def __missing__(self, key: str) -> Any:
        if key in self._fallback:
            return self._fallback[key]
        return _UnresolvedName(key, (), {})


class _UnresolvedName(type):
    """Stand-in class for a name an annotation uses but its scope lacks."""

    def __getattr__(cls, name: str) -> Any:
        if name.startswith("__"):
            raise AttributeError(name)
        return _UnresolvedName(f"{cls.__name__}.{name}", (), {})

    def __getitem__(cls, item: Any) -> Any:
        return cls


def _unwrap_hint(hint: Any) -> list[Any]:
    """Return ``hint`` and every layer nested in Annotated/ClassVar/Final."""

    layers: list[Any] = []
    pending = [hint]
    while pending:
        current = pending.pop()
        layers.append(current)
        if get_origin(current) in (Annotated, ClassVar, Final):
            args = get_args(current)
            if args:
                pending.append(args[0])
    return layers


def _hint_attributes(hint: Any) -> tuple[Attribute, ...]:
    found: list[Attribute] = []
    for layer in _unwrap_hint(hint):
        if get_origin(layer) is Annotated:
            found.extend(item for item in layer.__metadata__ if isinstance(item, Attribute))
    return tuple(found)


def _hint_has(hint: Any, qualifier: Any) -> bool:
    return any(
        layer is qualifier or get_origin(layer) is qualifier for layer in _unwrap_hint(hint)
    )


def _is_dunder(name: str) -> bool:
    return len(name) > 4 and name.startswith("__") and name.endswith("__")


def _skip_enum_name(cls: type, name: str) -> bool:
    """Hide enum machinery (``_sunder_`` names) on enum types."""

    if not is_enum_type(cls):
        return False
    return (
        len(name) > 2
        and name.startswith("_")
        and name.endswith("_")
        and not name.startswith("__")
        and name not in cls.__members__
    )
