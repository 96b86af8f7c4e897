from __future__ import annotations

from typing import Any, TypeVar

from beartype import beartype

from attrmeta.attributes.base import Attribute
from attrmeta.reflection.members import MemberScope, find_members
from attrmeta.reflection.metadata import get_attribute
from attrmeta.reflection.types import effective_type, enum_constant_name, is_enum_type

TAttribute = TypeVar("TAttribute", bound=Attribute)


@beartype
def resolve_type_attribute(
    source: type | None,
    kind: type[TAttribute],
) -> TAttribute | None:
    """Return the first ``kind`` attribute declared directly on a class.

    Attributes declared on base classes are not considered, whatever the
    kind's own ``inherited`` flag says.

    Args:
        source (type | None): Class to inspect.
        kind (type[TAttribute]): Attribute class to look for.

    Returns:
        TAttribute | None: The attribute, or ``None`` when ``source`` is
        ``None`` or carries no such attribute.
    """

    if source is None:
        return None
    return get_attribute(source, kind)


@beartype
def resolve_subject_attribute(
    source: Any,
    kind: type[TAttribute],
    *,
    declared: type | None = None,
) -> TAttribute | None:
    """Return the most relevant ``kind`` attribute for a class or instance.

    Classes and instances of non-enum classes resolve against the class
    declaration. Enum values resolve against the declaration of the constant
    they hold, addressed by its declared name.

    Args:
        source (Any): Class, instance or ``None``.
        kind (type[TAttribute]): Attribute class to look for.
        declared (type | None): Type to inspect when ``source`` is ``None``.

    Returns:
        TAttribute | None: The attribute, or ``None`` when absent.
    """

    cls = effective_type(source, declared)
    if cls is None:
        return None
    if not is_enum_type(cls):
        return resolve_type_attribute(cls, kind)
    return resolve_member_attribute(
        source, enum_constant_name(source), kind, declared=declared
    )


@beartype
def resolve_member_attribute(
    source: Any,
    member: str | None,
    kind: type[TAttribute],
    *,
    declared: type | None = None,
) -> TAttribute | None:
    """Return the ``kind`` attribute of a member addressed by name.

    Every member the class declares itself is searched, static and instance,
    public and non-public, and names compare case-insensitively. When several
    members differ only by case, which one wins is unspecified.

    Args:
        source (Any): Class, instance or ``None``.
        member (str | None): Member name. Blank names resolve to ``None``
            without searching.
        kind (type[TAttribute]): Attribute class to look for.
        declared (type | None): Type to inspect when ``source`` is ``None``.

    Returns:
        TAttribute | None: The attribute, or ``None`` when the member is
        missing or carries no such attribute.
    """

    if member is None or not member.strip():
        return None
    cls = effective_type(source, declared)
    if cls is None:
        return None
    matches = find_members(cls, member, MemberScope.ALL, ignore_case=True)
    if not matches:
        return None
    return matches[0].get_attribute(kind)
