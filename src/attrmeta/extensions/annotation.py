from __future__ import annotations

from typing import Any

from beartype import beartype

from attrmeta.attributes.annotation import Annotation

from .attribute import (
    resolve_member_attribute,
    resolve_subject_attribute,
    resolve_type_attribute,
)


@beartype
def get_type_annotation(source: type | None) -> Annotation | None:
    """Return the annotation declared on a class itself."""

    return resolve_type_attribute(source, Annotation)


@beartype
def get_subject_annotation(
    source: Any, *, declared: type | None = None
) -> Annotation | None:
    """Return the class annotation of an instance, or the constant's for enums."""

    return resolve_subject_attribute(source, Annotation, declared=declared)


@beartype
def get_member_annotation(
    source: Any, member: str | None, *, declared: type | None = None
) -> Annotation | None:
    """Return the annotation of a field, property, method or constant by name."""

    return resolve_member_attribute(source, member, Annotation, declared=declared)


@beartype
def get_annotation(
    source: Any,
    member: str | None = None,
    *,
    declared: type | None = None,
) -> Annotation | None:
    """Resolve an annotation for a class, instance, enum value or member.

    Examples:
        get_annotation(Sample)            # the class's own annotation
        get_annotation(sample, "name")    # a member, any letter case
        get_annotation(Color.RED)         # the constant's annotation

    Args:
        source (Any): Class, instance, enum value, or ``None`` together with
            ``declared``.
        member (str | None): Member name; omit to resolve the subject itself.
        declared (type | None): Type to inspect when ``source`` is ``None``.

    Returns:
        Annotation | None: The annotation, or ``None`` when absent.
    """

    if member is not None:
        return get_member_annotation(source, member, declared=declared)
    if isinstance(source, type):
        return get_type_annotation(source)
    return get_subject_annotation(source, declared=declared)
