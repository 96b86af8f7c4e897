from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from attrmeta.attributes.annotation import Annotation
from attrmeta.extensions.annotation import get_member_annotation, get_type_annotation
from attrmeta.reflection.members import declared_members

from .lookups import LookupCatalog, LookupRequest

CATALOG = LookupCatalog()


@CATALOG.lookup("annotation.type", description="Return the annotation declared on a class.")
def _type_annotation(request: LookupRequest) -> dict[str, Any]:
    return {"annotation": get_type_annotation(request.target)}


@CATALOG.lookup(
    "annotation.member",
    description="Return the annotation of one member, matched case-insensitively.",
)
def _member_annotation(request: LookupRequest) -> dict[str, Any]:
    return {"annotation": get_member_annotation(request.target, request.member)}


@CATALOG.lookup(
    "annotation.members",
    description="List declared members of a class with their annotations.",
)
def _member_annotations(request: LookupRequest) -> dict[str, Any]:
    members = [
        member
        for member in declared_members(request.target)
        if request.include_missing or member.get_attribute(Annotation) is not None
    ]
    return {"target": request.target, "members": members}


@CATALOG.lookup(
    "core.catalog",
    description="List registered bridge operations.",
    needs_target=False,
)
def _catalog(request: LookupRequest) -> dict[str, Any]:
    return {"operations": CATALOG.entries()}


def execute_operation(operation: str, params: Mapping[str, Any]) -> Any:
    """Validate and run one lookup with JSON-friendly output.

    Args:
        operation (str): Lookup name.
        params (Mapping[str, Any]): Parameter mapping provided by the caller.

    Returns:
        Any: Lookup result payload.
    """

    return CATALOG.answer(CATALOG.parse({"operation": operation, "params": params}))
