from .annotation import (
    get_annotation,
    get_member_annotation,
    get_subject_annotation,
    get_type_annotation,
)
from .attribute import (
    resolve_member_attribute,
    resolve_subject_attribute,
    resolve_type_attribute,
)

__all__ = [
    "get_annotation",
    "get_member_annotation",
    "get_subject_annotation",
    "get_type_annotation",
    "resolve_member_attribute",
    "resolve_subject_attribute",
    "resolve_type_attribute",
]
