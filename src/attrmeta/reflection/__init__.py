from .members import MemberInfo, MemberKind, MemberScope, declared_members, find_members
from .metadata import get_attribute, get_attributes
from .types import effective_type, enum_constant_name, is_enum_type

__all__ = [
    "MemberInfo",
    "MemberKind",
    "MemberScope",
    "declared_members",
    "effective_type",
    "enum_constant_name",
    "find_members",
    "get_attribute",
    "get_attributes",
    "is_enum_type",
]
