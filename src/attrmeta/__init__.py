from attrmeta.attributes import Annotation, Attribute
from attrmeta.extensions import (
    get_annotation,
    get_member_annotation,
    get_subject_annotation,
    get_type_annotation,
    resolve_member_attribute,
    resolve_subject_attribute,
    resolve_type_attribute,
)
from attrmeta.utils.errors import (
    AttributeUsageError,
    AttrMetaError,
    InputValidationError,
    OperationNotFoundError,
)

__version__ = "0.1.0"

__all__ = [
    "Annotation",
    "Attribute",
    "AttrMetaError",
    "AttributeUsageError",
    "InputValidationError",
    "OperationNotFoundError",
    "get_annotation",
    "get_member_annotation",
    "get_subject_annotation",
    "get_type_annotation",
    "resolve_member_attribute",
    "resolve_subject_attribute",
    "resolve_type_attribute",
]
