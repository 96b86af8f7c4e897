from .annotation import Annotation
from .base import Attribute, attach_attribute, attached_attributes

__all__ = [
    "Annotation",
    "Attribute",
    "attach_attribute",
    "attached_attributes",
]
