from __future__ import annotations


class AttrMetaError(Exception):
    """Base error for attribute declaration and bridge failures."""


class AttributeUsageError(AttrMetaError):
    """Raised when an attribute is attached where its usage does not allow it."""


class InputValidationError(AttrMetaError):
    """Raised when operation input parameters fail validation."""


class OperationNotFoundError(AttrMetaError):
    """Raised when an operation key is not registered."""
