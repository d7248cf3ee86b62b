"""Exceptions raised when constructing print attribute values."""


class AttributeValueError(Exception):
    """Base class for rejected print attribute values."""


class NullInputError(AttributeValueError, TypeError):
    """A required constructor argument was None."""


class InvalidArgumentError(AttributeValueError, ValueError):
    """A constructor argument is well typed but not an acceptable value."""
