"""Validated print attribute values."""

import logging
import os

from print_attributes.attribute import Attribute, AttributeRole, PageRanges
from print_attributes.errors import (
    AttributeValueError,
    InvalidArgumentError,
    NullInputError,
)
from print_attributes.syntax import SetOfIntegers

__all__ = [
    "Attribute",
    "AttributeRole",
    "AttributeValueError",
    "InvalidArgumentError",
    "NullInputError",
    "PageRanges",
    "SetOfIntegers",
]

_level = os.getenv("LOG_LEVEL")
# Only configure if no handlers are present so apps/tests can override.
if _level and not logging.getLogger().handlers:
    logging.basicConfig(level=getattr(logging, _level.upper(), logging.INFO))
