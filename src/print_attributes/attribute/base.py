"""Category metadata shared by print attribute values."""

from __future__ import annotations

from enum import Enum
from typing import Protocol, runtime_checkable


class AttributeRole(Enum):
    """Where an attribute category may appear in a print request."""

    DOC = "doc"
    PRINT_REQUEST = "print-request"
    PRINT_JOB = "print-job"


@runtime_checkable
class Attribute(Protocol):
    """A value the attribute framework can group and dispatch by category.

    ``category()`` returns the class that identifies the kind of attribute,
    ``category_name()`` its stable registry name.
    """

    @classmethod
    def category(cls) -> type: ...

    @classmethod
    def category_name(cls) -> str: ...

    @classmethod
    def roles(cls) -> frozenset[AttributeRole]: ...
