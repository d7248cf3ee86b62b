from .base import Attribute, AttributeRole
from .page_ranges import PageRanges

__all__ = [
    "Attribute",
    "AttributeRole",
    "PageRanges",
]
