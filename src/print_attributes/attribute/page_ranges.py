from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, field_validator

from print_attributes.attribute.base import AttributeRole
from print_attributes.errors import InvalidArgumentError, NullInputError
from print_attributes.syntax import SetOfIntegers


def _check_pages(members: SetOfIntegers) -> SetOfIntegers:
    if members.is_empty():
        raise InvalidArgumentError("members is zero-length")
    # Canonical ranges are sorted, so the first lower bound is the smallest.
    first_page = members.ranges[0][0]
    if first_page < 1:
        raise InvalidArgumentError(f"Page value < 1 specified: {first_page}")
    return members


def _page_range(low: int, high: int) -> SetOfIntegers:
    members = SetOfIntegers.from_range(low, high)
    if low > high:
        raise InvalidArgumentError(f"Null range specified: {low}-{high}")
    return members


def _members_from_args(args: tuple[Any, ...]) -> SetOfIntegers:
    if len(args) == 2:
        return _page_range(*args)
    if len(args) != 1:
        raise TypeError(
            f"PageRanges takes 1 or 2 positional arguments, got {len(args)}"
        )

    (value,) = args
    if value is None:
        raise NullInputError("members is None")
    if isinstance(value, SetOfIntegers):
        return value
    if isinstance(value, str):
        return SetOfIntegers.from_string(value)
    if isinstance(value, int) and not isinstance(value, bool):
        return SetOfIntegers.from_value(value)
    return SetOfIntegers.from_members(value)


class PageRanges(BaseModel):
    """The 1-based pages of a document to print.

    Construct from any of:

    - array form: ``PageRanges([(1, 4), 7, [10, 12]])``
    - string form: ``PageRanges("1-4,7,10-12")``
    - a single page: ``PageRanges(3)``
    - a single range: ``PageRanges(2, 5)``
    - an existing set: ``PageRanges(SetOfIntegers.from_range(2, 5))``

    Ranges are held in canonical form, so ``PageRanges("1-3,2-5")`` equals
    ``PageRanges("1-5")``. The set is never empty and never contains page 0.

    Raises:
        NullInputError: If the members argument is None.
        InvalidArgumentError: If the set would be empty, contains a page
            below 1, is malformed, or a two argument range is reversed.
    """

    model_config = ConfigDict(frozen=True)

    NAME: ClassVar[str] = "page-ranges"
    ROLES: ClassVar[frozenset[AttributeRole]] = frozenset(
        {AttributeRole.DOC, AttributeRole.PRINT_REQUEST, AttributeRole.PRINT_JOB}
    )

    members: SetOfIntegers

    def __init__(self, *args: Any, **data: Any) -> None:
        if args:
            if data:
                raise TypeError(
                    "PageRanges takes positional members or keyword fields, not both"
                )
            data = {"members": _check_pages(_members_from_args(args))}
        super().__init__(**data)

    @field_validator("members")
    @classmethod
    def _validate_members(cls, members: SetOfIntegers) -> SetOfIntegers:
        return _check_pages(members)

    @classmethod
    def from_members(cls, members: Sequence[int | Sequence[int]]) -> PageRanges:
        return cls(SetOfIntegers.from_members(members))

    @classmethod
    def from_string(cls, text: str) -> PageRanges:
        return cls(SetOfIntegers.from_string(text))

    @classmethod
    def from_page(cls, page: int) -> PageRanges:
        return cls(SetOfIntegers.from_value(page))

    @classmethod
    def from_range(cls, low: int, high: int) -> PageRanges:
        return cls(low, high)

    @classmethod
    def category(cls) -> type[PageRanges]:
        """Return the class used to group page ranges values."""
        return PageRanges

    @classmethod
    def category_name(cls) -> str:
        return cls.NAME

    @classmethod
    def roles(cls) -> frozenset[AttributeRole]:
        return cls.ROLES

    @property
    def ranges(self) -> tuple[tuple[int, int], ...]:
        return self.members.ranges

    def __str__(self) -> str:
        return str(self.members)

    def __contains__(self, page: object) -> bool:
        return page in self.members

    def contains(self, page: int) -> bool:
        return self.members.contains(page)

    def next(self, page: int) -> int | None:
        """Return the next selected page after ``page``, or None."""
        return self.members.next(page)

    def page_numbers(self, num_pages: int) -> Iterator[int]:
        """Yield the selected page numbers that exist in the document.

        Args:
            num_pages: Total number of pages in the document.

        Yields:
            1-indexed page numbers in ascending order, each at most once.
        """
        if num_pages <= 0:
            return

        for low, high in self.ranges:
            if low > num_pages:
                return
            yield from range(low, min(high, num_pages) + 1)
