"""Immutable sets of non-negative integers stored as closed ranges.

A set is written either in *string form*, e.g. ``"1-4,7,10:12"``, or in
*array form*, a sequence whose elements are an integer ``v``, a one element
sequence ``(v,)`` or a pair ``(low, high)``. Both forms are normalised into
the same canonical ranges: sorted ascending, with overlapping or contiguous
ranges merged and null ranges (``low > high``) dropped.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator, Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict, StrictInt, field_validator

from print_attributes.errors import InvalidArgumentError, NullInputError

log = logging.getLogger(__name__)

Range = tuple[int, int]

# One comma separated group: "N", "N-M" or "N:M", whitespace allowed around
# the numbers and the separator.
_GROUP_RE = re.compile(r"^\s*(\d+)\s*(?:[-:]\s*(\d+)\s*)?$")


def canonical_ranges(ranges: Iterable[Range]) -> tuple[Range, ...]:
    """Sort and merge ``ranges``, dropping null ranges.

    Two ranges are merged when they overlap or when one starts right after
    the other ends, so ``(1, 3)`` and ``(4, 6)`` become ``(1, 6)``.
    """
    non_null = []
    for low, high in ranges:
        if low > high:
            log.debug("Dropping null range %d-%d", low, high)
            continue
        non_null.append((low, high))
    non_null.sort()

    merged: list[Range] = []
    for low, high in non_null:
        if merged and low <= merged[-1][1] + 1:
            last_low, last_high = merged[-1]
            merged[-1] = (last_low, max(last_high, high))
        else:
            merged.append((low, high))
    return tuple(merged)


def _require_int(value: Any, what: str) -> int:
    if value is None:
        raise NullInputError(f"{what} is None")
    # bool is an int subclass but never a meaningful set member.
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(
            f"{what} must be an integer, got {type(value).__name__}: {value!r}"
        )
    return value


def _checked_range(low: int, high: int) -> Range:
    if low <= high and low < 0:
        raise InvalidArgumentError(f"Member value < 0 specified: {low}")
    return low, high


def parse_ranges(text: str) -> list[Range]:
    """Split string form into raw ``(low, high)`` pairs, in input order.

    Raises:
        NullInputError: If ``text`` is None.
        InvalidArgumentError: If ``text`` does not follow the syntax.
    """
    if text is None:
        raise NullInputError("members is None")
    if not isinstance(text, str):
        raise InvalidArgumentError(
            f"members must be a string, got {type(text).__name__}: {text!r}"
        )
    if not text.strip():
        return []

    ranges: list[Range] = []
    for group in text.split(","):
        match = _GROUP_RE.match(group)
        if match is None:
            raise InvalidArgumentError(
                f"Invalid set of integers {text!r}: bad group {group.strip()!r}"
            )
        low = int(match.group(1))
        high = int(match.group(2)) if match.group(2) is not None else low
        ranges.append((low, high))
    return ranges


class SetOfIntegers(BaseModel):
    """A canonical, immutable set of non-negative integers."""

    model_config = ConfigDict(frozen=True)

    ranges: tuple[tuple[StrictInt, StrictInt], ...] = ()

    @field_validator("ranges")
    @classmethod
    def _canonicalize(cls, ranges: tuple[Range, ...]) -> tuple[Range, ...]:
        # Null ranges are dropped whatever their bounds, so only non-null
        # ranges are held to the non-negative rule.
        return canonical_ranges(_checked_range(low, high) for low, high in ranges)

    @classmethod
    def from_string(cls, text: str) -> SetOfIntegers:
        """Build a set from string form, e.g. ``"1-4, 7, 10:12"``.

        Empty or whitespace-only text gives the empty set. A reversed group
        such as ``"5-2"`` is a null range and contributes nothing.
        """
        ranges = parse_ranges(text)
        result = cls(ranges=ranges)
        log.debug("Parsed %r as %r", text, result.ranges)
        return result

    @classmethod
    def from_members(cls, members: Sequence[int | Sequence[int]]) -> SetOfIntegers:
        """Build a set from array form.

        Args:
            members: Elements are ``v``, ``(v,)`` or ``(low, high)``.

        Raises:
            NullInputError: If ``members`` or any element is None.
            InvalidArgumentError: If an element has the wrong shape, holds a
                non-integer, or a non-null range has a bound below zero.
        """
        if members is None:
            raise NullInputError("members is None")
        if isinstance(members, (str, bytes)) or not isinstance(members, Iterable):
            raise InvalidArgumentError(
                f"members must be a sequence of ranges, got {members!r}"
            )

        ranges: list[Range] = []
        for member in members:
            if member is None:
                raise NullInputError("members contains None")
            if isinstance(member, int) and not isinstance(member, bool):
                ranges.append(_checked_range(member, member))
                continue
            if isinstance(member, (str, bytes)) or not isinstance(member, Sequence):
                raise InvalidArgumentError(f"Invalid member {member!r}")
            if len(member) == 1:
                value = _require_int(member[0], "member value")
                ranges.append(_checked_range(value, value))
            elif len(member) == 2:
                low = _require_int(member[0], "lower bound")
                high = _require_int(member[1], "upper bound")
                ranges.append(_checked_range(low, high))
            else:
                raise InvalidArgumentError(
                    f"Member {member!r} is not a length-one or length-two sequence"
                )
        return cls(ranges=ranges)

    @classmethod
    def from_value(cls, value: int) -> SetOfIntegers:
        value = _require_int(value, "member")
        return cls(ranges=(_checked_range(value, value),))

    @classmethod
    def from_range(cls, low: int, high: int) -> SetOfIntegers:
        """Build the set ``low..high``; empty when ``low > high``."""
        low = _require_int(low, "lower bound")
        high = _require_int(high, "upper bound")
        return cls(ranges=(_checked_range(low, high),))

    def __str__(self) -> str:
        return ",".join(
            str(low) if low == high else f"{low}-{high}" for low, high in self.ranges
        )

    def __contains__(self, value: object) -> bool:
        return (
            isinstance(value, int)
            and not isinstance(value, bool)
            and self.contains(value)
        )

    def is_empty(self) -> bool:
        return not self.ranges

    def contains(self, value: int) -> bool:
        """Return True if ``value`` is a member of this set."""
        for low, high in self.ranges:
            if value < low:
                return False
            if value <= high:
                return True
        return False

    def next(self, value: int) -> int | None:
        """Return the smallest member greater than ``value``, or None."""
        for low, high in self.ranges:
            if value < low:
                return low
            if value < high:
                return value + 1
        return None

    def integers(self) -> Iterator[int]:
        """Yield every member in ascending order."""
        for low, high in self.ranges:
            yield from range(low, high + 1)
