# SPDX-FileCopyrightText: 2025-present Ron M <ramayer+git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""Exceptions raised by :mod:`lookaround_iterator`."""

from __future__ import annotations


class LookaroundError(Exception):
    """Base class for all errors raised by this package."""


class InvalidBoundError(LookaroundError, ValueError):
    """A lookbehind or lookahead bound is negative or not an integer."""

    def __init__(self, name: str, value: object) -> None:
        self.name = name
        self.value = value
        super().__init__(f"{name} must be a non-negative integer, got {value!r}")


class OffsetOutOfRangeError(LookaroundError, IndexError):
    """An offset lies outside ``-lookbehind..lookahead``.

    Attributes:
        offset: The offset that was requested
        lowest: Smallest valid offset (``-lookbehind``)
        highest: Largest valid offset (``lookahead``)
    """

    def __init__(self, offset: int, lowest: int, highest: int) -> None:
        self.offset = offset
        self.lowest = lowest
        self.highest = highest
        super().__init__(f"offset {offset} not in range {lowest}..{highest} (inclusive)")


class IteratorExhaustedError(LookaroundError, LookupError):
    """The iterator ran past its last element, so there is no current element."""
