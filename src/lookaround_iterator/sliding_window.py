# SPDX-FileCopyrightText: 2025-present Ron M <ramayer+git@gmail.com>
#
# SPDX-License-Identifier: MIT
from __future__ import annotations

from typing import Iterable, Iterator, Optional, Tuple, TypeVar

from lookaround_iterator.lookaround_iterator import LookaroundIterator

T = TypeVar("T")


def window(iterable: Iterable[T], behind: int = 0, ahead: int = 0) -> Iterator[Tuple[Optional[T], ...]]:
    """Sliding window over an iterable.

    Example:
        >>> for prev, i, nxt in window(range(4), 1, 1):
        ...     print(prev, i, nxt)
        None 0 1
        0 1 2
        1 2 3
        2 3 None

    Bounds are checked immediately; the source is not touched until the first
    window is requested.

    Raises:
        InvalidBoundError: If behind or ahead is negative
    """
    it = LookaroundIterator(iterable, lookbehind=behind, lookahead=ahead)
    return _windows(it)


def _windows(it: LookaroundIterator[T]) -> Iterator[Tuple[Optional[T], ...]]:
    while it.move_next():
        yield it.window()
