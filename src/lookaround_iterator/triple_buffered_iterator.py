# SPDX-FileCopyrightText: 2025-present Ron M <ramayer+git@gmail.com>
#
# SPDX-License-Identifier: MIT
from __future__ import annotations

from typing import Iterable, Optional, Tuple, TypeVar

from lookaround_iterator.lookaround_iterator import LookaroundIterator

T = TypeVar("T")


class TripleBufferedIterator(LookaroundIterator[T]):
    """Iterator that provides access to previous, current, and next items.

    This is a LookaroundIterator with one element of lookbehind and one of
    lookahead, iterating over ``(previous, current, next)`` tuples. This is
    useful for processing that requires context from adjacent items.
    """

    def __init__(self, iterable_or_iterator: Iterable[T]) -> None:
        """Initialize the triple buffered iterator.

        Args:
            iterable_or_iterator: The source iterator to wrap with triple buffering
        """
        super().__init__(iterable_or_iterator, lookbehind=1, lookahead=1)

    def __iter__(self) -> TripleBufferedIterator[T]:
        return self

    def __next__(self) -> Tuple[Optional[T], T, Optional[T]]:  # type: ignore[override]
        """Get next item with its surrounding context.

        Returns:
            Tuple of (previous_item, current_item, next_item), where items may be None
            at the boundaries of the iteration.

        Raises:
            StopIteration: When the source iterator is exhausted
        """
        if not self.move_next():
            raise StopIteration
        return self.window()  # type: ignore[return-value]
