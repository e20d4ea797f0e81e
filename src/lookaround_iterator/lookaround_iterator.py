# SPDX-FileCopyrightText: 2025-present Ron M <ramayer+git@gmail.com>
#
# SPDX-License-Identifier: MIT
from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Generic, Iterable, Iterator, Optional, TypeVar, Union

from lookaround_iterator.exceptions import (
    InvalidBoundError,
    IteratorExhaustedError,
    OffsetOutOfRangeError,
)

T = TypeVar("T")
D = TypeVar("D")

# Marks a slot that holds no element. Never returned to callers.
_EMPTY = object()


class Phase(Enum):
    """Lifecycle of a LookaroundIterator, in the order the phases are entered."""

    UNINITIALIZED = "uninitialized"  # move_next was never called, the buffer is empty
    ACTIVE = "active"  # the source still produces elements
    DRAINING = "draining"  # the source is exhausted, lookahead slots are being shifted out
    EXHAUSTED = "exhausted"  # no current element, only lookbehind history remains


@dataclass(frozen=True)
class _Draining:
    # elements left in current + lookahead, counted down by move_next
    remaining: int

    phase = Phase.DRAINING


def _check_bound(name: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise InvalidBoundError(name, value)
    return value


class LookaroundIterator(Generic[T]):
    """Iterator that exposes a fixed number of elements before and after the current one.

    The current element is at offset ``0``, lookbehind elements at negative offsets
    and lookahead elements at positive offsets::

        it = LookaroundIterator(range(1, 11), lookbehind=2, lookahead=3)
        for _ in range(4):
            it.move_next()
        it.window()  # (2, 3, 4, 5, 6, 7)

    Before the first call to :meth:`move_next` every slot is empty. Once the
    iterator is exhausted the last elements stay available as lookbehind.
    """

    def __init__(self, source: Iterable[T], lookbehind: int = 0, lookahead: int = 0) -> None:
        """Initialize the lookaround iterator.

        Args:
            source: Iterable whose elements are iterated over. Its iterator is
                consumed by this object and should not be used elsewhere.
            lookbehind: Number of previous elements to keep
            lookahead: Number of upcoming elements to fetch in advance

        Raises:
            InvalidBoundError: If lookbehind or lookahead is negative
        """
        self._index_of_current = _check_bound("lookbehind", lookbehind)
        _check_bound("lookahead", lookahead)
        self._source: Iterator[T] = iter(source)
        size = lookbehind + 1 + lookahead
        # appending on the right drops the oldest slot on the left
        self._buffer: deque[object] = deque([_EMPTY] * size, maxlen=size)
        self._state: Union[Phase, _Draining] = Phase.UNINITIALIZED
        self.logger = logging.getLogger(__name__)

    @property
    def lookbehind(self) -> int:
        return self._index_of_current

    @property
    def lookahead(self) -> int:
        return len(self._buffer) - self._index_of_current - 1

    @property
    def size(self) -> int:
        return len(self._buffer)

    @property
    def phase(self) -> Phase:
        return self._state.phase if isinstance(self._state, _Draining) else self._state

    def _slot(self, offset: int) -> object:
        if not -self.lookbehind <= offset <= self.lookahead:
            raise OffsetOutOfRangeError(offset, -self.lookbehind, self.lookahead)
        return self._buffer[self._index_of_current + offset]

    def at(self, offset: int, default: Optional[D] = None) -> Union[T, D, None]:
        """Return the element at ``offset``, or ``default`` if that slot is empty.

        Raises:
            OffsetOutOfRangeError: If offset is outside ``-lookbehind..lookahead``
        """
        value = self._slot(offset)
        return default if value is _EMPTY else value  # type: ignore[return-value]

    def is_filled(self, offset: int) -> bool:
        """Whether the slot at ``offset`` holds an element."""
        return self._slot(offset) is not _EMPTY

    def __getitem__(self, offset: int) -> Optional[T]:
        return self.at(offset)

    @property
    def current(self) -> Optional[T]:
        """The element at offset 0; ``None`` before the first move_next.

        Raises:
            IteratorExhaustedError: If the iterator is exhausted
        """
        if self._state is Phase.EXHAUSTED:
            raise IteratorExhaustedError("iterator is exhausted, there is no current element")
        return self.at(0)

    @property
    def previous(self) -> Optional[T]:
        """The element that was current before the last move_next."""
        return self.at(-1)

    @property
    def next(self) -> Optional[T]:
        """The element that becomes current after the next move_next."""
        return self.at(1)

    def window(self) -> tuple[Optional[T], ...]:
        """Snapshot of all slots from ``-lookbehind`` to ``lookahead``, empty slots as None."""
        return tuple(None if value is _EMPTY else value for value in self._buffer)  # type: ignore[misc]

    def _transition(self, state: Union[Phase, _Draining]) -> None:
        previous_phase = self.phase
        self._state = state
        if self.phase is not previous_phase:
            self.logger.debug("%s -> %s", previous_phase.value, self.phase.value)

    def _fill(self) -> None:
        for i in range(self._index_of_current, len(self._buffer)):
            value = next(self._source, _EMPTY)
            if value is _EMPTY:
                filled = i - self._index_of_current
                self._transition(_Draining(filled) if filled else Phase.EXHAUSTED)
                return
            self._buffer[i] = value
        self._transition(Phase.ACTIVE)

    def move_next(self) -> bool:
        """Advance by one element.

        Pulls at most one element from the source, except on the first call,
        which fills the current and lookahead slots.

        Returns:
            True if there is a current element after the call, False once exhausted
        """
        state = self._state
        if state is Phase.UNINITIALIZED:
            self._fill()
        elif state is Phase.ACTIVE:
            value = next(self._source, _EMPTY)
            self._buffer.append(value)
            if value is _EMPTY:
                self._transition(_Draining(self.lookahead) if self.lookahead else Phase.EXHAUSTED)
        elif isinstance(state, _Draining):
            self._buffer.append(_EMPTY)
            remaining = state.remaining - 1
            self._transition(_Draining(remaining) if remaining else Phase.EXHAUSTED)
        return self._state is not Phase.EXHAUSTED

    def __iter__(self) -> LookaroundIterator[T]:
        return self

    def __next__(self) -> T:
        if not self.move_next():
            raise StopIteration
        return self._buffer[self._index_of_current]  # type: ignore[return-value]

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(lookbehind={self.lookbehind}, "
            f"lookahead={self.lookahead}, phase={self.phase.value})"
        )
