# SPDX-FileCopyrightText: 2025-present Ron M <ramayer+git@gmail.com>
#
# SPDX-License-Identifier: MIT

from .exceptions import InvalidBoundError, IteratorExhaustedError, LookaroundError, OffsetOutOfRangeError
from .lookaround_iterator import LookaroundIterator, Phase
from .sliding_window import window
from .triple_buffered_iterator import TripleBufferedIterator

__all__ = [
    "InvalidBoundError",
    "IteratorExhaustedError",
    "LookaroundError",
    "LookaroundIterator",
    "OffsetOutOfRangeError",
    "Phase",
    "TripleBufferedIterator",
    "window",
]
