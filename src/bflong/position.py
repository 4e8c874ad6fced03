"""
Sequence Cursor
===============

A small forward-only cursor shared by the simulator passes. It works over
any indexable sequence (token lists, instruction lists, plain strings) and
reports ``None`` once it walks past the end instead of raising.

Example
-------
>>> pos = Position()
>>> pos.current("+.")
'+'
>>> pos.advance()
>>> pos.current("+.")
'.'
>>> pos.advance()
>>> pos.current("+.") is None
True
"""

from typing import Optional, Sequence, TypeVar

T = TypeVar("T")


class Position:
    """
    Mutable 0-based cursor into a sequence.

    The cursor is never clamped: callers stop polling once current()
    returns None. One instance belongs to exactly one pass; call reset()
    before reusing it for another.

    Attributes:
        index: The current cursor value
    """

    def __init__(self, index: int = 0):
        self.index = index

    def current(self, sequence: Sequence[T]) -> Optional[T]:
        """Return the element under the cursor, or None when out of range."""
        if 0 <= self.index < len(sequence):
            return sequence[self.index]
        return None

    def advance(self, count: int = 1) -> None:
        """Move the cursor forward by count elements."""
        self.index += count

    def exhausted(self, sequence: Sequence[T]) -> bool:
        """Return True once the cursor has passed the end of sequence."""
        return self.index >= len(sequence)

    def reset(self) -> None:
        """Rewind to the start for a new pass."""
        self.index = 0

    def __repr__(self) -> str:
        return f"Position({self.index})"
