"""A stack that reports its minimum in constant time."""

from __future__ import annotations

from typing import Any


class MinStack:
    """Stack keeping a parallel record of the running minimum."""

    def __init__(self) -> None:
        self._values: list[Any] = []
        self._minimums: list[Any] = []

    def __len__(self) -> int:
        return len(self._values)

    def push(self, value) -> None:
        """Push a value onto the stack."""
        self._values.append(value)
        if self._minimums and not value < self._minimums[-1]:
            self._minimums.append(self._minimums[-1])
        else:
            self._minimums.append(value)

    def pop(self):
        """Remove and return the top value; raise ``IndexError`` when empty."""
        if not self._values:
            raise IndexError("pop from empty stack")
        self._minimums.pop()
        return self._values.pop()

    def top(self):
        """Return the top value; raise ``IndexError`` when empty."""
        if not self._values:
            raise IndexError("top of empty stack")
        return self._values[-1]

    def get_min(self):
        """Return the smallest value on the stack, or ``None`` when empty."""
        return self._minimums[-1] if self._minimums else None