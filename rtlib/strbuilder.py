"""A growable text buffer with explicit capacity management."""

from __future__ import annotations

from typing import Optional

GROWTH_FACTOR = 2
DEFAULT_CAPACITY = 16
NUL = "\0"


class StringBuilder:
    """Accumulates characters into a buffer that grows by doubling.

    The buffer keeps track of its capacity the way a heap buffer would:
    it grows only when an append needs more room, and it can be shrunk
    back to the length of its content.
    """

    def __init__(self, initial_capacity: int) -> None:
        if initial_capacity <= 0:
            raise ValueError(
                f"initial capacity must be positive, got {initial_capacity!r}"
            )
        self._chars: list[str] = []
        self._capacity = initial_capacity

    def ensure_capacity(self, required: int) -> None:
        """Grow the buffer, by doubling, until it holds ``required`` characters."""
        if required < 0:
            raise ValueError(f"required capacity must not be negative, got {required!r}")
        if required <= self._capacity:
            return
        new_capacity = self._capacity if self._capacity > 0 else DEFAULT_CAPACITY
        while new_capacity < required:
            new_capacity *= GROWTH_FACTOR
        self._capacity = new_capacity

    def append_char(self, c: str) -> None:
        """Append a single character."""
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        self.ensure_capacity(len(self._chars) + 1)
        self._chars.append(c)

    def append_n(self, data: str, n: int) -> None:
        """Append the first ``n`` characters of ``data``, NUL characters included."""
        if n < 0:
            raise ValueError(f"n must not be negative, got {n!r}")
        if n > len(data):
            raise ValueError(f"cannot take {n} characters from {len(data)}")
        self.ensure_capacity(len(self._chars) + n)
        self._chars.extend(data[:n])

    def append_str(self, text: Optional[str]) -> None:
        """Append ``text`` up to its first NUL; None appends nothing."""
        if text is None:
            return
        head = text.split(NUL, 1)[0]
        self.append_n(head, len(head))

    def clear(self) -> None:
        """Drop the content while keeping the capacity."""
        self._chars.clear()

    def shrink_to_fit(self) -> None:
        """Reduce the capacity to the current length."""
        self._capacity = len(self._chars)

    def build(self) -> str:
        """Return the accumulated text up to its first NUL.

        Room for a terminator is reserved first, so the capacity may grow.
        The builder stays usable afterwards.
        """
        self.ensure_capacity(len(self._chars) + 1)
        return "".join(self._chars).split(NUL, 1)[0]

    def capacity(self) -> int:
        """Return the current capacity of the buffer."""
        return self._capacity

    def __len__(self) -> int:
        return len(self._chars)