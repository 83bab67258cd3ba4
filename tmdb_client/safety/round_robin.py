"""Thread-safe round-robin index selector."""

from __future__ import annotations

import threading


class RoundRobin:
    """Cycle through the indices ``0 .. size - 1`` forever.

    Calls to :meth:`next` are serialized with a lock, so concurrent callers
    each receive their own step of the cycle and no step is lost.

    Example:
        >>> rr = RoundRobin(3)
        >>> [rr.next() for _ in range(5)]
        [0, 1, 2, 0, 1]
    """

    def __init__(self, size: int):
        """Initialize selector.

        Args:
            size: Number of slots to rotate across.

        Raises:
            ValueError: If size is less than 1.
        """
        if size < 1:
            raise ValueError("size must be >= 1")
        self._size = size
        self._position = 0
        self._lock = threading.Lock()

    def next(self) -> int:
        """Return the current index and advance to the next slot."""
        with self._lock:
            index = self._position
            self._position = (self._position + 1) % self._size
            return index

    @property
    def size(self) -> int:
        """Number of slots in the cycle."""
        return self._size

    def __len__(self) -> int:
        return self._size
