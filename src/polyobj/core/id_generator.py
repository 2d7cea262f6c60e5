from __future__ import annotations


class IDGenerator:
    """Issues sequential identifiers starting at 0. Not thread-safe."""

    def __init__(self) -> None:
        self._counter = 0

    def next(self) -> int:
        value = self._counter
        self._counter += 1
        return value

    @property
    def issued(self) -> int:
        """Number of identifiers handed out so far."""
        return self._counter
