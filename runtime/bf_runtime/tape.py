"""
BF Runtime - Tape

Unbounded, bidirectional byte tape. Cells live in one contiguous numpy uint8
arena; the head is a signed offset from a fixed origin, so a move of any
distance is pointer arithmetic. The arena doubles toward whichever side the
head leaves, and cells that were never materialized read as zero.
"""

from typing import Tuple
import numpy as np

from .config import DEFAULT_TAPE_SIZE


class Tape:
    """Byte tape addressed by a signed offset from its origin"""

    def __init__(self, size: int = DEFAULT_TAPE_SIZE):
        size = max(1, size)
        self.cells = np.zeros(size, dtype=np.uint8)
        # arena index of offset 0
        self.origin = size // 2
        self.position = 0
        self._low = 0
        self._high = 0

    # Head movement
    def move_right(self):
        self.move_right_by(1)

    def move_left(self):
        self.move_left_by(1)

    def move_right_by(self, n: int):
        self.position += n
        self._ensure(self.position)

    def move_left_by(self, n: int):
        self.position -= n
        self._ensure(self.position)

    # Cell access
    @property
    def current(self) -> int:
        return int(self.cells[self.origin + self.position])

    @current.setter
    def current(self, value: int):
        self.cells[self.origin + self.position] = value & 0xFF

    def increment(self, n: int = 1):
        self.current = self.current + n

    def decrement(self, n: int = 1):
        self.current = self.current - n

    def read(self, offset: int) -> int:
        """Value at a signed offset without moving the head"""
        index = self.origin + offset
        if 0 <= index < len(self.cells):
            return int(self.cells[index])
        return 0

    @property
    def extent(self) -> Tuple[int, int]:
        """Lowest and highest offsets the head has visited"""
        return self._low, self._high

    def snapshot(self) -> bytes:
        """Bytes of the visited extent, lowest offset first"""
        start = self.origin + self._low
        stop = self.origin + self._high + 1
        return self.cells[start:stop].tobytes()

    def _ensure(self, offset: int):
        """Grow the arena until offset is addressable"""
        if offset < self._low:
            self._low = offset
        elif offset > self._high:
            self._high = offset

        index = self.origin + offset
        if index < 0:
            extra = max(-index, len(self.cells))
            self.cells = np.concatenate((np.zeros(extra, dtype=np.uint8), self.cells))
            self.origin += extra
        elif index >= len(self.cells):
            extra = max(index - len(self.cells) + 1, len(self.cells))
            self.cells = np.concatenate((self.cells, np.zeros(extra, dtype=np.uint8)))

    def __repr__(self) -> str:
        return f"Tape(position={self.position}, current={self.current}, extent={self.extent})"


__all__ = ['Tape']
