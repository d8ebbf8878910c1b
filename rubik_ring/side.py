"""Sticker ring of a single cube face."""

from __future__ import annotations

from typing import Sequence

import numpy as np

from .actions import Face, RotationDirection, neighbor_order, neighbor_pos

RING_SIZE = 8
ROW_SIZE = 3

_ROW_SPAN = np.arange(ROW_SIZE)


class Side:
    """One face: 8 non-centre stickers in a ring plus a rotation offset.

    Ring slots, clockwise from the top-left corner::

        0  1  2
        7     3
        6  5  4

    Each neighbor owns two consecutive slots starting at
    ``rotation_offset + 2 * neighbor_pos``. A row read toward a neighbor spans
    three slots, so it also picks up the corner it shares with the next edge.
    Turning the face only moves ``rotation_offset``; the stickers stay put.
    """

    def __init__(self, face: Face):
        self.face = Face(face)
        self._tiles = np.full(RING_SIZE, int(self.face), dtype=np.int8)
        self.rotation_offset = 0

    @property
    def tiles(self) -> tuple[Face, ...]:
        """Raw ring contents, independent of the rotation offset."""
        return tuple(Face(int(v)) for v in self._tiles)

    def _row_slots(self, neighbor: Face) -> np.ndarray:
        start = self.rotation_offset + 2 * neighbor_pos(self.face, neighbor)
        return (start + _ROW_SPAN) % RING_SIZE

    def get_row(self, neighbor: Face) -> tuple[Face, Face, Face]:
        a, b, c = self._tiles[self._row_slots(neighbor)]
        return Face(int(a)), Face(int(b)), Face(int(c))

    def set_row(self, neighbor: Face, row: Sequence[Face]) -> None:
        if len(row) != ROW_SIZE:
            raise ValueError(f"Row must have exactly {ROW_SIZE} tiles, got {len(row)}")
        self._tiles[self._row_slots(neighbor)] = np.asarray([int(c) for c in row], dtype=np.int8)

    def rotate(self, direction: RotationDirection) -> None:
        self.rotation_offset = (self.rotation_offset + direction.jump_offset * 2) % RING_SIZE

    def normalized_tiles(self) -> tuple[Face, ...]:
        """Ring left-rotated by the offset, so slot 0 is the top-left corner again."""
        return tuple(Face(int(v)) for v in np.roll(self._tiles, -self.rotation_offset))

    def is_solved(self) -> bool:
        return bool(np.all(self._tiles == int(self.face)))

    def string_array(self) -> list[str]:
        top, right, bottom, left = (self.get_row(n) for n in neighbor_order(self.face))
        rows = (
            (top[0], top[1], top[2]),
            (left[1], self.face, right[1]),
            (bottom[2], bottom[1], bottom[0]),
        )
        return ["  ".join(c.letter for c in row) for row in rows]

    def __str__(self) -> str:
        return "\n".join(self.string_array())

    def __repr__(self) -> str:
        return f"Side({self.face.name}, offset={self.rotation_offset}, tiles={''.join(c.letter for c in self.tiles)})"
