"""Pull-based synchronization between a CubeState and whatever draws it."""

from __future__ import annotations

from .actions import ACTION_TABLE, Face, RotationDirection, neighbor_order
from .engine import CubeState

# (column, row) offset of each ring slot from the face centre.
TILE_OFFSETS = (
    (-1, -1),
    (0, -1),
    (1, -1),
    (1, 0),
    (1, 1),
    (0, 1),
    (-1, 1),
    (-1, 0),
)


class CubeView:
    """Colour snapshot of a cube, refreshed only when the owner asks for it.

    The cube never learns about its views. After each turn the view pulls the
    turned face and its four neighbors; the opposite face cannot change and is
    left alone.
    """

    def __init__(self, cube: CubeState):
        self.cube = cube
        self._colors: dict[Face, tuple[Face, ...]] = {}
        self.last_synced: tuple[Face, ...] = ()
        self.sync_all()

    def colors(self, face: Face) -> tuple[Face, ...]:
        return self._colors[face]

    def grid(self, face: Face) -> list[list[Face]]:
        cells = [[face] * 3 for _ in range(3)]
        for (dx, dy), color in zip(TILE_OFFSETS, self._colors[face]):
            cells[dy + 1][dx + 1] = color
        return cells

    def sync_face(self, face: Face) -> None:
        self._colors[face] = self.cube.face(face).normalized_tiles()

    def sync_all(self) -> None:
        for face in Face:
            self.sync_face(face)
        self.last_synced = tuple(Face)

    def sync_after_turn(self, face: Face) -> None:
        faces = (face, *neighbor_order(face))
        for f in faces:
            self.sync_face(f)
        self.last_synced = faces

    def rotate(self, face: Face, direction: RotationDirection) -> None:
        self.cube.rotate(face, direction)
        self.sync_after_turn(face)

    def step(self, action: int) -> None:
        self.cube.step(action)
        face, _ = ACTION_TABLE[action]
        self.sync_after_turn(face)

    def reset(self) -> None:
        self.cube.reset()
        self.sync_all()
