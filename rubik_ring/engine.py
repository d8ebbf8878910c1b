"""Core 3x3 cube state and the quarter-turn algorithm."""

from __future__ import annotations

import logging
from typing import Any

from .actions import (
    ACTION_TABLE,
    N_NEIGHBORS,
    Face,
    RotationDirection,
    action_index,
    action_name,
    neighbor_order,
    parse_sequence,
    validate_action,
)
from .side import Side

_LOGGER = logging.getLogger(__name__)

SIDE_SEPARATOR = "    "

SideSnapshot = tuple[Face, tuple[Face, ...], int]


class CubeState:
    """Six face rings and the turn that rewires them.

    Not thread-safe: one controller (a CLI run, the viewer loop, a test) owns
    an instance and is the only caller of ``rotate``.
    """

    def __init__(self):
        self._sides = [Side(face) for face in Face]
        self.step_count = 0
        self.history: list[int] = []

    def face(self, face: Face) -> Side:
        return self._sides[face]

    def rotate(self, face: Face, direction: RotationDirection) -> None:
        neighbors = neighbor_order(face)
        # Read every row before writing any: the writes form a 4-cycle.
        rows = [self._sides[n].get_row(face) for n in neighbors]
        jump = direction.jump_offset
        for i, n in enumerate(neighbors):
            self._sides[n].set_row(face, rows[(i + jump) % N_NEIGHBORS])
        self._sides[face].rotate(direction)
        _LOGGER.debug("rotate face=%s direction=%s", face.name, direction.name)

    def step(self, action: int) -> None:
        validate_action(action)
        face, direction = ACTION_TABLE[action]
        self.rotate(face, direction)
        self.step_count += 1
        self.history.append(action)

    def apply_sequence(self, text: str) -> list[int]:
        """Apply whitespace-separated moves such as ``"W B' r+ G-"``.

        The whole string is parsed before the first turn, so a bad token
        leaves the cube untouched. Returns the applied action indexes.
        """
        actions = [action_index(face, direction) for face, direction in parse_sequence(text)]
        for action in actions:
            self.step(action)
        return actions

    def reset(self) -> None:
        self._sides = [Side(face) for face in Face]
        self.step_count = 0
        self.history = []

    def is_solved(self) -> bool:
        return all(side.is_solved() for side in self._sides)

    def snapshot(self) -> tuple[SideSnapshot, ...]:
        return tuple((side.face, side.tiles, side.rotation_offset) for side in self._sides)

    def state_payload(self) -> dict[str, Any]:
        return {
            "step_count": self.step_count,
            "solved": self.is_solved(),
            "history": [action_name(a) for a in self.history],
        }

    def render_text(self) -> str:
        """Unfolded cross: top face, the four side faces in a row, bottom face."""
        rows = ["", "", ""]
        for n in neighbor_order(Face.YELLOW):
            for i, line in enumerate(self._sides[n].string_array()):
                rows[i] += line + SIDE_SEPARATOR

        return f"{self._sides[Face.WHITE]}\n\n" + "\n".join(rows) + f"\n\n{self._sides[Face.YELLOW]}\n"

    def __str__(self) -> str:
        return self.render_text()
