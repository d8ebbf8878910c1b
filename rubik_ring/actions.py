"""Face identity, turn directions and the action table for the 3x3 cube."""

from __future__ import annotations

from enum import Enum, IntEnum


class ActionValidationError(ValueError):
    """Raised when an action index or move token is invalid."""


class Face(IntEnum):
    """Cube faces, named by the colour of their centre sticker.

    Top: WHITE, bottom: YELLOW, front: RED, back: ORANGE, right: BLUE, left: GREEN.
    """

    WHITE = 0
    YELLOW = 1
    RED = 2
    ORANGE = 3
    BLUE = 4
    GREEN = 5

    @property
    def letter(self) -> str:
        return FACE_LETTERS[self]

    @property
    def rgb(self) -> tuple[int, int, int]:
        return FACE_RGB[self]


class RotationDirection(Enum):
    """Quarter turn direction, seen from outside the turned face."""

    RIGHT = "right"
    LEFT = "left"

    @property
    def jump_offset(self) -> int:
        # Complementary mod 4: RIGHT pulls the row from three neighbors ahead.
        return 3 if self is RotationDirection.RIGHT else 1


N_NEIGHBORS = 4

FACE_LETTERS = {
    Face.WHITE: "W",
    Face.YELLOW: "Y",
    Face.RED: "R",
    Face.ORANGE: "O",
    Face.BLUE: "B",
    Face.GREEN: "G",
}
LETTER_TO_FACE = {letter: face for face, letter in FACE_LETTERS.items()}

FACE_RGB = {
    Face.WHITE: (255, 255, 255),
    Face.YELLOW: (255, 255, 0),
    Face.RED: (255, 0, 0),
    Face.ORANGE: (255, 128, 51),
    Face.BLUE: (0, 0, 255),
    Face.GREEN: (0, 255, 0),
}

# Adjacent faces, clockwise as seen from outside the face. Indexed by Face.
NEIGHBOR_ORDER: tuple[tuple[Face, Face, Face, Face], ...] = (
    (Face.ORANGE, Face.BLUE, Face.RED, Face.GREEN),  # WHITE
    (Face.RED, Face.BLUE, Face.ORANGE, Face.GREEN),  # YELLOW
    (Face.WHITE, Face.BLUE, Face.YELLOW, Face.GREEN),  # RED
    (Face.WHITE, Face.GREEN, Face.YELLOW, Face.BLUE),  # ORANGE
    (Face.WHITE, Face.ORANGE, Face.YELLOW, Face.RED),  # BLUE
    (Face.WHITE, Face.RED, Face.YELLOW, Face.ORANGE),  # GREEN
)


def _build_neighbor_positions() -> tuple[dict[Face, int], ...]:
    positions = tuple({n: i for i, n in enumerate(NEIGHBOR_ORDER[face])} for face in Face)
    for face in Face:
        for other in positions[face]:
            if face not in positions[other]:
                raise RuntimeError(f"Neighbor table is not symmetric for {face.name}/{other.name}")
    return positions


def _build_opposites() -> tuple[Face, ...]:
    opposites = []
    for face in Face:
        rest = set(Face) - {face} - set(NEIGHBOR_ORDER[face])
        if len(rest) != 1:
            raise RuntimeError(f"Expected a single opposite face for {face.name}, got {len(rest)}")
        opposites.append(rest.pop())
    return tuple(opposites)


_NEIGHBOR_POS = _build_neighbor_positions()
_OPPOSITE = _build_opposites()


def neighbor_order(face: Face) -> tuple[Face, Face, Face, Face]:
    return NEIGHBOR_ORDER[face]


def neighbor_pos(face: Face, other: Face) -> int:
    """Return the index of ``other`` within ``neighbor_order(face)``.

    Only adjacent faces have a position; asking for any other face is a bug in
    the caller, so it fails with ``AssertionError`` rather than a user error.
    """
    try:
        return _NEIGHBOR_POS[face][other]
    except KeyError as exc:
        raise AssertionError(f"{Face(other).name} is not adjacent to {Face(face).name}") from exc


def opposite(face: Face) -> Face:
    return _OPPOSITE[face]


# Action index -> (face, direction). Even indexes turn RIGHT, odd ones LEFT.
ACTION_TABLE = [
    (face, direction) for face in Face for direction in (RotationDirection.RIGHT, RotationDirection.LEFT)
]

ACTION_NAMES = [
    f"{face.letter}{'+' if direction is RotationDirection.RIGHT else '-'}" for face, direction in ACTION_TABLE
]

N_ACTIONS = len(ACTION_TABLE)

_SUFFIX_TO_DIRECTION = {
    "": RotationDirection.RIGHT,
    "+": RotationDirection.RIGHT,
    "'": RotationDirection.LEFT,
    "-": RotationDirection.LEFT,
}


def action_index(face: Face, direction: RotationDirection) -> int:
    return 2 * int(face) + (0 if direction is RotationDirection.RIGHT else 1)


def action_name(action: int) -> str:
    return ACTION_NAMES[action]


def validate_action(action: int) -> int:
    if isinstance(action, bool) or not isinstance(action, int) or action < 0 or action >= N_ACTIONS:
        raise ActionValidationError(f"Action must be an integer in range 0..{N_ACTIONS - 1}")
    return action


def parse_action(token: str) -> tuple[Face, RotationDirection]:
    """Parse a move token such as ``"W"``, ``"b'"``, ``"R+"`` or ``"G-"``."""
    tok = token.strip().replace("’", "'")
    if not tok:
        raise ActionValidationError("Empty move token")

    face = LETTER_TO_FACE.get(tok[0].upper())
    if face is None:
        raise ActionValidationError(f"Unknown face in move: {token!r}")

    direction = _SUFFIX_TO_DIRECTION.get(tok[1:])
    if direction is None:
        raise ActionValidationError(f"Unknown direction suffix in move: {token!r}")
    return face, direction


def parse_sequence(text: str) -> list[tuple[Face, RotationDirection]]:
    return [parse_action(tok) for tok in text.split()]
