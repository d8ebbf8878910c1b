import unittest

from rubik_ring.actions import (
    ACTION_NAMES,
    ACTION_TABLE,
    ActionValidationError,
    Face,
    RotationDirection,
    action_index,
    neighbor_order,
    neighbor_pos,
    opposite,
    parse_action,
    parse_sequence,
    validate_action,
)


class TestNeighborTable(unittest.TestCase):
    def test_each_face_has_four_distinct_neighbors(self):
        for face in Face:
            neighbors = neighbor_order(face)
            self.assertEqual(len(set(neighbors)), 4)
            self.assertNotIn(face, neighbors)

    def test_adjacency_is_symmetric(self):
        for face in Face:
            for other in neighbor_order(face):
                self.assertIn(face, neighbor_order(other), msg=f"{face.name}/{other.name}")

    def test_neighbor_pos_inverts_neighbor_order(self):
        for face in Face:
            for i, other in enumerate(neighbor_order(face)):
                self.assertEqual(neighbor_pos(face, other), i)

    def test_opposites(self):
        self.assertEqual(opposite(Face.WHITE), Face.YELLOW)
        self.assertEqual(opposite(Face.RED), Face.ORANGE)
        self.assertEqual(opposite(Face.BLUE), Face.GREEN)
        for face in Face:
            self.assertEqual(opposite(opposite(face)), face)

    def test_non_adjacent_lookup_is_a_defect(self):
        with self.assertRaises(AssertionError):
            neighbor_pos(Face.WHITE, Face.YELLOW)
        with self.assertRaises(AssertionError):
            neighbor_pos(Face.RED, Face.RED)

    def test_white_neighbor_order(self):
        self.assertEqual(neighbor_order(Face.WHITE), (Face.ORANGE, Face.BLUE, Face.RED, Face.GREEN))

    def test_letters_are_unique(self):
        self.assertEqual("".join(f.letter for f in Face), "WYROBG")


class TestActions(unittest.TestCase):
    def test_action_table_layout(self):
        self.assertEqual(len(ACTION_TABLE), 12)
        self.assertEqual(ACTION_NAMES[0], "W+")
        self.assertEqual(ACTION_NAMES[1], "W-")
        self.assertEqual(ACTION_NAMES[11], "G-")
        for action, (face, direction) in enumerate(ACTION_TABLE):
            self.assertEqual(action_index(face, direction), action)

    def test_jump_offsets_are_complementary(self):
        right = RotationDirection.RIGHT.jump_offset
        left = RotationDirection.LEFT.jump_offset
        self.assertEqual((right, left), (3, 1))
        self.assertEqual((right + left) % 4, 0)

    def test_parse_action_accepts_suffixes(self):
        self.assertEqual(parse_action("W"), (Face.WHITE, RotationDirection.RIGHT))
        self.assertEqual(parse_action("r+"), (Face.RED, RotationDirection.RIGHT))
        self.assertEqual(parse_action("b'"), (Face.BLUE, RotationDirection.LEFT))
        self.assertEqual(parse_action("G-"), (Face.GREEN, RotationDirection.LEFT))
        self.assertEqual(parse_action("O’"), (Face.ORANGE, RotationDirection.LEFT))

    def test_parse_action_rejects_bad_tokens(self):
        for token in ("", "X", "W2", "Wx", "  "):
            with self.assertRaises(ActionValidationError, msg=token):
                parse_action(token)

    def test_parse_sequence(self):
        self.assertEqual(
            parse_sequence("W  Y'\nR"),
            [
                (Face.WHITE, RotationDirection.RIGHT),
                (Face.YELLOW, RotationDirection.LEFT),
                (Face.RED, RotationDirection.RIGHT),
            ],
        )
        self.assertEqual(parse_sequence(""), [])

    def test_validate_action(self):
        self.assertEqual(validate_action(5), 5)
        for bad in (-1, 12, True, 1.0, "3"):
            with self.assertRaises(ActionValidationError):
                validate_action(bad)


if __name__ == "__main__":
    unittest.main()
