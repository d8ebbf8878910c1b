import os
import unittest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame

from rubik_ring.actions import Face, neighbor_order
from rubik_ring.config import ViewerConfig
from rubik_ring.engine import CubeState
from rubik_ring.gui import RubikViewer, net_positions


class TestRubikViewer(unittest.TestCase):
    def setUp(self):
        self.gui = RubikViewer(CubeState(), ViewerConfig(width=640, height=480))

    def tearDown(self):
        pygame.quit()

    def test_net_matches_text_layout(self):
        net = net_positions()
        self.assertEqual(net[Face.WHITE], (0, 0))
        self.assertEqual(net[Face.YELLOW], (0, 2))
        self.assertEqual([net[f] for f in neighbor_order(Face.YELLOW)], [(0, 1), (1, 1), (2, 1), (3, 1)])

    def test_tile_rects(self):
        rect = self.gui.tile_rect(Face.WHITE, 0, 0)
        self.assertEqual((rect.x, rect.y, rect.w, rect.h), (40, 100, 40, 40))
        rect = self.gui.tile_rect(Face.BLUE, 2, 1)
        self.assertEqual((rect.x, rect.y), (40 + 144 + 88, 100 + 144 + 44))

    def test_keys_turn_faces_and_sync_view(self):
        self.assertTrue(self.gui.handle_key(pygame.K_w))
        self.assertEqual(self.gui.cube.history, [0])
        self.assertNotIn(Face.YELLOW, self.gui.view.last_synced)
        self.assertEqual(self.gui.view.colors(Face.RED), self.gui.cube.face(Face.RED).normalized_tiles())

        self.assertTrue(self.gui.handle_key(pygame.K_w, pygame.KMOD_LSHIFT))
        self.assertEqual(self.gui.cube.history, [0, 1])
        self.assertTrue(self.gui.cube.is_solved())

    def test_unbound_key_is_ignored(self):
        self.assertTrue(self.gui.handle_key(pygame.K_z))
        self.assertEqual(self.gui.cube.step_count, 0)

    def test_backspace_resets_and_escape_quits(self):
        self.gui.handle_key(pygame.K_g)
        self.assertTrue(self.gui.handle_key(pygame.K_BACKSPACE))
        self.assertTrue(self.gui.cube.is_solved())
        self.assertEqual(self.gui.cube.step_count, 0)
        self.assertFalse(self.gui.handle_key(pygame.K_ESCAPE))

    def test_reset_button_click_resets_cube(self):
        self.gui.handle_key(pygame.K_r)
        self.gui.handle_key(pygame.K_b, pygame.KMOD_LSHIFT)
        self.assertFalse(self.gui.handle_click((0, 0)))
        self.assertEqual(self.gui.cube.step_count, 2)

        self.assertTrue(self.gui.handle_click(self.gui.reset_btn.center))
        self.assertTrue(self.gui.cube.is_solved())
        self.assertEqual(self.gui.cube.step_count, 0)
        for face in Face:
            self.assertEqual(self.gui.view.colors(face), (face,) * 8)

    def test_draw_frame_paints_tile_colors(self):
        self.gui.handle_key(pygame.K_w)
        self.gui.draw_frame()
        # top-left tile of RED now carries BLUE
        rect = self.gui.tile_rect(Face.RED, 0, 0)
        self.assertEqual(tuple(self.gui.screen.get_at(rect.center))[:3], Face.BLUE.rgb)


if __name__ == "__main__":
    unittest.main()
