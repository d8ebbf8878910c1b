"""Pygame viewer that draws the cube as an unfolded net."""

from __future__ import annotations

import logging

import pygame

from .actions import ACTION_NAMES, Face, RotationDirection, action_index, neighbor_order
from .config import ViewerConfig
from .engine import CubeState
from .view import CubeView

_LOGGER = logging.getLogger(__name__)

LINE = (28, 32, 42)
TEXT = (220, 225, 235)
BUTTON = (52, 60, 78)
BUTTON_BORDER = (92, 110, 140)

KEY_TO_FACE = {
    pygame.K_w: Face.WHITE,
    pygame.K_y: Face.YELLOW,
    pygame.K_r: Face.RED,
    pygame.K_o: Face.ORANGE,
    pygame.K_b: Face.BLUE,
    pygame.K_g: Face.GREEN,
}


def net_positions() -> dict[Face, tuple[int, int]]:
    """Face -> (column, row) in the same cross the text rendering uses."""
    positions = {Face.WHITE: (0, 0), Face.YELLOW: (0, 2)}
    for col, face in enumerate(neighbor_order(Face.YELLOW)):
        positions[face] = (col, 1)
    return positions


class RubikViewer:
    def __init__(self, cube: CubeState, config: ViewerConfig | None = None):
        self.config = config or ViewerConfig()
        self.view = CubeView(cube)
        self.net = net_positions()

        pygame.init()
        self.size = (self.config.width, self.config.height)
        self.screen = pygame.display.set_mode(self.size)
        pygame.display.set_caption("Rubik 3x3 Net")
        self.clock = pygame.time.Clock()

        self.font = pygame.font.SysFont("monospace", 18)
        self.small_font = pygame.font.SysFont("monospace", 14)

        self.origin = (40, 100)
        self.reset_btn = pygame.Rect(40, self.size[1] - 70, 180, 44)

    @property
    def cube(self) -> CubeState:
        return self.view.cube

    def face_size(self) -> int:
        return 3 * self.config.tile_size + 2 * self.config.tile_gap

    def tile_rect(self, face: Face, col: int, row: int) -> pygame.Rect:
        stride = self.face_size() + self.config.face_gap
        net_col, net_row = self.net[face]
        cell = self.config.tile_size + self.config.tile_gap
        x = self.origin[0] + net_col * stride + col * cell
        y = self.origin[1] + net_row * stride + row * cell
        return pygame.Rect(x, y, self.config.tile_size, self.config.tile_size)

    def handle_key(self, key: int, mods: int = 0) -> bool:
        """Apply the turn bound to ``key``. Returns False when the viewer should close."""
        if key in (pygame.K_ESCAPE, pygame.K_q):
            return False
        if key == pygame.K_BACKSPACE:
            self.view.reset()
            _LOGGER.info("cube reset")
            return True

        face = KEY_TO_FACE.get(key)
        if face is not None:
            direction = RotationDirection.LEFT if mods & pygame.KMOD_SHIFT else RotationDirection.RIGHT
            action = action_index(face, direction)
            self.view.step(action)
            _LOGGER.debug("action=%s synced=%s", ACTION_NAMES[action], [f.name for f in self.view.last_synced])
        return True

    def handle_click(self, pos: tuple[int, int]) -> bool:
        """Reset the cube if ``pos`` hits the reset button. Returns whether it did."""
        if not self.reset_btn.collidepoint(pos):
            return False
        self.view.reset()
        _LOGGER.info("cube reset")
        return True

    def _draw_net(self):
        for face in Face:
            for row, cells in enumerate(self.view.grid(face)):
                for col, color in enumerate(cells):
                    rect = self.tile_rect(face, col, row)
                    pygame.draw.rect(self.screen, color.rgb, rect, border_radius=4)
                    pygame.draw.rect(self.screen, LINE, rect, width=2, border_radius=4)

    def _draw_hud(self):
        payload = self.cube.state_payload()
        header = self.font.render(f"steps={payload['step_count']} | solved={payload['solved']}", True, TEXT)
        controls = self.small_font.render(
            "Keys: W Y R O B G turn right, Shift+key turns left | Backspace reset | ESC",
            True,
            TEXT,
        )
        self.screen.blit(header, (24, 18))
        self.screen.blit(controls, (24, 48))

        pygame.draw.rect(self.screen, BUTTON, self.reset_btn, border_radius=8)
        pygame.draw.rect(self.screen, BUTTON_BORDER, self.reset_btn, width=2, border_radius=8)
        txt = self.font.render("Reset", True, TEXT)
        self.screen.blit(
            txt,
            (self.reset_btn.centerx - txt.get_width() // 2, self.reset_btn.centery - txt.get_height() // 2),
        )

    def draw_frame(self):
        self.screen.fill(self.config.background)
        self._draw_hud()
        self._draw_net()
        pygame.display.flip()

    def run(self):
        running = True
        while running:
            self.clock.tick(self.config.fps)

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if not self.handle_key(event.key, event.mod):
                        running = False
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    self.handle_click(event.pos)

            self.draw_frame()

        pygame.quit()
