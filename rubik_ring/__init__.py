"""Rubik 3x3 cube state with ring-buffer faces."""

from .actions import Face, RotationDirection, neighbor_order, neighbor_pos
from .engine import CubeState
from .side import Side
from .view import CubeView

__all__ = ["CubeState", "CubeView", "Face", "RotationDirection", "Side", "neighbor_order", "neighbor_pos"]
