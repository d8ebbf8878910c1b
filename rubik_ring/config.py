"""YAML configuration for the net viewer."""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any

import yaml


class ConfigError(ValueError):
    """Raised when a config file has the wrong shape."""


@dataclass
class ViewerConfig:
    width: int = 960
    height: int = 640
    tile_size: int = 40
    tile_gap: int = 4
    face_gap: int = 16
    background: tuple[int, int, int] = (18, 22, 30)
    fps: int = 60
    moves: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "ViewerConfig":
        if data is not None and not isinstance(data, dict):
            raise ConfigError("viewer config must be a mapping")
        data = dict(data or {})
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown viewer config keys: {', '.join(unknown)}")

        if "background" in data:
            bg = data["background"]
            if not isinstance(bg, (list, tuple)) or len(bg) != 3:
                raise ConfigError("background must be a list of 3 integers")
            try:
                rgb = tuple(int(v) for v in bg)
            except (TypeError, ValueError) as exc:
                raise ConfigError(f"background must be a list of 3 integers: {exc}") from exc
            if any(isinstance(v, bool) or not 0 <= c <= 255 for v, c in zip(bg, rgb)):
                raise ConfigError("background values must be integers in range 0..255")
            data["background"] = rgb

        for key in ("width", "height", "tile_size", "tile_gap", "face_gap", "fps"):
            value = data.get(key, 0)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ConfigError(f"{key} must be a non-negative integer")

        if "moves" in data and not isinstance(data["moves"], str):
            raise ConfigError("moves must be a string")

        return cls(**data)

    def to_dict(self) -> dict[str, Any]:
        out = asdict(self)
        out["background"] = list(self.background)
        return out


def load_config(path: str | Path) -> dict:
    """Load YAML config. Returns the top-level mapping (empty if the file is empty)."""
    with open(path, encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Config root must be a mapping: {path}")
    return data


def load_viewer_config(path: str | Path | None) -> ViewerConfig:
    if path is None:
        return ViewerConfig()
    return ViewerConfig.from_dict(load_config(path).get("viewer"))
