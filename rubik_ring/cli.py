"""CLI entrypoint for the Rubik ring-buffer cube."""

from __future__ import annotations

import argparse
import logging

from .config import ConfigError, ViewerConfig, load_viewer_config
from .engine import CubeState

LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"


def build_parser(defaults: ViewerConfig | None = None) -> argparse.ArgumentParser:
    d = defaults or ViewerConfig()
    parser = argparse.ArgumentParser(description="Rubik 3x3 cube with ring-buffer faces")
    sub = parser.add_subparsers(dest="mode", required=True)

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--config", type=str, default=None, help="Path to YAML config (viewer section)")
    common.add_argument("--moves", type=str, default=d.moves, help="Moves to apply first, e.g. \"W B' R+ G-\"")
    common.add_argument("--log-level", type=str, default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])

    sub.add_parser("show", parents=[common], help="Print the unfolded cube after applying --moves")

    gui = sub.add_parser("gui", parents=[common], help="Open the pygame net viewer")
    gui.add_argument("--width", type=int, default=d.width)
    gui.add_argument("--height", type=int, default=d.height)
    gui.add_argument("--tile-size", type=int, default=d.tile_size)

    return parser


def main(argv: list[str] | None = None) -> None:
    # Pre-parse to get --config
    pre = argparse.ArgumentParser(add_help=False)
    pre.add_argument("--config", type=str, default=None)
    pre_args, _ = pre.parse_known_args(argv)

    try:
        config = load_viewer_config(pre_args.config)
    except (OSError, ConfigError) as exc:
        build_parser().error(f"cannot load config: {exc}")

    parser = build_parser(config)
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level, format=LOG_FORMAT, datefmt=LOG_DATEFMT)

    cube = CubeState()
    try:
        cube.apply_sequence(args.moves)
    except ValueError as exc:
        parser.error(str(exc))

    if args.mode == "show":
        print(cube.render_text(), end="")
        return

    if args.mode == "gui":
        from .gui import RubikViewer

        config.width = args.width
        config.height = args.height
        config.tile_size = args.tile_size
        RubikViewer(cube, config).run()
        return

    parser.error(f"Unsupported mode: {args.mode}")


if __name__ == "__main__":
    main()
