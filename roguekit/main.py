# roguekit/main.py
"""Command line entry point: run searches on map files and demo the rng helpers."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Sequence
import argparse
import logging
import os

from dotenv import load_dotenv

from .config import CONFIG, Config, load_config
from .core.distance import DistanceAlg
from .core.point import Point
from .maps.grid_map import GridMap
from .maps.map_loader import MapFormatError, load_grid_map
from .systems.pathfinding import a_star_search
from .utils import rng
from .utils.cli.terminal_view import TerminalView

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

EXIT_FOUND = 0
EXIT_NO_PATH = 1
EXIT_BAD_INPUT = 2


def configure_logging(cfg: Config = CONFIG) -> None:
    """Set the root level and per-module levels from ``cfg.logging``."""

    numeric_level = getattr(logging, cfg.logging.global_level, logging.INFO)
    logging.basicConfig(level=numeric_level, format=LOG_FORMAT, force=True)

    # Apply per-module levels if defined
    for module_name, level_str in cfg.logging.module_levels.items():
        module_numeric_level = getattr(logging, str(level_str).upper(), None)
        if isinstance(module_numeric_level, int):
            logging.getLogger(module_name).setLevel(module_numeric_level)
        else:
            logger.warning("Invalid log level '%s' for module '%s' in config.", level_str, module_name)


def parse_point(text: str) -> Point:
    """Parse ``"x,y"`` into a :class:`Point` (for argparse)."""

    parts = text.split(",")
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(f"expected X,Y but got '{text}'")
    try:
        return Point(int(parts[0]), int(parts[1]))
    except ValueError:
        raise argparse.ArgumentTypeError(f"coordinates must be integers: '{text}'") from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="roguekit", description="Roguelike grid toolkit.")
    parser.add_argument("--config", type=Path, default=None, help="Path to config.yaml.")
    sub = parser.add_subparsers(dest="command", required=True)

    path_cmd = sub.add_parser("path", help="Find a path on a YAML map file.")
    path_cmd.add_argument("--map", dest="map_path", type=Path, required=True)
    path_cmd.add_argument("--from", dest="origin", type=parse_point, required=True)
    path_cmd.add_argument("--to", dest="goal", type=parse_point, required=True)
    path_cmd.add_argument(
        "--heuristic",
        choices=[alg.value for alg in DistanceAlg],
        default=None,
        help="Distance heuristic (defaults to config).",
    )
    path_cmd.add_argument("--gui", action="store_true", help="Show the result in a window.")
    path_cmd.add_argument("--no-colour", action="store_true", help="Plain ASCII output.")

    random_cmd = sub.add_parser("random", help="Show samples from the random helpers.")
    random_cmd.add_argument("--seed", type=int, default=None)
    return parser


def run_path(args: argparse.Namespace, cfg: Config) -> int:
    try:
        grid = load_grid_map(args.map_path, default_diagonal=cfg.pathfinding.diagonal)
        heuristic = DistanceAlg.from_name(args.heuristic or cfg.pathfinding.heuristic)
        for label, point in (("origin", args.origin), ("goal", args.goal)):
            if not grid.in_bounds(point):
                raise ValueError(f"{label} {point} is outside the map")
    except (MapFormatError, ValueError, OSError) as exc:
        logger.error("Cannot run search: %s", exc)
        return EXIT_BAD_INPUT

    path = a_star_search(args.origin, args.goal, grid, heuristic)
    view = TerminalView(colour=not args.no_colour)
    view.show(grid, path, args.origin, args.goal)
    if path is None:
        print(f"No path from {args.origin} to {args.goal}.")
    else:
        steps = " -> ".join(f"({p.x},{p.y})" for p in path)
        print(f"{len(path)} steps: {steps}")

    if args.gui:
        show_in_window(grid, path, args.origin, args.goal, cfg)
    return EXIT_FOUND if path is not None else EXIT_NO_PATH


def show_in_window(
    grid: GridMap,
    path: Optional[List[Point]],
    origin: Point,
    goal: Point,
    cfg: Config,
) -> None:
    import pygame

    from .gui.renderer import STATUS_HEIGHT, PathRenderer
    from .gui.window import Window

    tile = cfg.gui.tile_size
    window = Window((grid.width * tile, grid.height * tile + STATUS_HEIGHT))
    renderer = PathRenderer(window, tile)
    clock = pygame.time.Clock()
    try:
        while renderer.handle_events(pygame.event.get()):
            renderer.draw(grid, path, origin, goal)
            clock.tick(30)
    finally:
        window.close()


def run_random_demo(args: argparse.Namespace, cfg: Config) -> int:
    if args.seed is not None:
        rng.seed(args.seed)
    print(f"A random integer between 1 and 10: {rng.rand_range(1, 11)}")
    print(f"A random float between -1 and 1: {rng.rand_range(-1.0, 1.0)}")
    print(f"Rolling a 3d6: {rng.roll(6, 3)}")
    tries = [rng.one_in(10) for _ in range(10)]
    print(f"Trying to succeed 10 times with a 1/10 probability of success: {tries}")
    print(
        "Sample of a normal (gaussian) distribution with mean 0 and stdev 1: "
        f"{rng.normal(0.0, 1.0)}"
    )
    print(f"Selecting a random item from a list: {rng.choice(['first', 'second', 'third'])}")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    env_path = Path(".env")
    if env_path.exists(): load_dotenv(env_path)

    args = build_parser().parse_args(argv)
    config_path = args.config or os.getenv("ROGUEKIT_CONFIG")
    cfg = load_config(Path(config_path)) if config_path else CONFIG
    configure_logging(cfg)
    if cfg.random.seed is not None:
        rng.seed(cfg.random.seed)

    if args.command == "path":
        return run_path(args, cfg)
    return run_random_demo(args, cfg)


if __name__ == "__main__":
    raise SystemExit(main())
