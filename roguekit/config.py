"""Simple configuration loader for roguekit."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional
import os

import yaml


CONFIG_PATH = Path(
    os.getenv("ROGUEKIT_CONFIG", Path(__file__).resolve().parents[1] / "config.yaml")
)


@dataclass
class PathfindingConfig:
    """Defaults for searches started from the command line."""

    heuristic: str = "chebyshev"
    diagonal: bool = True


@dataclass
class RandomConfig:
    """Seed for the shared random generator; ``None`` means OS entropy."""

    seed: Optional[int] = None


@dataclass
class LoggingConfig:
    global_level: str = "INFO"
    module_levels: Dict[str, str] = field(default_factory=dict)


@dataclass
class GuiConfig:
    tile_size: int = 24


@dataclass
class Config:
    """Top level configuration dataclass."""

    pathfinding: PathfindingConfig
    random: RandomConfig
    logging: LoggingConfig
    gui: GuiConfig


def _parse_config(data: dict[str, Any]) -> Config:
    """Convert raw ``data`` into :class:`Config`."""

    pf_data = data.get("pathfinding") or {}
    pathfinding = PathfindingConfig(
        heuristic=str(pf_data.get("heuristic", "chebyshev")),
        diagonal=bool(pf_data.get("diagonal", True)),
    )

    random_data = data.get("random") or {}
    seed = random_data.get("seed")
    random_cfg = RandomConfig(seed=int(seed) if seed is not None else None)

    log_data = data.get("logging") or {}
    logging_cfg = LoggingConfig(
        global_level=str(log_data.get("global_level", "INFO")).upper(),
        module_levels=dict(log_data.get("module_levels") or {}),
    )

    gui_data = data.get("gui") or {}
    gui = GuiConfig(tile_size=int(gui_data.get("tile_size", 24)))

    return Config(
        pathfinding=pathfinding, random=random_cfg, logging=logging_cfg, gui=gui
    )


def load_config(path: Path = CONFIG_PATH) -> Config:
    """Load configuration from ``path`` and return a :class:`Config`."""

    path = Path(path)
    if path.is_file():
        raw = yaml.safe_load(path.read_text()) or {}
    else:
        raw = {}
    return _parse_config(raw)


# Load configuration at module import time.
CONFIG = load_config()


__all__ = [
    "CONFIG",
    "Config",
    "PathfindingConfig",
    "RandomConfig",
    "LoggingConfig",
    "GuiConfig",
    "load_config",
]
