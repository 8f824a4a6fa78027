"""Deterministic, chunk-streamed 2D world generation."""
from .config import WorldConfig, WorldConfigError
from .entities import Block, Category, Fruit, FruitState
from .flora import Flora
from .noise import Noise1D, column_seed
from .terrain import Terrain
from .timers import Scheduler
from .world import ObjectPlacer, WorldManager, create_world

__all__ = [
    "Block", "Category", "Flora", "Fruit", "FruitState", "Noise1D", "ObjectPlacer",
    "Scheduler", "Terrain", "WorldConfig", "WorldConfigError", "WorldManager",
    "column_seed", "create_world",
]
