"""Tree placement: trunks, leaves and fruit, reproducible per column."""
import random
from typing import Callable, List, Optional

from .config import WorldConfig
from .entities import Block, Category, Fruit, FruitBehavior, fade_out
from .noise import column_random
from .timers import Scheduler
from .utils import approximate_color, snap_down

TRUNK_COLOR_DELTA = 10
LEAF_COLOR_DELTA = 20
FRUIT_COLOR_DELTA = 60


class Tree:
    """Builds the blocks of a single tree from a column's random stream."""

    def __init__(self, ground_height_at: Callable[[float], float], config: WorldConfig,
                 scheduler: Optional[Scheduler] = None, fruit_behavior: FruitBehavior = fade_out):
        self.ground_height_at = ground_height_at
        self.config = config
        self.scheduler = scheduler if scheduler is not None else Scheduler()
        self.fruit_behavior = fruit_behavior

    def create(self, trunk_x: int, ground_y: int, trunk_height: int, rng: random.Random) -> List[Block]:
        size = self.config.block_size
        blocks = self._trunk(trunk_x, ground_y, trunk_height)
        trunk_top = ground_y - trunk_height * size
        # canopy is centred one block above the top log
        blocks.extend(self._canopy(trunk_x, trunk_top - size, rng))
        return blocks

    def _trunk(self, trunk_x: int, ground_y: int, trunk_height: int) -> List[Block]:
        size = self.config.block_size
        logs = []
        for i in range(trunk_height):
            y = ground_y - (i + 1) * size
            color = approximate_color(self.config.trunk_color, TRUNK_COLOR_DELTA, trunk_x * 31 + y)
            logs.append(Block(trunk_x, y, color, Category.TRUNK, size))
        return logs

    def _reaches_ground(self, y: int, extent: int, terrain_y: float) -> bool:
        # one block of clearance between the canopy and the ground
        return y + extent + self.config.block_size >= terrain_y

    def _canopy(self, trunk_x: int, center_y: int, rng: random.Random) -> List[Block]:
        cfg = self.config
        size = cfg.block_size
        reach = size * cfg.canopy_radius
        out = []
        for x in range(trunk_x - reach, trunk_x + size + reach, size):
            terrain_y = self.ground_height_at(x)
            for y in range(center_y - reach, center_y + size + reach, size):
                r = rng.random()
                leaf_clear = not self._reaches_ground(y, size, terrain_y)
                if x == trunk_x:
                    if leaf_clear and r < cfg.leaf_density:
                        out.append(self._leaf(x, y))
                    continue
                fruit_clear = not self._reaches_ground(y, cfg.fruit_diameter, terrain_y)
                if fruit_clear and r < cfg.fruit_density:
                    out.append(self._fruit(x, y))
                elif leaf_clear and r < cfg.fruit_density + cfg.leaf_density:
                    out.append(self._leaf(x, y))
        return out

    def _leaf(self, x: int, y: int) -> Block:
        color = approximate_color(self.config.leaf_color, LEAF_COLOR_DELTA, x * 31 + y)
        return Block(x, y, color, Category.LEAF, self.config.block_size)

    def _fruit(self, x: int, y: int) -> Fruit:
        color = approximate_color(self.config.fruit_color, FRUIT_COLOR_DELTA, x * 31 + y)
        return Fruit(x, y, color,
                     size=self.config.fruit_diameter,
                     scheduler=self.scheduler,
                     behavior=self.fruit_behavior,
                     respawn_delay=self.config.fruit_respawn_delay)


class Flora:
    """Plants trees on a fixed column grid.

    Every candidate column gets its own random stream keyed by (column, seed),
    so what grows at a column never depends on which range asked for it.
    """

    def __init__(self, ground_height_at: Callable[[float], float], config: WorldConfig,
                 scheduler: Optional[Scheduler] = None, fruit_behavior: FruitBehavior = fade_out):
        self.ground_height_at = ground_height_at
        self.config = config
        self.seed = config.seed
        self.tree = Tree(ground_height_at, config, scheduler, fruit_behavior)
        self.scheduler = self.tree.scheduler

    def tree_columns(self, min_x: float, max_x: float) -> List[int]:
        """Candidate trunk columns in [min_x, max_x), grid-snapped like terrain columns."""
        gap = self.config.tree_gap
        return list(range(snap_down(min_x, gap), snap_down(max_x, gap), gap))

    def create_in_range(self, min_x: float, max_x: float) -> List[Block]:
        cfg = self.config
        size = cfg.block_size
        created = []
        for x in self.tree_columns(min_x, max_x):
            # keep the spawn area clear
            if abs(x) < cfg.avoid_origin_radius:
                continue
            rng = column_random(x, self.seed)
            if rng.randrange(cfg.trunk_probability) != 0:
                continue
            trunk_height = rng.randint(cfg.tree_min_height, cfg.tree_max_height)
            ground_y = snap_down(self.ground_height_at(x), size)
            created.extend(self.tree.create(x, ground_y, trunk_height, rng))
        return created
