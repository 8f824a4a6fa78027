import math
from typing import List

from .config import WorldConfig
from .entities import Block, Category
from .noise import noise
from .utils import approximate_color, snap_down

COLOR_DELTA = 10


class Terrain:
    """Ground elevation for a seed, and the ground blocks under it."""

    def __init__(self, config: WorldConfig):
        self.config = config
        self.seed = config.seed
        self.base_height = config.base_height

    def ground_height_at(self, x: float) -> float:
        n = noise(self.seed, x * self.config.noise_frequency)
        return self.base_height + n * self.config.noise_amplitude

    def create_in_range(self, min_x: float, max_x: float) -> List[Block]:
        """Ground columns for every block-aligned x in [min_x, max_x).

        Both ends are floored to the block grid, so adjacent ranges never
        share or skip a column.
        """
        size = self.config.block_size
        start = snap_down(min_x, size)
        end = snap_down(max_x, size)
        blocks = []
        for x in range(start, end, size):
            top_y = int(math.floor(self.ground_height_at(x) / size)) * size
            for depth in range(self.config.terrain_depth):
                y = top_y + depth * size
                color = approximate_color(self.config.ground_color, COLOR_DELTA, x * 31 + y)
                blocks.append(Block(x, y, color, Category.GROUND, size))
        return blocks
