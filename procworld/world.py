"""Chunk streaming around a moving reference coordinate."""
import logging
import math
from typing import Dict, List, Optional, Protocol, Tuple

from .config import WorldConfig
from .entities import Block, FruitBehavior, fade_out
from .flora import Flora
from .terrain import Terrain
from .timers import Scheduler

log = logging.getLogger(__name__)


class ObjectPlacer(Protocol):
    """Whatever owns placed entities once they leave the generators."""

    def place(self, entity: Block) -> None:
        ...

    def remove(self, entity: Block) -> None:
        ...


class WorldManager:
    """Keeps the chunks around a reference x loaded, and only those.

    The world is cut into chunks ``[i * chunk_width, (i + 1) * chunk_width)``.
    The resident window ``[min_index, max_index]`` always holds the chunk under
    the reference coordinate plus ``margin`` chunks on each side. Everything
    generated for a chunk is recorded so that unloading removes exactly that.
    """

    def __init__(self, terrain: Terrain, flora: Flora, placer: ObjectPlacer,
                 chunk_width: int, margin: int = 1, scheduler: Optional[Scheduler] = None):
        self.terrain = terrain
        self.flora = flora
        self.placer = placer
        self.chunk_width = chunk_width
        self.margin = margin
        self.scheduler = scheduler if scheduler is not None else flora.scheduler
        self.chunks: Dict[int, List[Block]] = {}

        self.min_index = -margin
        self.max_index = margin
        for index in range(self.min_index, self.max_index + 1):
            self.load_chunk(index)

    # --------------------------- Queries ------------------------------
    @property
    def window(self) -> Tuple[int, int]:
        return self.min_index, self.max_index

    @property
    def resident_indices(self) -> List[int]:
        return sorted(self.chunks)

    def is_resident(self, index: int) -> bool:
        return index in self.chunks

    def entities_in(self, index: int) -> List[Block]:
        return list(self.chunks.get(index, ()))

    def chunk_range(self, index: int) -> Tuple[int, int]:
        start = index * self.chunk_width
        return start, start + self.chunk_width

    def chunk_index_at(self, x: float) -> int:
        return int(math.floor(x / self.chunk_width))

    # --------------------------- Update --------------------------------
    def update(self, reference_x: float):
        target = self.chunk_index_at(reference_x)

        # grow toward the reference first so required chunks are never missing
        while target - self.min_index < self.margin:
            self.min_index -= 1
            self.load_chunk(self.min_index)
        while self.max_index - target < self.margin:
            self.max_index += 1
            self.load_chunk(self.max_index)

        while target - self.min_index > self.margin:
            self.unload_chunk(self.min_index)
            self.min_index += 1
        while self.max_index - target > self.margin:
            self.unload_chunk(self.max_index)
            self.max_index -= 1

    def load_chunk(self, index: int):
        if index in self.chunks:
            return
        min_x, max_x = self.chunk_range(index)
        entities = self.terrain.create_in_range(min_x, max_x)
        entities.extend(self.flora.create_in_range(min_x, max_x))
        for entity in entities:
            self.placer.place(entity)
        self.chunks[index] = entities
        log.debug("loaded chunk %d [%d, %d): %d entities", index, min_x, max_x, len(entities))

    def unload_chunk(self, index: int):
        entities = self.chunks.pop(index, None)
        if entities is None:
            return
        for entity in entities:
            self.placer.remove(entity)
            self.scheduler.cancel_owner(entity)
        log.debug("unloaded chunk %d: %d entities", index, len(entities))


def create_world(config: WorldConfig, placer: ObjectPlacer, scheduler: Optional[Scheduler] = None,
                 fruit_behavior: FruitBehavior = fade_out) -> WorldManager:
    """Wire terrain, flora and streaming for ``config`` and load the initial window."""
    if scheduler is None:
        scheduler = Scheduler()
    terrain = Terrain(config)
    flora = Flora(terrain.ground_height_at, config, scheduler, fruit_behavior)
    log.info("creating world seed=%d chunk_width=%d margin=%d",
             config.seed, config.chunk_width, config.margin)
    return WorldManager(terrain, flora, placer, config.chunk_width, config.margin, scheduler)
