"""Blocks and fruit produced by the world generators."""
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Optional, Tuple

import pygame

from .config import BLOCK_SIZE, FRUIT_DIAMETER, FRUIT_RESPAWN_DELAY, Color
from .timers import Scheduler

log = logging.getLogger(__name__)


class Category(Enum):
    GROUND = "ground"
    TRUNK = "trunk"
    LEAF = "leaf"
    FRUIT = "fruit"
    DECORATIVE = "decorative"

    @property
    def solid(self) -> bool:
        return self in (Category.GROUND, Category.TRUNK)


class FruitState(Enum):
    AVAILABLE = "available"
    EATEN = "eaten"


@dataclass(eq=False)
class Block:
    x: int
    y: int
    color: Color
    category: Category = Category.GROUND
    size: int = BLOCK_SIZE

    @property
    def solid(self) -> bool:
        return self.category.solid

    @property
    def rect(self) -> pygame.Rect:
        return pygame.Rect(self.x, self.y, self.size, self.size)

    @property
    def key(self) -> Tuple[str, int, int]:
        """Identity of what was generated, independent of object identity."""
        return (self.category.value, self.x, self.y)


# ----------------------------- Fruit behaviours -----------------------
FruitBehavior = Callable[["Fruit", Any], None]


def fade_out(fruit: "Fruit", other: Any):
    fruit.alpha = 0


def energy_reward(amount: float) -> FruitBehavior:
    """Give ``amount`` energy to whatever ate the fruit, then fade it out."""
    def behavior(fruit: "Fruit", other: Any):
        add_energy = getattr(other, "add_energy", None)
        if add_energy is not None:
            add_energy(amount)
        fade_out(fruit, other)
    return behavior


@dataclass(eq=False)
class Fruit(Block):
    category: Category = Category.FRUIT
    size: int = FRUIT_DIAMETER
    scheduler: Optional[Scheduler] = None
    behavior: FruitBehavior = fade_out
    respawn_delay: float = FRUIT_RESPAWN_DELAY
    state: FruitState = FruitState.AVAILABLE
    collisions_enabled: bool = True
    alpha: int = 255
    origin: Tuple[int, int] = field(init=False)
    base_color: Color = field(init=False)

    def __post_init__(self):
        if self.scheduler is None:
            raise ValueError("a fruit needs a scheduler to grow back once eaten")
        self.origin = (self.x, self.y)
        self.base_color = self.color

    @property
    def available(self) -> bool:
        return self.state is FruitState.AVAILABLE

    def on_collision(self, other: Any) -> bool:
        """Handle a triggering collision. Returns True if the fruit was eaten."""
        if not self.collisions_enabled or self.state is FruitState.EATEN:
            return False
        self.behavior(self, other)
        self.collisions_enabled = False
        self.state = FruitState.EATEN
        self.scheduler.schedule(self, self.respawn_delay, self._respawn)
        log.debug("fruit at %s eaten", self.origin)
        return True

    def _respawn(self):
        self.x, self.y = self.origin
        self.color = self.base_color
        self.alpha = 255
        self.collisions_enabled = True
        self.state = FruitState.AVAILABLE
        log.debug("fruit at %s respawned", self.origin)
