"""World constants and the frozen construction parameters of a world."""
from dataclasses import dataclass, replace
from typing import Tuple

Color = Tuple[int, int, int]

# ----------------------------- Window ---------------------------------
WIDTH, HEIGHT = 1024, 768
FPS = 60

# ----------------------------- Blocks ---------------------------------
BLOCK_SIZE = 30
TERRAIN_DEPTH = 20          # blocks per ground column
FRUIT_DIAMETER = 25

# ----------------------------- Terrain --------------------------------
GROUND_HEIGHT_RATIO = 2.0 / 3.0
NOISE_AMPLITUDE = BLOCK_SIZE * 7.0
NOISE_FREQUENCY = 0.0023    # noise lattice cells per pixel

# ----------------------------- Flora ----------------------------------
TREE_GAP = BLOCK_SIZE * 6   # spacing between candidate trunk columns
TREE_MIN_HEIGHT = 3
TREE_MAX_HEIGHT = 5
TRUNK_PROBABILITY = 4       # one tree per this many candidate columns, on average
CANOPY_RADIUS = 2
FRUIT_DENSITY = 0.2
LEAF_DENSITY = 0.8
AVOID_ORIGIN_RADIUS = BLOCK_SIZE * 2
FRUIT_RESPAWN_DELAY = 30.0  # seconds

# ----------------------------- Streaming ------------------------------
CHUNK_MARGIN = 1

# ----------------------------- Colors ---------------------------------
GROUND_COLOR = (212, 123, 74)
TRUNK_COLOR = (100, 50, 20)
LEAF_COLOR = (50, 200, 30)
FRUIT_COLOR = (220, 100, 60)
SKY_COLOR_TOP = (32, 54, 94)
SKY_COLOR_BOTTOM = (160, 195, 255)
AVATAR_COLOR = (240, 240, 255)


class WorldConfigError(ValueError):
    """Raised when a world is configured with impossible parameters."""


@dataclass(frozen=True)
class WorldConfig:
    seed: int = 42
    window_width: int = WIDTH
    window_height: int = HEIGHT
    chunk_width: int = 0            # 0 means "use the window width"
    margin: int = CHUNK_MARGIN
    block_size: int = BLOCK_SIZE
    terrain_depth: int = TERRAIN_DEPTH
    base_height_ratio: float = GROUND_HEIGHT_RATIO
    noise_amplitude: float = NOISE_AMPLITUDE
    noise_frequency: float = NOISE_FREQUENCY
    tree_gap: int = TREE_GAP
    tree_min_height: int = TREE_MIN_HEIGHT
    tree_max_height: int = TREE_MAX_HEIGHT
    trunk_probability: int = TRUNK_PROBABILITY
    canopy_radius: int = CANOPY_RADIUS
    fruit_density: float = FRUIT_DENSITY
    leaf_density: float = LEAF_DENSITY
    fruit_diameter: int = FRUIT_DIAMETER
    fruit_respawn_delay: float = FRUIT_RESPAWN_DELAY
    avoid_origin_radius: int = AVOID_ORIGIN_RADIUS
    ground_color: Color = GROUND_COLOR
    trunk_color: Color = TRUNK_COLOR
    leaf_color: Color = LEAF_COLOR
    fruit_color: Color = FRUIT_COLOR

    def __post_init__(self):
        if self.chunk_width == 0:
            object.__setattr__(self, "chunk_width", self.window_width)
        self._validate()

    def _validate(self):
        positive = ("window_width", "window_height", "chunk_width", "block_size",
                    "terrain_depth", "tree_gap", "fruit_diameter")
        for name in positive:
            if getattr(self, name) <= 0:
                raise WorldConfigError(f"{name} must be positive, got {getattr(self, name)!r}")
        if self.margin < 0:
            raise WorldConfigError(f"margin must be >= 0, got {self.margin}")
        if self.canopy_radius < 0:
            raise WorldConfigError(f"canopy_radius must be >= 0, got {self.canopy_radius}")
        if not 1 <= self.tree_min_height <= self.tree_max_height:
            raise WorldConfigError(
                f"trunk height range [{self.tree_min_height}, {self.tree_max_height}] is empty"
            )
        if self.trunk_probability < 1:
            raise WorldConfigError(f"trunk_probability must be >= 1, got {self.trunk_probability}")
        for name in ("fruit_density", "leaf_density"):
            if not 0.0 <= getattr(self, name) <= 1.0:
                raise WorldConfigError(f"{name} must lie in [0, 1], got {getattr(self, name)}")
        if self.fruit_density + self.leaf_density > 1.0 + 1e-9:
            raise WorldConfigError("fruit_density + leaf_density must not exceed 1")
        if self.fruit_respawn_delay < 0:
            raise WorldConfigError(f"fruit_respawn_delay must be >= 0, got {self.fruit_respawn_delay}")
        if self.avoid_origin_radius < 0:
            raise WorldConfigError(f"avoid_origin_radius must be >= 0, got {self.avoid_origin_radius}")

    @property
    def base_height(self) -> float:
        return self.base_height_ratio * self.window_height

    def with_seed(self, seed: int) -> "WorldConfig":
        return replace(self, seed=seed)
