#
"""
Infinite side-scrolling world: terrain and trees streamed around the avatar.

Features
- Deterministic world from a visible seed; the same seed always grows the same trees.
- Ground columns and trees generated per chunk and dropped once out of range.
- Fruit can be eaten for energy and grows back after a while.

Controls
- Left/Right or A/D: move
- Space / W / Up: jump
- Esc: pause
- R: restart at current seed (while paused)
- N: new seed (while paused)
- F1: show/hide debug overlay
"""
import logging
import random
import sys
from typing import Dict, Iterable, Iterator, Tuple

import pygame

from .config import (
    AVATAR_COLOR, FPS, HEIGHT, SKY_COLOR_BOTTOM, SKY_COLOR_TOP, WIDTH, WorldConfig,
)
from .entities import Block, Category, Fruit, energy_reward
from .utils import clamp, lerp, snap_down
from .world import create_world

log = logging.getLogger(__name__)

# ----------------------------- Avatar ---------------------------------
GRAVITY = 2000.0            # px/s^2
MOVE_SPEED = 320.0          # px/s
JUMP_VELOCITY = 760.0       # px/s
AVATAR_W, AVATAR_H = 30, 50
ENERGY_MAX = 100.0
ENERGY_PER_FRUIT = 10.0
ENERGY_GAIN_IDLE = 1.0     # per second standing still on the ground
ENERGY_LOSS_RUN = 0.5      # per second while walking
ENERGY_LOSS_JUMP = 10.0    # per jump

# ----------------------------- Layers ---------------------------------
COLLIDABLE = "collidable"
LEAVES = "leaves"
FRUIT = "fruit"
DRAW_ORDER = (COLLIDABLE, LEAVES, FRUIT)

LAYER_FOR_CATEGORY = {
    Category.GROUND: COLLIDABLE,
    Category.TRUNK: COLLIDABLE,
    Category.LEAF: LEAVES,
    Category.DECORATIVE: LEAVES,
    Category.FRUIT: FRUIT,
}


class LayeredPlacer:
    """Routes placed entities into draw/collision layers by category."""

    def __init__(self):
        self.layers: Dict[str, Dict[int, Block]] = {name: {} for name in DRAW_ORDER}

    def place(self, entity: Block):
        self.layers[LAYER_FOR_CATEGORY[entity.category]][id(entity)] = entity

    def remove(self, entity: Block):
        self.layers[LAYER_FOR_CATEGORY[entity.category]].pop(id(entity), None)

    def layer(self, name: str) -> Iterator[Block]:
        return iter(self.layers[name].values())

    def __len__(self):
        return sum(len(layer) for layer in self.layers.values())


class Avatar:
    def __init__(self, x: float, y: float):
        self.pos = pygame.Vector2(x, y)
        self.vel = pygame.Vector2(0, 0)
        self.on_ground = False
        self.energy = ENERGY_MAX

    @property
    def rect(self) -> pygame.Rect:
        return pygame.Rect(int(self.pos.x), int(self.pos.y), AVATAR_W, AVATAR_H)

    def add_energy(self, amount: float):
        self.energy = clamp(self.energy + amount, 0.0, ENERGY_MAX)

    def apply_input(self, direction: int, want_jump: bool, dt: float):
        """Set velocity from input and pay for it in energy.

        Walking is refused below ENERGY_LOSS_RUN; standing on the ground recovers energy.
        """
        if direction and self.energy >= ENERGY_LOSS_RUN:
            self.vel.x = direction * MOVE_SPEED
            self.add_energy(-ENERGY_LOSS_RUN * dt)
        else:
            self.vel.x = 0.0
            if self.on_ground:
                self.add_energy(ENERGY_GAIN_IDLE * dt)
        if want_jump and self.on_ground and self.energy >= ENERGY_LOSS_JUMP:
            self.vel.y = -JUMP_VELOCITY
            self.on_ground = False
            self.add_energy(-ENERGY_LOSS_JUMP)

    def collide_horizontal(self, obstacles: Iterable[pygame.Rect]):
        # push out of solid blocks along the direction of travel
        for r in obstacles:
            if not self.rect.colliderect(r):
                continue
            if self.vel.x > 0:
                self.pos.x = r.left - AVATAR_W
            elif self.vel.x < 0:
                self.pos.x = r.right
            self.vel.x = 0
            break


# ----------------------------- Game -----------------------------------
class Game:
    def __init__(self, seed: int = None):
        if seed is None:
            seed = random.randint(1, 1_000_000_000)
        pygame.init()
        pygame.display.set_caption("procworld")
        self.screen = pygame.display.set_mode((WIDTH, HEIGHT))
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("consolas", 16)
        self.big_font = pygame.font.SysFont("consolas", 24, bold=True)
        self.sky = self._sky_surface()

        self.reset_world(seed)
        self.pause = False
        self.show_debug = False

    def reset_world(self, seed: int):
        self.config = WorldConfig(seed=seed, window_width=WIDTH, window_height=HEIGHT)
        self.placer = LayeredPlacer()
        self.world = create_world(self.config, self.placer, fruit_behavior=energy_reward(ENERGY_PER_FRUIT))
        self.scheduler = self.world.scheduler
        # place avatar slightly above ground at x=0
        self.avatar = Avatar(0, self._ground_top(0) - AVATAR_H - self.config.block_size * 2)
        self.cam_x = 0.0
        self.cam_y = float(self.avatar.pos.y)
        log.info("world reset with seed %d", seed)

    # ------------------------- Physics Helpers ------------------------
    def _ground_top(self, x: float) -> float:
        size = self.config.block_size
        column = snap_down(x, size)
        return snap_down(self.world.terrain.ground_height_at(column), size)

    def _move_and_collide(self, dt: float):
        a = self.avatar
        a.on_ground = False
        a.pos.x += a.vel.x * dt
        a.collide_horizontal(b.rect for b in self.placer.layer(COLLIDABLE) if b.category is Category.TRUNK)
        a.pos.y += a.vel.y * dt

        feet_y = min(self._ground_top(a.pos.x + 2), self._ground_top(a.pos.x + AVATAR_W - 2))
        if a.pos.y + AVATAR_H >= feet_y and a.vel.y >= 0:
            a.pos.y = feet_y - AVATAR_H
            a.vel.y = 0
            a.on_ground = True

        body = a.rect
        for fruit in list(self.placer.layer(FRUIT)):
            if isinstance(fruit, Fruit) and fruit.collisions_enabled and body.colliderect(fruit.rect):
                fruit.on_collision(a)

    # --------------------------- Update --------------------------------
    def handle_input(self, dt: float):
        keys = pygame.key.get_pressed()
        direction = 0
        if keys[pygame.K_LEFT] or keys[pygame.K_a]:
            direction -= 1
        if keys[pygame.K_RIGHT] or keys[pygame.K_d]:
            direction += 1
        want_jump = keys[pygame.K_SPACE] or keys[pygame.K_w] or keys[pygame.K_UP]
        self.avatar.apply_input(direction, want_jump, dt)

    def update(self, dt: float) -> bool:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.pause = not self.pause
                if event.key == pygame.K_F1:
                    self.show_debug = not self.show_debug
                if self.pause and event.key == pygame.K_r:
                    self.reset_world(self.config.seed)
                if self.pause and event.key == pygame.K_n:
                    self.reset_world(random.randint(1, 1_000_000_000))

        if self.pause:
            return True

        dt = clamp(dt, 0.0, 1.0 / 20.0)  # avoid huge steps
        self.handle_input(dt)
        self.avatar.vel.y += GRAVITY * dt
        self._move_and_collide(dt)
        self.scheduler.tick(dt)
        self.world.update(self.avatar.pos.x + AVATAR_W * 0.5)

        self.cam_x = lerp(self.cam_x, self.avatar.pos.x + AVATAR_W * 0.5, 0.12)
        self.cam_y = lerp(self.cam_y, self.avatar.pos.y - 120, 0.08)
        return True

    # --------------------------- Render --------------------------------
    def _world_to_screen(self, x: float, y: float) -> Tuple[int, int]:
        return int(x - self.cam_x + WIDTH // 2), int(y - self.cam_y + HEIGHT // 2)

    def _sky_surface(self) -> pygame.Surface:
        # vertical gradient sky
        surf = pygame.Surface((WIDTH, HEIGHT))
        top = pygame.Color(*SKY_COLOR_TOP)
        bottom = pygame.Color(*SKY_COLOR_BOTTOM)
        for y in range(HEIGHT):
            pygame.draw.line(surf, top.lerp(bottom, y / (HEIGHT - 1)), (0, y), (WIDTH, y))
        return surf

    def draw_world(self):
        view = self.screen.get_rect()
        for name in DRAW_ORDER:
            for entity in self.placer.layer(name):
                x, y = self._world_to_screen(entity.x, entity.y)
                rect = pygame.Rect(x, y, entity.size, entity.size)
                if not view.colliderect(rect):
                    continue
                if isinstance(entity, Fruit):
                    if entity.alpha > 0:
                        pygame.draw.ellipse(self.screen, entity.color, rect)
                else:
                    pygame.draw.rect(self.screen, entity.color, rect)

    def draw_avatar(self):
        x, y = self._world_to_screen(self.avatar.pos.x, self.avatar.pos.y)
        pygame.draw.rect(self.screen, AVATAR_COLOR, pygame.Rect(x, y, AVATAR_W, AVATAR_H), border_radius=8)

    def draw_hud(self):
        hud = f"Seed: {self.config.seed}   Energy: {int(self.avatar.energy)}   X: {int(self.avatar.pos.x)}"
        self.screen.blit(self.font.render(hud, True, (15, 15, 20)), (10, 10))

        if self.pause:
            s = self.big_font.render("PAUSED  (R)estart  (N)ew seed  (Esc) Resume", True, (255, 255, 255))
            rect = s.get_rect(center=(WIDTH // 2, HEIGHT // 2))
            pygame.draw.rect(self.screen, (0, 0, 0), rect.inflate(40, 20))
            self.screen.blit(s, rect)

        if self.show_debug:
            lines = [
                f"chunks={self.world.resident_indices} window={self.world.window}",
                f"entities={len(self.placer)} timers={self.scheduler.pending()}",
            ]
            for i, txt in enumerate(lines):
                self.screen.blit(self.font.render(txt, True, (0, 0, 0)), (10, 30 + 18 * i))

    def render(self):
        self.screen.blit(self.sky, (0, 0))
        self.draw_world()
        self.draw_avatar()
        self.draw_hud()
        pygame.display.flip()

    def run(self):
        running = True
        while running:
            dt = self.clock.tick(FPS) / 1000.0
            running = self.update(dt)
            if running:
                self.render()
        pygame.quit()


def main(argv=None):
    from .setup_logging import setup_logging

    argv = sys.argv[1:] if argv is None else argv
    setup_logging()
    seed = None
    if argv:
        try:
            seed = int(argv[0])
        except ValueError:
            log.warning("ignoring non-integer seed %r", argv[0])
    Game(seed).run()
