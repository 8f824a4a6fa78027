"""Seeded noise and per-column random streams.

Everything random in a world derives from these functions, and all of them
are fixed integer arithmetic: the same seed gives the same world in every
process, on every run.
"""
import math
import random
from functools import lru_cache

from .utils import lerp, smoothstep

MASK32 = 0xFFFFFFFF
MASK64 = 0xFFFFFFFFFFFFFFFF


# ----------------------------- 1D Gradient Noise ----------------------
class Noise1D:
    """Deterministic Perlin-like 1D gradient noise with octaves."""
    def __init__(self, seed: int):
        self.seed = seed

    def _hash_grad(self, ix: int) -> float:
        # Pseudo-random gradient in [-1, 1] from integer coordinate
        n = (ix * 374761393 + self.seed * 668265263) & MASK32
        n = (n ^ (n >> 13)) * 1274126177 & MASK32
        n = (n ^ (n >> 16)) & MASK32
        return ((n / MASK32) * 2.0) - 1.0

    def value(self, x: float, frequency: float = 1.0, octaves: int = 4, lacunarity: float = 2.0, gain: float = 0.5) -> float:
        """Return smooth noise in [-1, 1] at float x."""
        amp = 1.0
        freq = frequency
        total = 0.0
        norm = 0.0
        for _ in range(octaves):
            xf = x * freq
            xi = math.floor(xf)
            frac = xf - xi

            # 1D dot products against the gradients at floor(x) and floor(x)+1
            v0 = self._hash_grad(xi) * frac
            v1 = self._hash_grad(xi + 1) * (frac - 1.0)

            n = lerp(v0, v1, smoothstep(frac)) * 2.0

            total += n * amp
            norm += amp
            amp *= gain
            freq *= lacunarity
        return total / max(1e-6, norm)


@lru_cache(maxsize=16)
def _noise_for(seed: int) -> Noise1D:
    return Noise1D(seed)


def noise(seed: int, x: float) -> float:
    """Smooth noise for ``seed`` at ``x``, with one lattice cell per unit of x."""
    return _noise_for(seed).value(x)


# ----------------------------- Column streams -------------------------
def column_seed(column: int, seed: int) -> int:
    """Mix a column coordinate and the world seed into a 64-bit stream seed.

    splitmix64 finaliser over ``column * golden + seed * c1``; negative
    columns wrap through the 64-bit mask.
    """
    z = (column * 0x9E3779B97F4A7C15 + seed * 0xBF58476D1CE4E5B9) & MASK64
    z = ((z ^ (z >> 30)) * 0xBF58476D1CE4E5B9) & MASK64
    z = ((z ^ (z >> 27)) * 0x94D049BB133111EB) & MASK64
    return z ^ (z >> 31)


def column_random(column: int, seed: int) -> random.Random:
    return random.Random(column_seed(column, seed))
