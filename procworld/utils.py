import math

from .config import Color


def clamp(v, lo, hi):
    return lo if v < lo else hi if v > hi else v

def lerp(a, b, t):
    return a + (b - a) * t

def smoothstep(t):
    # 6t^5 - 15t^4 + 10t^3
    return t * t * t * (t * (t * 6 - 15) + 10)

def snap_down(v: float, step: int) -> int:
    """Largest multiple of ``step`` that is <= v (floors toward -inf for negatives)."""
    return int(math.floor(v / step)) * step


def approximate_color(base: Color, delta: int, key: int) -> Color:
    """Jitter each channel of ``base`` by up to ``delta``, driven only by ``key``.

    Used to give neighbouring blocks slightly different shades while keeping
    the result a pure function of the block position.
    """
    out = []
    for channel, shift in zip(base, (0, 11, 22)):
        n = ((key >> shift) ^ (key * 2654435761)) & 0xFFFFFFFF
        offset = (n % (2 * delta + 1)) - delta if delta > 0 else 0
        out.append(int(clamp(channel + offset, 0, 255)))
    return (out[0], out[1], out[2])
