"""Seeded pseudo-random number generation and shuffling.

The generator is a 32-bit mixing function (mulberry32 style) seeded by a
31-multiplier string hash. All arithmetic wraps at 32 bits so that a given
seed produces the same stream as the browser client.
"""
import random as _random
from typing import Callable, List, Sequence, TypeVar

T = TypeVar("T")

RandomSource = Callable[[], float]

_MASK = 0xFFFFFFFF
_INCREMENT = 0x6D2B79F5


def _imul(a: int, b: int) -> int:
    """32-bit wrapping multiply."""
    return ((a & _MASK) * (b & _MASK)) & _MASK


def _utf16_units(text: str) -> List[int]:
    data = text.encode("utf-16-le", "surrogatepass")
    return [int.from_bytes(data[i:i + 2], "little") for i in range(0, len(data), 2)]


def hash_seed(seed: str) -> int:
    """Fold a seed string into a 32-bit state: h = 31 * h + code, per UTF-16 unit."""
    h = 0
    for code in _utf16_units(seed):
        h = (_imul(31, h) + code) & _MASK
    return h


def make_generator(seed: str) -> RandomSource:
    """
    Create a reproducible random source from a seed string.

    Args:
        seed: Any text. The same seed always yields the same sequence.

    Returns:
        Zero-argument callable returning floats in [0, 1).
    """
    state = hash_seed(seed)

    def next_float() -> float:
        nonlocal state
        state = (state + _INCREMENT) & _MASK
        t = _imul(state ^ (state >> 15), 1 | state)
        t = (t + _imul(t ^ (t >> 7), 61 | t)) & _MASK
        return ((t ^ (t >> 14)) & _MASK) / 4294967296

    return next_float


def shuffle(items: Sequence[T], random: RandomSource = _random.random) -> List[T]:
    """
    Return a Fisher-Yates shuffled copy of ``items``.

    Walks from the last index down to 1, swapping each slot with a
    uniformly chosen index at or below it. The input is not modified.
    """
    result = list(items)
    for i in range(len(result) - 1, 0, -1):
        j = int(random() * (i + 1))
        result[i], result[j] = result[j], result[i]
    return result
