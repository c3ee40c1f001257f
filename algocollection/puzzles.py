"""Short contest-style classification puzzles."""

from __future__ import annotations

from enum import Enum
from typing import Optional


class Parity(str, Enum):
    """Whether an integer is even or odd."""

    EVEN = "even"
    ODD = "odd"


class Mixture(str, Enum):
    """What a mix of solid and liquid ingredients turns into."""

    SOLUTION = "Solution"
    LIQUID = "Liquid"
    SOLID = "Solid"


def parity(n: int) -> Parity:
    """Return ``Parity.EVEN`` or ``Parity.ODD`` (equal to ``"even"``/``"odd"``) for ``n``."""
    if not isinstance(n, int):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    remainder = n % 2
    if remainder == 0:
        return Parity.EVEN
    return Parity.ODD


def boxes_needed(a: int, b: int, c: int, d: int) -> int:
    """Return how many bags of capacity ``d`` hold boxes ``a``, ``b`` and ``c``.

    The boxes are packed in order: all three together, else the first two
    together with the third alone, else one bag each.
    """
    if a + b + c <= d:
        return 1
    if a + b <= d:
        return 2
    return 3


def classify_mixture(a: int, b: int) -> Optional[Mixture]:
    """Classify a mix of ``a`` solid and ``b`` liquid units; ``None`` if there is nothing."""
    if a > 0 and b > 0:
        return Mixture.SOLUTION
    if a == 0 and b > 0:
        return Mixture.LIQUID
    if b == 0 and a > 0:
        return Mixture.SOLID
    return None