"""Small dynamic-programming and recursive puzzles."""

from __future__ import annotations

import math
from collections.abc import Sequence


def minimum_initial_health(dungeon: Sequence[Sequence[int]]) -> int:
    """Return the least starting health to cross the grid from top-left to bottom-right.

    Moves go right or down; each cell adds its value to health, which must
    stay at least 1 throughout.
    """
    if not dungeon or not dungeon[0]:
        raise ValueError("dungeon must have at least one cell")
    width = len(dungeon[0])
    if any(len(row) != width for row in dungeon):
        raise ValueError("dungeon rows must all have the same length")
    height = len(dungeon)
    below = [math.inf] * (width + 1)
    below[width - 1] = 1
    for i in range(height - 1, -1, -1):
        row = [math.inf] * (width + 1)
        if i == height - 1:
            row[width] = math.inf
        for j in range(width - 1, -1, -1):
            need = min(below[j], row[j + 1]) - dungeon[i][j]
            row[j] = 1 if need <= 0 else need
        below = row
    return int(below[0])


def matrix_chain_cost(dims: Sequence[int]) -> int:
    """Return the fewest scalar multiplications to multiply a chain of matrices.

    Matrix ``k`` has shape ``dims[k - 1] x dims[k]``.
    """
    n = len(dims)
    if n < 3:
        return 0
    cost = [[0] * n for _ in range(n)]
    for span in range(2, n):
        for i in range(n - span):
            j = i + span
            cost[i][j] = min(
                cost[i][k] + cost[k][j] + dims[i] * dims[k] * dims[j] for k in range(i + 1, j)
            )
    return cost[0][n - 1]


def digit_removal_steps(n: int) -> int:
    """Return how many steps reduce ``n`` to zero, each subtracting its largest digit."""
    if n < 0:
        raise ValueError("n must not be negative")
    steps = [0] * (n + 1)
    for i in range(1, n + 1):
        steps[i] = steps[i - max(int(d) for d in str(i))] + 1
    return steps[n]


def digit_sum(n: int, base: int = 10) -> int:
    """Return the sum of the digits of ``n`` written in ``base``; zero when ``n <= 0``."""
    if base < 2:
        raise ValueError("base must be at least 2")
    total = 0
    while n > 0:
        n, digit = divmod(n, base)
        total += digit
    return total