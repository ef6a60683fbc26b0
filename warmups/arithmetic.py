"""Short arithmetic exercises."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from math import gcd

_SIZE = 5
_CENTER = 2


def moves_to_center(matrix: Sequence[Sequence[int]]) -> int:
    """Adjacent row/column swaps needed to bring the single 1 of a 5x5 matrix to the centre."""
    if len(matrix) != _SIZE or any(len(row) != _SIZE for row in matrix):
        raise ValueError("matrix must be 5x5")
    result = None
    for r, row in enumerate(matrix):
        if 1 in row:
            result = abs(r - _CENTER) + abs(list(row).index(1) - _CENTER)
    if result is None:
        raise ValueError("matrix holds no 1")
    return result


def years_until_heavier(limak: int, bob: int) -> int:
    """Years until Limak (tripling yearly) is strictly heavier than Bob (doubling yearly)."""
    if limak <= 0:
        raise ValueError("limak's weight must be positive")
    years = 0
    while limak <= bob:
        limak *= 3
        bob *= 2
        years += 1
    return years


def run_bitpp(statements: Iterable[str]) -> int:
    """Execute Bit++ statements on x = 0 and return the final value."""
    return sum(1 if "++" in op else -1 for op in statements)


def calories_spent(calories: Sequence[int], strips: str) -> int:
    """Total calories for touching strips numbered 1 to 4 in the given order."""
    total = 0
    for ch in strips:
        if ch not in "1234":
            raise ValueError(f"strip must be 1-4, got {ch!r}")
        total += calories[int(ch) - 1]
    return total


def shovels_to_buy(price: int, coin: int) -> int:
    """Fewest shovels payable with tens and at most one coin of the given value."""
    count = 1
    while True:
        change = price * count % 10
        if change in (coin, 0):
            return count
        count += 1


def second_oven_worth(cakes_needed: int, bake_time: int, per_batch: int, build_time: int) -> bool:
    """Whether building a second oven shortens the time to get the cakes."""
    one_oven = -(-cakes_needed // per_batch) * bake_time
    return build_time < one_oven - bake_time


def die_roll_chance(yakko: int, wakko: int) -> str:
    """Dot's chance to win as an irreducible fraction 'A/B'."""
    favorable = 6 - max(yakko, wakko) + 1
    total = 6
    g = gcd(favorable, total)
    return f"{favorable // g}/{total // g}"


def odds_then_evens(n: int, k: int) -> int:
    """The k-th number when 1..n is listed odds first, then evens."""
    odds = (n + 1) // 2
    if k <= odds:
        return 2 * k - 1
    return 2 * (k - odds)


def is_equilibrium(forces: Iterable[Sequence[int]]) -> bool:
    """Whether the three-dimensional force vectors sum to zero."""
    sums = [0, 0, 0]
    for x, y, z in forces:
        sums[0] += x
        sums[1] += y
        sums[2] += z
    return sums == [0, 0, 0]