from fractions import Fraction

import pytest

from warmups.arithmetic import (
    calories_spent,
    die_roll_chance,
    is_equilibrium,
    moves_to_center,
    odds_then_evens,
    run_bitpp,
    second_oven_worth,
    shovels_to_buy,
    years_until_heavier,
)


def _matrix_with_one(row, col):
    matrix = [[0] * 5 for _ in range(5)]
    matrix[row][col] = 1
    return matrix


def test_moves_to_center_already_centred():
    assert moves_to_center(_matrix_with_one(2, 2)) == 0


@pytest.mark.parametrize("row, col", [(0, 1), (1, 4), (3, 0), (4, 4)])
def test_moves_to_center_symmetry(row, col):
    value = moves_to_center(_matrix_with_one(row, col))
    assert value == moves_to_center(_matrix_with_one(col, row))
    assert value == moves_to_center(_matrix_with_one(4 - row, col))
    assert value == moves_to_center(_matrix_with_one(row, 4 - col))


def test_moves_to_center_neighbours_differ_by_one():
    assert moves_to_center(_matrix_with_one(0, 0)) == moves_to_center(_matrix_with_one(1, 0)) + 1


def test_moves_to_center_errors():
    with pytest.raises(ValueError):
        moves_to_center([[0] * 5 for _ in range(5)])
    with pytest.raises(ValueError):
        moves_to_center([[1, 0], [0, 0]])


@pytest.mark.parametrize("limak, bob", [(4, 7), (4, 9), (1, 1), (10, 10), (1, 10)])
def test_years_until_heavier_is_first_year(limak, bob):
    years = years_until_heavier(limak, bob)
    assert limak * 3**years > bob * 2**years
    assert limak * 3 ** (years - 1) <= bob * 2 ** (years - 1)


def test_run_bitpp():
    assert run_bitpp(["++X"]) == 1
    assert run_bitpp(["X++", "--X"]) == 0
    statements = ["X++", "++X", "X--", "++X"]
    plus = sum("++" in s for s in statements)
    assert run_bitpp(statements) == plus - (len(statements) - plus)


def test_calories_spent_single_strip_and_empty():
    calories = [1, 2, 3, 4]
    assert calories_spent(calories, "1") == calories[0]
    assert calories_spent(calories, "4") == calories[3]
    assert calories_spent(calories, "") == 0


def test_calories_spent_is_additive():
    calories = [1, 5, 3, 2]
    assert calories_spent(calories, "11221" + "3314") == calories_spent(
        calories, "11221"
    ) + calories_spent(calories, "3314")


def test_calories_spent_rejects_unknown_strip():
    with pytest.raises(ValueError):
        calories_spent([1, 2, 3, 4], "125")


@pytest.mark.parametrize("price, coin", [(117, 3), (237, 7), (15, 2), (10, 5)])
def test_shovels_to_buy_is_minimal(price, coin):
    count = shovels_to_buy(price, coin)
    assert 1 <= count <= 10
    assert price * count % 10 in (0, coin)
    assert all(price * i % 10 not in (0, coin) for i in range(1, count))


def test_shovels_to_buy_example():
    assert shovels_to_buy(117, 3) == 9


@pytest.mark.parametrize(
    "args, expected",
    [
        ((8, 6, 4, 5), True),
        ((8, 6, 4, 6), False),
        ((10, 3, 11, 4), False),
        ((4, 2, 1, 4), True),
    ],
)
def test_second_oven_worth(args, expected):
    assert second_oven_worth(*args) is expected


def test_die_roll_chance_example():
    assert die_roll_chance(4, 2) == "1/2"


def test_die_roll_chance_keeps_one_over_one():
    assert die_roll_chance(1, 1) == "1/1"


@pytest.mark.parametrize("yakko, wakko", [(a, b) for a in range(1, 7) for b in range(1, 7)])
def test_die_roll_chance_irreducible(yakko, wakko):
    numerator, denominator = (int(p) for p in die_roll_chance(yakko, wakko).split("/"))
    assert Fraction(numerator, denominator).denominator == denominator
    assert 6 % denominator == 0
    assert die_roll_chance(yakko, wakko) == die_roll_chance(wakko, yakko)


def test_odds_then_evens_example():
    assert odds_then_evens(10, 3) == 5


@pytest.mark.parametrize("n", [1, 2, 7, 10])
def test_odds_then_evens_is_permutation(n):
    listing = [odds_then_evens(n, k) for k in range(1, n + 1)]
    assert sorted(listing) == list(range(1, n + 1))
    odds = (n + 1) // 2
    assert all(x % 2 == 1 for x in listing[:odds])
    assert all(x % 2 == 0 for x in listing[odds:])


def test_odds_then_evens_large():
    n = 1_000_000_000_000
    assert odds_then_evens(n, n) == n


def test_is_equilibrium():
    assert is_equilibrium([(4, 1, 7), (-2, 4, -1), (1, -5, -3)]) is False
    assert is_equilibrium([(3, -1, 7), (-5, 2, -4), (2, -1, -3)]) is True
    assert is_equilibrium([]) is True