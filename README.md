# warmups

A collection of short, self-contained puzzle solutions: string games,
small arithmetic problems and list manipulations. Each one is a plain
Python function that takes ordinary Python values and returns the answer.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `warmups.strings` covers words and letters: `game_winner`,
  `count_distinct_letters`, `gender_verdict`, `final_stone_position`,
  `longest_uncommon_subsequence`, `new_password`, `wheel_rotations`,
  `is_pangram`, `compare_ignore_case`, `stones_to_remove`, `abbreviate`,
  `fix_case`, `capitalize_first`, `rearrange_sum` and
  `count_magnet_groups`.
- `warmups.arithmetic` covers counting and number problems:
  `moves_to_center`, `years_until_heavier`, `run_bitpp`, `calories_spent`,
  `shovels_to_buy`, `second_oven_worth`, `die_roll_chance`,
  `odds_then_evens` and `is_equilibrium`.
- `warmups.sequences` covers lists of numbers and records:
  `problems_solved`, `free_icecream`, `home_in_guest_uniform`,
  `gravity_flip`, `waste_emptyings`, `lineland_mail`, `advancers`,
  `stewards_supported`, `untreated_crimes`, `gift_givers`, `card_game`,
  `shoot_birds`, `snack_tower`, `form_teams`, `min_coins_for_majority`,
  `road_width` and `can_separate_equal`.
- `warmups.cli` is the `warmups` command described below.

## Examples

```python
from warmups.strings import abbreviate, game_winner, compare_ignore_case
from warmups.arithmetic import years_until_heavier, die_roll_chance
from warmups.sequences import card_game, form_teams

abbreviate("localization")           # "l10n"
abbreviate("word")                   # "word"
game_winner("ADAAAA")                # "Anton"
compare_ignore_case("aaaa", "aaaA")  # 0
years_until_heavier(4, 7)            # 2
die_roll_chance(4, 2)                # "1/2"
card_game([4, 1, 2, 10])             # (12, 5)
form_teams([1, 3, 1, 3, 2, 1, 2])    # [(1, 5, 2), (3, 7, 4)]
```

Functions raise `ValueError` when given input that the problem does not
allow, for example `new_password(5, 30)`, `advancers([1, 2], 3)` or a
`rearrange_sum` expression that is not a `+`-separated list of integers.

## Command line

The package installs a `warmups` command with three sub-commands:

```
warmups bear [WEIGHT WEIGHT]
warmups team
warmups anton
```

- `warmups bear 4 7` prints the number of years until Limak outweighs
  Bob. With no weights it prints the answers for the pairs (4, 7),
  (4, 9) and (1, 1), one per line.
- `warmups team` reads from standard input a count `n` followed by `n`
  triples of 0/1 votes and prints how many problems will be solved.
- `warmups anton` reads from standard input the number of games and a
  string of `A`/`D` outcomes and prints `Anton`, `Danik` or `Friendship`.

```
$ printf '3\n1 1 0\n1 1 1\n1 0 0\n' | warmups team
2
```

When the input is not acceptable the command prints a message to
standard error and exits with status 1. `warmups --help` lists the
sub-commands.

## Limitations

Only the three problems above can be run from the command line; every
other problem is available solely as a Python function to be called
from your own code.