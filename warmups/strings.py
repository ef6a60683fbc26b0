"""Short exercises on words, letters and strings."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import groupby
from string import ascii_lowercase


def game_winner(outcomes: str) -> str:
    """Name who won more games in a string of 'A'/'D' outcomes."""
    upper = outcomes.upper()
    anton = upper.count("A")
    danik = upper.count("D")
    if anton > danik:
        return "Anton"
    if anton < danik:
        return "Danik"
    return "Friendship"


def count_distinct_letters(line: str) -> int:
    """Count the distinct lowercase Latin letters in a line."""
    return len({ch for ch in line if "a" <= ch <= "z"})


def gender_verdict(username: str) -> str:
    """Decide by the parity of distinct characters in a user name."""
    if len(set(username)) % 2 == 0:
        return "CHAT WITH HER!"
    return "IGNORE HIM!"


def final_stone_position(stones: str, instructions: str) -> int:
    """Return the 1-based stone Liss ends on after following the instructions."""
    pos = 0
    for colour in instructions:
        if pos < len(stones) and stones[pos] == colour:
            pos += 1
    return pos + 1


def longest_uncommon_subsequence(a: str, b: str) -> int:
    """Length of the longest subsequence of one string that is not in the other, or -1."""
    if a == b:
        return -1
    return max(len(a), len(b))


def new_password(length: int, distinct: int) -> str:
    """Build a password of the given length using exactly ``distinct`` letters."""
    if not 1 <= distinct <= len(ascii_lowercase):
        raise ValueError(f"distinct must be between 1 and 26, got {distinct}")
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    return "".join(ascii_lowercase[i % distinct] for i in range(length))


def wheel_rotations(word: str) -> int:
    """Minimum rotations of an alphabet wheel, starting at 'a', to print the word."""
    pointer = 0
    total = 0
    for ch in word.lower():
        position = ord(ch) - ord("a")
        clockwise = abs(position - pointer)
        total += min(clockwise, 26 - clockwise)
        pointer = position
    return total


def is_pangram(text: str) -> bool:
    """Tell whether the text has all 26 letters, ignoring case."""
    return len({ch.lower() for ch in text}) == 26


def compare_ignore_case(a: str, b: str) -> int:
    """Compare two strings case-insensitively, returning -1, 0 or 1."""
    left, right = a.lower(), b.lower()
    if left < right:
        return -1
    if left > right:
        return 1
    return 0


def stones_to_remove(colors: str) -> int:
    """Count stones to take so that no two neighbours share a colour."""
    return sum(left == right for left, right in zip(colors, colors[1:]))


def abbreviate(word: str) -> str:
    """Shorten words longer than ten characters to first letter, count, last letter."""
    if len(word) > 10:
        return f"{word[0]}{len(word) - 2}{word[-1]}"
    return word


def fix_case(word: str) -> str:
    """Make the word all upper case if upper-case letters are strictly more, else lower."""
    lower = sum(ch.islower() for ch in word)
    upper = len(word) - lower
    return word.upper() if upper > lower else word.lower()


def capitalize_first(word: str) -> str:
    """Upper-case the first character, leaving the rest untouched."""
    return word[:1].upper() + word[1:]


def rearrange_sum(expression: str) -> str:
    """Reorder the summands of a '+'-separated sum in non-decreasing order."""
    try:
        numbers = sorted(int(part) for part in expression.split("+"))
    except ValueError as exc:
        raise ValueError(f"malformed sum: {expression!r}") from exc
    return "+".join(str(n) for n in numbers)


def count_magnet_groups(magnets: Iterable[str]) -> int:
    """Count the groups formed by runs of identically oriented magnets."""
    return sum(1 for _ in groupby(magnets))