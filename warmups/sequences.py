"""Short exercises on lists of numbers and records."""

from __future__ import annotations

from collections import Counter, deque
from collections.abc import Iterable, Sequence


def problems_solved(votes: Iterable[Sequence[int]]) -> int:
    """Count problems on which at least two of the three friends are sure."""
    return sum(1 for vote in votes if sum(1 for sure in vote if sure) >= 2)


def free_icecream(initial: int, operations: Iterable[tuple[str, int]]) -> tuple[int, int]:
    """Process the queue; return the ice cream left and the number of distressed kids."""
    stock = initial
    distressed = 0
    for sign, amount in operations:
        if sign == "+":
            stock += amount
        elif sign == "-":
            if amount > stock:
                distressed += 1
            else:
                stock -= amount
        else:
            raise ValueError(f"operation must be '+' or '-', got {sign!r}")
    return stock, distressed


def home_in_guest_uniform(teams: Sequence[tuple[int, int]]) -> int:
    """Count games where the host must wear its guest uniform."""
    guest_colours = Counter(guest for _, guest in teams)
    matches = sum(guest_colours[home] for home, _ in teams)
    self_matches = sum(1 for home, guest in teams if home == guest)
    return matches - self_matches


def gravity_flip(columns: Iterable[int]) -> list[int]:
    """Column heights after gravity is switched to pull to the right."""
    return sorted(columns)


def waste_emptyings(max_size: int, capacity: int, oranges: Iterable[int]) -> int:
    """How many times the waste section of the juicer gets emptied."""
    waste = 0
    emptyings = 0
    for size in oranges:
        if size > max_size:
            continue
        waste += size
        if waste > capacity:
            waste = 0
            emptyings += 1
    return emptyings


def lineland_mail(positions: Sequence[int]) -> list[tuple[int, int]]:
    """Minimum and maximum cost of a letter from each city (positions sorted)."""
    if len(positions) < 2:
        raise ValueError("at least two cities are needed")
    first, last = positions[0], positions[-1]
    result = []
    for i, x in enumerate(positions):
        if i == 0:
            nearest = abs(positions[1] - x)
        elif i == len(positions) - 1:
            nearest = abs(x - positions[i - 1])
        else:
            nearest = min(abs(x - positions[i - 1]), abs(positions[i + 1] - x))
        farthest = max(abs(x - first), abs(last - x))
        result.append((nearest, farthest))
    return result


def advancers(scores: Sequence[int], k: int) -> int:
    """Participants with a positive score at least the k-th place's score."""
    if not 1 <= k <= len(scores):
        raise ValueError(f"k must be between 1 and {len(scores)}, got {k}")
    threshold = scores[k - 1]
    return sum(1 for score in scores if score >= threshold and score > 0)


def stewards_supported(strengths: Sequence[int]) -> int:
    """Stewards having someone strictly weaker and someone strictly stronger."""
    if not strengths:
        raise ValueError("no stewards given")
    weakest, strongest = min(strengths), max(strengths)
    return sum(1 for s in strengths if weakest < s < strongest)


def untreated_crimes(events: Iterable[int]) -> int:
    """Crimes (-1) that happen while no free officer (hired in groups) is left."""
    officers = 0
    untreated = 0
    for event in events:
        officers += event
        if officers < 0:
            untreated += 1
            officers = 0
    return untreated


def gift_givers(receivers: Sequence[int]) -> list[int]:
    """For each friend, in order, the 1-based friend who gave them a gift."""
    giver_of = {receiver: giver for giver, receiver in enumerate(receivers, start=1)}
    return [giver_of[receiver] for receiver in sorted(giver_of)]


def card_game(cards: Iterable[int]) -> tuple[int, int]:
    """Greedy end-taking game; return Sereja's and Dima's totals."""
    row = deque(cards)
    totals = [0, 0]
    turn = 0
    while row:
        card = row.popleft() if row[0] > row[-1] else row.pop()
        totals[turn] += card
        turn ^= 1
    return totals[0], totals[1]


def shoot_birds(wires: Sequence[int], shots: Iterable[tuple[int, int]]) -> list[int]:
    """Birds on each wire after the shots (wire, position), both 1-based."""
    birds = list(wires)
    for wire, position in shots:
        if not 1 <= wire <= len(birds):
            raise ValueError(f"no wire {wire}")
        index = wire - 1
        if not 1 <= position <= birds[index]:
            raise ValueError(f"no bird {position} on wire {wire}")
        if index > 0:
            birds[index - 1] += position - 1
        if index < len(birds) - 1:
            birds[index + 1] += birds[index] - position
        birds[index] = 0
    return birds


def snack_tower(arrivals: Sequence[int]) -> list[list[int]]:
    """Snacks placed on the tower each day, largest first."""
    size = len(arrivals)
    fallen = set()
    current = size
    days = []
    for snack in arrivals:
        if not 1 <= snack <= size:
            raise ValueError(f"snack size {snack} out of range")
        fallen.add(snack)
        today = []
        while current >= 1 and current in fallen:
            today.append(current)
            current -= 1
        days.append(today)
    return days


def form_teams(skills: Iterable[int]) -> list[tuple[int, int, int]]:
    """Teams of (programmer, mathematician, athlete), 1-based indices."""
    groups: dict[int, list[int]] = {1: [], 2: [], 3: []}
    for index, skill in enumerate(skills, start=1):
        groups[skill if skill in (1, 2) else 3].append(index)
    return list(zip(groups[1], groups[2], groups[3]))


def min_coins_for_majority(coins: Iterable[int]) -> int:
    """Fewest coins whose sum strictly exceeds the rest."""
    ordered = sorted(coins, reverse=True)
    if not ordered:
        raise ValueError("no coins given")
    half = sum(ordered) // 2
    taken = 0
    for count, coin in enumerate(ordered, start=1):
        taken += coin
        if taken > half:
            return count
    raise ValueError("no set of coins exceeds the rest")


def road_width(fence_height: int, heights: Iterable[int]) -> int:
    """Road width needed: 1 for people who fit under the fence, 2 for those who bend."""
    return sum(1 if h <= fence_height else 2 for h in heights)


def can_separate_equal(values: Sequence[int]) -> bool:
    """Whether the values can be ordered with no two equal neighbours."""
    if not values:
        return True
    return max(Counter(values).values()) <= (len(values) + 1) // 2