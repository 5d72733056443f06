"""Answers to puzzles over arrays, sets and grids."""

from collections import Counter, defaultdict
from collections.abc import Iterable, Sequence


def can_craft(have: Sequence[int], need: Sequence[int]) -> bool:
    """Tell whether the needed materials can be reached by the crafting operation."""
    if len(have) != len(need):
        raise ValueError("have and need must be the same length")
    surplus = None
    deficits = []
    for owned, wanted in zip(have, need):
        if wanted <= owned:
            extra = owned - wanted
            surplus = extra if surplus is None else min(surplus, extra)
        else:
            deficits.append(wanted - owned)
    if not deficits:
        return True
    if len(deficits) > 1:
        return False
    return surplus is None or deficits[0] <= surplus


def game_of_division(values: Sequence[int], k: int) -> int | None:
    """1-based index the first player should pick to win, or None if the first player loses."""
    residues = Counter(value % k for value in values)
    unique = sorted(residue for residue, count in residues.items() if count == 1)
    if not unique:
        return None
    chosen = unique[0]
    return next(i for i, value in enumerate(values, start=1) if value % k == chosen)


def can_get_three_sums(a: Iterable[int], b: Iterable[int]) -> bool:
    """Tell whether rearranging a can give at least three distinct sums a[i] + b[i]."""
    left, right = set(a), set(b)
    if len(left) >= 3 or len(right) >= 3:
        return True
    if len(left) == 1 or len(right) == 1:
        return False
    return len({x + y for x in left for y in right}) >= 3


def exam_results(n: int, lists: Sequence[int], known: Iterable[int]) -> str:
    """For each list (named by its one missing question), '1' if every question on it is known."""
    known_set = set(known)
    if len(known_set) < n - 1:
        return "0" * len(lists)
    if len(known_set) == n:
        return "1" * len(lists)
    return "".join("0" if missing in known_set else "1" for missing in lists)


def max_problem_difference(a: Sequence[int], b: Sequence[int]) -> int:
    """Largest lead of Monocarp over Stereocarp when choosing training days."""
    if not a or len(a) != len(b):
        raise ValueError("a and b must be non-empty and of equal length")
    return a[-1] + sum(max(0, previous - current) for previous, current in zip(a, b[1:]))


def subtract_min_sortable(values: Sequence[int]) -> bool:
    """Tell whether subtracting pairwise minimums can make values non-decreasing."""
    work = list(values)
    for i in range(len(work) - 1):
        low = min(work[i], work[i + 1])
        work[i] -= low
        work[i + 1] -= low
    return all(x <= y for x, y in zip(work, work[1:]))


def best_lineup(values: Sequence[int]) -> list[int]:
    """Values taken from largest down until a second backward step is needed."""
    ranked = sorted(enumerate(values), key=lambda item: (-item[1], item[0]))
    if not ranked:
        return []
    last_index, first_value = ranked[0]
    lineup = [first_value]
    strikes = 0
    for index, value in ranked[1:]:
        if index <= last_index:
            strikes += 1
        if strikes == 2:
            break
        last_index = index
        lineup.append(value)
    return lineup


def strangers_steps(grid: Sequence[Sequence[int]]) -> int:
    """Fewest steps to make the grid one colour when each step recolours a set of strangers."""
    if not grid or not grid[0]:
        raise ValueError("grid must not be empty")
    cost: dict[int, int] = defaultdict(int)
    touching = False
    for r, row in enumerate(grid):
        for c, colour in enumerate(row):
            cost[colour] = max(cost[colour], 1)
            if (c > 0 and row[c - 1] == colour) or (r > 0 and grid[r - 1][c] == colour):
                touching = True
                cost[colour] = 2
    return sum(cost.values()) - (2 if touching else 1)


def card_game_order(decks: Sequence[Sequence[int]]) -> list[int] | None:
    """Order of cows (1-based) that lets every card be played, or None if none exists."""
    n = len(decks)
    if n == 0:
        raise ValueError("at least one deck is required")
    slot: dict[int, int] = {}
    for cow, deck in enumerate(decks, start=1):
        if not deck:
            raise ValueError("decks must not be empty")
        first = deck[0]
        if any(abs(first - card) % n for card in deck[1:]):
            return None
        slot[min(deck)] = cow
    return [slot.get(position, 0) for position in range(n)]


def banker_life(n: int, k: int) -> list[int]:
    """The n-th row of the repeated-XOR triangle whose first row is a single k."""
    top = n - 1
    return [k if top & i == i else 0 for i in range(n)]