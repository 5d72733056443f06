"""Answers that lean on ordered structures: sorted ranks, runs and trees."""

from bisect import bisect_left
from collections.abc import Iterator, Sequence


def correct_placement(friends: Sequence[tuple[int, int]]) -> list[int]:
    """For each friend (h, w), the 1-based index of a friend who can stand in front, or -1.

    Friend j fits in front of friend i when both sides of j are strictly smaller
    than the sides of i, either as given or with j turned sideways.
    """
    rects = sorted((max(h, w), min(h, w), index) for index, (h, w) in enumerate(friends))
    if not rects:
        return []
    longest = [big for big, _, _ in rects]

    narrowest: list[tuple[int, int]] = []
    best: tuple[int, int] | None = None
    for _, small, index in rects:
        if best is None or small < best[0]:
            best = (small, index)
        narrowest.append(best)

    answer = [-1] * len(rects)
    for big, small, index in rects:
        below = bisect_left(longest, big)
        if below and small > narrowest[below - 1][0]:
            answer[index] = narrowest[below - 1][1] + 1
    return answer


def isosceles_trapezoid(sticks: Sequence[int]) -> tuple[int, int, int, int] | None:
    """Four sticks forming an isosceles trapezoid as (leg, leg, base, base), or None."""
    ordered = sorted(sticks)
    skip = next(
        (i for i in range(len(ordered) - 2, -1, -1) if ordered[i] == ordered[i + 1]),
        None,
    )
    if skip is None or ordered[skip] == 0:
        return None
    leg = ordered[skip]
    lower = ordered[:skip]
    upper = ordered[skip + 2 :]

    def candidates() -> Iterator[tuple[int, int]]:
        yield from zip(lower, lower[1:])
        yield from zip(upper, upper[1:])
        if lower and upper:
            yield lower[-1], upper[0]

    for short, long in candidates():
        if long - short < 2 * leg:
            return leg, leg, short, long
    return None


def _colour_runs(colors: str) -> list[tuple[int, int]]:
    """Alternating runs starting from the first blue cell, ending on a blue run.

    The first run is counted from position 0 even when red cells precede it.
    """
    runs: list[tuple[int, int]] = []
    start = 0
    current: str | None = None
    for i, ch in enumerate(colors):
        if current is None:
            if ch == "B":
                current = "B"
        elif ch != current:
            runs.append((start, i - 1))
            start = i
            current = ch
    if current == "B":
        runs.append((start, len(colors) - 1))
    return runs


def min_penalty(colors: str, penalties: Sequence[int], k: int) -> int:
    """Smallest highest penalty of a wrongly coloured cell after at most k blue repaints."""
    if len(colors) != len(penalties):
        raise ValueError("colors and penalties must be the same length")
    runs = _colour_runs(colors)
    needed = (len(runs) + 1) // 2
    if k >= needed:
        return 0
    needed -= k
    ranked = sorted(
        (max(penalties[start : end + 1]), number)
        for number, (start, end) in enumerate(runs, start=1)
    )
    blocked: set[int] = set()
    chosen = 0
    worst = 0
    for cost, number in ranked:
        if chosen >= needed:
            break
        if number not in blocked:
            chosen += 1
            worst = cost
            blocked.update((number - 1, number + 1))
    return worst


def vocabulary_quiz(parents: Sequence[int], order: Sequence[int]) -> list[int]:
    """Letters needed to recognise each word as the leaves of the word tree are asked in order.

    parents[i - 1] is the parent of node i; node 0 is the root.
    """
    n = len(parents)
    for node, parent_node in enumerate(parents, start=1):
        if not 0 <= parent_node <= n:
            raise ValueError(f"parent {parent_node} of node {node} lies outside 0..{n}")
    parent = [0, *parents]
    tree: list[list[int]] = [[] for _ in range(n + 1)]
    for node, parent_node in enumerate(parents, start=1):
        tree[parent_node].append(node)

    score = [0] * (n + 1)
    width = [0] * (n + 1)
    invalid = [False] * (n + 1)
    leaves = 0
    frontier = [0]
    while frontier:
        following = []
        for node in frontier:
            branch = tree[node]
            width[node] = len(branch)
            if len(branch) > 1:
                for child in branch:
                    score[child] = score[node] + 1
                    following.append(child)
            elif len(branch) == 1:
                only = branch[0]
                tree[node] = list(tree[only])
                score[only] = score[node]
                following.append(node)
            else:
                leaves += 1
        frontier = following

    if len(order) != leaves:
        raise ValueError(f"expected {leaves} words in the order, got {len(order)}")

    answers = []
    last = leaves - 1
    for i, find in enumerate(order):
        if not 1 <= find <= n:
            raise ValueError(f"word {find} lies outside 1..{n}")
        answers.append(score[find])
        width[parent[find]] -= 1
        invalid[find] = True
        if width[parent[find]] == 0 and i != last:
            while find != 0 and width[parent[find]] == 0:
                find = parent[find]
                invalid[find] = True
            width[parent[find]] -= 1
        holder = parent[find]
        if width[holder] == 1:
            survivor = next((child for child in tree[holder] if not invalid[child]), None)
            if survivor is not None:
                tree[holder] = [survivor]
                current = survivor
                while True:
                    score[current] = score[parent[current]]
                    if width[current] != 1:
                        break
                    current = tree[current][0]
    return answers