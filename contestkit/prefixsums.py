"""Answers built on prefix sums, sweeps and greedy passes over sorted data."""

from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import accumulate, islice

BARN_SIZE = 1000


class _Fenwick:
    """Binary indexed tree over positions 1..size."""

    def __init__(self, size: int) -> None:
        self._tree = [0] * (size + 1)

    def add(self, index: int, delta: int) -> None:
        while index < len(self._tree):
            self._tree[index] += delta
            index += index & -index

    def prefix(self, index: int) -> int:
        total = 0
        while index > 0:
            total += self._tree[index]
            index -= index & -index
        return total


def candies_sum(values: Sequence[int], operations: Iterable[tuple[str, int, int]]) -> int:
    """Total of alternating weighted sums over all queries; 'U' operations update a value."""
    n = len(values)
    current = [0, *values]
    weighted = _Fenwick(n)
    plain = _Fenwick(n)

    def place(index: int, value: int) -> None:
        signed = value if index % 2 else -value
        weighted.add(index, signed * index)
        plain.add(index, signed)

    for index in range(1, n + 1):
        place(index, current[index])

    total = 0
    for op, x, y in operations:
        if op == "U":
            if not 1 <= x <= n:
                raise ValueError(f"position {x} lies outside 1..{n}")
            place(x, -current[x])
            current[x] = y
            place(x, y)
        else:
            if not 1 <= x <= y <= n:
                raise ValueError(f"query range {x}..{y} is invalid for 1..{n}")
            part = weighted.prefix(y) - weighted.prefix(x - 1)
            part -= (x - 1) * (plain.prefix(y) - plain.prefix(x - 1))
            total += part if x % 2 else -part
    return total


def convoluted_intervals(intervals: Iterable[tuple[int, int]], m: int) -> list[int]:
    """For each k in 0..2m, ordered pairs (i, j) with a_i + a_j <= k <= b_i + b_j."""
    starts: Counter[int] = Counter()
    ends: Counter[int] = Counter()
    for a, b in intervals:
        if not 0 <= a <= b <= m:
            raise ValueError(f"interval ({a}, {b}) lies outside 0..{m}")
        starts[a] += 1
        ends[b] += 1
    delta = [0] * (2 * m + 2)
    for i, ci in starts.items():
        for j, cj in starts.items():
            delta[i + j] += ci * cj
    for i, ci in ends.items():
        for j, cj in ends.items():
            delta[i + j + 1] -= ci * cj
    return list(accumulate(delta[: 2 * m + 1]))


def barn_area(rectangles: Iterable[tuple[int, int, int, int]], k: int) -> int:
    """Area of the barn wall covered by exactly k coats of paint."""
    rects = list(rectangles)
    for x1, y1, x2, y2 in rects:
        if not (0 <= x1 <= x2 <= BARN_SIZE and 0 <= y1 <= y2 <= BARN_SIZE):
            raise ValueError(f"rectangle {(x1, y1, x2, y2)} lies outside the barn")
    xs = sorted({0, BARN_SIZE, *(r[0] for r in rects), *(r[2] for r in rects)})
    ys = sorted({0, BARN_SIZE, *(r[1] for r in rects), *(r[3] for r in rects)})
    x_index = {x: i for i, x in enumerate(xs)}
    y_index = {y: i for i, y in enumerate(ys)}
    diff = [[0] * len(ys) for _ in xs]
    for x1, y1, x2, y2 in rects:
        diff[x_index[x1]][y_index[y1]] += 1
        diff[x_index[x2]][y_index[y2]] += 1
        diff[x_index[x1]][y_index[y2]] -= 1
        diff[x_index[x2]][y_index[y1]] -= 1
    widths = [b - a for a, b in zip(xs, xs[1:])]
    heights = [b - a for a, b in zip(ys, ys[1:])]
    column_totals = [0] * len(heights)
    area = 0
    for row, width in zip(diff, widths):
        running = 0
        for j, (cell, height) in enumerate(zip(row, heights)):
            running += cell
            column_totals[j] += running
            if column_totals[j] == k:
                area += width * height
    return area


def visible_mountains(peaks: Iterable[tuple[int, int]]) -> int:
    """Number of 45-degree mountains, given by their peaks, not hidden by another."""
    ordered = sorted((y, x) for x, y in peaks)
    visible = 0
    for i, (y, x) in enumerate(ordered):
        hidden = any(abs(ox - x) <= oy - y for oy, ox in islice(ordered, i + 1, None))
        if not hidden:
            visible += 1
    return visible


def lifeguard_coverage(shifts: Iterable[tuple[int, int]]) -> int:
    """Time still covered after firing the one lifeguard whose loss costs least."""
    shifts = list(shifts)
    if not shifts:
        raise ValueError("at least one shift is required")
    events = sorted(
        event
        for guard, (start, end) in enumerate(shifts, start=1)
        for event in ((start, guard), (end, -guard))
    )
    on_duty: set[int] = set()
    alone: Counter[int] = Counter()
    covered = 0
    last = 0
    min_alone: int | None = None
    for now, guard in events:
        if len(on_duty) == 1:
            alone[next(iter(on_duty))] += now - last
        if on_duty:
            covered += now - last
        if guard > 0:
            on_duty.add(guard)
        else:
            on_duty.discard(-guard)
            spent = alone[-guard]
            min_alone = spent if min_alone is None else min(min_alone, spent)
        last = now
    return covered - min_alone


def rental_profit(
    cows: Iterable[int],
    stores: Iterable[tuple[int, int]],
    rents: Iterable[int],
) -> int:
    """Most money from milking cows or renting them out; stores are (gallons, price)."""
    herd = sorted(cows, reverse=True)
    offers = sorted((price, gallons) for gallons, price in stores)
    milk_totals = [0]
    for milk in herd:
        earned = 0
        while milk > 0 and offers:
            price, gallons = offers[-1]
            if milk < gallons:
                earned += milk * price
                offers[-1] = (price, gallons - milk)
                milk = 0
            else:
                milk -= gallons
                earned += gallons * price
                offers.pop()
        milk_totals.append(milk_totals[-1] + earned)
    rent_totals = [0, *accumulate(sorted(rents, reverse=True))]
    n = len(herd)
    rented_max = min(n, len(rent_totals) - 1)
    return max(milk_totals[n - i] + rent_totals[i] for i in range(rented_max + 1))


def _split_savings(points: list[tuple[int, int]]) -> int:
    ordered = sorted(points)
    ys = [y for _, y in ordered]
    premax = list(accumulate(ys, max))
    premin = list(accumulate(ys, min))
    first_x, last_x = ordered[0][0], ordered[-1][0]
    full = (premax[-1] - premin[-1]) * (last_x - first_x)
    best = 0
    maxfar = minfar = ys[-1]
    for i in range(len(ordered) - 2, -1, -1):
        next_x, next_y = ordered[i + 1]
        maxfar = max(maxfar, next_y)
        minfar = min(minfar, next_y)
        if next_x != ordered[i][0] or premax[i] < minfar or premin[i] > maxfar:
            left = (premax[i] - premin[i]) * (ordered[i][0] - first_x)
            right = (maxfar - minfar) * (last_x - next_x)
            best = max(best, full - left - right)
    return best


def split_field_savings(points: Iterable[tuple[int, int]]) -> int:
    """Area saved by enclosing the points with two disjoint rectangles instead of one."""
    pts = [(x, y) for x, y in points]
    if not pts:
        raise ValueError("at least one point is required")
    return max(_split_savings(pts), _split_savings([(y, x) for x, y in pts]))