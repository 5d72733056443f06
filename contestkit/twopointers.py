"""Sliding-window and two-pointer answers over sorted or contiguous data."""

from collections.abc import Iterable, Sequence

TOWER_MODULUS = 1_000_000_009


def tower_orders(heights: Iterable[int], d: int) -> int:
    """Number of building orders where each block is at most d taller than any below it, mod 1e9+9."""
    ordered = sorted(heights)
    left = 0
    total = 1
    for right, height in enumerate(ordered):
        while height - ordered[left] > d:
            left += 1
        total = total * (right - left + 1) % TOWER_MODULUS
    return total


def _best_prefix_windows(ordered: Sequence[int], k: int) -> list[int]:
    """For each prefix, the largest window whose spread is at most k."""
    best_so_far = []
    left = 0
    best = 0
    for right, value in enumerate(ordered):
        while abs(value - ordered[left]) > k:
            left += 1
        best = max(best, right - left + 1)
        best_so_far.append(best)
    return best_so_far


def diamond_display(sizes: Iterable[int], k: int) -> int:
    """Most diamonds shown in two cases, each holding sizes that differ by at most k."""
    ordered = sorted(sizes)
    forwards = _best_prefix_windows(ordered, k)
    backwards = _best_prefix_windows(ordered[::-1], k)
    n = len(ordered)
    return max(
        (forwards[i] + backwards[n - 2 - i] for i in range(n - 1)),
        default=0,
    )


def count_subarrays_with_sum(values: Sequence[int], target: int) -> int:
    """Number of contiguous runs of positive values adding up to target."""
    n = len(values)
    if n == 0:
        return 0
    left = right = 0
    total = values[0]
    count = 0
    while left < n and right < n:
        if total > target:
            total -= values[left]
            left += 1
        elif total < target:
            right += 1
            if right < n:
                total += values[right]
        else:
            total -= values[left]
            left += 1
            count += 1
    return count


def three_values_sum(values: Sequence[int], target: int) -> tuple[int, int, int] | None:
    """1-based positions of three values adding up to target, or None when there are none."""
    ordered = sorted((value, position) for position, value in enumerate(values, start=1))
    n = len(ordered)
    for i in range(n - 2):
        left, right = i + 1, n - 1
        while left < right:
            total = ordered[i][0] + ordered[left][0] + ordered[right][0]
            if total > target:
                right -= 1
            elif total < target:
                left += 1
            else:
                return ordered[i][1], ordered[left][1], ordered[right][1]
    return None


def mathletes_score(values: Iterable[int], k: int) -> int:
    """Number of disjoint pairs of values adding up to k under optimal play."""
    above: list[int] = []
    below: list[int] = []
    halves = 0
    for value in values:
        if 2 * value > k:
            above.append(value)
        elif 2 * value < k:
            below.append(value)
        else:
            halves += 1
    above.sort()
    below.sort()
    score = halves // 2
    pi = 0
    ni = len(below) - 1
    while ni >= 0 and pi < len(above):
        total = above[pi] + below[ni]
        if total == k:
            score += 1
            pi += 1
            ni -= 1
        elif total > k:
            ni -= 1
        else:
            pi += 1
    return score


def bubble_sort_moo_count(values: Iterable[int]) -> int:
    """Times 'moo' is printed by the bubble sort: one more than the farthest leftward move."""
    ordered = sorted((value, index) for index, value in enumerate(values))
    back = max((index - rank for rank, (_, index) in enumerate(ordered)), default=0)
    return max(back, 0) + 1


def min_repairs(n: int, k: int, broken: Iterable[int]) -> int:
    """Fewest broken signals to fix so that some k consecutive signals of 1..n all work."""
    if not 1 <= k <= n:
        raise ValueError("k must lie between 1 and n")
    lights = [0] * (n + 1)
    for signal in broken:
        if not 1 <= signal <= n:
            raise ValueError(f"broken signal {signal} lies outside 1..{n}")
        lights[signal] = 1
    window = sum(lights[1 : k + 1])
    best = window
    for start in range(1, n - k + 1):
        window += lights[start + k] - lights[start]
        best = min(best, window)
    return best


def best_reversal_segment(values: Sequence[int]) -> tuple[int, int]:
    """1-based segment whose cyclic shift removes the most inversions; (1, 1) if none helps."""
    best = 0
    best_pair = (1, 1)
    for left, pivot in enumerate(values):
        balance = 0
        for right in range(left, len(values)):
            current = values[right]
            if current < pivot:
                balance += 1
            elif current > pivot:
                balance -= 1
            if balance > best:
                best = balance
                best_pair = (left + 1, right + 1)
    return best_pair