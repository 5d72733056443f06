"""Closed-form answers to small arithmetic and counting puzzles."""

from collections import Counter
from collections.abc import Iterable, Sequence


def adjacent_digit_sums(x: int, y: int) -> bool:
    """Tell whether some n has digit sum x while n + 1 has digit sum y."""
    value = x + 1 - y
    return value >= 0 and value % 9 == 0


def cheap_travel(n: int, m: int, a: int, b: int) -> int:
    """Cheapest cost of n rides with single tickets at a or m-ride tickets at b."""
    if a * m <= b:
        return n * a
    full, remain = divmod(n, m)
    cost = full * b
    if remain:
        cost += min(b, remain * a)
    return cost


def coin_transformation(value: int) -> int:
    """Largest number of coins reachable by splitting coins worth more than 3 into four."""
    count = 0
    while value > 3:
        count += 1
        value //= 4
    return 2**count


def easy_problem(n: int) -> int:
    """Number of ordered positive pairs (a, b) with a = n - b."""
    return n - 1


def fizzbuzz_remixed(n: int) -> int:
    """Count of i in [0, n] with i mod 3 equal to i mod 5."""
    full, rest = divmod(n, 15)
    return full * 3 + min(rest + 1, 3)


def hard_problem(m: int, a: int, b: int, c: int) -> int:
    """Most monkeys seated in two rows of m seats given their row preferences."""
    seated = min(a, m) + min(b, m)
    return seated + min(c, 2 * m - seated)


def kth_not_divisible(n: int, k: int) -> int:
    """The k-th positive integer that is not divisible by n."""
    if n < 2:
        raise ValueError("n must be at least 2")
    return (k - 1) // (n - 1) + k


def mex_table(rows: int, cols: int) -> int:
    """Largest sum of row and column MEX values over a rows x cols table."""
    return max(rows, cols) + 1


def min_operations_to_sum(n: int, k: int, p: int) -> int | None:
    """Fewest changes to reach sum k with n values bounded by p, or None if impossible."""
    k = abs(k)
    if n * p < k:
        return None
    return (k + p - 1) // p


def two_frogs(n: int, a: int, b: int) -> bool:
    """Tell whether Alice wins the frog game on n lily pads starting at a and b."""
    return abs(a - b) % 2 == 0


def journey_day(n: int, a: int, b: int, c: int) -> int:
    """Day on which the walked total first reaches n, walking a, b, c in turn."""
    per_cycle = a + b + c
    days = 3 * (n // per_cycle)
    remain = n % per_cycle
    for walked in (a, b, c):
        if remain <= 0:
            break
        remain -= walked
        days += 1
    return days


def fibonacciness(a1: int, a2: int, a4: int, a5: int) -> int:
    """Most Fibonacci relations satisfiable by choosing the missing third term."""
    from_front = a1 + a2
    from_back = a5 - a4
    from_middle = a4 - a2
    distinct = 1
    if from_front != from_back:
        distinct += 1
        if from_middle not in (from_front, from_back):
            distinct += 1
    elif from_back != from_middle:
        distinct += 1
    return 4 - distinct


def odd_digit_divisors(n: int, d: int) -> list[int]:
    """Odd digits dividing the number made of n! copies of the digit d, ascending."""
    divisors = {1}
    if d == 5:
        divisors.add(5)
    if d % 3 == 0 or n > 2:
        divisors.add(3)
    if d % 9 == 0 or n > 5 or (d % 3 == 0 and n > 2):
        divisors.add(9)
    if d % 7 == 0 or n > 2:
        divisors.add(7)
    return sorted(divisors)


def shape_perimeter(m: int, moves: Iterable[tuple[int, int]]) -> int:
    """Perimeter of the shape left by stamping an m x m square after each move."""
    perimeter = 0
    for index, (x, y) in enumerate(moves):
        perimeter += 4 * m if index == 0 else 2 * x + 2 * y
    return perimeter


def goblin_subsequences(s: str) -> int:
    """Most '-_-' subsequences obtainable by rearranging the characters of s."""
    underscores = s.count("_")
    dashes = len(s) - underscores
    right = dashes // 2
    left = dashes - right
    return underscores * left * right


def kevin_points(values: Sequence[int]) -> int:
    """Most points Kevin earns by reordering values."""
    if not values:
        raise ValueError("values must not be empty")
    parity = Counter(value % 2 for value in values)
    odds, evens = parity[1], parity[0]
    return odds - 1 if evens == 0 else odds + 1


def best_gift_pairs(genres: Sequence[int], m: int) -> int:
    """Number of ways to pick two books of different genres numbered 1..m."""
    counts = Counter(genres)
    if any(not 1 <= genre <= m for genre in counts):
        raise ValueError(f"genres must lie between 1 and {m}")
    n = len(genres)
    return (n * n - sum(count * count for count in counts.values())) // 2


def lantern_radius(positions: Iterable[int], length: int) -> float:
    """Smallest light radius so lanterns at positions light the street [0, length]."""
    ordered = sorted(positions)
    if not ordered:
        raise ValueError("at least one lantern is required")
    widest = max((b - a for a, b in zip(ordered, ordered[1:])), default=0)
    widest = max(widest, 2 * ordered[0], 2 * (length - ordered[-1]))
    return widest / 2