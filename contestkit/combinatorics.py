"""Counting answers built on modular powers, cycles and coordinate groups."""

from collections import defaultdict
from collections.abc import Iterable, Sequence

BEAUTIFUL_MODULUS = 998_244_353
PROJECT_MODULUS = 1_000_000_007
TRIANGLE_MODULUS = 1_000_000_007

_project_prefix: list[int] = [0]


def beautiful_subsequences(values: Iterable[int]) -> int:
    """Number of subsequences of the form 1, 2, ..., 2, 3 (at least one 2), mod 998244353."""
    mod = BEAUTIFUL_MODULUS
    total = 0
    pairs = 0
    score = 0
    ones = 0
    twos = 0
    for value in values:
        if value == 1:
            if ones:
                score = score * pow(2, twos, mod) % mod
            score = (score + 1) % mod
            ones += 1
            twos = 0
        elif value == 2:
            twos += 1
        elif value == 3:
            total = (total + score * pow(2, twos, mod)) % mod
            pairs = (pairs + ones) % mod
    return (total - pairs) % mod


def project_value(n: int) -> int:
    """Contribution of size n to the project count, mod 1e9+7."""
    if n < 1:
        raise ValueError("n must be at least 1")
    mod = PROJECT_MODULUS
    return (pow(2, n - 1, mod) - pow(2, n // 2, mod)) % mod


def project_range_sum(left: int, right: int) -> int:
    """Sum of project_value(n) for left <= n <= right, mod 1e9+7."""
    if left < 1 or right < left:
        raise ValueError("need 1 <= left <= right")
    while len(_project_prefix) <= right:
        n = len(_project_prefix)
        _project_prefix.append((_project_prefix[-1] + project_value(n)) % PROJECT_MODULUS)
    return (_project_prefix[right] - _project_prefix[left - 1]) % PROJECT_MODULUS


def storage_keys(n: int, x: int) -> list[int]:
    """n values whose bitwise OR is x, chosen to make their MEX as large as possible."""
    if n < 1:
        raise ValueError("n must be at least 1")
    if x < 0:
        raise ValueError("x must not be negative")
    if x == 0:
        return [0] * n
    if x & (x + 1) == 0:
        if x + 1 <= n:
            return list(range(x + 1)) + [x] * (n - x - 1)
        last = n - 1 if (x + 1) // 2 <= n - 1 else x
        return list(range(n - 1)) + [last]
    lowest_zero = ((x + 1) & -(x + 1)).bit_length() - 1
    rest = n - 1
    small = min(rest, 2**lowest_zero)
    return [x] + list(range(small)) + [x] * (rest - small)


def book_owners(targets: Sequence[int], k: int) -> list[int]:
    """Who holds each kid's book after k days of passing books along the permutation."""
    n = len(targets)
    if sorted(targets) != list(range(1, n + 1)):
        raise ValueError("targets must be a permutation of 1..n")
    if k < 0:
        raise ValueError("k must not be negative")
    source = [0] * n
    for kid, target in enumerate(targets):
        source[target - 1] = kid
    owners = [0] * n
    seen = [False] * n
    for start in range(n):
        if seen[start]:
            continue
        cycle = []
        current = start
        while not seen[current]:
            seen[current] = True
            cycle.append(current)
            current = source[current]
        length = len(cycle)
        shift = k % length
        for position, kid in enumerate(cycle):
            owners[kid] = cycle[(position + shift) % length] + 1
    return owners


def _distance_sums(members: list[tuple[int, int]]) -> dict[int, int]:
    """For points on one line, the sum of distances from each point to the others."""
    members.sort()
    total = sum(coord for coord, _ in members)
    count = len(members)
    before = 0
    sums = {}
    for rank, (coord, index) in enumerate(members):
        after = total - before - coord
        sums[index] = coord * rank - before + after - coord * (count - rank - 1)
        before += coord
    return sums


def triangle_area_sum(points: Sequence[tuple[int, int]]) -> int:
    """Twice the total area of right triangles with axis-parallel legs, mod 1e9+7."""
    rows: dict[int, list[tuple[int, int]]] = defaultdict(list)
    columns: dict[int, list[tuple[int, int]]] = defaultdict(list)
    for index, (x, y) in enumerate(points):
        rows[y].append((x, index))
        columns[x].append((y, index))
    horizontal: dict[int, int] = {}
    for members in rows.values():
        horizontal.update(_distance_sums(members))
    vertical: dict[int, int] = {}
    for members in columns.values():
        vertical.update(_distance_sums(members))
    return sum(horizontal[i] * vertical[i] for i in horizontal) % TRIANGLE_MODULUS