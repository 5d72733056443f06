"""Answers to puzzles over strings and short symbol sequences."""

from collections.abc import Iterable, Sequence
from itertools import accumulate

_CHEWBACCA_DIGITS = str.maketrans("0123456789", "0123443210")
_MIRROR = {"w": "w", "p": "q"}


def brogramming_moves(s: str) -> int:
    """Moves needed to gather every '1' of a binary string into the second string."""
    in_ones = False
    moves = 0
    for ch in s:
        if ch == "1":
            in_ones = True
        elif in_ones:
            in_ones = False
            moves += 2
    if in_ones:
        moves += 1
    return moves


def chewbacca_minimum(x: str) -> str:
    """Smallest positive number obtained by inverting some digits of x."""
    if not x:
        return x
    head, tail = x[0], x[1:]
    if head != "9":
        head = head.translate(_CHEWBACCA_DIGITS)
    return head + tail.translate(_CHEWBACCA_DIGITS)


def mirror_glass(s: str) -> str:
    """The string of p, q and w as seen from the other side of the glass."""
    return "".join(_MIRROR.get(ch, "p") for ch in reversed(s))


def fitting_words(words: Iterable[str], m: int) -> int:
    """How many leading words fit on a strip of length m."""
    return sum(1 for total in accumulate(len(word) for word in words) if total <= m)


def longest_koyomity(s: str, queries: Iterable[tuple[int, str]]) -> list[int]:
    """Longest run of one colour after repainting at most m pieces, per query."""
    answers = []
    for limit, colour in queries:
        left = 0
        repaints = 0
        best = 1
        for right, ch in enumerate(s):
            repaints += ch != colour
            while repaints > limit:
                repaints -= s[left] != colour
                left += 1
            best = max(best, right - left + 1)
        answers.append(best)
    return answers


def robot_zero_visits(x: int, k: int, commands: str) -> int:
    """Times a robot starting at x reaches 0 within k seconds, restarting at each visit."""
    position = 0
    first_hit = None
    period = None
    for step, command in enumerate(commands, start=1):
        position += -1 if command == "L" else 1
        if first_hit is None and position + x == 0:
            first_hit = step
        elif period is None and position == 0:
            period = step
    if first_hit is None or first_hit > k:
        return 0
    if period is None:
        return 1
    return (k - first_hit) // period + 1


def array_exists(b: Sequence[int]) -> bool:
    """Tell whether some array has b as its 'three equal neighbours' indicator."""
    return not any(window == (1, 0, 1) for window in zip(b, b[1:], b[2:]))