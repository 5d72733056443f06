from collections import Counter
from itertools import permutations

import pytest

from contestkit.structures import (
    correct_placement,
    isosceles_trapezoid,
    min_penalty,
    vocabulary_quiz,
)


def _fits(front, back):
    fh, fw = front
    bh, bw = back
    return (fh < bh and fw < bw) or (fh < bw and fw < bh)


PLACEMENT_CASES = [
    [(3, 4), (5, 4), (3, 3)],
    [(1, 3), (2, 2), (3, 1)],
    [(2, 2), (3, 1), (6, 3), (5, 4)],
    [(2, 5), (4, 3), (6, 1), (1, 6), (3, 3), (7, 2)],
    [(10, 1), (1, 10), (5, 5), (4, 4), (6, 6)],
]


def test_correct_placement_worked_example():
    assert correct_placement([(3, 4), (5, 4), (3, 3)]) == [-1, 3, -1]


def test_correct_placement_empty_and_single():
    assert correct_placement([]) == []
    assert correct_placement([(7, 2)]) == [-1]


def test_correct_placement_identical_friends():
    assert correct_placement([(2, 3)] * 4) == [-1, -1, -1, -1]


@pytest.mark.parametrize("friends", PLACEMENT_CASES)
def test_correct_placement_answers_are_valid(friends):
    answer = correct_placement(friends)
    assert len(answer) == len(friends)
    for i, choice in enumerate(answer):
        if choice == -1:
            assert not any(_fits(other, friends[i]) for other in friends)
        else:
            assert _fits(friends[choice - 1], friends[i])


@pytest.mark.parametrize("friends", PLACEMENT_CASES)
def test_correct_placement_ignores_orientation(friends):
    turned = [(w, h) for h, w in friends]
    assert correct_placement(turned) == correct_placement(friends)


def test_isosceles_trapezoid_worked_example():
    assert isosceles_trapezoid([5, 5, 5, 10]) == (5, 5, 5, 10)


@pytest.mark.parametrize("sticks", [[1, 2, 3, 4], [1, 1, 1, 3], [], [7]])
def test_isosceles_trapezoid_impossible(sticks):
    assert isosceles_trapezoid(sticks) is None


@pytest.mark.parametrize(
    "sticks",
    [[10, 5, 10, 5], [4, 2, 1, 5, 7, 1], [5, 5, 5, 10], [2, 2, 3, 4, 8, 9]],
)
def test_isosceles_trapezoid_result_is_valid(sticks):
    result = isosceles_trapezoid(sticks)
    assert result is not None
    leg_a, leg_b, short, long = result
    assert leg_a == leg_b
    assert abs(long - short) < 2 * leg_a
    used = Counter(result)
    available = Counter(sticks)
    assert all(available[value] >= count for value, count in used.items())


def test_isosceles_trapezoid_ignores_input_order():
    base = [4, 2, 1, 5, 7, 1]
    expected = isosceles_trapezoid(base)
    for shuffled in permutations(base):
        assert isosceles_trapezoid(list(shuffled)) == expected


def test_min_penalty_worked_example():
    assert min_penalty("BRBR", [9, 3, 5, 4], 1) == 3


def test_min_penalty_enough_repaints():
    assert min_penalty("BBRR", [1, 3, 5, 2], 1) == 0
    assert min_penalty("RRRR", [4, 4, 4, 4], 0) == 0


@pytest.mark.parametrize(
    "colors, penalties",
    [
        ("BRBR", [9, 3, 5, 4]),
        ("BRBRB", [2, 8, 1, 6, 3]),
        ("RBRBBRBR", [5, 1, 7, 2, 9, 4, 6, 3]),
    ],
)
def test_min_penalty_never_grows_with_more_repaints(colors, penalties):
    results = [min_penalty(colors, penalties, k) for k in range(len(colors) + 1)]
    assert all(a >= b for a, b in zip(results, results[1:]))
    assert results[-1] == 0
    assert all(value == 0 or value in penalties for value in results)


def test_min_penalty_length_mismatch():
    with pytest.raises(ValueError):
        min_penalty("BRB", [1, 2], 0)


def test_vocabulary_quiz_star():
    assert vocabulary_quiz([0, 0, 0], [1, 2, 3]) == [1, 1, 0]


def test_vocabulary_quiz_two_levels():
    assert vocabulary_quiz([0, 0, 1, 1], [3, 4, 2]) == [2, 1, 0]


@pytest.mark.parametrize("order", list(permutations([1, 2, 3])))
def test_vocabulary_quiz_star_any_order(order):
    answers = vocabulary_quiz([0, 0, 0], list(order))
    assert len(answers) == 3
    assert answers[-1] == 0
    assert answers[0] == answers[1]


def test_vocabulary_quiz_wrong_number_of_words():
    with pytest.raises(ValueError):
        vocabulary_quiz([0, 0, 0], [1, 2])


def test_vocabulary_quiz_parent_out_of_range():
    with pytest.raises(ValueError):
        vocabulary_quiz([0, 5], [1])


def test_vocabulary_quiz_word_out_of_range():
    with pytest.raises(ValueError):
        vocabulary_quiz([0, 0], [1, 9])