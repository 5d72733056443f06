from functools import reduce
from operator import or_

import pytest

from contestkit.combinatorics import (
    BEAUTIFUL_MODULUS,
    book_owners,
    beautiful_subsequences,
    project_range_sum,
    project_value,
    storage_keys,
    triangle_area_sum,
)


def test_beautiful_sample():
    cases = ([3, 2, 1, 2, 2, 1, 3], [3, 1, 2, 2], [1, 2, 3])
    assert [beautiful_subsequences(c) for c in cases] == [3, 0, 1]


def test_beautiful_ignores_leading_twos():
    assert beautiful_subsequences([2, 2, 1, 2, 3]) == beautiful_subsequences([1, 2, 3])


def test_beautiful_in_range():
    result = beautiful_subsequences([1] * 40 + [2] * 40 + [3] * 40)
    assert 0 <= result < BEAUTIFUL_MODULUS


def test_project_single_range_matches_value():
    for n in range(1, 30):
        assert project_range_sum(n, n) == project_value(n)


def test_project_range_additive():
    left = project_range_sum(3, 50)
    right = project_range_sum(51, 200)
    assert (left + right) % 1_000_000_007 == project_range_sum(3, 200)


@pytest.mark.parametrize("left,right", [(0, 5), (5, 4)])
def test_project_range_invalid(left, right):
    with pytest.raises(ValueError):
        project_range_sum(left, right)


def test_project_value_invalid():
    with pytest.raises(ValueError):
        project_value(0)


@pytest.mark.parametrize("n,x", [(1, 7), (3, 7), (10, 7), (4, 5), (5, 2), (2, 6), (8, 12), (1, 1)])
def test_storage_keys_or_matches(n, x):
    keys = storage_keys(n, x)
    assert len(keys) == n
    assert reduce(or_, keys) == x


def test_storage_keys_zero():
    assert storage_keys(4, 0) == [0, 0, 0, 0]


def test_storage_keys_full_run_when_room():
    keys = storage_keys(10, 7)
    assert set(range(8)) <= set(keys)


def test_storage_keys_with_zero_bit_starts_with_x():
    assert storage_keys(4, 5)[0] == 5


def test_storage_keys_negative():
    with pytest.raises(ValueError):
        storage_keys(3, -1)


def test_book_owners_zero_days_identity():
    targets = [5, 1, 2, 4, 3]
    assert book_owners(targets, 0) == [1, 2, 3, 4, 5]


def test_book_owners_composition():
    targets = [3, 5, 1, 2, 6, 4, 7]
    first = book_owners(targets, 3)
    second = book_owners(targets, 4)
    combined = book_owners(targets, 7)
    assert combined == [first[owner - 1] for owner in second]


def test_book_owners_is_permutation():
    targets = [2, 3, 1, 5, 4]
    assert sorted(book_owners(targets, 11)) == list(range(1, 6))


def test_book_owners_rejects_non_permutation():
    with pytest.raises(ValueError):
        book_owners([1, 1, 2], 1)


def test_triangle_sample():
    assert triangle_area_sum([(0, 0), (0, 1), (1, 0), (1, 2)]) == 3


def test_triangle_collinear_is_zero():
    assert triangle_area_sum([(0, 0), (1, 0), (5, 0)]) == 0


def test_triangle_translation_invariant():
    points = [(0, 0), (0, 3), (4, 0), (4, 3), (2, 3), (-1, 0)]
    moved = [(x + 17, y - 9) for x, y in points]
    assert triangle_area_sum(moved) == triangle_area_sum(points)