import math

import pytest

from cpkit.contest_b import (
    can_make_smaller,
    first_valid_prefix,
    is_reachable,
    is_square,
    max_dash_subsequences,
    max_last_side,
    max_teams,
    min_length,
    segment_values,
    square_free_prefix_permutation,
    xor_triangle_partner,
)


def test_first_valid_prefix_completes_on_last_element():
    a = [2, 0, 2, 5, 0, 1, 0, 3]
    assert first_valid_prefix(a) == len(a)


def test_first_valid_prefix_ignores_trailing_elements():
    a = [2, 0, 2, 5, 0, 1, 0, 3]
    assert first_valid_prefix(a + [9, 0, 1]) == len(a)


def test_first_valid_prefix_missing_digit():
    assert first_valid_prefix([0, 0, 0, 2, 2, 1, 3, 7, 8]) == 0
    assert first_valid_prefix([]) == 0


def test_first_valid_prefix_stops_early():
    a = [9, 0, 1, 0, 3, 2, 0, 2, 5]
    assert first_valid_prefix(a + [4, 4, 4]) == len(a)


@pytest.mark.parametrize("k", range(-6, 20))
def test_is_reachable_period_three(k):
    assert is_reachable(k) == is_reachable(k + 3)


def test_is_reachable_values():
    assert is_reachable(1) is True
    assert is_reachable(4) is True
    assert is_reachable(2) is False
    assert is_reachable(3) is False


@pytest.mark.parametrize("n", range(0, 60))
def test_square_free_prefix_permutation(n):
    result = square_free_prefix_permutation(n)
    total = n * (n + 1) // 2
    if n == 1 or math.isqrt(total) ** 2 == total:
        assert result is None
    else:
        assert sorted(result) == list(range(1, n + 1))
        prefix = 0
        for value in result:
            prefix += value
            assert math.isqrt(prefix) ** 2 != prefix


def test_square_free_prefix_permutation_rejects_negative():
    with pytest.raises(ValueError):
        square_free_prefix_permutation(-1)


def test_segment_values_contains_zero_and_elements():
    a = [3, 1, 3, 7]
    result = segment_values(a)
    assert result == sorted(result)
    assert set(result) == {0} | set(a)
    assert len(result) == len(set(result))


def test_segment_values_empty():
    assert segment_values([]) == [0]


def test_can_make_smaller_already_smaller():
    assert can_make_smaller("ab", 0) is True


def test_can_make_smaller_uniform_string():
    assert can_make_smaller("aaa", 5) is False


def test_can_make_smaller_needs_a_swap():
    assert can_make_smaller("ba", 0) is False
    assert can_make_smaller("ba", 1) is True
    assert can_make_smaller("aba", 0) is False
    assert can_make_smaller("aba", 1) is True


def test_min_length():
    assert min_length("abc") == len("abc")
    assert min_length("abba") == 1
    assert min_length("") == 0


def test_is_square():
    assert is_square(1, 1, 1, 1) is True
    assert is_square(2, -2, 2, -2) is True
    assert is_square(1, 2, 1, 1) is False


def test_max_dash_subsequences_single():
    assert max_dash_subsequences("-_-") == 1


def test_max_dash_subsequences_degenerate():
    assert max_dash_subsequences("--") == 0
    assert max_dash_subsequences("------") == 0
    assert max_dash_subsequences("____") == 0


def test_max_dash_subsequences_order_independent():
    assert max_dash_subsequences("--__-") == max_dash_subsequences("_-_--")


def test_max_teams_all_strong():
    a = [5, 6, 7]
    assert max_teams(a, 5) == len(a)


def test_max_teams_bounds_and_order():
    a = [2, 1, 4, 3, 1, 1]
    result = max_teams(a, 4)
    assert 0 <= result <= len(a)
    assert max_teams(list(reversed(a)), 4) == result
    assert max_teams([], 3) == 0


def test_max_last_side():
    assert max_last_side([5]) == 5
    base = [4, 2, 7]
    assert max_last_side(base + [6]) == max_last_side(base) + 6 - 1


@pytest.mark.parametrize("x", range(1, 200))
def test_xor_triangle_partner_forms_triangle(x):
    y = xor_triangle_partner(x)
    if y is not None:
        z = x ^ y
        assert 1 <= y < x
        assert x + y > z and x + z > y and y + z > x


@pytest.mark.parametrize("x", [1, 2, 4, 8, 64, 3, 7, 31])
def test_xor_triangle_partner_none_for_power_or_all_ones(x):
    assert xor_triangle_partner(x) is None