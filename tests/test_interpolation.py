import pytest
from hypothesis import given
from hypothesis import strategies as st

from share_recovery.interpolation import interpolate_at_zero


def _poly(coeffs, x):
    return sum(c * x**i for i, c in enumerate(coeffs))


def test_line_through_three_points():
    assert interpolate_at_zero([(1, 3), (2, 5), (3, 7)]) == 1


def test_non_consecutive_points():
    # y = x^2 + 3
    assert interpolate_at_zero([(1, 4), (2, 7), (6, 39)]) == 3
    assert interpolate_at_zero([(2, 7), (3, 12), (6, 39)]) == 3


def test_single_point_is_constant():
    assert interpolate_at_zero([(5, 11)]) == 11


def test_corrupted_subset_truncates_toward_zero():
    # exact value is -5/2; truncation gives -2 where floor would give -3
    assert interpolate_at_zero([(1, 0), (3, 5)]) == -2
    # exact value is 5/2
    assert interpolate_at_zero([(1, 5), (3, 10)]) == 2


def test_invalid_point_sets():
    with pytest.raises(ValueError):
        interpolate_at_zero([])
    with pytest.raises(ValueError):
        interpolate_at_zero([(1, 2), (1, 3)])


@given(
    coeffs=st.lists(st.integers(min_value=-10**6, max_value=10**6), min_size=1, max_size=6),
    xs=st.sets(st.integers(min_value=1, max_value=40), min_size=6, max_size=6),
)
def test_recovers_constant_term(coeffs, xs):
    xs = sorted(xs)[: len(coeffs)]
    points = [(x, _poly(coeffs, x)) for x in xs]
    assert interpolate_at_zero(points) == coeffs[0]
