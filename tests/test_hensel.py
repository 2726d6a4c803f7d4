import pytest
from hypothesis import assume, given
from hypothesis import strategies as st

from hokg.hensel import hensel_lift
from hokg.utils import HokgError, NoInverseError


def test_seed_off_curve_is_rejected():
    with pytest.raises(HokgError, match="Initial point does not lie on the curve"):
        hensel_lift(5, 1, 1, 2, 3, 2)


def test_zero_exponent_returns_seed():
    assert hensel_lift(5, 1, 0, 2, 0, 0) == (2, 0)


@pytest.mark.parametrize("k", [1, 2, 3, 4])
def test_lift_preserves_residues(k):
    x, y = hensel_lift(5, 1, 0, 2, 0, k)
    assert x % 5 == 2
    assert y == 0
    assert 0 <= x < 5**k


def test_singular_derivative_has_no_inverse():
    with pytest.raises(NoInverseError):
        hensel_lift(5, 2, 2, 1, 0, 1)


def test_negative_exponent_rejected():
    with pytest.raises(ValueError):
        hensel_lift(5, 1, 0, 2, 0, -1)


@given(
    st.sampled_from([5, 7, 11, 13]),
    st.integers(min_value=0, max_value=12),
    st.integers(min_value=0, max_value=12),
    st.integers(min_value=1, max_value=4),
)
def test_lift_of_two_torsion_seed_stays_congruent(p, x0, a, k):
    x0 %= p
    a %= p
    assume((3 * x0 * x0 + a) % p != 0)
    b = (-(x0**3) - a * x0) % p
    x, y = hensel_lift(p, a, b, x0, 0, k)
    assert x % p == x0
    assert y == 0
    assert 0 <= x < p**k