"""Hensel lifting of a curve point from modulo p to modulo p**k."""

from __future__ import annotations

from .utils import HokgError, _trunc_rem, mod_inverse


def _rhs(x: int, a: int, b: int) -> int:
    return x * x * x + a * x + b


def hensel_lift(p: int, a: int, b: int, x0: int, y0: int, k: int) -> tuple[int, int]:
    """Lift the seed ``(x0, y0)`` on ``y^2 = x^3 + ax + b (mod p)`` to modulo ``p**k``.

    Raises HokgError if the seed is not on the curve or lifting fails.
    """
    if k < 0:
        raise ValueError("lifting exponent must be non-negative")

    if _trunc_rem(y0 * y0, p) != _trunc_rem(_rhs(x0, a, b), p):
        raise HokgError("Initial point does not lie on the curve")

    x, y = x0, y0
    for i in range(1, k + 1):
        modulus = p**i
        f_prime = _trunc_rem(3 * x * x + a, modulus)
        f_x = _trunc_rem(y * y - _rhs(x, a, b), modulus)
        delta_x = _trunc_rem(f_x * mod_inverse(f_prime, modulus), modulus)
        x = _trunc_rem(x - delta_x, modulus)

        if _trunc_rem(_rhs(x, a, b), modulus) < 0:
            raise HokgError("Negative right side in Hensel lifting")
        y = _trunc_rem(y + modulus, modulus)

    return x, y