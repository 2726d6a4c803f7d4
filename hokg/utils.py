"""Integer helpers: gcd, modular inverse and the package's errors."""

from __future__ import annotations


class HokgError(Exception):
    """Raised when key generation or a curve operation cannot proceed."""


class NoInverseError(HokgError):
    """Raised when a number has no inverse modulo the given modulus."""


def _trunc_rem(a: int, m: int) -> int:
    """Remainder whose sign follows the dividend (truncating division)."""
    r = abs(a) % abs(m)
    return -r if a < 0 else r


def _trunc_div(a: int, b: int) -> int:
    """Quotient rounded towards zero."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by the Euclidean algorithm."""
    while b:
        a, b = b, _trunc_rem(a, b)
    return a


def _extended_gcd(a: int, b: int) -> tuple[int, int, int]:
    """Return ``(g, x, y)`` with ``a*x + b*y == g``."""
    old_r, r = a, b
    old_x, x = 1, 0
    old_y, y = 0, 1
    while r:
        quotient = _trunc_div(old_r, r)
        old_r, r = r, old_r - quotient * r
        old_x, x = x, old_x - quotient * x
        old_y, y = y, old_y - quotient * y
    return old_r, old_x, old_y


def mod_inverse(a: int, m: int) -> int:
    """Return the inverse of ``a`` modulo ``m``.

    Raises NoInverseError when the extended Euclidean algorithm does not
    end with a gcd of exactly 1.
    """
    g, x, _ = _extended_gcd(a, m)
    if g != 1:
        raise NoInverseError("Modular inverse does not exist")
    return _trunc_rem(_trunc_rem(x, m) + m, m)