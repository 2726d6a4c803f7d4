"""Elliptic curve scalar multiplication modulo an arbitrary modulus."""

from __future__ import annotations

from .point import INFINITY, Infinity, Point
from .utils import _trunc_rem, mod_inverse

CurvePoint = Point | Infinity


def _double(point: CurvePoint, a: int, modulus: int) -> CurvePoint:
    if isinstance(point, Infinity) or point.y == 0:
        return INFINITY
    x, y = point.x, point.y
    slope = _trunc_rem((3 * x * x + a) * mod_inverse(2 * y, modulus), modulus)
    x3 = _trunc_rem(slope * slope - x - x, modulus)
    y3 = _trunc_rem(slope * (x - x3) - y, modulus)
    return Point(x3, y3)


def _add(p: CurvePoint, q: CurvePoint, a: int, modulus: int) -> CurvePoint:
    if isinstance(p, Infinity):
        return q
    if isinstance(q, Infinity):
        return p
    x1, y1, x2, y2 = p.x, p.y, q.x, q.y
    if x1 == x2 and y1 == -y2:
        return INFINITY
    if x1 == x2 and y1 == y2:
        inv = mod_inverse(2 * y1, modulus)
        slope = _trunc_rem((3 * x1 * x1 + a) * inv, modulus)
    else:
        inv = mod_inverse(x2 - x1, modulus)
        slope = _trunc_rem((y2 - y1) * inv, modulus)
    x3 = _trunc_rem(slope * slope - x1 - x2, modulus)
    y3 = _trunc_rem(slope * (x1 - x3) - y1, modulus)
    return Point(x3, y3)


def elliptic_curve_multiply(
    scalar: int, point: CurvePoint, a: int, b: int, modulus: int
) -> CurvePoint:
    """Multiply ``point`` by ``scalar`` with a double-and-add ladder.

    The magnitude of the scalar is consumed byte by byte from the least
    significant byte, and within each byte from its high bit down; the
    running point is doubled after every bit. ``b`` is accepted for a
    uniform curve signature and does not enter the formulas.

    Raises NoInverseError when a slope denominator is not invertible.
    """
    magnitude = abs(scalar)
    length = max(1, (magnitude.bit_length() + 7) // 8)
    result: CurvePoint = INFINITY
    temp = point
    for byte in magnitude.to_bytes(length, "little"):
        for bit in range(7, -1, -1):
            if (byte >> bit) & 1:
                result = _add(result, temp, a, modulus)
            temp = _double(temp, a, modulus)
    return result