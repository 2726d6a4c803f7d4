"""Hensel-optimised key generation over an elliptic curve modulo p**k."""

from __future__ import annotations

import secrets
from dataclasses import dataclass
from typing import NamedTuple

from .ecc import elliptic_curve_multiply
from .hensel import hensel_lift
from .point import Infinity, Point
from .utils import HokgError

_U64_MAX = 2**64 - 1


@dataclass(frozen=True)
class Config:
    """Curve ``y^2 = x^3 + ax + b`` over ``p``, seed point and lifting exponent."""

    p: int
    a: int
    b: int
    x0: int
    y0: int
    k: int

    def __post_init__(self) -> None:
        if not 0 <= self.p <= _U64_MAX:
            raise ValueError("p must be a non-negative 64-bit integer")
        if self.k < 0:
            raise ValueError("k must be non-negative")

    def as_tuple(self) -> tuple[int, int, int, int, int, int]:
        """The configuration values in declaration order."""
        return (self.p, self.a, self.b, self.x0, self.y0, self.k)


class HokgResult(NamedTuple):
    """Base point, private key, public key and the configuration used."""

    base_point: Point
    private_key: int
    public_key: Point | Infinity
    minimal_data: tuple[int, int, int, int, int, int]


def hokg(config: Config) -> HokgResult:
    """Generate a key pair from ``config``.

    The seed is lifted to modulo ``p**k``, a private key is drawn from
    ``[1, p**k - 1]`` and the public key is the lifted point times that key.
    Raises HokgError when any step fails.
    """
    modulus = config.p**config.k
    if modulus > _U64_MAX:
        raise HokgError("Modulus too large for u64")

    x_k, y_k = hensel_lift(config.p, config.a, config.b, config.x0, config.y0, config.k)
    base_point = Point(x_k, y_k)

    if modulus < 2:
        raise HokgError("Modulus must be at least 2 to draw a private key")
    private_key = secrets.randbits(64) % (modulus - 1) + 1

    public_key = elliptic_curve_multiply(private_key, base_point, config.a, config.b, modulus)
    return HokgResult(base_point, private_key, public_key, config.as_tuple())