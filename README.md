# hokg

Hensel-Optimized Key Generation (HOKG) for elliptic curves.

HOKG takes a seed point on a small curve `y^2 = x^3 + ax + b (mod p)` and runs a
Hensel-style Newton step on its x-coordinate for each power `p^1 ... p^k`, giving a
base point modulo `p^k`. It then draws a random private key from `[1, p^k - 1]` and
multiplies the base point by it to get the public key. The whole setup is described
by six small numbers: `p`, `a`, `b`, `x0`, `y0` and `k`.

This is an experimental scheme for study. Do not use it to protect real data.

## Installation

```
pip install .
```

Add the `test` extra to get the test tools:

```
pip install ".[test]"
```

## Command line

```
hokg
```

Options, each an integer:

| Option | Default | Meaning             |
|--------|---------|---------------------|
| `--p`  | 5       | small prime         |
| `--a`  | 1       | curve parameter a   |
| `--b`  | 1       | curve parameter b   |
| `--x0` | 2       | seed x-coordinate   |
| `--y0` | 3       | seed y-coordinate   |
| `--k`  | 2       | lifting exponent    |

On success it prints the base point, the private key, the public key and the
minimal data. If key generation fails, it prints `Error: <message>` instead; the
exit status is 0 either way.

Note that the default seed `(2, 3)` does not lie on `y^2 = x^3 + x + 1 (mod 5)`, so
running `hokg` with no options prints `Error: Initial point does not lie on the curve`.
A seed that is on that curve:

```
hokg --x0 0 --y0 1
```

## Library use

```python
from hokg.keygen import Config, hokg

config = Config(p=5, a=1, b=1, x0=0, y0=1, k=2)
result = hokg(config)

print(result.base_point)
print(result.private_key)
print(result.public_key)
print(result.minimal_data)   # (p, a, b, x0, y0, k)
```

`hokg` returns a `HokgResult` named tuple. The private key is random, so repeated
calls give different keys; for some keys the multiplication meets a slope
denominator with no inverse modulo `p^k` and `NoInverseError` is raised.

`Config` raises `ValueError` if `p` is not a non-negative 64-bit integer or `k` is
negative. `hokg` raises `HokgError` if `p^k` does not fit in 64 bits or is less
than 2.

The building blocks can also be used on their own:

```python
from hokg.hensel import hensel_lift
from hokg.ecc import elliptic_curve_multiply
from hokg.point import Point, Infinity, INFINITY
from hokg.utils import gcd, mod_inverse

x, y = hensel_lift(5, 1, 1, 0, 1, 2)
public = elliptic_curve_multiply(7, Point(x, y), 1, 1, 25)
```

- `gcd(a, b)` is the Euclidean greatest common divisor.
- `mod_inverse(a, m)` raises `NoInverseError` when `a` has no inverse modulo `m`.
- `hensel_lift` raises `HokgError` when the seed point is not on the curve, and
  `ValueError` when `k` is negative.
- `elliptic_curve_multiply` uses double-and-add and returns an `Infinity` instance
  for the point at infinity. Its `b` argument does not enter the formulas.

`NoInverseError` is a subclass of `HokgError`. Invalid arguments raise `ValueError`.

## What it does not do

The package only generates a key pair. It does not sign, encrypt or exchange keys,
does not check that `p` is prime, and does not store or load keys.