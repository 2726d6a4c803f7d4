"""Command line entry point: generate and print a key pair."""

from __future__ import annotations

import argparse

from .keygen import Config, hokg
from .utils import HokgError


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hokg", description="Generate an elliptic curve key pair by Hensel lifting."
    )
    parser.add_argument("--p", type=int, default=5, help="small prime")
    parser.add_argument("--a", type=int, default=1, help="curve parameter a")
    parser.add_argument("--b", type=int, default=1, help="curve parameter b")
    parser.add_argument("--x0", type=int, default=2, help="seed x-coordinate")
    parser.add_argument("--y0", type=int, default=3, help="seed y-coordinate")
    parser.add_argument("--k", type=int, default=2, help="lifting exponent")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run key generation and print the result or the error."""
    args = _parser().parse_args(argv)
    try:
        config = Config(p=args.p, a=args.a, b=args.b, x0=args.x0, y0=args.y0, k=args.k)
        base_point, private_key, public_key, minimal_data = hokg(config)
    except (HokgError, ValueError) as exc:
        print(f"Error: {exc}")
        return 0
    print(f"Base Point: {base_point}")
    print(f"Private Key: {private_key}")
    print(f"Public Key: {public_key}")
    print(f"Minimal Data: {minimal_data}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())