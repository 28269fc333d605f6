#!/usr/bin/env python3
"""
Digit-by-digit n-th root: CLI

Computes floor(x^(1/n)) for unsigned fixed-width radicands by peeling the radicand
into n-digit groups and extracting one root digit per group, the way the manual
square-root algorithm does, generalized to any degree and numeral base.

Usage examples:
  - Cube root:
      python nth_root.py --degree 3 10_218_313

  - Square roots with the step trace (alpha, beta, root, remainder):
      python nth_root.py --degree 2 --trace 312 4 8

  - Fifth root in base 16 with floor-property checks and final stats:
      python nth_root.py --degree 5 --base 16 --check --stats 0xFFFFFFFF
"""

from __future__ import annotations
import argparse
import sys
from typing import List, Optional

from nth_root_ext import DigitRootExt
from nth_root_min import DEFAULT_BASE, DEFAULT_WIDTH, RootError, is_floor_root


__CLI_VERSION__ = "v1.0"


def parse_uint(val: str) -> int:
    """Integer literal as Python spells it: 10_218_313, 0xFF, 0o17, 0b101."""
    try:
        v = int(str(val).strip(), 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid integer: {val}")
    if v < 0:
        raise argparse.ArgumentTypeError(f"Negative values are unsupported: {val}")
    return v


def parse_base(val: str) -> int:
    b = parse_uint(val)
    if b < 2:
        raise argparse.ArgumentTypeError(f"Numeral base must be >= 2: {val}")
    return b


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Digit-by-digit n-th root of unsigned integers.")
    p.add_argument("radicands", metavar="RADICAND", type=parse_uint, nargs="+",
                   help="Radicand(s); accepts underscores and 0x/0o/0b prefixes.")
    p.add_argument("--degree", type=parse_uint, required=True, help="Root degree n (>= 1).")
    p.add_argument("--base", type=parse_base, default=DEFAULT_BASE,
                   help=f"Numeral base for digit extraction (default {DEFAULT_BASE}).")
    p.add_argument("--width", type=parse_uint, default=DEFAULT_WIDTH,
                   help=f"Bit width of the radicand domain (default {DEFAULT_WIDTH}).")
    p.add_argument("--trace", action="store_true", help="Print every extraction step.")
    p.add_argument("--check", action="store_true", help="Verify y^n <= x < (y+1)^n for each result.")
    p.add_argument("--stats", action="store_true", help="Print simple statistics at end.")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    ap = build_arg_parser()
    args = ap.parse_args(argv)

    groups = 0
    pow_evals = 0
    largest = 0
    failed_checks = 0

    for x in args.radicands:
        try:
            dr = DigitRootExt(args.degree, x, base=args.base, width=args.width)
            if args.trace:
                print(f"# root({args.degree}, {x}) base {args.base}: {dr.blocks} group(s)")
                for (alpha, beta, y, r, done) in dr.enumerate():
                    print(f"  alpha={alpha:<12} beta={beta:<3} root={y:<12} remainder={r}"
                          + ("  [done]" if done else ""))
            y = dr.run()
        except RootError as e:
            print(f"[error] {e}", file=sys.stderr)
            return 1

        print(y)
        groups += dr.blocks
        pow_evals += dr.pow_evals
        largest = max(largest, y)

        if args.check and not is_floor_root(y, args.degree, x):
            failed_checks += 1
            print(f"[warn] floor property violated: root({args.degree}, {x}) = {y}", file=sys.stderr)

    if args.stats:
        print("--- stats ---")
        print(f"radicands      : {len(args.radicands)}")
        print(f"groups consumed: {groups}")
        print(f"exponentiations: {pow_evals}")
        print(f"largest root   : {largest}")
        if args.check:
            print(f"failed checks  : {failed_checks}")

    return 1 if failed_checks else 0


if __name__ == "__main__":
    sys.exit(main())
