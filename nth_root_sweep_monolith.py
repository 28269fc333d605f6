#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Digit Root Sweep (MONOLITH)
===========================
Single-file verification run for the digit-by-digit n-th root:
- Window scan [xmin, xmax] (clamped to the unsigned width domain), or a seeded
  random sample of the domain (--samples, --seed)
- Every radicand solved by the extended stepper (groups consumed, exponentiations)
- Cross-check against an independent integer Newton iteration
- CSV rows; optional staircase PNG; optional stats JSON (numpy quantiles)

Example:
  python3 nth_root_sweep_monolith.py \
    --degree 3 --xmin 0 --xmax 100000 \
    --csv sweep_cube.csv --no-png --stats sweep_cube_stats.json

  python3 nth_root_sweep_monolith.py \
    --degree 7 --samples 5000 --seed 42 --png sweep_7.png

Notes
-----
- The Newton reference shares no code with the digit extraction; agreement of
  the two is what the sweep measures.
- PNG marks exact n-th powers (remainder 0) on top of the root staircase.
"""

from __future__ import annotations

import argparse
import csv
import json
import random
import sys
import time
from typing import Dict, List, Optional, Tuple

import numpy as np

# Optional for PNG
try:
    import matplotlib
    matplotlib.use("Agg")
    import matplotlib.pyplot as plt
    HAVE_MPL = True
except Exception:
    HAVE_MPL = False

from nth_root_ext import DigitRootExt
from nth_root_min import DEFAULT_BASE, DEFAULT_WIDTH, RootError, RootOverflow, check_degree, is_floor_root


__NTH_ROOT_CORE_VERSION__ = "v1-digit-blocks"
__CLI_VERSION__           = "v1.0-sweep"

NEWTON_MAX_ROUNDS = 10000


# ------------------------- Reference: integer Newton -------------------------

def reference_root(x: int, n: int) -> int:
    """
    floor(x^(1/n)) by integer Newton iteration from an upper guess.
    Raises RootOverflow for a negative x or if the iteration does not settle.
    """
    if x < 0:
        raise RootOverflow(f"radicand {x} outside unsigned domain")
    check_degree(n)
    if x == 0:
        return 0

    g = 1 << -(-x.bit_length() // n)  # guess, g^n > x
    i = 0
    while True:
        new_g = ((n - 1) * g + x // g ** (n - 1)) // n
        if new_g >= g:
            return g
        i += 1
        if i > NEWTON_MAX_ROUNDS:
            raise RootOverflow(f"no convergence after {i} rounds ({g}, {new_g})")
        g = new_g


# ------------------------- Radicand sources -------------------------

def window_radicands(xmin: int, xmax: int, width: int) -> range:
    top = (1 << width) - 1
    lo = max(0, xmin)
    hi = min(top, xmax)
    return range(lo, hi + 1)


def sampled_radicands(samples: int, width: int, seed: Optional[int]) -> List[int]:
    rng = random.Random(seed)
    top = (1 << width) - 1
    return sorted(rng.randint(0, top) for _ in range(samples))


# ------------------------- Staircase plot (PNG) -------------------------

def save_staircase_png(rows: List[Tuple[int, int, bool, int, int, int, bool]],
                       degree: int, base: int, png_path: str) -> None:
    """
    Root staircase: radicand vs root, exact n-th powers as stars,
    mismatches (if any) as red crosses.
    """
    xs = np.array([row[0] for row in rows], dtype=float)
    ys = np.array([row[1] for row in rows], dtype=float)
    exact = np.array([row[2] for row in rows], dtype=bool)
    bad = np.array([not row[6] for row in rows], dtype=bool)

    plt.figure(figsize=(7, 5), dpi=150)
    ax = plt.gca()

    if len(xs) > 2000:
        plt.scatter(xs, ys, s=1, alpha=0.35, color="tab:blue", label="root")
    else:
        plt.step(xs, ys, where="post", linewidth=0.8, color="tab:blue", label="root")
    if exact.any():
        plt.scatter(xs[exact], ys[exact], s=18, marker='*', color="tab:orange",
                    label=f"exact {degree}-th powers")
    if bad.any():
        plt.scatter(xs[bad], ys[bad], s=24, marker='x', color="red", label="mismatch")

    ax.minorticks_on()
    ax.grid(True, which='major', color="0.80", linewidth=0.6)
    ax.grid(True, which='minor', color="0.92", linewidth=0.3)
    plt.xlabel("radicand x", fontsize=9)
    plt.ylabel(rf"$\lfloor x^{{1/{degree}}} \rfloor$", fontsize=9)
    plt.title(f"Digit-by-digit root staircase: degree {degree}, base {base}", fontsize=11)
    plt.legend(loc="lower right", frameon=False, fontsize=8)
    plt.tight_layout()
    plt.savefig(png_path, dpi=150)
    plt.close()


# ------------------------- Main pipeline -------------------------

def run_sweep(degree: int, xmin: int, xmax: int,
              base: int, width: int,
              csv_path: str, png_path: Optional[str], write_png: bool,
              stats_path: Optional[str],
              samples: Optional[int] = None, seed: Optional[int] = None) -> Dict[str, int]:
    """
    End-to-end sweep in one function. Prints the summary block and returns
    {"checked", "exact", "mismatches"}.
    """
    check_degree(degree)
    if samples is not None:
        radicands = sampled_radicands(samples, width, seed)
    else:
        radicands = window_radicands(xmin, xmax, width)
    if len(radicands) == 0:
        print("[warn] no radicands to check (empty window or sample); nothing to do.")
        return {"checked": 0, "exact": 0, "mismatches": 0}

    t0 = time.time()
    rows: List[Tuple[int, int, bool, int, int, int, bool]] = []
    exact_count = 0
    mismatches = 0
    for x in radicands:
        dr = DigitRootExt(degree, x, base=base, width=width)
        y = dr.run()
        ref = reference_root(x, degree)
        exact = y ** degree == x
        ok = (y == ref) and is_floor_root(y, degree, x)
        if exact:
            exact_count += 1
        if not ok:
            mismatches += 1
        rows.append((x, y, exact, dr.blocks, dr.pow_evals, ref, ok))
    t1 = time.time()

    evals = np.array([row[4] for row in rows], dtype=float)

    print("=== Digit Root Sweep (monolith) ===")
    print(f"[core] {__NTH_ROOT_CORE_VERSION__} | [cli] {__CLI_VERSION__}")
    if samples is not None:
        print(f"Sample: {samples} radicand(s) from [0, 2^{width}) | seed: {seed}")
    else:
        print(f"Window requested: [{xmin}, {xmax}] | Effective: [{radicands[0]}, {radicands[-1]}]")
    print(f"Degree: {degree} | Base: {base} | Width: {width}")
    print(f"Checked: {len(rows)} | Exact powers: {exact_count} | Mismatches: {mismatches}")
    print(f"Exponentiations: mean={evals.mean():.2f} max={int(evals.max())} | Scan: {t1 - t0:.3f}s")

    with open(csv_path, "w", newline="") as f:
        w = csv.writer(f)
        w.writerow(["radicand", "root", "exact", "groups", "pow_evals", "reference", "ok"])
        for (x, y, exact, groups, pow_evals, ref, ok) in rows:
            w.writerow([x, y, bool(exact), groups, pow_evals, ref, bool(ok)])
    print(f"[saved] {csv_path}")

    if write_png and png_path:
        if HAVE_MPL:
            save_staircase_png(rows, degree, base, png_path)
            print(f"[saved] {png_path}")
        else:
            print("[warn] matplotlib unavailable; PNG skipped.")

    if stats_path:
        ps = [0.00, 0.25, 0.50, 0.75, 0.90, 0.99, 1.00]
        qs = np.quantile(evals, ps)
        stats = {
            "window": ({"samples": samples, "seed": seed} if samples is not None
                       else {"xmin": xmin, "xmax": xmax,
                             "effective_xmin": radicands[0], "effective_xmax": radicands[-1]}),
            "degree": degree,
            "base": base,
            "width": width,
            "timing": {"scan_sec": t1 - t0},
            "counts": {
                "checked": len(rows),
                "exact_powers": exact_count,
                "mismatches": mismatches,
            },
            "pow_evals_quantiles": {f"Q{int(100 * p_)}": float(q) for p_, q in zip(ps, qs)},
            "pow_evals_mean": float(evals.mean()),
        }
        with open(stats_path, "w") as jf:
            json.dump(stats, jf, indent=2)
        print(f"[saved] {stats_path}")

    return {"checked": len(rows), "exact": exact_count, "mismatches": mismatches}


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Digit Root Sweep (monolith)")

    ap.add_argument("--degree", type=int, required=True)
    ap.add_argument("--xmin", type=int, default=0)
    ap.add_argument("--xmax", type=int, default=10000)
    ap.add_argument("--base", type=int, default=DEFAULT_BASE)
    ap.add_argument("--width", type=int, default=DEFAULT_WIDTH, help="Bit width of the radicand domain")
    ap.add_argument("--samples", type=int, default=None,
                    help="Draw this many random radicands from the whole domain instead of a window")
    ap.add_argument("--seed", type=int, default=None, help="Seed for --samples")

    ap.add_argument("--csv", type=str, default="nth_root_sweep.csv")
    ap.add_argument("--png", type=str, default="nth_root_staircase.png")
    ap.add_argument("--no-png", action="store_true", help="Disable PNG even if matplotlib is available")
    ap.add_argument("--stats", type=str, default=None, help="Optional stats JSON path")

    args = ap.parse_args(argv)
    if args.base < 2:
        ap.error(f"--base must be >= 2, got {args.base}")
    if args.samples is not None and args.samples < 1:
        ap.error(f"--samples must be >= 1, got {args.samples}")

    try:
        summary = run_sweep(
            degree=args.degree,
            xmin=args.xmin, xmax=args.xmax,
            base=args.base, width=args.width,
            csv_path=args.csv,
            png_path=args.png,
            write_png=(not args.no_png),
            stats_path=args.stats,
            samples=args.samples, seed=args.seed,
        )
    except RootError as e:
        print(f"[error] {e}", file=sys.stderr)
        return 1

    return 1 if summary["mismatches"] else 0


if __name__ == "__main__":
    sys.exit(main())
