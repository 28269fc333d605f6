# nth_root_min.py

from typing import Iterator, Optional, Tuple

DEFAULT_BASE = 10
DEFAULT_WIDTH = 32  # unsigned radicand domain: 0 <= x < 2**32


class RootError(Exception):
    """Base class for every failure of the root extraction."""


class InvalidDegree(RootError):
    """Degree below 1. A 0th root would undo division applied zero times."""


class RootOverflow(RootError):
    """Radicand outside the fixed-width domain, or the loop failed to converge."""


# ------------------------- Numeric helpers -------------------------

def check_degree(degree: int) -> int:
    if degree < 1:
        raise InvalidDegree(f"{degree}th root is strictly unsupported computation.")
    return degree


def check_unsigned(num: int) -> int:
    if num < 0:
        raise RootOverflow(f"radicand {num} outside unsigned domain")
    return num


def check_radicand(radicand: int, width: int = DEFAULT_WIDTH) -> int:
    if radicand < 0 or radicand >> width:
        raise RootOverflow(f"radicand {radicand} outside unsigned {width}-bit domain")
    return radicand


def check_base(base: int) -> int:
    if base < 2:
        raise ValueError(f"numeral base must be >= 2, got {base}")
    return base


def digit_count(num: int, base: int = DEFAULT_BASE) -> int:
    """Number of base-`base` digits of num (0 has none)."""
    check_unsigned(num)
    places = 0
    while num:
        num //= base
        places += 1
    return places


def bounded_pow(value: int, exponent: int, bound: int) -> Optional[int]:
    """
    value**exponent if it does not exceed bound, else None.
    Multiplies step by step and stops as soon as the partial product passes bound.
    """
    acc = 1
    for _ in range(exponent):
        acc *= value
        if acc > bound:
            return None
    return acc


def is_floor_root(y: int, degree: int, x: int) -> bool:
    return y ** degree <= x < (y + 1) ** degree


# ------------------------- Digit-block generator -------------------------

class AlphaGenerator:
    """
    Peels `num` into groups of `siz` base digits, most-significant group first.
    The top group may be shorter than `siz`; it is returned as its numeric value.
    Once the operative number is exhausted every call returns 0.
    """

    def __init__(self, num: int, siz: int, base: int = DEFAULT_BASE):
        check_degree(siz)
        check_base(base)
        check_unsigned(num)
        self.num: int = num   # operative number
        self.siz: int = siz   # block size (root degree)
        self.base: int = base
        places = digit_count(num, base)
        self.blocks: int = -(-places // siz)
        self.plc: int = self.blocks * siz  # operative place count, whole blocks

    def next(self) -> int:
        num = self.num
        if num == 0:
            return 0

        plc = self.plc - self.siz
        pw = self.base ** plc
        alpha = num // pw

        self.num = num % pw
        self.plc = plc
        return alpha

    def __iter__(self) -> Iterator[int]:
        return self

    def __next__(self) -> int:
        return self.next()


# ------------------------- Step solver -------------------------

def next_step(root: int, remainder: int, bdp: int, alpha: int, degree: int,
              base: int = DEFAULT_BASE) -> Tuple[int, int]:
    """
    One digit of the root. Finds the largest beta in 0..base-1 with
        (base*y + beta)^n - bdp*y^n <= bdp*r + alpha
    and returns (base*y + beta, limit - delta).
    """
    widened = root * base
    subtrahend = bdp * root ** degree
    limit = bdp * remainder + alpha

    # beta = 0 always fits: widened^n == bdp * y^n
    beta, delta = 0, 0
    for cand in range(1, base):
        cand_delta = (widened + cand) ** degree - subtrahend
        if cand_delta > limit:
            break
        beta, delta = cand, cand_delta

    return widened + beta, limit - delta


# ------------------------- Driver -------------------------

def nth_root(degree: int, radicand: int, base: int = DEFAULT_BASE,
             width: int = DEFAULT_WIDTH) -> int:
    """Greatest y with y**degree <= radicand. Raises InvalidDegree / RootOverflow."""
    check_degree(degree)
    check_radicand(radicand, width)

    bdp = base ** degree
    alphas = AlphaGenerator(radicand, degree, base)
    y, r = 0, 0

    # every group, plus one step to see the next digit overshoot
    for _ in range(alphas.blocks + 1):
        cand_y, cand_r = next_step(y, r, bdp, alphas.next(), degree, base)
        power = bounded_pow(cand_y, degree, radicand)
        if power is None:
            return y
        if power == radicand:
            return cand_y
        y, r = cand_y, cand_r

    # unreachable with exact arithmetic: after all groups y >= base**(blocks-1),
    # so (base*y)**degree > radicand and the last step overshoots
    raise RootOverflow(
        f"no convergence after {alphas.blocks + 1} steps (degree={degree}, radicand={radicand})")


def root(degree: int, radicand: int) -> Optional[int]:
    """Integer n-th root of an unsigned 32-bit radicand, or None for degree 0."""
    try:
        return nth_root(degree, radicand)
    except InvalidDegree:
        return None


if __name__ == "__main__":
    print([root(3, 8), root(2, 312), root(3, 10_218_313), root(0, 5)])
