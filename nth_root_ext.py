# nth_root_ext.py

from typing import Iterator, List, Tuple

from nth_root_min import (
    DEFAULT_BASE,
    DEFAULT_WIDTH,
    AlphaGenerator,
    RootOverflow,
    bounded_pow,
    check_degree,
    check_radicand,
    next_step,
)

Step = Tuple[int, int, int, int, bool]  # (alpha, beta, root, remainder, done)


class DigitRootExt:
    """
    Extended digit-by-digit root: same loop as nth_root, advanced one group per tick.
    Keeps the step trace observable and counts the exponentiations spent in the
    digit searches, so callers can watch the root grow digit by digit.
    """

    def __init__(self, degree: int, radicand: int, base: int = DEFAULT_BASE,
                 width: int = DEFAULT_WIDTH):
        check_degree(degree)
        check_radicand(radicand, width)
        self.degree: int = degree
        self.radicand: int = radicand
        self.base: int = base
        self.bdp: int = base ** degree
        self.alphas = AlphaGenerator(radicand, degree, base)
        self.blocks: int = self.alphas.blocks

        # y, r threaded through the loop
        self.y: int = 0
        self.r: int = 0
        self.done: bool = False
        self.last: Step = (0, 0, 0, 0, False)

        # stats
        self.ticks: int = 0
        self.pow_evals: int = 0

    @property
    def result(self) -> int:
        if not self.done:
            raise RuntimeError("root not finished; call run() or exhaust enumerate()")
        return self.y

    def tick(self) -> Step:
        """
        Consume one alpha group and return (alpha, beta, root, remainder, done).
        After completion the final record is returned again and nothing is consumed.
        """
        if self.done:
            return self.last
        if self.ticks > self.blocks:
            raise RootOverflow(
                f"no convergence after {self.ticks} steps (degree={self.degree}, radicand={self.radicand})")

        alpha = self.alphas.next()
        self.ticks += 1

        # 1) next digit
        widened = self.y * self.base
        cand_y, cand_r = next_step(self.y, self.r, self.bdp, alpha, self.degree, self.base)
        beta = cand_y - widened
        # candidates 1..beta accepted, plus the one that failed (if any was tried)
        self.pow_evals += beta + (1 if beta < self.base - 1 else 0)

        # 2) compare against the radicand
        power = bounded_pow(cand_y, self.degree, self.radicand)
        if power is None:
            # overshoot: previous root is final
            self.done = True
            self.last = (alpha, beta, self.y, self.r, True)
            return self.last

        self.y, self.r = cand_y, cand_r
        self.done = power == self.radicand
        self.last = (alpha, beta, self.y, self.r, self.done)
        return self.last

    def enumerate(self) -> Iterator[Step]:
        """Yield step records until the root is final."""
        while not self.done:
            yield self.tick()

    def run(self) -> int:
        for _ in self.enumerate():
            pass
        return self.y

    def trace(self) -> List[Step]:
        return list(self.enumerate())


if __name__ == "__main__":
    dr = DigitRootExt(3, 10_218_313)
    for step in dr.enumerate():
        print(step)
    print(dr.result, dr.pow_evals)
