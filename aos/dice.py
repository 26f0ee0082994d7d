"""
Dice probability primitives for six-sided dice tests.

Every roll in the attack sequence is a test of one or more d6 against a
threshold: a die succeeds when it shows the threshold or higher. Rolling a
batch of dice against the same threshold is a series of independent
Bernoulli trials, so the chance of exactly k successes out of n is
binomial. Binomial coefficients come from a memoized Pascal's triangle
that grows on demand.
"""

from __future__ import annotations


class BinomialTable:
    """An append-only cache of Pascal's triangle rows.

    The table is seeded with rows 0 through 8 and grows one row at a time,
    each new row computed from the one above it. Rows are tuples and never
    change once written, so a table can be shared by any number of
    computations. Growth is a pure function of the cached rows, which means
    two threads racing to grow the same table would only duplicate work.
    """

    SEED_ROWS = 9

    def __init__(self) -> None:
        self._rows: list[tuple[int, ...]] = [(1,)]
        self._grow(self.SEED_ROWS - 1)

    def __len__(self) -> int:
        return len(self._rows)

    def _grow(self, n: int) -> None:
        """Extend the table until row n is cached."""
        while n >= len(self._rows):
            prev = self._rows[-1]
            middle = tuple(prev[i - 1] + prev[i] for i in range(1, len(prev)))
            self._rows.append((1, *middle, 1))

    def binomial(self, n: int, k: int) -> int:
        """Return C(n, k), the number of ways to choose k of n items."""
        if n < 0 or not 0 <= k <= n:
            raise ValueError(f"binomial({n}, {k}) requires 0 <= k <= n")
        self._grow(n)
        return self._rows[n][k]


_default_table = BinomialTable()


def clamp(x: int, lo: int, hi: int) -> int:
    return lo if x <= lo else hi if x >= hi else x


def prob_dice(threshold: int) -> float:
    """The chance a single d6 shows threshold or higher.

    A 4+ succeeds on 4, 5 or 6, so prob_dice(4) is 3/6. Callers clamp the
    threshold to 1-6 first; a 1+ always succeeds.
    """
    return (7 - threshold) / 6


def prob_dice_test(rolls: int, successes: int, threshold: int, table: BinomialTable | None = None) -> float:
    """The chance of exactly ``successes`` out of ``rolls`` dice passing.

    Uses the binomial formula C(n, k) * p^k * (1 - p)^(n - k). Rolling no
    dice at all yields zero successes with certainty.

    Args:
        rolls: Number of dice rolled.
        successes: Exact number of dice that must pass.
        threshold: The value each die must meet or beat.
        table: Binomial cache to use; the module-wide table if omitted.
    """
    if table is None:
        table = _default_table
    p = prob_dice(threshold)
    fails = rolls - successes
    return table.binomial(rolls, successes) * p**successes * (1 - p) ** fails
