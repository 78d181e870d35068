# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""Memoized binomial coefficients."""

from typing import Dict, Tuple

from scipy.special import comb

from ..errors import InvalidArgumentError


class Binomial:
    """
    Binomial coefficient cache keyed by (n, k).

    Each :class:`~compgeo.curves.BezierCurve` owns one instance; the cache
    grows with the degree of the curve, which stays small in practice.
    """

    def __init__(self):
        self._cache: Dict[Tuple[int, int], int] = {}

    def of(self, n: int, k: int) -> int:
        """
        C(n, k).

        :raises InvalidArgumentError: Unless 0 <= k <= n.
        """
        if n < 0 or k < 0 or k > n:
            raise InvalidArgumentError(f"Binomial coefficient undefined for n={n}, k={k}")
        key = (n, k)
        if key not in self._cache:
            self._cache[key] = int(comb(n, k, exact=True))
        return self._cache[key]

    def row(self, n: int) -> Tuple[int, ...]:
        """C(n, 0) .. C(n, n)."""
        return tuple(self.of(n, k) for k in range(n + 1))

    def __len__(self) -> int:
        return len(self._cache)
