"""Iterative solver for linear complementarity problems."""

from __future__ import annotations

import math

from cyrengine.matrix import MatN
from cyrengine.vector import VecN


def lcp_gauss_seidel(a: MatN, b: VecN) -> VecN:
    """Solve ``a x = b`` with as many Gauss-Seidel sweeps as there are unknowns.

    A step whose size would be NaN or infinite (for instance from a zero on
    the diagonal) is skipped, leaving that unknown unchanged.
    """
    size = len(b)
    if a.n != size:
        raise ValueError(f"matrix of size {a.n} does not fit vector of size {size}")
    x = VecN(size)
    for _ in range(size):
        for i, (row, target) in enumerate(zip(a.rows, b)):
            try:
                dx = (target - row.dot(x)) / row[i]
            except ZeroDivisionError:
                continue
            if math.isfinite(dx):
                x[i] = x[i] + dx
    return x