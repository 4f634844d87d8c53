from __future__ import annotations

import logging
import time as _time
from typing import Any

from orthonormal import gram_schmidt, gram_schmidt_inplace
from vector import Vector, Vector4

logger = logging.getLogger(__name__)

_DEFAULT_ITERATIONS = 10000

_CANONICAL_ROWS = (
    (1.0, 1.0, 1.0, 1.0),
    (0.0, 1.0, 0.0, 1.0),
    (0.0, 0.0, 1.0, 1.0),
    (0.0, 0.0, 0.0, 1.0),
)


def canonical_basis(vector_cls: type[Vector] = Vector4) -> list[Vector]:
    """Fresh copy of the standard demo input.

    Dimension 4 uses the four rows above; dimension 3 keeps the leading three
    components of the first three rows.
    """
    dim = vector_cls.DIM
    if dim not in (3, 4):
        raise ValueError("canonical_basis is defined for dimensions 3 and 4 only.")
    return [vector_cls(row[:dim]) for row in _CANONICAL_ROWS[:dim]]


def gram_schmidt_bench(
    iterations: int = _DEFAULT_ITERATIONS,
    *,
    inplace: bool = True,
    vector_cls: type[Vector] = Vector4,
) -> dict[str, Any]:
    """Time repeated orthonormalization of the canonical basis."""
    iterations = int(iterations)
    if iterations <= 0:
        raise ValueError("iterations must be positive.")

    result: list[Vector] = []
    t0 = _time.perf_counter()
    for _ in range(iterations):
        basis = canonical_basis(vector_cls)
        if inplace:
            gram_schmidt_inplace(basis)
            result = basis
        else:
            result = gram_schmidt(basis)
    elapsed = _time.perf_counter() - t0

    info: dict[str, Any] = {
        "iterations": iterations,
        "time": elapsed,
        "per_iter": elapsed / iterations,
        "result": result,
    }
    logger.info(
        "gram_schmidt (%s, %s): %d iterations in %.3f s (%.2f us/iter).",
        vector_cls.__name__,
        "in-place" if inplace else "pure",
        iterations,
        elapsed,
        1e6 * info["per_iter"],
    )
    return info


def GramSchmidtBench(
    iterations: int = _DEFAULT_ITERATIONS,
    inplace: bool = True,
    vectorCls: type[Vector] = Vector4,
) -> dict[str, Any]:
    return gram_schmidt_bench(iterations, inplace=inplace, vector_cls=vectorCls)
