from __future__ import annotations

from collections.abc import Iterable, Sequence

import numpy as np
from scipy import linalg as sla

from vector import Vector

from ._core import check_member

_DEFAULT_ATOL = 1e-10


def _stack_rows(vectors: Iterable[Vector]) -> np.ndarray:
    rows: list[np.ndarray] = []
    cls: type[Vector] | None = None
    for i, v in enumerate(vectors):
        cls = check_member(i, v, cls)
        rows.append(v.components)
    if not rows:
        return np.zeros((0, 0), dtype=np.float64)
    return np.vstack(rows)


def orthonormality_defect(vectors: Sequence[Vector]) -> float:
    """Largest entry of ``|G - I|`` for the Gram matrix ``G[i, j] = <v_i, v_j>``."""
    n = len(vectors)
    if n == 0:
        return 0.0
    for i, v in enumerate(vectors):
        check_member(i, v, type(vectors[0]))
    G = np.empty((n, n), dtype=np.float64)
    for i in range(n):
        for j in range(n):
            G[i, j] = Vector.dot_product(vectors[i], vectors[j])
    with np.errstate(invalid="ignore"):
        return float(np.max(np.abs(G - np.eye(n))))


def is_orthonormal(vectors: Sequence[Vector], atol: float = _DEFAULT_ATOL) -> bool:
    return bool(orthonormality_defect(vectors) <= atol)


def prefix_span_residuals(basis: Sequence[Vector], output: Sequence[Vector]) -> np.ndarray:
    """Residual norm of ``output[i]`` after projection onto ``span(basis[0..i])``.

    Values near zero mean ``output[i]`` depends on no input past ``basis[i]``.
    Both sequences must be finite and of equal length and dimension.
    """
    A = _stack_rows(basis)
    Q = _stack_rows(output)
    if A.shape != Q.shape:
        raise ValueError("basis and output must have the same length and dimension.")

    res = np.zeros(A.shape[0], dtype=np.float64)
    for i in range(A.shape[0]):
        span = A[: i + 1, :].T
        coeffs, _, _, _ = sla.lstsq(span, Q[i, :])
        res[i] = np.linalg.norm(span @ coeffs - Q[i, :])
    return res


OrthonormalityDefect = orthonormality_defect
IsOrthonormal = is_orthonormal
PrefixSpanResiduals = prefix_span_residuals
