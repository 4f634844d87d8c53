from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any, TypeVar

from vector import Vector

logger = logging.getLogger(__name__)

V = TypeVar("V", bound=Vector)

_DEFAULT_TOL = 1e-12


def check_member(index: int, v: Any, cls: type[Vector] | None) -> type[Vector]:
    """Check that ``basis[index]`` is a vector of the same type as ``basis[0]``."""
    if not isinstance(v, Vector):
        raise TypeError(f"basis[{index}] must be a Vector, got {type(v).__name__}.")
    if cls is not None and type(v) is not cls:
        raise TypeError(
            f"basis[{index}] is a {type(v).__name__}, expected {cls.__name__} like basis[0]."
        )
    return type(v)


def project_out(prior: Iterable[V], v: V) -> V:
    """Subtract from ``v`` its projections onto the (orthonormal) ``prior`` vectors.

    The projections are summed first, left to right, and subtracted once.
    """
    projection_sum = type(v).sum(b * Vector.dot_product(b, v) for b in prior)
    return v - projection_sum


def orthonormalize_against(
    prior: Iterable[V],
    v: V,
    index: int,
    *,
    check_independence: bool = False,
    tol: float = _DEFAULT_TOL,
) -> V:
    """Single modified Gram-Schmidt step shared by the pure and in-place forms."""
    residual = project_out(prior, v)
    if check_independence:
        ref = v.length()
        res = residual.length()
        # `not >` also rejects NaN and a zero input.
        if not res > tol * ref:
            logger.debug("basis[%d]: residual length %g vs input length %g.", index, res, ref)
            raise ValueError(f"basis[{index}] is linearly dependent on the preceding vectors.")
    return residual.normalized()
