from __future__ import annotations

from collections.abc import Iterable
from typing import TypeVar

from vector import Vector

from ._core import _DEFAULT_TOL, check_member, orthonormalize_against

V = TypeVar("V", bound=Vector)


def gram_schmidt(
    basis: Iterable[V],
    *,
    check_independence: bool = False,
    tol: float = _DEFAULT_TOL,
) -> list[V]:
    """Orthonormalize ``basis`` with modified Gram-Schmidt and return a new list.

    ``out[i]`` is ``basis[i]`` minus its projections onto ``out[0..i-1]``,
    normalized. The input vectors are not modified. Linearly dependent input
    yields NaN/Inf components unless ``check_independence`` is set, in which
    case a residual no longer than ``tol`` times the input raises ValueError.
    """
    output: list[V] = []
    cls: type[Vector] | None = None
    for i, v in enumerate(basis):
        cls = check_member(i, v, cls)
        output.append(
            orthonormalize_against(output, v, i, check_independence=check_independence, tol=tol)
        )
    return output


def GramSchmidt(
    basis: Iterable[V],
    checkIndependence: bool = False,
    tol: float = _DEFAULT_TOL,
) -> list[V]:
    return gram_schmidt(basis, check_independence=checkIndependence, tol=tol)
