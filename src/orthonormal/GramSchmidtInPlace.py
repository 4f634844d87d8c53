from __future__ import annotations

from collections.abc import MutableSequence
from itertools import islice
from typing import TypeVar

from vector import Vector

from ._core import _DEFAULT_TOL, check_member, orthonormalize_against

V = TypeVar("V", bound=Vector)


def gram_schmidt_inplace(
    basis: MutableSequence[V],
    *,
    check_independence: bool = False,
    tol: float = _DEFAULT_TOL,
) -> None:
    """Orthonormalize ``basis`` in place, slot by slot in increasing index order.

    When slot ``i`` is written, slots ``0..i-1`` already hold their final
    values and slots ``i+1..`` still hold the caller's input. Results match
    :func:`gram_schmidt` bit for bit.
    """
    cls: type[Vector] | None = None
    for i in range(len(basis)):
        v = basis[i]
        cls = check_member(i, v, cls)
        basis[i] = orthonormalize_against(
            islice(basis, i), v, i, check_independence=check_independence, tol=tol
        )


def GramSchmidtInPlace(
    basis: MutableSequence[V],
    checkIndependence: bool = False,
    tol: float = _DEFAULT_TOL,
) -> None:
    gram_schmidt_inplace(basis, check_independence=checkIndependence, tol=tol)
