"""Timing and demonstration callers for :mod:`orthonormal`.

These sit outside the numeric core and only drive it:

* ``GramSchmidtBench``
"""

from .GramSchmidtBench import GramSchmidtBench, canonical_basis, gram_schmidt_bench

__all__ = [
    "canonical_basis",
    "gram_schmidt_bench",
    "GramSchmidtBench",
]
