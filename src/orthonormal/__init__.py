from .GramSchmidt import GramSchmidt, gram_schmidt
from .GramSchmidtInPlace import GramSchmidtInPlace, gram_schmidt_inplace
from .Orthonormality import (
    IsOrthonormal,
    OrthonormalityDefect,
    PrefixSpanResiduals,
    is_orthonormal,
    orthonormality_defect,
    prefix_span_residuals,
)

__all__ = [
    "gram_schmidt",
    "gram_schmidt_inplace",
    "is_orthonormal",
    "orthonormality_defect",
    "prefix_span_residuals",
    "GramSchmidt",
    "GramSchmidtInPlace",
    "IsOrthonormal",
    "OrthonormalityDefect",
    "PrefixSpanResiduals",
]
