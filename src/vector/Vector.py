from __future__ import annotations

import numbers
import operator
from collections.abc import Iterable, Iterator
from functools import lru_cache
from typing import Any, TypeVar

import numpy as np

from ._common import as_components

V = TypeVar("V", bound="Vector")

# IEEE results (inf/nan) are part of the contract for division by zero.
_QUIET = {"divide": "ignore", "invalid": "ignore", "over": "ignore"}


class Vector:
    """Fixed-dimension Euclidean vector with float64 components.

    Concrete dimensions are subclasses produced by :func:`vector_type`
    (``Vector3``, ``Vector4``, ...). Arithmetic only combines vectors of the
    same concrete type and always returns a new vector; ``normalize``,
    ``scale_with_dot_prod`` and item assignment are the mutating operations.
    """

    DIM: int = 0
    __slots__ = ("_c",)
    __hash__ = None  # type: ignore[assignment]
    # numpy binary operators defer to the reflected methods below.
    __array_ufunc__ = None

    def __init__(self, components: Any) -> None:
        cls = type(self)
        if cls.DIM <= 0:
            raise TypeError("Vector has no dimension; use vector_type(dim), Vector3 or Vector4.")
        self._c = as_components("components", components, cls.DIM)

    @classmethod
    def _wrap(cls: type[V], arr: np.ndarray) -> V:
        out = cls.__new__(cls)
        out._c = arr
        return out

    @classmethod
    def new(cls: type[V], components: Any) -> V:
        return cls(components)

    @classmethod
    def empty(cls: type[V]) -> V:
        """Zero vector, the identity for ``+``."""
        if cls.DIM <= 0:
            raise TypeError("Vector has no dimension; use vector_type(dim), Vector3 or Vector4.")
        return cls._wrap(np.zeros(cls.DIM, dtype=np.float64))

    @classmethod
    def sum(cls: type[V], vectors: Iterable[V]) -> V:
        """Fold ``vectors`` with ``+`` from ``empty()``, strictly in iteration order."""
        total = cls.empty()
        for v in vectors:
            total = total + v
        return total

    @property
    def components(self) -> np.ndarray:
        return self._c.copy()

    def get_component(self, index: int) -> float:
        return float(self._c[operator.index(index)])

    def copy(self: V) -> V:
        return self._wrap(self._c.copy())

    def __len__(self) -> int:
        return type(self).DIM

    def __getitem__(self, index: int) -> float:
        return float(self._c[operator.index(index)])

    def __setitem__(self, index: int, value: float) -> None:
        self._c[operator.index(index)] = float(value)

    def __iter__(self) -> Iterator[float]:
        return iter(self._c.tolist())

    def __array__(self, dtype: Any = None, copy: Any = None) -> np.ndarray:
        return np.array(self._c, dtype=dtype, copy=True)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._c.tolist()!r})"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return bool(np.array_equal(self._c, other._c))  # type: ignore[attr-defined]

    def __add__(self: V, other: V) -> V:
        if type(other) is not type(self):
            return NotImplemented
        with np.errstate(**_QUIET):
            return self._wrap(self._c + other._c)

    def __sub__(self: V, other: V) -> V:
        if type(other) is not type(self):
            return NotImplemented
        with np.errstate(**_QUIET):
            return self._wrap(self._c - other._c)

    def __mul__(self: V, k: float) -> V:
        if not isinstance(k, numbers.Real):
            return NotImplemented
        with np.errstate(**_QUIET):
            return self._wrap(self._c * float(k))

    __rmul__ = __mul__

    def __truediv__(self: V, k: float) -> V:
        if not isinstance(k, numbers.Real):
            return NotImplemented
        with np.errstate(**_QUIET):
            return self._wrap(self._c / float(k))

    def __neg__(self: V) -> V:
        return self._wrap(-self._c)

    def scale(self: V, k: float) -> V:
        return self * k

    @staticmethod
    def dot_product(a: Vector, b: Vector) -> float:
        if type(a) is not type(b):
            raise TypeError("dot_product requires two vectors of the same type.")
        # Accumulate in index order.
        total = 0.0
        for x, y in zip(a._c.tolist(), b._c.tolist()):
            total += x * y
        return total

    def length(self) -> float:
        return float(np.sqrt(Vector.dot_product(self, self)))

    def normalized(self: V) -> V:
        return self / self.length()

    def normalize(self) -> None:
        """Divide this vector by its length in place.

        A zero vector becomes all-NaN; no error is raised.
        """
        self._c = self.normalized()._c

    def scale_with_dot_prod(self, other: Vector) -> None:
        """Replace each component ``c_i`` by ``c_i * c_i * other_i`` in place."""
        if type(other) is not type(self):
            raise TypeError("scale_with_dot_prod requires two vectors of the same type.")
        with np.errstate(**_QUIET):
            self._c = self._c * self._c * other._c


@lru_cache(maxsize=None)
def _vector_type(dim: int) -> type[Vector]:
    return type(f"Vector{dim}", (Vector,), {"DIM": dim, "__slots__": (), "__module__": __name__})


def vector_type(dim: int) -> type[Vector]:
    """Return the (cached) concrete vector class of dimension ``dim``."""
    dim = operator.index(dim)
    if dim < 1:
        raise ValueError("dim must be positive.")
    return _vector_type(dim)


Vector3 = vector_type(3)
Vector4 = vector_type(4)
