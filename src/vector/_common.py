from __future__ import annotations

from typing import Any

import numpy as np


def as_components(name: str, x: Any, dim: int) -> np.ndarray:
    """Copy ``x`` into a fresh float64 array of shape (dim,)."""
    arr = np.asarray(x)
    if np.iscomplexobj(arr):
        raise ValueError(f"{name} must be real.")
    if arr.ndim != 1:
        raise ValueError(f"{name} must be one-dimensional.")
    arr = np.array(arr, dtype=np.float64, copy=True)
    if arr.shape[0] != dim:
        raise ValueError(f"{name} must have exactly {dim} components, got {arr.shape[0]}.")
    return arr
