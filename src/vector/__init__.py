from .Vector import Vector, Vector3, Vector4, vector_type

__all__ = [
    "vector_type",
    "Vector",
    "Vector3",
    "Vector4",
]
