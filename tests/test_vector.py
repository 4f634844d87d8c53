import warnings

import numpy as np
import pytest

from vector import Vector, Vector3, Vector4, vector_type


class TestVectorArithmetic:
    def test_dot_product(self):
        v1 = Vector4([1.0, 2.0, 3.0, 6.0])
        v2 = Vector4([3.0, 4.0, 5.0, 7.0])
        assert Vector4.dot_product(v1, v2) == 68.0

    def test_length(self):
        assert Vector4([4.0, 4.0, 4.0, 4.0]).length() == 8.0
        assert Vector4([3.0, 4.0, 5.0, 7.0]).length() == np.sqrt(99.0)

    def test_normalize_in_place(self):
        v = Vector4([4.0, 4.0, 4.0, 4.0])
        v.normalize()
        assert v == Vector4([0.5, 0.5, 0.5, 0.5])

    def test_normalized_leaves_receiver(self):
        v = Vector4([4.0, 4.0, 4.0, 4.0])
        u = v.normalized()
        assert u == Vector4([0.5, 0.5, 0.5, 0.5])
        assert v == Vector4([4.0, 4.0, 4.0, 4.0])

    def test_scale_with_dot_prod(self):
        v1 = Vector4([1.0, 2.0, 3.0, 6.0])
        v2 = Vector4([3.0, 4.0, 5.0, 7.0])
        v1.scale_with_dot_prod(v2)
        assert v1 == Vector4([3.0, 16.0, 45.0, 252.0])

    def test_componentwise_operators(self):
        a = Vector3([1.0, 2.0, 3.0])
        b = Vector3([0.5, -1.0, 4.0])
        assert a + b == Vector3([1.5, 1.0, 7.0])
        assert a - b == Vector3([0.5, 3.0, -1.0])
        assert a * 2.0 == Vector3([2.0, 4.0, 6.0])
        assert 2.0 * a == a.scale(2.0)
        assert a / 2.0 == Vector3([0.5, 1.0, 1.5])
        assert -a == Vector3([-1.0, -2.0, -3.0])
        # operands are untouched
        assert a == Vector3([1.0, 2.0, 3.0])

    def test_numpy_scalar_operands(self):
        a = Vector4([1.0, 2.0, 3.0, 4.0])
        left = np.float64(2.0) * a
        assert isinstance(left, Vector4)
        assert left == a * 2.0
        assert isinstance(a * np.float64(2.0), Vector4)
        assert isinstance(a / np.float64(2.0), Vector4)
        # ndarray comparison is not elementwise
        assert (np.array([1.0, 2.0, 3.0, 4.0]) == a) is False
        np.testing.assert_array_equal(np.asarray(a), [1.0, 2.0, 3.0, 4.0])

    def test_sum_is_left_fold_from_empty(self):
        vs = [Vector3([0.1, 1e16, -1.0]), Vector3([0.2, 1.0, 2.0]), Vector3([0.3, -1e16, 3.0])]
        expected = ((Vector3.empty() + vs[0]) + vs[1]) + vs[2]
        assert Vector3.sum(vs) == expected
        assert Vector3.sum([]) == Vector3.empty()
        assert Vector3.empty() == Vector3([0.0, 0.0, 0.0])

    def test_division_by_zero_propagates(self):
        v = Vector3([1.0, 0.0, -1.0])
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            out = v / 0.0
        assert out[0] == np.inf
        assert np.isnan(out[1])
        assert out[2] == -np.inf

    def test_normalize_zero_vector_is_nan(self):
        v = Vector4.empty()
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            v.normalize()
        assert np.all(np.isnan(np.asarray(v)))


class TestVectorType:
    def test_construction_copies_input(self):
        arr = np.array([1.0, 2.0, 3.0])
        v = Vector3(arr)
        arr[0] = 10.0
        assert v[0] == 1.0
        assert Vector3.new([1, 2, 3]) == v

    def test_wrong_length_rejected(self):
        with pytest.raises(ValueError):
            Vector4([1.0, 2.0, 3.0])
        with pytest.raises(ValueError):
            Vector3(np.eye(3))

    def test_complex_rejected(self):
        with pytest.raises(ValueError):
            Vector3([1.0 + 1.0j, 0.0, 0.0])

    def test_base_class_has_no_dimension(self):
        with pytest.raises(TypeError):
            Vector([1.0])

    def test_mixing_dimensions_is_type_error(self):
        with pytest.raises(TypeError):
            Vector3([1.0, 2.0, 3.0]) + Vector4([1.0, 2.0, 3.0, 4.0])
        with pytest.raises(TypeError):
            Vector.dot_product(Vector3.empty(), Vector4.empty())

    def test_index_access(self):
        v = Vector4([1.0, 2.0, 3.0, 4.0])
        assert len(v) == 4
        assert list(v) == [1.0, 2.0, 3.0, 4.0]
        assert v.get_component(2) == 3.0
        v[2] = 9.0
        assert v[2] == 9.0
        with pytest.raises(IndexError):
            v[4]

    def test_components_is_a_copy(self):
        v = Vector3([1.0, 2.0, 3.0])
        c = v.components
        c[0] = 5.0
        assert v[0] == 1.0
        np.testing.assert_array_equal(np.asarray(v), [1.0, 2.0, 3.0])

    def test_equality_and_hash(self):
        assert Vector3([1.0, 2.0, 3.0]) == Vector3([1.0, 2.0, 3.0])
        assert Vector3([1.0, 2.0, 3.0]) != Vector3([1.0, 2.0, 4.0])
        assert Vector3([1.0, 2.0, 3.0]) != [1.0, 2.0, 3.0]
        assert vector_type(2)([1.0, 2.0]) != vector_type(3)([1.0, 2.0, 0.0])
        with pytest.raises(TypeError):
            hash(Vector3.empty())

    def test_vector_type_is_cached(self):
        assert vector_type(3) is Vector3
        assert vector_type(4) is Vector4
        V7 = vector_type(7)
        assert V7 is vector_type(7)
        assert V7.DIM == 7
        assert V7.__name__ == "Vector7"
        assert repr(vector_type(2)([1.0, 2.0])) == "Vector2([1.0, 2.0])"

    def test_vector_type_rejects_bad_dim(self):
        with pytest.raises(ValueError):
            vector_type(0)
        with pytest.raises(TypeError):
            vector_type(2.5)
