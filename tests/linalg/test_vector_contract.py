"""
Tests for the vector contract.

Every test runs against each container (DenseVector, ListVector) and
each precision (float64, float32) through the vector_cls and real
fixtures in conftest.py.
"""

import math
import warnings

import numpy as np
import pytest

from pycora.core.exceptions import (
    DimensionError,
    IndexOutOfRangeError,
    PrecisionMismatchError,
    ValidationError,
)
from pycora.core.numbers import F32, F64


# ═══════════════════════════════════════════════════════════════════════
# Construction
# ═══════════════════════════════════════════════════════════════════════


class TestConstruction:

    def test_zeros(self, vector_cls, real):
        v = vector_cls.zeros(4, real)
        assert v.len() == 4
        assert all(x == 0.0 for x in v)
        assert v.real is real

    def test_ones(self, vector_cls, real):
        v = vector_cls.ones(3, real)
        assert v.to_vec() == [1.0, 1.0, 1.0]

    def test_fill(self, vector_cls, real):
        v = vector_cls.fill(2, 7.5, real)
        assert v.to_vec() == [7.5, 7.5]
        assert all(isinstance(x, real.dtype) for x in v)

    def test_default_precision_is_f64(self, vector_cls):
        assert vector_cls.zeros(1).real is F64

    def test_from_array_preserves_order_and_values(self, vector_cls, real):
        values = [3.25, -1.0, 0.5, 1e-3, 42.0]
        v = vector_cls.from_array(values, real)
        assert v.to_vec() == [real.cast(x) for x in values]

    def test_from_array_infers_float32(self, vector_cls):
        v = vector_cls.from_array(np.array([1.0, 2.0], dtype=np.float32))
        assert v.real is F32

    def test_from_array_integers_become_f64(self, vector_cls):
        v = vector_cls.from_array([1, 2, 3])
        assert v.real is F64
        assert v.get(2) == 3.0

    def test_from_array_copies(self, vector_cls, real):
        arr = np.array([1.0, 2.0], dtype=real.dtype)
        v = vector_cls.from_array(arr)
        arr[0] = 99.0
        assert v.get(0) == 1.0

    def test_from_array_empty(self, vector_cls, real):
        v = vector_cls.from_array([], real)
        assert v.is_empty()
        assert len(v) == 0

    def test_from_array_rejects_2d(self, vector_cls):
        with pytest.raises(DimensionError, match="expected 1D"):
            vector_cls.from_array([[1.0, 2.0], [3.0, 4.0]])

    def test_from_array_rejects_strings(self, vector_cls):
        with pytest.raises(ValidationError, match="non-numeric"):
            vector_cls.from_array(["a", "b"])

    def test_negative_length(self, vector_cls):
        with pytest.raises(ValidationError, match="non-negative"):
            vector_cls.zeros(-1)

    def test_round_trip(self, vector_cls, real, gaussian_data):
        v = vector_cls.from_array(gaussian_data, real)
        assert vector_cls.from_array(v.to_vec()).approximate_eq(v, 0.0)

    def test_copy_is_independent(self, vector_cls, real):
        v = vector_cls.from_array([1.0, 2.0], real)
        c = v.copy()
        c.set(0, 5.0)
        assert v.get(0) == 1.0
        assert c.get(0) == 5.0


# ═══════════════════════════════════════════════════════════════════════
# Element access
# ═══════════════════════════════════════════════════════════════════════


class TestElementAccess:

    def test_get_set(self, vector_cls, real):
        v = vector_cls.zeros(3, real)
        v.set(1, 2.5)
        assert v.get(1) == 2.5
        assert isinstance(v.get(1), real.dtype)

    def test_item_syntax(self, vector_cls, real):
        v = vector_cls.zeros(2, real)
        v[0] = 4.0
        assert v[0] == 4.0

    def test_get_out_of_range(self, vector_cls, real):
        v = vector_cls.zeros(3, real)
        with pytest.raises(IndexOutOfRangeError, match="3 out of range"):
            v.get(3)

    def test_set_out_of_range(self, vector_cls, real):
        v = vector_cls.zeros(3, real)
        with pytest.raises(IndexError):
            v.set(10, 1.0)

    def test_negative_index_does_not_wrap(self, vector_cls, real):
        v = vector_cls.from_array([1.0, 2.0], real)
        with pytest.raises(IndexOutOfRangeError):
            v.get(-1)

    def test_len_and_is_empty(self, vector_cls, real):
        assert vector_cls.zeros(0, real).is_empty()
        assert not vector_cls.zeros(1, real).is_empty()
        assert len(vector_cls.zeros(5, real)) == 5


# ═══════════════════════════════════════════════════════════════════════
# Elementwise arithmetic
# ═══════════════════════════════════════════════════════════════════════


class TestElementwise:

    @pytest.fixture
    def pair(self, vector_cls, real):
        a = vector_cls.from_array([1.0, 2.0, 3.0], real)
        b = vector_cls.from_array([4.0, 5.0, 8.0], real)
        return a, b

    def test_add(self, pair):
        a, b = pair
        assert a.add(b).to_vec() == [5.0, 7.0, 11.0]
        assert a.to_vec() == [1.0, 2.0, 3.0]

    def test_sub(self, pair):
        a, b = pair
        assert a.sub(b).to_vec() == [-3.0, -3.0, -5.0]

    def test_mul(self, pair):
        a, b = pair
        assert a.mul(b).to_vec() == [4.0, 10.0, 24.0]

    def test_div(self, pair):
        a, b = pair
        assert b.div(a).to_vec() == [4.0, 2.5, b.real.cast(8.0) / b.real.cast(3.0)]

    def test_mut_returns_self(self, pair):
        a, b = pair
        assert a.add_mut(b) is a
        assert a.to_vec() == [5.0, 7.0, 11.0]
        assert a.sub_mut(b) is a
        assert a.mul_mut(b) is a
        assert a.div_mut(b) is a
        assert a.to_vec() == [1.0, 2.0, 3.0]

    def test_chaining(self, pair):
        a, b = pair
        a.add_mut(b).mul_mut(b)
        assert a.to_vec() == [20.0, 35.0, 88.0]

    def test_operators(self, pair):
        a, b = pair
        assert (a + b).to_vec() == [5.0, 7.0, 11.0]
        assert (b - a).to_vec() == [3.0, 3.0, 5.0]
        assert (a * b).to_vec() == [4.0, 10.0, 24.0]
        assert (a / a).to_vec() == [1.0, 1.0, 1.0]

    def test_inplace_operators(self, pair):
        a, b = pair
        original = a
        a += b
        assert a is original
        assert a.to_vec() == [5.0, 7.0, 11.0]

    def test_self_operand(self, pair):
        a, _ = pair
        a.add_mut(a)
        assert a.to_vec() == [2.0, 4.0, 6.0]

    def test_add_zeros_is_identity(self, vector_cls, real, gaussian_data):
        v = vector_cls.from_array(gaussian_data, real)
        assert v.add(vector_cls.zeros(v.len(), real)).approximate_eq(v, real.epsilon())

    def test_divide_by_zero_is_ieee(self, vector_cls, real):
        a = vector_cls.from_array([1.0, -1.0, 0.0], real)
        z = vector_cls.zeros(3, real)
        with warnings.catch_warnings():
            warnings.simplefilter('error')
            r = a.div(z)
        assert r.get(0) == np.inf
        assert r.get(1) == -np.inf
        assert np.isnan(r.get(2))

    @pytest.mark.parametrize("op", ['add', 'sub', 'mul', 'div', 'add_mut', 'sub_mut', 'mul_mut', 'div_mut', 'dot'])
    def test_length_mismatch_raises(self, vector_cls, real, op):
        a = vector_cls.zeros(3, real)
        b = vector_cls.zeros(4, real)
        with pytest.raises(DimensionError, match="length mismatch"):
            getattr(a, op)(b)

    def test_precision_mismatch_raises(self, vector_cls):
        a = vector_cls.zeros(3, F64)
        b = vector_cls.zeros(3, F32)
        with pytest.raises(PrecisionMismatchError):
            a.add(b)


class TestSingleElement:

    def test_add_element(self, vector_cls, real):
        v = vector_cls.from_array([1.0, 2.0], real)
        v.add_element_mut(1, 3.0)
        assert v.to_vec() == [1.0, 5.0]

    def test_sub_element(self, vector_cls, real):
        v = vector_cls.from_array([1.0, 2.0], real)
        v.sub_element_mut(0, 0.5)
        assert v.to_vec() == [0.5, 2.0]

    def test_mul_element(self, vector_cls, real):
        v = vector_cls.from_array([1.0, 2.0], real)
        v.mul_element_mut(1, 4.0)
        assert v.to_vec() == [1.0, 8.0]

    def test_div_element(self, vector_cls, real):
        v = vector_cls.from_array([1.0, 2.0], real)
        v.div_element_mut(1, 4.0)
        assert v.to_vec() == [1.0, 0.5]

    def test_out_of_range(self, vector_cls, real):
        v = vector_cls.zeros(2, real)
        with pytest.raises(IndexOutOfRangeError):
            v.add_element_mut(2, 1.0)


# ═══════════════════════════════════════════════════════════════════════
# Statistics
# ═══════════════════════════════════════════════════════════════════════


class TestStatistics:

    def test_sum_mean(self, vector_cls, real):
        v = vector_cls.from_array([1.0, 2.0, 3.0], real)
        assert v.sum() == 6.0
        assert v.mean() == 2.0

    def test_std(self, vector_cls, real):
        v = vector_cls.from_array([1.0, 2.0, 3.0], real)
        assert float(v.std()) == pytest.approx(0.8164965809277260, rel=real.tolerance.rtol)
        assert float(v.var()) == pytest.approx(2.0 / 3.0, rel=real.tolerance.rtol)

    def test_results_keep_precision(self, vector_cls, real):
        v = vector_cls.from_array([1.0, 2.0, 3.0], real)
        for value in (v.sum(), v.mean(), v.var(), v.std(), v.dot(v), v.norm2(), v.norm(3.0)):
            assert isinstance(value, real.dtype)

    def test_var_nonnegative(self, vector_cls, real, gaussian_data):
        v = vector_cls.from_array(gaussian_data, real)
        assert v.var() >= -real.tolerance.atol

    def test_var_close_to_numpy(self, vector_cls, gaussian_data):
        v = vector_cls.from_array(gaussian_data, F64)
        assert float(v.var()) == pytest.approx(np.var(gaussian_data), rel=1e-10)

    def test_var_single_pass_formula(self, vector_cls, gaussian_data):
        """Reproduces Σx²/n − (Σx/n)² accumulated left to right."""
        mu = 0.0
        sum_sq = 0.0
        for x in gaussian_data:
            mu += x
            sum_sq += x * x
        n = len(gaussian_data)
        mu /= n
        expected = sum_sq / n - mu * mu

        v = vector_cls.from_array(gaussian_data, F64)
        assert v.var() == expected

    def test_var_constant(self, vector_cls, real):
        v = vector_cls.fill(10, 4.0, real)
        assert v.var() == 0.0
        assert v.std() == 0.0

    def test_sum_is_sequential(self, vector_cls, gaussian_data):
        acc = 0.0
        for x in gaussian_data:
            acc += x
        assert vector_cls.from_array(gaussian_data, F64).sum() == acc

    def test_empty_sum_is_zero(self, vector_cls, real):
        assert vector_cls.zeros(0, real).sum() == 0.0

    def test_empty_mean_warns(self, vector_cls, real):
        v = vector_cls.zeros(0, real)
        with pytest.warns(RuntimeWarning, match="Mean of empty vector"):
            assert np.isnan(v.mean())

    def test_empty_var_warns(self, vector_cls, real):
        v = vector_cls.zeros(0, real)
        with pytest.warns(RuntimeWarning, match="Variance of empty vector"):
            assert np.isnan(v.std())


# ═══════════════════════════════════════════════════════════════════════
# Dot product and norms
# ═══════════════════════════════════════════════════════════════════════


class TestNorms:

    def test_dot(self, vector_cls, real):
        a = vector_cls.from_array([1.0, 2.0, 3.0], real)
        b = vector_cls.from_array([4.0, -5.0, 6.0], real)
        assert a.dot(b) == 12.0

    def test_norm2_is_sqrt_dot(self, vector_cls, real, gaussian_data):
        v = vector_cls.from_array(gaussian_data, real)
        assert float(v.norm2()) == pytest.approx(math.sqrt(float(v.dot(v))), rel=real.tolerance.rtol)

    def test_norm2_known(self, vector_cls, real):
        assert vector_cls.from_array([3.0, 4.0], real).norm2() == 5.0

    def test_norm_p1(self, vector_cls, real):
        v = vector_cls.from_array([1.0, -2.0, 3.0], real)
        assert v.norm(1.0) == 6.0

    def test_norm_p2_matches_norm2(self, vector_cls, real):
        v = vector_cls.from_array([1.0, -2.0, 3.0], real)
        assert float(v.norm(2.0)) == pytest.approx(float(v.norm2()), rel=real.tolerance.rtol)

    def test_norm_fractional_p(self, vector_cls, real):
        v = vector_cls.from_array([1.0, 4.0, 9.0], real)
        assert float(v.norm(0.5)) == pytest.approx(36.0, rel=real.tolerance.rtol)

    def test_norm_inf(self, vector_cls, real):
        v = vector_cls.from_array([1.0, -7.0, 3.0], real)
        assert v.norm(np.inf) == 7.0

    def test_norm_negative_inf(self, vector_cls, real):
        v = vector_cls.from_array([-4.0, 0.5, 3.0], real)
        assert v.norm(-np.inf) == 0.5

    def test_norm_inf_skips_nan(self, vector_cls, real):
        v = vector_cls.from_array([1.0, np.nan, 3.0], real)
        assert v.norm(np.inf) == 3.0

    def test_norm_inf_empty(self, vector_cls, real):
        v = vector_cls.zeros(0, real)
        assert v.norm(np.inf) == -np.inf
        assert v.norm(-np.inf) == np.inf

    def test_empty_dot(self, vector_cls, real):
        v = vector_cls.zeros(0, real)
        assert v.dot(v) == 0.0
        assert v.norm2() == 0.0


# ═══════════════════════════════════════════════════════════════════════
# unique / approximate_eq / equality
# ═══════════════════════════════════════════════════════════════════════


class TestComparison:

    def test_unique(self, vector_cls, real):
        v = vector_cls.from_array([1.0, 2.0, 2.0, 3.0], real)
        u = v.unique()
        assert len(u) == 3
        assert set(float(x) for x in u) == {1.0, 2.0, 3.0}

    def test_unique_empty(self, vector_cls, real):
        assert vector_cls.zeros(0, real).unique() == []

    def test_approximate_eq_within_eps(self, vector_cls, real):
        a = vector_cls.from_array([1.0, 2.0], real)
        b = vector_cls.from_array([1.05, 1.95], real)
        assert a.approximate_eq(b, 0.1)
        assert not a.approximate_eq(b, 0.01)

    def test_approximate_eq_length_mismatch(self, vector_cls, real):
        assert not vector_cls.zeros(2, real).approximate_eq(vector_cls.zeros(3, real), 1.0)

    def test_approximate_eq_default_eps(self, vector_cls, real):
        a = vector_cls.from_array([1.0, 2.0], real)
        b = a.copy()
        b.add_element_mut(0, real.tolerance.atol / 2)
        assert a.approximate_eq(b)
        b.add_element_mut(0, 10 * real.tolerance.atol)
        assert not a.approximate_eq(b)

    def test_eq(self, vector_cls, real):
        assert vector_cls.from_array([1.0, 2.0], real) == vector_cls.from_array([1.0, 2.0], real)
        assert vector_cls.from_array([1.0, 2.0], real) != vector_cls.from_array([1.0, 3.0], real)
        assert vector_cls.zeros(2, real) != vector_cls.zeros(3, real)

    def test_eq_precision_sensitive(self, vector_cls):
        assert vector_cls.zeros(2, F64) != vector_cls.zeros(2, F32)

    def test_unhashable(self, vector_cls):
        with pytest.raises(TypeError):
            hash(vector_cls.zeros(1))

    def test_repr(self, vector_cls):
        r = repr(vector_cls.from_array([1.0, 2.5], F32))
        assert r == f"{vector_cls.__name__}([1.0, 2.5], dtype=float32)"

    def test_to_numpy(self, vector_cls, real):
        arr = vector_cls.from_array([1.0, 2.0], real).to_numpy()
        assert arr.dtype == real.dtype
        np.testing.assert_array_equal(arr, [1.0, 2.0])
