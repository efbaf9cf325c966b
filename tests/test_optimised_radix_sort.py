import numpy as np
import pytest

from algorithms.radix_sort import optimised_radix_sort
from algorithms.radix_sort.errors import EmptyInputError, NegativeValueError
from algorithms.radix_sort.optimised_radix_sort import counting_sort_pass_numba, radix_sort_numba


def test_sorts_sample_array(sample_array, sorted_sample_array):
    result = radix_sort_numba(np.array(sample_array))
    assert result.tolist() == sorted_sample_array


def test_returns_new_array_with_input_dtype():
    arr = np.array([30, 1, 20], dtype=np.int32)
    result = radix_sort_numba(arr)
    assert result.dtype == np.int32
    assert result.tolist() == [1, 20, 30]
    assert arr.tolist() == [30, 1, 20]


@pytest.mark.parametrize("dtype", [np.uint8, np.uint16, np.uint32, np.uint64, np.int64])
def test_matches_numpy_sort_for_integer_dtypes(dtype):
    rng = np.random.RandomState(7)
    upper = min(np.iinfo(dtype).max, 10 ** 12)
    arr = rng.randint(0, upper, size=5000, dtype=np.int64).astype(dtype)
    np.testing.assert_array_equal(radix_sort_numba(arr), np.sort(arr))


def test_handles_full_uint64_range():
    arr = np.array([2 ** 64 - 1, 0, 10 ** 19, 12345], dtype=np.uint64)
    np.testing.assert_array_equal(radix_sort_numba(arr), np.sort(arr))


@pytest.mark.parametrize("values", [[5], [3, 3, 3], [0, 0]])
def test_single_element_and_uniform_values(values):
    assert radix_sort_numba(np.array(values)).tolist() == values


def test_empty_array_raises():
    with pytest.raises(EmptyInputError):
        radix_sort_numba(np.array([], dtype=np.int64))


def test_negative_value_raises():
    with pytest.raises(NegativeValueError) as exc_info:
        radix_sort_numba(np.array([1, 2, -3, -4]))
    assert exc_info.value.index == 2


@pytest.mark.parametrize("bad_input", [[1, 2, 3], np.array([1.0, 2.0]), np.array([[1, 2], [3, 4]])])
def test_rejects_non_integer_or_non_array_input(bad_input):
    with pytest.raises(TypeError):
        radix_sort_numba(bad_input)


def test_counting_pass_orders_by_one_digit_stably():
    arr = np.array([21, 13, 11, 23, 12], dtype=np.uint64)
    counting_sort_pass_numba(arr, np.uint64(1))
    assert arr.tolist() == [21, 11, 12, 13, 23]
    counting_sort_pass_numba(arr, np.uint64(10))
    assert arr.tolist() == [11, 12, 13, 21, 23]


@pytest.mark.parametrize("values, expected_exponents", [
    ([0, 0, 0], [1]),
    ([999, 5], [1, 10, 100]),
    ([1000, 1], [1, 10, 100, 1000]),
])
def test_number_of_passes_follows_max_digit_count(monkeypatch, values, expected_exponents):
    seen = []

    def recording_pass(arr, exp):
        seen.append(int(exp))
        counting_sort_pass_numba(arr, exp)

    monkeypatch.setattr(optimised_radix_sort, "counting_sort_pass_numba", recording_pass)
    result = radix_sort_numba(np.array(values))
    assert seen == expected_exponents
    assert result.tolist() == sorted(values)


@pytest.mark.parametrize("values, dtype", [
    ([200, 5, 17, 255], np.uint8),
    ([127, 3, 100, 0], np.int8),
    ([32767, 10000, 9], np.int16),
    ([2_000_000_000, 3, 2_147_483_647], np.int32),
    ([10 ** 18 + 1, 3, 2 ** 63 - 1], np.int64),
])
def test_max_at_dtype_digit_limit(values, dtype):
    result = radix_sort_numba(np.array(values, dtype=dtype))
    assert result.tolist() == sorted(values)
    assert result.dtype == dtype
