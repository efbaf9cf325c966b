import numpy as np
import pytest

from algorithms.radix_sort.errors import (
    EmptyInputError, ExponentOverflowError, NegativeValueError, RadixSortError,
)
from algorithms.radix_sort.validation import check_exponent, validate_sequence


def test_errors_share_a_value_error_base():
    for error_type in (EmptyInputError, NegativeValueError, ExponentOverflowError):
        assert issubclass(error_type, RadixSortError)
        assert issubclass(error_type, ValueError)


def test_valid_inputs_pass():
    validate_sequence([0, 1, 2])
    validate_sequence((7,))
    validate_sequence(np.array([0, 5], dtype=np.uint8))
    validate_sequence([np.int64(4), 3])


@pytest.mark.parametrize("empty", [[], (), np.array([], dtype=np.int64)])
def test_empty_inputs_rejected(empty):
    with pytest.raises(EmptyInputError):
        validate_sequence(empty)


def test_negative_value_reports_first_offender():
    with pytest.raises(NegativeValueError) as exc_info:
        validate_sequence([3, 0, -7, -1])
    assert exc_info.value.index == 2
    assert exc_info.value.value == -7
    assert "-7" in str(exc_info.value)


@pytest.mark.parametrize("values", [[1, "2"], [1.0], [True, 2], [None]])
def test_non_integers_rejected(values):
    with pytest.raises(TypeError):
        validate_sequence(values)


def test_check_exponent():
    check_exponent(100, np.uint8)
    check_exponent(10 ** 19, np.uint64)
    with pytest.raises(ExponentOverflowError) as exc_info:
        check_exponent(1000, np.uint8)
    assert exc_info.value.exp == 1000
    assert exc_info.value.dtype == "uint8"
    with pytest.raises(ExponentOverflowError):
        check_exponent(10 ** 19, np.int64)
