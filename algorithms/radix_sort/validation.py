import numbers

import numpy as np

from algorithms.radix_sort.errors import EmptyInputError, ExponentOverflowError, NegativeValueError


def validate_sequence(arr):
    """
    Checks that arr can be radix sorted: non-empty, integers only, nothing negative.

    Args:
        arr: list-like of ints or a one-dimensional NumPy integer array.

    Raises:
        TypeError: for non-integer elements or a NumPy array of the wrong shape/dtype.
        EmptyInputError: if arr has no elements.
        NegativeValueError: on the first element below zero.
    """
    if isinstance(arr, np.ndarray):
        validate_array(arr)
        return

    if len(arr) == 0:
        raise EmptyInputError()

    for index, value in enumerate(arr):
        if isinstance(value, bool) or not isinstance(value, numbers.Integral):
            raise TypeError(f"Input must contain integers only, got {type(value).__name__} at index {index}.")
        if value < 0:
            raise NegativeValueError(index, value)


def validate_array(arr: np.ndarray):
    if arr.ndim != 1:
        raise TypeError(f"Input must be a one-dimensional array, got {arr.ndim} dimensions.")
    if arr.dtype.kind not in 'iu':
        raise TypeError(f"Input array must have an integer dtype, got {arr.dtype}.")
    if arr.size == 0:
        raise EmptyInputError()

    # Unsigned dtypes cannot hold negatives.
    if arr.dtype.kind == 'i':
        negative_indices = np.flatnonzero(arr < 0)
        if negative_indices.size > 0:
            first = int(negative_indices[0])
            raise NegativeValueError(first, int(arr[first]))


def check_exponent(exp: int, dtype):
    """Raises ExponentOverflowError if exp is not representable in dtype."""
    if exp > np.iinfo(dtype).max:
        raise ExponentOverflowError(exp, np.dtype(dtype).name)
