import time

import numpy as np
from numba import njit

from algorithms.radix_sort.single_threaded import digit_exponents
from algorithms.radix_sort.validation import check_exponent, validate_array
from constants.params import RADIX_BASE

WORK_DTYPE = np.uint64


@njit(cache=True)
def counting_sort_pass_numba(arr: np.ndarray, exp):
    """Stable counting sort of a uint64 array by the digit (arr // exp) % 10, written back into arr."""
    n = arr.size
    # Keep the digit arithmetic in uint64, mixing in int64 promotes to float
    base = np.uint64(RADIX_BASE)
    output = np.empty_like(arr)
    count = np.zeros(RADIX_BASE, dtype=np.intp)

    for i in range(n):
        digit = (arr[i] // exp) % base
        count[digit] += 1

    for i in range(1, RADIX_BASE):
        count[i] += count[i - 1]

    for i in range(n - 1, -1, -1):
        value = arr[i]
        digit = (value // exp) % base
        output[count[digit] - 1] = value
        count[digit] -= 1

    arr[:] = output


def radix_sort_numba(arr: np.ndarray):
    """
    Sorts a 1-D array of non-negative integers with Numba-compiled digit passes.

    The input is left untouched; a new sorted array with the input dtype is returned.
    """
    if not isinstance(arr, np.ndarray):
        raise TypeError("Input must be a NumPy array.")
    validate_array(arr)

    original_dtype = arr.dtype
    work = arr.astype(WORK_DTYPE, copy=True)

    max_num = int(np.max(work))
    for exp in digit_exponents(max_num):
        check_exponent(exp, WORK_DTYPE)
        counting_sort_pass_numba(work, WORK_DTYPE(exp))

    return work.astype(original_dtype)


if __name__ == "__main__":
    array_size = 2_000_000

    print(f"Generating {array_size:,} random integers (0 to 10^9)...")
    test_arr_orig = np.random.randint(0, 10 ** 9, size=array_size, dtype=np.int64)

    print("Performing initial run (includes Numba compilation time)...")
    start_time = time.time()
    radix_sort_numba(test_arr_orig)
    print(f"Initial run completed in {time.time() - start_time:.3f} seconds.")

    start_time = time.time()
    sorted_arr = radix_sort_numba(test_arr_orig)
    elapsed_time = time.time() - start_time
    print(f"Second run completed in {elapsed_time:.3f} seconds.")
    if elapsed_time > 0:
        print(f"Throughput: {array_size / elapsed_time / 1e6:.2f} MElements/s")

    if np.array_equal(sorted_arr, np.sort(test_arr_orig)):
        print("Verification PASSED.")
    else:
        print("Verification FAILED.")
