from algorithms.radix_sort.errors import EmptyInputError
from algorithms.radix_sort.validation import validate_sequence
from constants.params import RADIX_BASE


def _identity(value):
    return value


def get_max(arr):
    """Returns the largest value of a non-empty sequence with a single linear scan."""
    n = len(arr)
    if n == 0:
        raise EmptyInputError("Cannot find the maximum of an empty sequence.")

    max_num = arr[0]
    for i in range(1, n):
        if arr[i] > max_num:
            max_num = arr[i]
    return max_num


def digit_exponents(max_num):
    """
    Yields the digit exponents 1, 10, 100, ... needed to sort values up to max_num.

    One exponent per decimal digit of max_num, so max_num == 0 still yields
    exactly one exponent. max_num may be a NumPy scalar, the exponent itself
    is always a Python int so it can grow past the width of the input dtype.
    """
    max_num = int(max_num)
    exp = 1
    yield exp
    while max_num // (exp * RADIX_BASE) > 0:
        exp *= RADIX_BASE
        yield exp


def counting_sort(arr, exp, key=None):
    """
    Performs counting sort based on a specific digit (exp).

    Elements sharing the digit keep their relative order. The result is copied
    back into arr.

    Args:
        arr: Mutable sequence to reorder in place.
        exp: Digit exponent, 1 for units, 10 for tens and so on.
        key: Optional function extracting the integer sort key of an element.
    """
    if key is None:
        key = _identity

    n = len(arr)
    output = [None] * n
    count = [0] * RADIX_BASE

    for i in range(n):
        index = (key(arr[i]) // exp) % RADIX_BASE
        count[index] += 1

    for i in range(1, RADIX_BASE):
        count[i] += count[i - 1]

    # Right to left so equal digits land in input order
    for i in range(n - 1, -1, -1):
        index = (key(arr[i]) // exp) % RADIX_BASE
        output[count[index] - 1] = arr[i]
        count[index] -= 1

    for i in range(n):
        arr[i] = output[i]


def radix_sort(arr, verbose=False):
    """
    Performs LSD radix sort (base 10) on arr in place and returns it.

    Args:
        arr: Mutable sequence of non-negative integers (list or 1-D NumPy array).
        verbose: Print the sequence after every digit pass.

    Raises:
        EmptyInputError: arr is empty.
        NegativeValueError: arr holds a value below zero.
        TypeError: arr holds something other than integers.
    """
    validate_sequence(arr)

    max_num = get_max(arr)
    for pass_num, exp in enumerate(digit_exponents(max_num), start=1):
        counting_sort(arr, exp)
        if verbose:
            print(f"Info: Pass {pass_num} (exp={exp}): {' '.join(str(v) for v in arr)}")
    return arr


def radix_sort_by_key(items, key):
    """
    Returns a new list of items stably sorted by key(item).

    key must map every item to a non-negative integer. Items with equal keys
    keep their input order.
    """
    items = list(items)
    keys = [key(item) for item in items]
    validate_sequence(keys)

    max_key = get_max(keys)
    for exp in digit_exponents(max_key):
        counting_sort(items, exp, key=key)
    return items

