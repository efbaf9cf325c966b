class RadixSortError(ValueError):
    """Base class for inputs the radix sort refuses to process."""


class EmptyInputError(RadixSortError):
    """Raised when the sequence to sort has no elements."""

    def __init__(self, message="Input sequence is empty, nothing to sort."):
        super().__init__(message)


class NegativeValueError(RadixSortError):
    """Raised when the sequence contains a value below zero."""

    def __init__(self, index, value):
        self.index = index
        self.value = value
        super().__init__(f"Input contains negative value {value} at index {index}, "
                         f"radix sort only supports non-negative integers.")


class ExponentOverflowError(RadixSortError):
    """Raised when a digit exponent no longer fits the working integer type."""

    def __init__(self, exp, dtype):
        self.exp = exp
        self.dtype = dtype
        super().__init__(f"Digit exponent {exp} does not fit in {dtype}.")
