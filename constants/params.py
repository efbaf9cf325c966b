RUNS = 11
RANDOM_SEED = 42

RADIX_BASE = 10

SMALL_ARRAY_LENGTH = 10_000
MID_ARRAY_LENGTH = 100_000
BIG_ARRAY_LENGTH = 1_000_000

# Pure-Python passes get very slow above this size
PYTHON_SORT_SIZE_LIMIT = 1_000_000

MAX_RANDOM_VALUE = 10 ** 9
NUM_PREGENERATED_ARRAYS = 10

SAMPLE_ARRAY = [170, 45, 75, 90, 802, 24, 2, 66]
