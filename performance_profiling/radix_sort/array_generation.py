import os
import argparse

import numpy as np

from constants.params import MAX_RANDOM_VALUE, MID_ARRAY_LENGTH, NUM_PREGENERATED_ARRAYS, RANDOM_SEED
from constants.string_constants import PREGENERATED_ARRAYS_FILE, RESULTS_BASE_PATH, RADIX_SORT_PATH

DATA_TYPE_RADIX = np.int64


def generate_array(array_size, random_state_seed, max_value=MAX_RANDOM_VALUE, dtype=DATA_TYPE_RADIX):
    """Generates one reproducible array of non-negative integers in [0, max_value)."""
    rng = np.random.RandomState(random_state_seed)
    return rng.randint(0, max_value, size=array_size, dtype=dtype)


def generate_random_arrays(size, num_arrays=NUM_PREGENERATED_ARRAYS, max_value=MAX_RANDOM_VALUE,
                           seed=RANDOM_SEED):
    """Generates multiple random arrays for sorting benchmarking, one row per array."""
    arrays = [generate_array(size, seed + i, max_value) for i in range(num_arrays)]
    return np.array(arrays)


def save_arrays(size, output_dir, num_arrays=NUM_PREGENERATED_ARRAYS, seed=RANDOM_SEED):
    """Saves generated arrays to a .npz file and returns its path."""
    os.makedirs(output_dir, exist_ok=True)
    file_path = os.path.join(output_dir, PREGENERATED_ARRAYS_FILE)

    arrays = generate_random_arrays(size, num_arrays, seed=seed)
    np.savez(file_path, arrays=arrays)

    print(f"Info: Generated {num_arrays} random arrays of size {size:,} in {file_path}.")
    return file_path


def load_arrays(file_path):
    with np.load(file_path) as data:
        return data['arrays']


def run_array_generation(size, output_dir, num_arrays=NUM_PREGENERATED_ARRAYS, seed=RANDOM_SEED):
    """Runs the array generation process."""
    return save_arrays(size, output_dir, num_arrays=num_arrays, seed=seed)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Pre-generates arrays for the radix sort profiler.")
    parser.add_argument("--size", type=int, default=MID_ARRAY_LENGTH,
                        help="Number of elements per array.")
    parser.add_argument("--num_arrays", type=int, default=NUM_PREGENERATED_ARRAYS,
                        help="Number of arrays to generate.")
    parser.add_argument("--output_dir", default=os.path.join(RESULTS_BASE_PATH, RADIX_SORT_PATH),
                        help="Directory the .npz file is written to.")
    args = parser.parse_args()

    run_array_generation(args.size, args.output_dir, num_arrays=args.num_arrays)
