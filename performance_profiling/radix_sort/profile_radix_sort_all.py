import os
import time
import traceback
import argparse

import numpy as np

from algorithms.radix_sort.optimised_radix_sort import radix_sort_numba
from algorithms.radix_sort.single_threaded import radix_sort
from constants.params import RANDOM_SEED, RUNS, MID_ARRAY_LENGTH, PYTHON_SORT_SIZE_LIMIT
from constants.string_constants import RESULTS_BASE_PATH, RADIX_SORT_PATH, DATE_FORMAT, RESULT_CSV_HEADER
from performance_profiling.radix_sort.array_generation import generate_array, load_arrays
from utils.utils import get_cpu_info, get_cpu_core_info, write_result_header


def radix_sort_python_list(arr_np: np.ndarray):
    # The pure-Python sort is timed on a list, as a caller would use it
    return radix_sort(arr_np.tolist())


def get_implementations(run_python_impl=True):
    return {
        "python_single_thread": {
            "file_suffix": 'python_single_thread_stats.txt',
            "func": radix_sort_python_list,
            "run_this_time": run_python_impl,
            "name_print": "Pure Python Radix (Single-Thread)",
        },
        "numba_single_thread": {
            "file_suffix": 'numba_single_thread_stats.txt',
            "func": radix_sort_numba,
            "run_this_time": True,
            "name_print": "Numba Radix (Single-Thread)",
        },
        "numpy_sort_baseline": {
            "file_suffix": 'numpy_sort_baseline_stats.txt',
            "func": np.sort,
            "run_this_time": True,
            "name_print": "NumPy sort (Baseline)",
        },
    }


def profile_implementation(func, arr_input):
    """
    Times one call of func on arr_input.

    Returns:
        (execution time in seconds, sorted result)
    """
    start_time = time.perf_counter()
    result = func(arr_input)
    end_time = time.perf_counter()
    return end_time - start_time, result


def profile_and_save_stats(
        array_size: int,
        total_runs: int,
        run_python_impl: bool = True,
        results_dir: str = RESULTS_BASE_PATH,
        arrays_file: str = None
):
    """
    Profiles every selected implementation on the same inputs and writes one stats file each.

    Returns:
        dict mapping implementation key to the list of measured times (inf for failed runs).
    """
    pregenerated = load_arrays(arrays_file) if arrays_file else None
    if pregenerated is not None:
        print(f"Info: Using {len(pregenerated)} pre-generated arrays from {arrays_file}.")
        if pregenerated.shape[1] != array_size:
            print(f"Warning: Pre-generated arrays hold {pregenerated.shape[1]:,} elements, "
                  f"profiling that size instead of {array_size:,}.")
            array_size = pregenerated.shape[1]

    size_str = f"S{array_size}"
    print(f"\nInfo: Profiling Radix Sort for configuration: {size_str} (Size: {array_size:,})")
    print(f"Parameters: Runs={total_runs}")
    if not run_python_impl:
        print("  NOTE: Pure Python implementation will be SKIPPED.")

    output_dir = os.path.join(results_dir, RADIX_SORT_PATH, str(array_size))
    os.makedirs(output_dir, exist_ok=True)

    active_implementations = {key: config_item for key, config_item in get_implementations(run_python_impl).items()
                              if config_item["run_this_time"]}
    timings = {key: [] for key in active_implementations}
    file_handles = {}
    cpu_info = get_cpu_info()

    try:
        for key, config_item in active_implementations.items():
            path = os.path.join(output_dir, config_item["file_suffix"])
            file_handles[key] = open(path, 'w')
            write_result_header(file_handles[key], cpu_info)
            file_handles[key].write(RESULT_CSV_HEADER)

        print("  Warming up Numba Radix Sort JIT compiler...")
        try:
            radix_sort_numba(generate_array(min(1000, array_size), RANDOM_SEED - 1))
            print("  Numba Radix Sort warm-up complete.")
        except Exception as e_warmup:
            print(f"  Warning: Numba Radix Sort warm-up failed: {e_warmup}")

        for run_number in range(1, total_runs + 1):
            print(f"  Starting Run {run_number}/{total_runs} for {size_str}...")
            if pregenerated is not None:
                arr_np_original = pregenerated[(run_number - 1) % len(pregenerated)]
            else:
                arr_np_original = generate_array(array_size, RANDOM_SEED + run_number)
            expected = np.sort(arr_np_original)

            for impl_key, config_item in active_implementations.items():
                impl_name_print = config_item["name_print"]
                print(f"    Profiling {impl_name_print}...")
                timestamp = time.strftime(DATE_FORMAT)

                try:
                    exec_time, result = profile_implementation(config_item["func"], arr_np_original.copy())
                    if not np.array_equal(np.asarray(result), expected):
                        raise AssertionError(f"{impl_name_print} returned an unsorted or altered array.")
                except Exception as e:
                    print(f"      Error during {impl_name_print} profiling for run {run_number}: {e}")
                    traceback.print_exc()
                    timings[impl_key].append(float('inf'))
                    file_handles[impl_key].write(f"{run_number},{timestamp},inf,{arr_np_original.size},0.0\n")
                    continue

                melements_per_sec = arr_np_original.size / exec_time / 1e6 if exec_time > 0 else 0.0
                timings[impl_key].append(exec_time)
                file_handles[impl_key].write(f"{run_number},{timestamp},{exec_time:.6f},"
                                             f"{arr_np_original.size},{melements_per_sec:.2f}\n")
                print(f"      {impl_name_print} Run {run_number}: {exec_time:.6f}s, "
                      f"MElements/s: {melements_per_sec:.2f}")
        print(f"  Finished all runs for {size_str}.")

    except IOError as e_io:
        print(f"Error writing results for {size_str}: {e_io}")
    finally:
        for fh in file_handles.values():
            if not fh.closed:
                fh.close()

    for impl_key, times in timings.items():
        successful = [t for t in times if t != float('inf')]
        if successful:
            print(f"Info: {impl_key}: average {sum(successful) / len(successful):.6f} s "
                  f"over {len(successful)} successful runs.")
        else:
            print(f"Info: {impl_key}: no runs completed successfully.")
    return timings


def run_radix_sort_benchmark(size: int, runs: int = RUNS, run_python: bool = True,
                             results_dir: str = RESULTS_BASE_PATH, arrays_file: str = None):
    print(f"CPU Info: {get_cpu_info()}")
    print(f"CPU Cores: {get_cpu_core_info()} (all implementations run single-threaded)")

    if run_python and size > PYTHON_SORT_SIZE_LIMIT:
        print(f"Warning: Skipping pure Python implementation for size {size:,} "
              f"(limit {PYTHON_SORT_SIZE_LIMIT:,}).")
        run_python = False

    return profile_and_save_stats(
        array_size=size,
        total_runs=runs,
        run_python_impl=run_python,
        results_dir=results_dir,
        arrays_file=arrays_file
    )


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Profiler for Radix Sort implementations.")
    parser.add_argument("--size", type=int, default=MID_ARRAY_LENGTH,
                        help="Number of elements in the array to sort.")
    parser.add_argument("--runs", type=int, default=RUNS,
                        help="Number of times to run each benchmark.")
    parser.add_argument("--no_python", action="store_true",
                        help="If set, skips the pure Python implementation.")
    parser.add_argument("--arrays_file", default=None,
                        help="Profile arrays from a .npz written by array_generation.py instead of fresh ones.")
    args = parser.parse_args()

    run_radix_sort_benchmark(size=args.size, runs=args.runs, run_python=not args.no_python,
                             arrays_file=args.arrays_file)
    print("\nRadix Sort profiling complete. Results saved to respective files.")
