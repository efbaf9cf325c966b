import os
import sys
import time
import argparse

from algorithms.radix_sort.errors import RadixSortError
from algorithms.radix_sort.single_threaded import radix_sort
from constants.params import RUNS, SAMPLE_ARRAY, SMALL_ARRAY_LENGTH, MID_ARRAY_LENGTH, BIG_ARRAY_LENGTH
from constants.string_constants import RESULTS_BASE_PATH, PLOTS_OUTPUT_DIR
from utils.utils import format_sequence, get_cpu_info, get_cpu_core_info, get_ram_info, \
    get_formatted_elapsed_time


def build_parser():
    parser = argparse.ArgumentParser(description="LSD radix sort (base 10) for non-negative integers.")
    parser.add_argument(
        "--values",
        type=int,
        nargs="+",
        help="Integers to sort. Defaults to a fixed sample array."
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print the array after every digit pass."
    )
    parser.add_argument(
        "--benchmark",
        action="store_true",
        help="Run the radix sort profiling suite instead of sorting."
    )
    parser.add_argument(
        "--sizes",
        type=int,
        nargs="+",
        default=[SMALL_ARRAY_LENGTH, MID_ARRAY_LENGTH, BIG_ARRAY_LENGTH],
        help="Array sizes to profile with --benchmark."
    )
    parser.add_argument(
        "--runs",
        type=int,
        default=RUNS,
        help="Number of runs per size with --benchmark (run 1 is treated as warm-up)."
    )
    parser.add_argument(
        "--no_python",
        action="store_true",
        help="If set, skips the pure Python implementation during --benchmark."
    )
    parser.add_argument(
        "--arrays_file",
        default=None,
        help="Benchmark the arrays in this .npz (see array_generation.py) instead of --sizes."
    )
    parser.add_argument(
        "--results_dir",
        default=RESULTS_BASE_PATH,
        help="Directory benchmark result files are written to and plots are read from."
    )
    parser.add_argument(
        "--plot",
        action="store_true",
        help="Generate plots and summary statistics from the results directory."
    )
    parser.add_argument(
        "--plots_dir",
        default=PLOTS_OUTPUT_DIR,
        help="Directory plots and the summary CSV are written to."
    )
    parser.add_argument(
        "--system_info",
        action="store_true",
        help="Print CPU and RAM information."
    )
    return parser


def print_system_info():
    print("[System Info]")
    print(f"CPU: {get_cpu_info()}")
    print(f"CPU Cores: {get_cpu_core_info()}")
    print(f"RAM: {get_ram_info()}")


def run_radix_sort_suite(sizes, runs, run_python, results_dir, arrays_file=None):
    # Imported here so plain sorting does not pay for Numba start-up
    from performance_profiling.radix_sort.array_generation import load_arrays
    from performance_profiling.radix_sort.profile_radix_sort_all import run_radix_sort_benchmark

    if arrays_file:
        sizes = [load_arrays(arrays_file).shape[1]]

    start_time = time.time()
    for size in sizes:
        print(f"--- Radix Sort Suite: Size {size:,}, Runs {runs} ---")
        run_radix_sort_benchmark(size=size, runs=runs, run_python=run_python, results_dir=results_dir,
                                 arrays_file=arrays_file)
        print(f"\nElapsed time: {get_formatted_elapsed_time(start_time)}")
    print(f"Results saved under {os.path.abspath(results_dir)}")


def main(argv=None):
    args = build_parser().parse_args(argv)

    if args.system_info:
        print_system_info()

    if args.benchmark:
        run_radix_sort_suite(args.sizes, args.runs, not args.no_python, args.results_dir, args.arrays_file)

    if args.plot:
        from plotter import generate_all_plots
        generate_all_plots(results_dir=args.results_dir, output_dir=args.plots_dir)

    if args.benchmark or args.plot or args.system_info:
        return 0

    arr = list(args.values) if args.values is not None else list(SAMPLE_ARRAY)
    try:
        radix_sort(arr, verbose=args.verbose)
    except RadixSortError as e:
        print(f"Error: {e}")
        return 1

    print("Sorted array: ")
    print(format_sequence(arr))
    return 0


if __name__ == "__main__":
    sys.exit(main())
