import pandas as pd
import pytest

import plotter


def write_stats_file(path, times, size=1_000_000):
    path.parent.mkdir(parents=True, exist_ok=True)
    lines = ["# CPU Info: Test CPU", "Run,Timestamp,Time(s),Size,MElements/s"]
    for run_number, exec_time in enumerate(times, start=1):
        if exec_time == float('inf'):
            lines.append(f"{run_number},2026-01-01 00:00:00,inf,{size},0.0")
        else:
            lines.append(f"{run_number},2026-01-01 00:00:00,{exec_time},{size},{size / exec_time / 1e6:.2f}")
    path.write_text("\n".join(lines) + "\n")


@pytest.fixture
def results_dir(tmp_path):
    size_dir = tmp_path / "results" / "radix_sort" / "1000000"
    write_stats_file(size_dir / "python_single_thread_stats.txt", [0.5, 0.4, 0.4, 0.4])
    write_stats_file(size_dir / "numba_single_thread_stats.txt", [0.2, 0.01, 0.01, float('inf')])
    write_stats_file(size_dir / "numpy_sort_baseline_stats.txt", [0.001, 0.001, 0.002, 0.001])
    return tmp_path / "results"


def test_load_data_file_drops_failed_runs(results_dir):
    df = plotter.load_data_file(str(results_dir / "radix_sort" / "1000000" / "numba_single_thread_stats.txt"))
    assert df["Run"].tolist() == [1, 2, 3]


def test_load_data_file_missing_file_returns_none(tmp_path):
    assert plotter.load_data_file(str(tmp_path / "missing.txt")) is None


def test_implementation_sort_order():
    names = ["numpy_sort_baseline_stats", "numba_single_thread_stats", "python_single_thread_stats"]
    assert sorted(names, key=plotter.get_implementation_sort_key) == [
        "python_single_thread_stats", "numba_single_thread_stats", "numpy_sort_baseline_stats"]


def test_sanitize_filename():
    assert plotter.sanitize_filename("MElements/s") == "MElements_s"
    assert plotter.sanitize_filename("a b:c") == "a_b_c"


def test_generate_all_plots_writes_summary_and_plots(results_dir, tmp_path):
    output_dir = tmp_path / "plots"
    summary_file = plotter.generate_all_plots(results_dir=str(results_dir), output_dir=str(output_dir))

    summary = pd.read_csv(summary_file)
    time_rows = summary[summary["Metric"] == "Time(s)"].set_index("Implementation")
    assert time_rows.loc["python_single_thread_stats", "Median"] == pytest.approx(0.4)
    assert time_rows.loc["numba_single_thread_stats", "Count"] == 2

    speedups = summary[summary["Metric"] == "Speedup Factor (Median Time)"]
    assert set(speedups["Implementation"]) == {
        "numba_single_thread_stats vs python_single_thread_stats",
        "numpy_sort_baseline_stats vs python_single_thread_stats",
    }
    numba_speedup = speedups[speedups["Implementation"].str.startswith("numba")]["Median"].iloc[0]
    assert numba_speedup == pytest.approx(40.0)

    plots = {path.name for path in (output_dir / "radix_sort" / "1000000").iterdir()}
    assert "comparison_median_Times_excl_warmup_log.png" in plots
    assert "python_single_thread_stats_time_vs_run_excl_warmup.png" in plots


def test_generate_all_plots_without_results(tmp_path):
    assert plotter.generate_all_plots(results_dir=str(tmp_path / "empty"),
                                      output_dir=str(tmp_path / "plots")) is None
