import os
import re
from collections import defaultdict

import pandas as pd
import matplotlib.pyplot as plt
import matplotlib.ticker as mticker

from constants.string_constants import RESULTS_BASE_PATH, PLOTS_OUTPUT_DIR

# --- Configuration ---
SUMMARY_STATS_FILENAME = 'summary_statistics_excl_warmup.csv'
PERF_COLUMN = 'MElements/s'
TIME_COLUMN = 'Time(s)'
BASELINE_IMPLEMENTATION = 'python_single_thread_stats'
# Plotting Aesthetics
FIG_WIDTH = 6
FIG_DPI = 150
COMP_FIG_HEIGHT = 6
RUN_FIG_HEIGHT = 6
COMP_BAR_WIDTH = 0.5
LABEL_FONT_SIZE = 13
TITLE_FONT_SIZE = 15
TICK_FONT_SIZE = 11
LEGEND_FONT_SIZE = 12
ANNOTATION_FONT_SIZE = 12
BAR_LABEL_Y_FACTOR = 1.15
# --- End Configuration ---


def sanitize_filename(name):
    """Removes potentially problematic characters for filenames."""
    name = re.sub(r'[\\/*?:"<>|]+', '_', name)
    name = re.sub(r'\s+', '_', name)
    name = re.sub(r'[^a-zA-Z0-9_.-]', '', name)
    return name


def get_implementation_sort_key(impl_name):
    """
    Determines the bar order in comparison plots.
    Order: 0. pure Python, 1. Numba, 2. NumPy baseline, 3. anything else.
    """
    name_lower = impl_name.lower()
    if 'python' in name_lower:
        return (0, impl_name)
    elif 'numba' in name_lower:
        return (1, impl_name)
    elif 'numpy' in name_lower or 'baseline' in name_lower:
        return (2, impl_name)
    return (3, impl_name)


def load_data_file(file_path):
    """Loads one benchmark result file, skipping failed (inf) runs."""
    try:
        df = pd.read_csv(file_path, skipinitialspace=True, comment='#')
    except FileNotFoundError:
        print(f"Error: File not found {file_path}")
        return None
    except pd.errors.EmptyDataError:
        print(f"Warning: Skipping empty file {file_path}")
        return None

    if 'Run' not in df.columns or TIME_COLUMN not in df.columns:
        print(f"Warning: Required columns ('Run', '{TIME_COLUMN}') not found in {file_path}. Skipping.")
        return None

    df[TIME_COLUMN] = pd.to_numeric(df[TIME_COLUMN], errors='coerce')
    df = df[df[TIME_COLUMN] != float('inf')].dropna(subset=[TIME_COLUMN]).copy()
    if PERF_COLUMN in df.columns:
        df[PERF_COLUMN] = pd.to_numeric(df[PERF_COLUMN], errors='coerce')
        df = df[df[PERF_COLUMN] > 0]

    if df.empty:
        return None
    return df


def _plot_metric_per_run(df_plot, metric_col, metric_label, title_str, plot_path, marker, linestyle, color=None):
    plt.figure(figsize=(FIG_WIDTH, RUN_FIG_HEIGHT))
    median = df_plot[metric_col].median()
    stdev = df_plot[metric_col].std() if len(df_plot[metric_col].dropna()) >= 2 else 0.0

    plt.plot(df_plot['Run'], df_plot[metric_col], marker=marker, linestyle=linestyle, color=color,
             label=metric_label)
    if pd.notna(median):
        fmt = '{:,.2f}' if median >= 1 else '{:.4f}'
        plt.axhline(median, color='r', linestyle='--', linewidth=1.5, label=f'Median: {fmt.format(median)}')
    if pd.notna(stdev) and stdev > 1e-9:
        fmt_std = '{:,.2f}' if stdev >= 1 else '{:.4f}'
        plt.text(0.98, 0.95, f'Std Dev: {fmt_std.format(stdev)}', transform=plt.gca().transAxes,
                 fontsize=ANNOTATION_FONT_SIZE, verticalalignment='top', horizontalalignment='right',
                 bbox=dict(boxstyle='round,pad=0.3', fc='white', alpha=0.8))

    plt.xlabel('Run Number (Warm-up Excluded)', fontsize=LABEL_FONT_SIZE)
    plt.ylabel(metric_label, fontsize=LABEL_FONT_SIZE)
    plt.title(title_str, fontsize=TITLE_FONT_SIZE)
    plt.xticks(fontsize=TICK_FONT_SIZE)
    plt.yticks(fontsize=TICK_FONT_SIZE)
    plt.gca().xaxis.set_major_locator(mticker.MaxNLocator(integer=True))
    plt.grid(True, which='both', linestyle='--', linewidth=0.5)
    plt.legend(fontsize=LEGEND_FONT_SIZE)
    plt.tight_layout()
    try:
        plt.savefig(plot_path, dpi=FIG_DPI)
    except OSError as e:
        print(f"Error saving plot {plot_path}: {e}")
    plt.close()


def plot_individual_run(df, size_str, implementation, output_dir):
    """Generates and saves time and throughput plots for one result file, excluding Run 1."""
    df_plot = df[df['Run'] > 1]
    if df_plot.empty:
        return

    base_filename = sanitize_filename(implementation)
    _plot_metric_per_run(df_plot, TIME_COLUMN, 'Time (s)',
                         f'Execution Time per Run\nSize: {size_str}\nImpl: {implementation}',
                         os.path.join(output_dir, f"{base_filename}_time_vs_run_excl_warmup.png"),
                         marker='o', linestyle='-')

    if PERF_COLUMN in df_plot.columns:
        _plot_metric_per_run(df_plot, PERF_COLUMN, PERF_COLUMN,
                             f'{PERF_COLUMN} per Run\nSize: {size_str}\nImpl: {implementation}',
                             os.path.join(output_dir,
                                          f"{base_filename}_{sanitize_filename(PERF_COLUMN)}_vs_run_excl_warmup.png"),
                             marker='x', linestyle='--', color='green')


def calculate_stats_excluding_warmup(series):
    """Calculates stats for a series already excluding the warm-up run."""
    if series.empty or series.isnull().all():
        return {'mean': float('nan'), 'median': float('nan'), 'stdev': float('nan'), 'count': len(series)}
    valid_data = series.dropna()
    stdev = valid_data.std() if len(valid_data) >= 2 else 0.0
    return {'mean': series.mean(), 'median': series.median(), 'stdev': stdev, 'count': len(series)}


def plot_comparison(stats_dict, metric_name, unit, size_str, output_dir, use_median=False):
    """Generates a log-scale comparison bar plot across implementations for one size."""
    if not stats_dict:
        return None

    sorted_impl_keys = sorted(stats_dict.keys(), key=get_implementation_sort_key)
    stat_key = 'median' if use_median else 'mean'
    plot_title_stat = 'Median' if use_median else 'Average'

    bars_data = []
    for impl_key in sorted_impl_keys:
        metric_stats = stats_dict[impl_key].get(metric_name, {})
        value = metric_stats.get(stat_key, float('nan'))
        if pd.notna(value) and value > 0:
            error = metric_stats.get('stdev', float('nan'))
            bars_data.append((impl_key, value, error if pd.notna(error) else 0))
    if not bars_data:
        return None

    labels, values, errors = zip(*bars_data)
    plt.figure(figsize=(FIG_WIDTH, COMP_FIG_HEIGHT))
    ax = plt.gca()
    x_positions = range(len(values))
    bars = ax.bar(x_positions, values, yerr=errors, capsize=5, color='skyblue', edgecolor='black',
                  log=True, width=COMP_BAR_WIDTH)

    ax.set_ylabel(f'{plot_title_stat} {metric_name} ({unit})', fontsize=LABEL_FONT_SIZE)
    ax.set_title(f'Comparison of {plot_title_stat} {metric_name}\nAlg: Radix Sort\nSize: {size_str}',
                 fontsize=TITLE_FONT_SIZE)
    ax.set_xticks(list(x_positions))
    ax.set_xticklabels(labels, rotation=30, ha='right', fontsize=TICK_FONT_SIZE)
    plt.yticks(fontsize=TICK_FONT_SIZE)
    ax.grid(True, which='major', axis='y', linestyle='-', linewidth=0.7)
    ax.grid(True, which='minor', axis='y', linestyle=':', linewidth=0.5)

    max_text_y = 0
    for bar in bars:
        yval = bar.get_height()
        if abs(yval) >= 1000:
            fmt = '{:,.0f}'
        elif abs(yval) >= 1:
            fmt = '{:,.2f}'
        else:
            fmt = '{:.4f}'
        text_y_position = yval * BAR_LABEL_Y_FACTOR
        max_text_y = max(max_text_y, text_y_position)
        ax.text(x=bar.get_x() + bar.get_width() / 2.0, y=text_y_position,
                s=fmt.format(yval), va='bottom', ha='center', fontsize=ANNOTATION_FONT_SIZE)

    plt.tight_layout()
    bottom_lim, top_lim = ax.get_ylim()
    if max_text_y >= top_lim * 0.85:
        ax.set_ylim(bottom=bottom_lim, top=max_text_y * 1.25)
        plt.tight_layout()

    comp_plot_path = os.path.join(
        output_dir, f"comparison_{plot_title_stat.lower()}_{sanitize_filename(metric_name)}_excl_warmup_log.png")
    try:
        plt.savefig(comp_plot_path, dpi=FIG_DPI)
    except OSError as e:
        print(f"Error saving log comparison plot {comp_plot_path}: {e}")
        comp_plot_path = None
    plt.close()
    return comp_plot_path


def collect_results(results_dir):
    """Returns {size_str: {implementation_name: DataFrame}} for every radix sort result file."""
    all_data = defaultdict(dict)
    for root, _, files in os.walk(results_dir):
        for file_name in files:
            if not file_name.endswith('.txt'):
                continue
            file_path = os.path.join(root, file_name)
            parts = os.path.relpath(file_path, results_dir).split(os.sep)
            if len(parts) != 3:
                continue
            _, size_str, impl_file = parts
            df = load_data_file(file_path)
            if df is not None:
                all_data[size_str][impl_file.replace('.txt', '')] = df
    return all_data


def summarize_size(size_str, implementations_dict):
    """Computes per-implementation stats (warm-up excluded) plus speedups over the pure Python baseline."""
    stats = {}
    summary_rows = []
    for implementation_name, df_impl in implementations_dict.items():
        df_stats = df_impl[df_impl['Run'] > 1]
        stats[implementation_name] = {TIME_COLUMN: calculate_stats_excluding_warmup(df_stats[TIME_COLUMN])}
        if PERF_COLUMN in df_stats.columns:
            stats[implementation_name][PERF_COLUMN] = calculate_stats_excluding_warmup(df_stats[PERF_COLUMN])

        for metric_name, metric_stats in stats[implementation_name].items():
            summary_rows.append({'Algorithm': 'radix_sort', 'Size': size_str,
                                 'Implementation': implementation_name, 'Metric': metric_name,
                                 'Mean': metric_stats['mean'], 'Median': metric_stats['median'],
                                 'StdDev': metric_stats['stdev'], 'Count': metric_stats['count']})

    baseline_median = stats.get(BASELINE_IMPLEMENTATION, {}).get(TIME_COLUMN, {}).get('median', float('nan'))
    if pd.notna(baseline_median) and baseline_median > 1e-9:
        for implementation_name, impl_stats in stats.items():
            if implementation_name == BASELINE_IMPLEMENTATION:
                continue
            median_time = impl_stats[TIME_COLUMN]['median']
            if pd.notna(median_time) and median_time > 1e-9:
                speedup = baseline_median / median_time
                summary_rows.append({'Algorithm': 'radix_sort', 'Size': size_str,
                                     'Implementation': f'{implementation_name} vs {BASELINE_IMPLEMENTATION}',
                                     'Metric': 'Speedup Factor (Median Time)',
                                     'Mean': speedup, 'Median': speedup, 'StdDev': float('nan'), 'Count': 1})
    return stats, summary_rows


def generate_all_plots(results_dir=RESULTS_BASE_PATH, output_dir=PLOTS_OUTPUT_DIR):
    """
    Loads every result file, writes per-run and comparison plots and a summary CSV.

    Returns:
        Path of the summary CSV, or None when there was nothing to summarize.
    """
    os.makedirs(output_dir, exist_ok=True)
    print(f"Input directory: {os.path.abspath(results_dir)}")
    print(f"Output directory: {os.path.abspath(output_dir)}")
    print("NOTE: All statistics and plots will exclude the first run (warm-up).")

    print("\n--- Starting Data Collection ---")
    all_data = collect_results(results_dir)
    print("--- Data Collection Finished ---")

    summary_rows = []
    for size_str, implementations_dict in sorted(all_data.items()):
        size_output_dir = os.path.join(output_dir, 'radix_sort', sanitize_filename(size_str))
        os.makedirs(size_output_dir, exist_ok=True)

        for implementation_name, df_data in implementations_dict.items():
            plot_individual_run(df_data, size_str, implementation_name, size_output_dir)

        stats, rows = summarize_size(size_str, implementations_dict)
        summary_rows.extend(rows)
        for use_median in (False, True):
            plot_comparison(stats, TIME_COLUMN, 's', size_str, size_output_dir, use_median=use_median)
            plot_comparison(stats, PERF_COLUMN, PERF_COLUMN, size_str, size_output_dir, use_median=use_median)

    if not summary_rows:
        print("No summary statistics were generated.")
        return None

    summary_file = os.path.join(output_dir, SUMMARY_STATS_FILENAME)
    summary_df = pd.DataFrame(summary_rows)[['Algorithm', 'Size', 'Implementation', 'Metric',
                                             'Mean', 'Median', 'StdDev', 'Count']]
    try:
        summary_df.to_csv(summary_file, index=False, float_format='%.5f')
    except OSError as e:
        print(f"Error saving summary statistics CSV: {e}")
        return None
    print(f"Summary statistics saved to: {summary_file}")
    return summary_file


# Run manually
if __name__ == "__main__":
    generate_all_plots()
