RESULTS_BASE_PATH = 'results/'
RADIX_SORT_PATH = 'radix_sort/'
PLOTS_OUTPUT_DIR = 'visualizations_and_stats'
PREGENERATED_ARRAYS_FILE = 'pre_generated_arrays.npz'

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
RESULT_CSV_HEADER = "Run,Timestamp,Time(s),Size,MElements/s\n"
