import time

import cpuinfo
import psutil


def get_cpu_info():
    """Returns CPU info using py-cpuinfo."""
    try:
        cpu_info = cpuinfo.get_cpu_info()
        return cpu_info['brand_raw']
    except Exception as e:
        return f"Error: {e}"


def get_cpu_core_info():
    """Returns physical/logical core counts using psutil."""
    physical_cores = psutil.cpu_count(logical=False)
    logical_cores = psutil.cpu_count(logical=True)
    return f"{physical_cores} physical, {logical_cores} logical"


def get_ram_info():
    """Returns RAM info using psutil."""
    ram = psutil.virtual_memory()
    return f"Total: {ram.total / (1024 ** 3):.2f} GB, Available: {ram.available / (1024 ** 3):.2f} GB"


def write_result_header(file, cpu_info=None):
    file.write(f"# CPU Info: {cpu_info or get_cpu_info()}\n")
    file.write(f"# RAM Info: {get_ram_info()}\n")


def format_sequence(arr):
    return " ".join(str(value) for value in arr)


def get_formatted_elapsed_time(start_time):
    elapsed_time = time.time() - start_time
    formatted_time = time.strftime("%H:%M:%S", time.gmtime(elapsed_time))
    return formatted_time
