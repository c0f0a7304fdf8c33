from hostreport.models.schemas import GPUSnapshot


def format_number(value) -> str:
    """Shortest plain rendering: whole floats lose their trailing '.0'."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def render_gpu(gpu: GPUSnapshot) -> list[str]:
    return [
        f"GPU Name: {gpu.name}",
        f"Number of Cores: {gpu.num_cores}",
        f"Memory Bus Width: {gpu.memory_bus_width}-bit bus width",
        f"GPU Core Clocks: {gpu.core_clock_mhz} MHz",
        f"GPU Memory Clock: {gpu.memory_clock_mhz} MHz",
        f"GPU Temperature: {gpu.temperature_c} C",
        f"Power Usage: {format_number(gpu.power_usage_w)} W",
        f"Power Limit: {gpu.power_limit_w} W",
        f"Memory Used: {gpu.memory_used_gb:.2f} GB",
        f"Memory Total: {gpu.memory_total_gb:.2f} GB",
    ]


def render_gpu_error(error: Exception) -> list[str]:
    return [f"Error: {error}"]
