GIB = 1024**3


def bytes_to_gb(num_bytes: int) -> float:
    """Convert a byte count to GiB (2**30 bytes)."""
    return num_bytes / GIB


def convert_seconds(seconds: int) -> tuple[int, int, int, int]:
    """Split a duration into (days, hours, minutes, seconds)."""
    days = seconds // 86400
    hours = (seconds // 3600) % 24
    minutes = (seconds // 60) % 60
    return days, hours, minutes, seconds % 60


def average_cpu_usage(usages: list[float]) -> float:
    if not usages:
        return 0.0
    return sum(usages) / len(usages)
