from typing import Optional

from hostreport.models.schemas import DiskSnapshot, HostSnapshot
from hostreport.services.conversions import convert_seconds


def _optional(value: Optional[str]) -> str:
    return value if value is not None else "unavailable"


def render_system(host: HostSnapshot) -> list[str]:
    """Memory, identity, uptime and CPU lines."""
    days, hours, minutes, seconds = convert_seconds(host.uptime_seconds)
    lines = [
        "=> system:",
        f"total memory: {host.total_memory_gb:.2f} GB",
        f"used memory : {host.used_memory_gb:.2f} GB",
        f"total swap  : {host.total_swap_gb:.2f} GB",
        f"used swap   : {host.used_swap_gb:.2f} GB",
        f"System name:             {_optional(host.system_name)}",
        f"System kernel version:   {_optional(host.kernel_version)}",
        f"System OS version:       {_optional(host.os_version)}",
        f"System host name:        {_optional(host.host_name)}",
        f"uptime {host.uptime_seconds} seconds is equivalent to {days} days, "
        f"{hours} hours, {minutes} minutes, and {seconds} seconds",
        f"NB CPUs: {host.cpu_count}",
    ]
    lines.extend(f"{core.name} Usage: {core.percent:.2f}%" for core in host.cpu_cores)
    lines.append(f"average_cpu_usage {host.average_cpu_usage:.2f}%")
    return lines


def render_disk(disk: DiskSnapshot) -> str:
    return "\t".join([
        disk.name,
        disk.kind.value,
        disk.file_system,
        disk.mount_point,
        f"{disk.total_gb:.2f} GB",
        f"{disk.available_gb:.2f} GB",
    ])


def render_disks(disks: list[DiskSnapshot]) -> list[str]:
    return ["=> disks:"] + [render_disk(d) for d in disks]
