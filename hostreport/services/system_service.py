import logging
import os
import platform
import time
from pathlib import Path
from typing import Optional

import psutil

from hostreport.models.schemas import CPUCoreUsage, DiskKind, DiskSnapshot, HostSnapshot
from hostreport.services.conversions import average_cpu_usage, bytes_to_gb

logger = logging.getLogger(__name__)

# CPU usage is a delta between two samples; shorter windows are unreliable
MINIMUM_CPU_UPDATE_INTERVAL = 1.0


def _none_if_blank(value: Optional[str]) -> Optional[str]:
    return value or None


class SystemService:
    """Reads host identity, memory, disk, uptime and CPU stats."""

    SYS_BLOCK_ROOT = Path("/sys/class/block")

    def __init__(
        self,
        cpu_sample_interval: float = MINIMUM_CPU_UPDATE_INTERVAL,
        sys_block_root: Optional[Path] = None,
    ):
        self.cpu_sample_interval = max(cpu_sample_interval, MINIMUM_CPU_UPDATE_INTERVAL)
        self.sys_block_root = sys_block_root or self.SYS_BLOCK_ROOT

    def read_snapshot(self) -> HostSnapshot:
        """Collect a full host snapshot. Blocks for the CPU sampling interval."""
        virtual_mem = psutil.virtual_memory()
        swap = psutil.swap_memory()
        system_name, os_version = self.get_os_identity()
        cores = self.sample_cpu_usage()

        return HostSnapshot(
            total_memory_gb=bytes_to_gb(virtual_mem.total),
            used_memory_gb=bytes_to_gb(virtual_mem.used),
            total_swap_gb=bytes_to_gb(swap.total),
            used_swap_gb=bytes_to_gb(swap.used),
            system_name=system_name,
            kernel_version=self.get_kernel_version(),
            os_version=os_version,
            host_name=_none_if_blank(platform.node()),
            uptime_seconds=self.get_uptime_seconds(),
            cpu_count=psutil.cpu_count(logical=True) or len(cores),
            disks=self.list_disks(),
            cpu_cores=cores,
            average_cpu_usage=average_cpu_usage([c.percent for c in cores]),
        )

    @staticmethod
    def get_os_identity() -> tuple[Optional[str], Optional[str]]:
        """Return (system name, OS version); either may be None."""
        system = platform.system()
        if system == "Linux":
            try:
                release = platform.freedesktop_os_release()
            except OSError:
                logger.debug("os-release not found; OS name unavailable")
                return None, None
            return _none_if_blank(release.get("NAME")), _none_if_blank(
                release.get("VERSION_ID")
            )
        if system == "Darwin":
            return "Darwin", _none_if_blank(platform.mac_ver()[0])
        if system == "Windows":
            return "Windows", _none_if_blank(platform.version())
        return _none_if_blank(system), None

    @staticmethod
    def get_kernel_version() -> Optional[str]:
        return _none_if_blank(platform.release())

    @staticmethod
    def get_uptime_seconds() -> int:
        return max(0, int(time.time() - psutil.boot_time()))

    def list_disks(self) -> list[DiskSnapshot]:
        """Enumerate mounted volumes; unreadable mounts are skipped."""
        disks = []
        for part in psutil.disk_partitions(all=False):
            try:
                usage = psutil.disk_usage(part.mountpoint)
            except OSError as e:
                logger.debug("Skipping %s: %s", part.mountpoint, e)
                continue
            disks.append(DiskSnapshot(
                name=part.device,
                kind=self.get_disk_kind(part.device),
                file_system=part.fstype,
                mount_point=part.mountpoint,
                total_gb=bytes_to_gb(usage.total),
                available_gb=bytes_to_gb(usage.free),
            ))
        return disks

    def get_disk_kind(self, device: str) -> DiskKind:
        """Classify a block device from its sysfs rotational flag."""
        # Pseudo filesystems (tmpfs, overlay, ...) report a bare label, not a device node
        if not device.startswith("/"):
            return DiskKind.UNKNOWN
        name = os.path.basename(os.path.realpath(device))
        block_dir = self.sys_block_root / name
        # Partitions carry no queue/; the flag lives on the parent disk
        if (block_dir / "partition").exists():
            block_dir = block_dir.resolve().parent

        try:
            with open(block_dir / "queue" / "rotational", "r") as f:
                flag = f.read().strip()
        except OSError:
            return DiskKind.UNKNOWN

        if flag == "0":
            return DiskKind.SSD
        if flag == "1":
            return DiskKind.HDD
        return DiskKind.UNKNOWN

    def sample_cpu_usage(self) -> list[CPUCoreUsage]:
        """Per-core usage over the sampling interval."""
        # First call only primes psutil's per-CPU counters
        psutil.cpu_percent(interval=None, percpu=True)
        time.sleep(self.cpu_sample_interval)
        usages = psutil.cpu_percent(interval=None, percpu=True)
        return [
            CPUCoreUsage(name=f"cpu{i}", percent=float(pct))
            for i, pct in enumerate(usages)
        ]
