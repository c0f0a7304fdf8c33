import logging

from hostreport.models.schemas import GPUSnapshot
from hostreport.services.conversions import bytes_to_gb
from hostreport.services.errors import GpuInitError, GpuQueryError

logger = logging.getLogger(__name__)


class GPUService:
    """GPU telemetry via nvidia-ml-py (pynvml), first device only."""

    DEVICE_INDEX = 0

    def __init__(self, nvml=None):
        # Injected bindings are used as-is; otherwise pynvml is imported on first read
        self._pynvml = nvml
        self._initialized = False

    def _init_nvml(self):
        """Load the NVML bindings and initialize the driver library."""
        if self._pynvml is None:
            try:
                import pynvml
            except ImportError as e:
                raise GpuInitError(e) from e
            self._pynvml = pynvml

        try:
            self._pynvml.nvmlInit()
        except self._pynvml.NVMLError as e:
            raise GpuInitError(e) from e
        self._initialized = True

    def _query(self, field: str, getter, *args):
        try:
            value = getter(*args)
        except self._pynvml.NVMLError as e:
            logger.debug("NVML query for %s failed: %s", field, e)
            raise GpuQueryError(field, e) from e
        logger.debug("NVML %s = %r", field, value)
        return value

    def read_snapshot(self) -> GPUSnapshot:
        """Read every metric of device 0; any failing query aborts the whole read."""
        self._init_nvml()
        pynvml = self._pynvml

        try:
            try:
                handle = pynvml.nvmlDeviceGetHandleByIndex(self.DEVICE_INDEX)
            except pynvml.NVMLError as e:
                raise GpuInitError(e) from e

            power_limit = self._query(
                "power limit", pynvml.nvmlDeviceGetEnforcedPowerLimit, handle
            )
            memory = self._query("memory info", pynvml.nvmlDeviceGetMemoryInfo, handle)
            power_usage = self._query(
                "power usage", pynvml.nvmlDeviceGetPowerUsage, handle
            )
            temperature = self._query(
                "temperature",
                pynvml.nvmlDeviceGetTemperature,
                handle,
                pynvml.NVML_TEMPERATURE_GPU,
            )
            core_clock = self._query(
                "graphics clock",
                pynvml.nvmlDeviceGetClockInfo,
                handle,
                pynvml.NVML_CLOCK_GRAPHICS,
            )
            memory_clock = self._query(
                "memory clock",
                pynvml.nvmlDeviceGetClockInfo,
                handle,
                pynvml.NVML_CLOCK_MEM,
            )
            name = self._query("name", pynvml.nvmlDeviceGetName, handle)
            if isinstance(name, bytes):
                name = name.decode("utf-8")
            num_cores = self._query("core count", pynvml.nvmlDeviceGetNumGpuCores, handle)
            bus_width = self._query(
                "memory bus width", pynvml.nvmlDeviceGetMemoryBusWidth, handle
            )
        finally:
            self.close()

        return GPUSnapshot(
            name=name,
            num_cores=num_cores,
            memory_bus_width=bus_width,
            core_clock_mhz=core_clock,
            memory_clock_mhz=memory_clock,
            temperature_c=temperature,
            power_usage_w=power_usage / 1000,
            power_limit_w=power_limit // 1000,
            memory_used_gb=bytes_to_gb(memory.used),
            memory_total_gb=bytes_to_gb(memory.total),
        )

    def close(self):
        if self._initialized and self._pynvml:
            try:
                self._pynvml.nvmlShutdown()
            except self._pynvml.NVMLError as e:
                logger.debug("NVML shutdown failed: %s", e)
            self._initialized = False
