"""Exceptions raised by the telemetry readers and weather fetchers."""


class GpuError(Exception):
    """GPU telemetry could not be read."""


class GpuInitError(GpuError):
    def __init__(self, cause: object):
        self.cause = cause
        super().__init__(f"NVML initialization failed: {cause}")


class GpuQueryError(GpuError):
    def __init__(self, field: str, cause: object):
        self.field = field
        self.cause = cause
        super().__init__(f"failed to query GPU {field}: {cause}")


class FetchError(Exception):
    """A weather request failed before a usable response was produced."""

    kind = "fetch error"

    def __init__(self, url: str, cause: object):
        self.url = url
        self.cause = cause
        super().__init__(f"{self.kind} for {url}: {cause}")


class FetchTransportError(FetchError):
    kind = "transport error"


class FetchParseError(FetchError):
    kind = "invalid response body"
