"""Pytest configuration and shared fixtures."""

from types import SimpleNamespace
from unittest.mock import MagicMock

import httpx
import pytest

from hostreport.models.schemas import CPUCoreUsage, DiskKind, DiskSnapshot, HostSnapshot
from hostreport.services.weather_service import WeatherService

GIB = 1024**3

CITY_WEATHER_URL = "https://weather.test/app/weather/listWeather"
AUX_WEATHER_URL = "https://aux.test/api/weather/GetWeather"


class FakeNVMLError(Exception):
    """Stands in for pynvml.NVMLError."""


@pytest.fixture
def fake_nvml() -> MagicMock:
    """NVML bindings describing a single healthy test GPU."""
    nvml = MagicMock()
    nvml.NVMLError = FakeNVMLError
    nvml.nvmlDeviceGetName.return_value = "TestGPU"
    nvml.nvmlDeviceGetNumGpuCores.return_value = 10
    nvml.nvmlDeviceGetMemoryBusWidth.return_value = 256
    nvml.nvmlDeviceGetClockInfo.side_effect = lambda handle, clock: {
        nvml.NVML_CLOCK_GRAPHICS: 1500,
        nvml.NVML_CLOCK_MEM: 7000,
    }[clock]
    nvml.nvmlDeviceGetTemperature.return_value = 65
    nvml.nvmlDeviceGetPowerUsage.return_value = 150000
    nvml.nvmlDeviceGetEnforcedPowerLimit.return_value = 200000
    nvml.nvmlDeviceGetMemoryInfo.return_value = SimpleNamespace(
        used=4 * GIB, total=8 * GIB, free=4 * GIB
    )
    return nvml


@pytest.fixture
def host_snapshot() -> HostSnapshot:
    return HostSnapshot(
        total_memory_gb=16.0,
        used_memory_gb=6.5,
        total_swap_gb=2.0,
        used_swap_gb=0.0,
        system_name="Ubuntu",
        kernel_version="6.8.0-45-generic",
        os_version="24.04",
        host_name="workstation",
        uptime_seconds=90061,
        cpu_count=2,
        disks=[
            DiskSnapshot(
                name="/dev/nvme0n1p2",
                kind=DiskKind.SSD,
                file_system="ext4",
                mount_point="/",
                total_gb=512.0,
                available_gb=128.25,
            )
        ],
        cpu_cores=[
            CPUCoreUsage(name="cpu0", percent=10.0),
            CPUCoreUsage(name="cpu1", percent=30.0),
        ],
        average_cpu_usage=20.0,
    )


def make_city(**overrides) -> dict:
    city = {
        "alarms": [],
        "city": "Beijing",
        "cityid": 101010100,
        "indexes": [],
        "pm25": {
            "advice": "0",
            "aqi": "42",
            "citycount": 1200,
            "cityrank": 85,
            "co": "4",
            "color": "0",
            "level": "0",
            "no2": "12",
            "o3": "66",
            "pm10": "30",
            "pm25": "18",
            "quality": "Good",
            "so2": "3",
            "timestamp": "",
            "upDateTime": "2024-05-01 10:00:00.000",
        },
        "provinceName": "Beijing",
        "realtime": {
            "img": "0",
            "sD": "40",
            "sendibleTemp": "21",
            "temp": "22",
            "time": "2024-05-01 10:05:00",
            "wD": "N",
            "wS": "Level 2",
            "weather": "Sunny",
            "ziwaixian": "N/A",
        },
        "weatherDetailsInfo": {
            "publishTime": "2024-05-01 10:00:00",
            "weather3HoursDetailsInfos": [
                {
                    "endTime": "2024-05-01 14:00:00",
                    "highestTemperature": "25",
                    "img": "1",
                    "isRainFall": "",
                    "lowerestTemperature": "25",
                    "precipitation": "0",
                    "startTime": "2024-05-01 11:00:00",
                    "wd": "",
                    "weather": "Cloudy",
                    "ws": "",
                }
            ],
        },
        "weathers": [
            {
                "aqi": "45",
                "date": "2024-05-02",
                "img": "1",
                "sun_down_time": "19:12",
                "sun_rise_time": "05:18",
                "temp_day_c": "26",
                "temp_day_f": "78.8",
                "temp_night_c": "14",
                "temp_night_f": "57.2",
                "wd": "",
                "weather": "Cloudy",
                "week": "Thursday",
                "ws": "",
            }
        ],
    }
    city.update(overrides)
    return city


@pytest.fixture
def city_weather_payload() -> dict:
    return {"code": "0", "message": "", "redirect": "", "value": [make_city()]}


def make_weather_service(handler) -> WeatherService:
    return WeatherService(
        city_weather_url=CITY_WEATHER_URL,
        aux_weather_url=AUX_WEATHER_URL,
        timeout=5.0,
        transport=httpx.MockTransport(handler),
    )


@pytest.fixture
def weather_routes(city_weather_payload):
    """Per-URL response factories; tests replace entries to change behavior."""
    return {
        AUX_WEATHER_URL: lambda request: httpx.Response(200, text="sunny all week"),
        CITY_WEATHER_URL: lambda request: httpx.Response(200, json=city_weather_payload),
    }


@pytest.fixture
def weather_service(weather_routes) -> WeatherService:
    def handler(request: httpx.Request) -> httpx.Response:
        url = f"{request.url.scheme}://{request.url.host}{request.url.path}"
        return weather_routes[url](request)

    return make_weather_service(handler)
