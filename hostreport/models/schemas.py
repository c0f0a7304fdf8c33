from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt


class Snapshot(BaseModel):
    """Base for point-in-time telemetry captures; populated once, never mutated."""

    model_config = ConfigDict(frozen=True)


class GPUSnapshot(Snapshot):
    name: str
    num_cores: int
    memory_bus_width: int
    core_clock_mhz: int
    memory_clock_mhz: int
    temperature_c: int
    power_usage_w: float
    power_limit_w: int
    memory_used_gb: float
    memory_total_gb: float


class DiskKind(str, Enum):
    SSD = "SSD"
    HDD = "HDD"
    UNKNOWN = "Unknown"


class DiskSnapshot(Snapshot):
    name: str
    kind: DiskKind = DiskKind.UNKNOWN
    file_system: str
    mount_point: str
    total_gb: float
    available_gb: float


class CPUCoreUsage(Snapshot):
    name: str
    percent: float


class HostSnapshot(Snapshot):
    total_memory_gb: float
    used_memory_gb: float
    total_swap_gb: float
    used_swap_gb: float

    # Not every platform reports these
    system_name: Optional[str] = None
    kernel_version: Optional[str] = None
    os_version: Optional[str] = None
    host_name: Optional[str] = None

    uptime_seconds: int
    cpu_count: int
    disks: list[DiskSnapshot] = []
    cpu_cores: list[CPUCoreUsage] = []
    average_cpu_usage: float = 0.0


# City weather payload. Field names on the wire are camelCase and kept
# verbatim through aliases; every field is required and integers must arrive
# as JSON numbers without a fractional part.

class WeatherRecord(BaseModel):
    model_config = ConfigDict(frozen=True)


class Alarm(WeatherRecord):
    content: str = Field(alias="alarmContent")
    description: str = Field(alias="alarmDesc")
    id: str = Field(alias="alarmId")
    level_code: str = Field(alias="alarmLevelNo")
    level: str = Field(alias="alarmLevelNoDesc")
    type_code: str = Field(alias="alarmType")
    type: str = Field(alias="alarmTypeDesc")
    precaution: str
    publish_time: str = Field(alias="publishTime")


class AirQualityIndex(WeatherRecord):
    abbreviation: str
    alias: str
    content: str
    level: str
    name: str


class Pm25Metrics(WeatherRecord):
    advice: str
    aqi: str
    city_count: StrictInt = Field(alias="citycount")
    city_rank: StrictInt = Field(alias="cityrank")
    co: str
    color: str
    level: str
    no2: str
    o3: str
    pm10: str
    pm25: str
    quality: str
    so2: str
    timestamp: str
    update_time: str = Field(alias="upDateTime")


class RealtimeConditions(WeatherRecord):
    icon: str = Field(alias="img")
    humidity: str = Field(alias="sD")
    feels_like: str = Field(alias="sendibleTemp")
    temp: str
    time: str
    wind_direction: str = Field(alias="wD")
    wind_scale: str = Field(alias="wS")
    weather: str
    uv_index: str = Field(alias="ziwaixian")


class ThreeHourForecast(WeatherRecord):
    start_time: str = Field(alias="startTime")
    end_time: str = Field(alias="endTime")
    highest_temperature: str = Field(alias="highestTemperature")
    lowest_temperature: str = Field(alias="lowerestTemperature")
    icon: str = Field(alias="img")
    is_rainfall: str = Field(alias="isRainFall")
    precipitation: str
    wind_direction: str = Field(alias="wd")
    wind_scale: str = Field(alias="ws")
    weather: str


class WeatherDetailsInfo(WeatherRecord):
    publish_time: str = Field(alias="publishTime")
    forecasts: list[ThreeHourForecast] = Field(alias="weather3HoursDetailsInfos")


class DailyForecast(WeatherRecord):
    aqi: str
    date: str
    icon: str = Field(alias="img")
    sunset: str = Field(alias="sun_down_time")
    sunrise: str = Field(alias="sun_rise_time")
    temp_day_c: str
    temp_day_f: str
    temp_night_c: str
    temp_night_f: str
    wind_direction: str = Field(alias="wd")
    weather: str
    week: str
    wind_scale: str = Field(alias="ws")


class CityWeather(WeatherRecord):
    alarms: list[Alarm]
    city: str
    city_id: StrictInt = Field(alias="cityid")
    indexes: list[AirQualityIndex]
    pm25: Pm25Metrics
    province_name: str = Field(alias="provinceName")
    realtime: RealtimeConditions
    details: WeatherDetailsInfo = Field(alias="weatherDetailsInfo")
    weathers: list[DailyForecast]


class WeatherReport(WeatherRecord):
    code: str
    message: str
    redirect: str
    value: list[CityWeather]


class FetchResult(BaseModel):
    """Outcome of one HTTP GET that completed at the transport level."""

    url: str
    status_code: int
    reason: str = ""

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


class RawWeatherResult(FetchResult):
    body: Optional[str] = None


class CityWeatherResult(FetchResult):
    report: Optional[WeatherReport] = None
