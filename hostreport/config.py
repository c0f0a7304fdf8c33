from pydantic_settings import BaseSettings

APP_VERSION = "0.1.0"


class Settings(BaseSettings):
    # Logging
    DEBUG: bool = False
    LOG_LEVEL: str = "WARNING"

    # Host
    CPU_SAMPLE_INTERVAL: float = 1.0

    # Weather
    CITY_ID: int = 101200105
    CITY_WEATHER_URL: str = "https://aider.meizu.com/app/weather/listWeather"
    AUX_WEATHER_URL: str = "https://api.oioweb.cn/api/weather/GetWeather"
    HTTP_TIMEOUT: float = 10.0

    # Transport and parse failures abort the run unless disabled
    FETCH_ERRORS_FATAL: bool = True

    model_config = {"env_prefix": "HOSTREPORT_"}


settings = Settings()
