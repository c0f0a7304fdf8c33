from hostreport.models.schemas import (
    CityWeather,
    CityWeatherResult,
    FetchResult,
    RawWeatherResult,
    WeatherReport,
)

SEPARATOR = "------------------------"


def _request_failed(result: FetchResult) -> str:
    return f"Request failed: {result.status_code} {result.reason}".rstrip()


def render_weather_alt(result: RawWeatherResult) -> list[str]:
    """Auxiliary endpoint: raw body on success, status otherwise."""
    if not result.ok:
        return [_request_failed(result)]
    return [f"Request succeeded: {result.body}"]


def render_city(city: CityWeather) -> list[str]:
    lines = []
    for alarm in city.alarms:
        lines += [
            f"Alarm Content: {alarm.content}",
            f"Alarm Description: {alarm.description}",
            f"Alarm ID: {alarm.id}",
            f"Alarm Level: {alarm.level}",
            f"Alarm Type: {alarm.type}",
            f"Precaution: {alarm.precaution}",
            f"Publish Time: {alarm.publish_time}",
            SEPARATOR,
        ]

    lines += [
        f"City: {city.city}",
        f"City ID: {city.city_id}",
    ]

    for index in city.indexes:
        lines += [
            f"Index Name: {index.name}",
            f"Index Level: {index.level}",
            f"Index Content: {index.content}",
            SEPARATOR,
        ]

    pm25 = city.pm25
    lines += [
        f"PM2.5 Quality: {pm25.quality}",
        f"PM2.5 AQI: {pm25.aqi}",
        f"PM2.5 Level: {pm25.level}",
        f"PM2.5 Pollutants: pm2.5={pm25.pm25} pm10={pm25.pm10} o3={pm25.o3} "
        f"no2={pm25.no2} so2={pm25.so2} co={pm25.co}",
        f"PM2.5 City Rank: {pm25.city_rank}/{pm25.city_count}",
        f"Province Name: {city.province_name}",
    ]

    realtime = city.realtime
    lines += [
        f"Realtime Weather: {realtime.weather}",
        f"Realtime Temperature: {realtime.temp}",
        f"Realtime Feels Like: {realtime.feels_like}",
        f"Realtime Wind: {realtime.wind_direction} {realtime.wind_scale}",
        f"Realtime UV Index: {realtime.uv_index}",
        f"Realtime Observed: {realtime.time}",
    ]

    lines.append(f"Forecast Published: {city.details.publish_time}")
    for slot in city.details.forecasts:
        lines.append(
            f"{slot.start_time} - {slot.end_time}: {slot.weather} "
            f"{slot.lowest_temperature}~{slot.highest_temperature} "
            f"{slot.wind_direction} {slot.wind_scale} rain={slot.is_rainfall} "
            f"precipitation={slot.precipitation}"
        )

    for day in city.weathers:
        lines += [
            f"Weather Date: {day.date} {day.week}",
            f"Weather: {day.weather}",
            f"Day Temperature: {day.temp_day_c}",
            f"Night Temperature: {day.temp_night_c}",
            f"Sunrise/Sunset: {day.sunrise} / {day.sunset}",
            f"Wind: {day.wind_direction} {day.wind_scale}",
            f"AQI: {day.aqi}",
            SEPARATOR,
        ]
    return lines


def render_report(report: WeatherReport) -> list[str]:
    lines = [
        f"Code: {report.code}",
        f"Message: {report.message}",
        f"Redirect: {report.redirect}",
    ]
    for city in report.value:
        lines += render_city(city)
    return lines


def render_city_weather(result: CityWeatherResult) -> list[str]:
    if result.report is None:
        return [_request_failed(result)]
    return render_report(result.report)
