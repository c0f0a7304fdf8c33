import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from hostreport.models.schemas import CityWeatherResult, RawWeatherResult, WeatherReport
from hostreport.services.errors import FetchParseError, FetchTransportError

logger = logging.getLogger(__name__)


class WeatherService:
    """Fetches the auxiliary weather text and the structured city forecast.

    Every request gets its own short-lived ``httpx.AsyncClient``; callers await
    the two fetches one after the other.
    """

    def __init__(
        self,
        city_weather_url: str,
        aux_weather_url: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.city_weather_url = city_weather_url
        self.aux_weather_url = aux_weather_url
        self.timeout = timeout
        self._transport = transport

    async def _get(self, url: str, params: Optional[dict] = None) -> httpx.Response:
        logger.debug("GET %s params=%s", url, params)
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self._transport
            ) as client:
                response = await client.get(url, params=params)
        except httpx.HTTPError as e:
            logger.debug("Request to %s failed: %s", url, e)
            raise FetchTransportError(url, e) from e

        logger.debug("GET %s -> %s", url, response.status_code)
        if not response.is_success:
            logger.warning("%s returned HTTP %s", url, response.status_code)
        return response

    async def fetch_weather_alt(self) -> RawWeatherResult:
        """Fetch the auxiliary endpoint; the body is kept as opaque text."""
        response = await self._get(self.aux_weather_url)
        return RawWeatherResult(
            url=str(response.url),
            status_code=response.status_code,
            reason=response.reason_phrase,
            body=response.text if response.is_success else None,
        )

    async def fetch_weather_raw(self, city_id: int) -> CityWeatherResult:
        """Fetch and parse the forecast for one city.

        Non-2xx responses yield a result without a report. A 2xx body that is
        not valid JSON or does not match the schema raises FetchParseError.
        """
        response = await self._get(self.city_weather_url, params={"cityIds": city_id})
        url = str(response.url)
        if not response.is_success:
            return CityWeatherResult(
                url=url,
                status_code=response.status_code,
                reason=response.reason_phrase,
            )

        try:
            report = WeatherReport.model_validate_json(response.content)
        except ValidationError as e:
            logger.debug("Unparseable weather payload from %s: %s", url, e)
            raise FetchParseError(url, e) from e

        logger.debug("Parsed %d city record(s)", len(report.value))
        return CityWeatherResult(
            url=url,
            status_code=response.status_code,
            reason=response.reason_phrase,
            report=report,
        )
