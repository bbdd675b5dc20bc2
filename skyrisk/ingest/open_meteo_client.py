"""Open-Meteo forecast API client with optional retry on rate limiting."""

import logging
import time

import httpx

from skyrisk.config.schema import DEFAULT_USER_AGENT, OPEN_METEO_FORECAST_URL
from skyrisk.errors import MalformedResponseError, NetworkError

logger = logging.getLogger(__name__)

DAILY_FIELDS = (
    "temperature_2m_max",
    "temperature_2m_min",
    "precipitation_sum",
    "windspeed_10m_max",
)
RETRY_STATUSES = (429, 503)


def get_json(
    url: str,
    params: dict,
    *,
    user_agent: str = DEFAULT_USER_AGENT,
    timeout: float = 30.0,
    max_retries: int = 0,
    retry_base_delay: float = 2.0,
) -> dict:
    """GET a JSON document, mapping failures onto NetworkError/MalformedResponseError.

    Retries on 503/429 and transport errors with exponential backoff, up to
    max_retries extra attempts.
    """
    headers = {"User-Agent": user_agent, "Accept": "application/json"}

    for attempt in range(max_retries + 1):
        try:
            resp = httpx.get(url, params=params, headers=headers, timeout=timeout)
        except httpx.RequestError as e:
            if attempt < max_retries:
                delay = retry_base_delay * (2**attempt)
                logger.warning("Request error for %s, retrying in %.1fs: %s", url, delay, e)
                time.sleep(delay)
                continue
            raise NetworkError(f"Request failed: {e}") from e

        if resp.status_code in RETRY_STATUSES and attempt < max_retries:
            delay = retry_base_delay * (2**attempt)
            logger.warning(
                "%s returned %d, retrying in %.1fs (attempt %d/%d)",
                url, resp.status_code, delay, attempt + 1, max_retries,
            )
            time.sleep(delay)
            continue
        if resp.status_code >= 400:
            raise NetworkError(f"HTTP {resp.status_code} from {url}", resp.status_code)
        try:
            data = resp.json()
        except ValueError as e:
            raise MalformedResponseError(f"Invalid JSON from {url}") from e
        if not isinstance(data, dict):
            raise MalformedResponseError(f"Expected a JSON object from {url}")
        return data

    raise NetworkError(f"Retries exhausted for {url}")


class OpenMeteoClient:
    def __init__(
        self,
        base_url: str = OPEN_METEO_FORECAST_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 30.0,
        max_retries: int = 0,
        retry_base_delay: float = 2.0,
    ):
        self.base_url = base_url
        self.user_agent = user_agent
        self.timeout = timeout
        self.max_retries = max_retries
        self.retry_base_delay = retry_base_delay

    def get_daily_forecast(self, latitude: float, longitude: float) -> dict:
        """Fetch the multi-day daily forecast (up to 16 days) for a coordinate."""
        params = {
            "latitude": latitude,
            "longitude": longitude,
            "daily": ",".join(DAILY_FIELDS),
            "timezone": "auto",
        }
        return get_json(
            f"{self.base_url}/v1/forecast",
            params,
            user_agent=self.user_agent,
            timeout=self.timeout,
            max_retries=self.max_retries,
            retry_base_delay=self.retry_base_delay,
        )
