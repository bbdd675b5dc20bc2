"""Open-Meteo geocoding API client."""

import logging

from skyrisk.config.schema import DEFAULT_USER_AGENT, OPEN_METEO_GEOCODING_URL
from skyrisk.ingest.open_meteo_client import get_json

logger = logging.getLogger(__name__)


class GeocodingClient:
    def __init__(
        self,
        base_url: str = OPEN_METEO_GEOCODING_URL,
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

    def search(self, name: str, count: int = 1) -> list[dict]:
        """Search places by name. Returns an empty list when nothing matches."""
        data = get_json(
            f"{self.base_url}/v1/search",
            {"name": name, "count": count},
            user_agent=self.user_agent,
            timeout=self.timeout,
            max_retries=self.max_retries,
            retry_base_delay=self.retry_base_delay,
        )
        results = data.get("results") or []
        logger.debug("Geocoding %r returned %d result(s)", name, len(results))
        return results
