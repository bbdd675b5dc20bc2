"""Location resolution from device geolocation or free-text city search."""

import logging

from skyrisk.errors import (
    MalformedResponseError,
    NotFoundError,
    UnsupportedCapabilityError,
)
from skyrisk.ingest.geocoding_client import GeocodingClient
from skyrisk.ingest.geolocation import GeolocationProvider
from skyrisk.models.location import MY_LOCATION_LABEL, Location

logger = logging.getLogger(__name__)

COORD_DECIMALS = 4


class LocationResolver:
    def __init__(self, geocoder: GeocodingClient):
        self.geocoder = geocoder

    def from_device(self, provider: GeolocationProvider | None) -> Location:
        """Resolve the device position, rounded to 4 decimals."""
        if provider is None:
            raise UnsupportedCapabilityError("Geolocation not supported")
        position = provider.current_position()
        try:
            coords = position["coords"]
            lat = round(float(coords["latitude"]), COORD_DECIMALS)
            lon = round(float(coords["longitude"]), COORD_DECIMALS)
        except (KeyError, TypeError, ValueError) as e:
            raise MalformedResponseError(f"Bad position payload: {position!r}") from e
        return Location(latitude=lat, longitude=lon, display_name=MY_LOCATION_LABEL)

    def search_city(self, name: str) -> Location:
        """Resolve a city name to its best geocoding match."""
        query = name.strip()
        if not query:
            raise ValueError("city name must not be blank")

        results = self.geocoder.search(query, count=1)
        if not results:
            raise NotFoundError(f"City not found: {query}")

        best = results[0]
        try:
            lat = float(best["latitude"])
            lon = float(best["longitude"])
        except (KeyError, TypeError, ValueError) as e:
            raise MalformedResponseError(f"Geocoding result lacks coordinates: {best!r}") from e

        city = best.get("name") or query
        country = best.get("country")
        display = f"{city}, {country}" if country else city
        logger.info("Resolved %r to %s (%s, %s)", query, display, lat, lon)
        return Location(latitude=lat, longitude=lon, display_name=display)
