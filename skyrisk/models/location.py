"""Resolved location model."""

from dataclasses import dataclass

MY_LOCATION_LABEL = "My Location"


@dataclass(frozen=True)
class Location:
    latitude: float
    longitude: float
    display_name: str | None = None

    @property
    def label(self) -> str:
        if self.display_name:
            return self.display_name
        return f"{self.latitude}, {self.longitude}"
