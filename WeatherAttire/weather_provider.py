"""Weather provider abstraction - allows swapping different weather sources."""
from abc import ABC, abstractmethod
from weather_data import WeatherObservation


class WeatherProviderBase(ABC):
    """Abstract base class for weather lookups by location name."""

    @abstractmethod
    def get_weather(self, location: str) -> WeatherObservation:
        """
        Fetch the current weather for a location.

        Args:
            location: Location name, e.g. "Manchester"

        Returns:
            WeatherObservation: Current condition and temperature

        Raises:
            WeatherLookupError: If the location cannot be resolved or the lookup fails
        """
        pass


class WeatherLookupError(LookupError):
    """Exception raised when a weather provider fails to resolve weather for a location."""
    pass
