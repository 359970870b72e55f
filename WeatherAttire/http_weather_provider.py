"""HTTP weather provider for the upstream location-based weather API."""
import logging
import requests
from weather_provider import WeatherProviderBase, WeatherLookupError
from weather_data import WeatherObservation


def derive_temperature(temp_min: float, temp_max: float) -> float:
    """
    Derive the single temperature figure from the upstream min/max pair.

    The upstream contract reports a ratio of the two readings as a
    percentage; the result is passed on as given.

    Raises:
        WeatherLookupError: If temp_max is zero
    """
    if temp_max == 0:
        raise WeatherLookupError("Cannot derive temperature: temp_max is 0")
    return (temp_min / temp_max) * 100


class HttpWeatherProvider(WeatherProviderBase):
    """
    Weather provider that queries an upstream HTTP endpoint by location.

    The endpoint is called as ``GET <base_url>?location=<name>`` and must
    answer with a JSON object holding at least ``main``, ``temp_min`` and
    ``temp_max``.
    """

    def __init__(self, base_url: str, timeout: int = 10):
        """
        Initialize HTTP weather provider.

        Args:
            base_url: Upstream weather endpoint URL
            timeout: HTTP request timeout in seconds
        """
        if not base_url:
            raise ValueError("base_url must not be empty")
        self.base_url = base_url
        self.timeout = timeout

    def get_weather(self, location: str) -> WeatherObservation:
        """
        Fetch current weather for a location from the upstream API.

        Returns:
            WeatherObservation: Condition label and derived temperature

        Raises:
            WeatherLookupError: If the request fails or the response can't be parsed
        """
        params = {"location": location}

        try:
            logging.info(f"Making weather API request: {self.base_url}")
            logging.debug(f"Request parameters: location={location!r}, timeout={self.timeout}")
            response = requests.get(self.base_url, params=params, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logging.error(f"Network error during API request: {e}")
            raise WeatherLookupError(f"Network error: {str(e)}") from e

        logging.info(f"API response status: {response.status_code}")

        if not response.ok:
            logging.error(f"API request failed with status {response.status_code}")
            self._handle_error_response(response)

        try:
            data = response.json()
            if not isinstance(data, dict):
                raise TypeError(f"expected JSON object, got {type(data).__name__}")
            logging.debug(f"API response data keys: {list(data.keys())}")

            condition = data["main"]
            if not isinstance(condition, str):
                raise TypeError(f"'main' must be a string, got {type(condition).__name__}")
            temp_min = float(data["temp_min"])
            temp_max = float(data["temp_max"])
        except (KeyError, ValueError, TypeError, OverflowError) as e:
            logging.error(f"Failed to parse API response: {e}", exc_info=True)
            raise WeatherLookupError(f"Failed to parse response: {str(e)}") from e

        observation = WeatherObservation(
            condition=condition,
            temperature=derive_temperature(temp_min, temp_max),
        )

        logging.info(
            f"Successfully parsed weather for {location!r}: "
            f"{observation.temperature:.1f}, {observation.condition!r}"
        )
        return observation

    def _handle_error_response(self, response: requests.Response) -> None:
        """Raise a lookup error describing a non-2xx upstream response."""
        try:
            error_data = response.json()
        except ValueError:
            # Not JSON, use HTTP status
            logging.error(f"Non-JSON error response: HTTP {response.status_code}, body: {response.text[:500]}")
            raise WeatherLookupError(f"HTTP {response.status_code}: {response.text[:200]}")

        message = "Unknown error"
        if isinstance(error_data, dict):
            message = error_data.get("message", message)
        logging.error(f"Weather API error response: {error_data}")
        raise WeatherLookupError(f"Weather API error {response.status_code}: {message}")
