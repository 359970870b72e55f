"""Attire recommendation rules and the service that feeds them weather lookups."""
import logging
from dataclasses import dataclass
from typing import Optional

from weather_data import WeatherObservation
from weather_provider import WeatherProviderBase

TEMPERATURE_THRESHOLD = 20.0
RAIN_CONDITION = "Rain"
TROUSERS = "trousers"
SHORTS = "shorts"


class BadRequestError(ValueError):
    """Exception raised when a recommendation is requested without a usable location."""
    pass


@dataclass(frozen=True)
class Jacket:
    waterproof: bool
    windproof: bool


@dataclass(frozen=True)
class AttireRecommendation:
    """Recommended attire for one weather observation."""
    jacket: Jacket
    legwear: str  # TROUSERS or SHORTS
    umbrella: bool

    def to_dict(self) -> dict:
        """Wire representation served by the /v1/weather endpoint."""
        return {
            "Jacket": {
                "Waterproof": self.jacket.waterproof,
                "Windproof": self.jacket.windproof,
            },
            "Pants": self.legwear,
            "Umbrella": self.umbrella,
        }


def recommend_attire(observation: WeatherObservation) -> AttireRecommendation:
    """
    Map a weather observation to an attire recommendation.

    Rain means an umbrella. Below TEMPERATURE_THRESHOLD means trousers and a
    windproof jacket; at or above it, shorts and a jacket that is only
    waterproof. The jacket is always waterproof.
    """
    umbrella = observation.condition == RAIN_CONDITION

    if observation.temperature < TEMPERATURE_THRESHOLD:
        legwear = TROUSERS
        jacket = Jacket(waterproof=True, windproof=True)
    else:
        legwear = SHORTS
        jacket = Jacket(waterproof=True, windproof=False)

    return AttireRecommendation(jacket=jacket, legwear=legwear, umbrella=umbrella)


class AttireService:
    """
    Looks up the weather for a location and turns it into an attire recommendation.

    Lookup failures from the provider are not retried or wrapped; they reach
    the caller as raised.
    """

    def __init__(self, provider: WeatherProviderBase):
        """
        Initialize attire service.

        Args:
            provider: Weather provider used to resolve locations
        """
        if provider is None:
            raise ValueError("invalid forecaster")
        self.provider = provider

    def recommend(self, location: Optional[str]) -> AttireRecommendation:
        """
        Recommend attire for the current weather at a location.

        Raises:
            BadRequestError: If location is missing or blank
            WeatherLookupError: If the provider can't resolve the weather
        """
        if not location or not location.strip():
            raise BadRequestError("location is required")

        observation = self.provider.get_weather(location)
        logging.debug(
            f"Weather for {location!r}: condition={observation.condition!r} "
            f"temperature={observation.temperature}"
        )

        attire = recommend_attire(observation)
        logging.info(
            f"Recommendation for {location!r}: legwear={attire.legwear} "
            f"umbrella={attire.umbrella} windproof={attire.jacket.windproof}"
        )
        return attire
