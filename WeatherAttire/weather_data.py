"""Weather domain model - pure data structures independent of any API."""
from dataclasses import dataclass


@dataclass(frozen=True)
class WeatherObservation:
    """Domain model for a single weather reading, independent of any specific API."""
    condition: str  # e.g., "Rain", "Clear", "Clouds"
    temperature: float
