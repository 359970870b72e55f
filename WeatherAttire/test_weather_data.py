"""Tests for weather_data module."""
import dataclasses
import pytest
from weather_data import WeatherObservation


def test_weather_observation_creation():
    """Test creating WeatherObservation with required fields."""
    weather = WeatherObservation(condition="Clouds", temperature=20.5)

    assert weather.condition == "Clouds"
    assert weather.temperature == 20.5


def test_weather_observation_is_immutable():
    """Test that observations can't be changed after construction."""
    weather = WeatherObservation(condition="Rain", temperature=12.0)

    with pytest.raises(dataclasses.FrozenInstanceError):
        weather.temperature = 30.0


def test_weather_observation_equality():
    """Test that observations compare by value."""
    assert WeatherObservation("Rain", 12.0) == WeatherObservation("Rain", 12.0)
    assert WeatherObservation("Rain", 12.0) != WeatherObservation("Clear", 12.0)
