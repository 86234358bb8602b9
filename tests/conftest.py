"""Pytest fixtures for hobby forecast tests.

The forecast fixtures cover the week of Monday 2025-06-09 to Sunday
2025-06-15 so weekday and weekend filters have something to bite on.
"""

from datetime import date, timedelta

import pytest

from hobby_forecast.models.hobby import Hobby, TimeOfDay, WeatherCondition
from hobby_forecast.models.weather import (
    DailyTemperature,
    Forecast,
    ForecastDay,
    WeatherType,
)

WEEK_START = date(2025, 6, 9)  # Monday


# =============================================================================
# Test Isolation Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache():
    """Reset settings cache before each test to ensure clean state."""
    from hobby_forecast.config import get_settings
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# =============================================================================
# Forecast Fixtures
# =============================================================================


@pytest.fixture
def make_day():
    """Factory for forecast days with mild, dry defaults."""

    def _make_day(
        day: date = WEEK_START,
        weather_type: WeatherType = WeatherType.CLEAR,
        min_c: float = 18.0,
        max_c: float = 24.0,
        pop: float = 0.1,
        **kwargs,
    ) -> ForecastDay:
        segments = {
            key: kwargs.pop(key)
            for key in ("morning_c", "day_c", "evening_c", "night_c")
            if key in kwargs
        }
        return ForecastDay(
            date=day,
            weather_type=weather_type,
            weather_description=kwargs.pop("weather_description", weather_type.value),
            temperature=DailyTemperature(min_c=min_c, max_c=max_c, **segments),
            pop=pop,
            **kwargs,
        )

    return _make_day


@pytest.fixture
def clear_day(make_day) -> ForecastDay:
    """Clear, mild, dry day."""
    return make_day()


@pytest.fixture
def rainy_cold_day(make_day) -> ForecastDay:
    """Cold day with rain likely."""
    return make_day(weather_type=WeatherType.RAIN, min_c=5.0, max_c=10.0, pop=0.8)


@pytest.fixture
def week_forecast(make_day) -> Forecast:
    """Seven days: clear Mon/Wed/Fri, rain on the other four days."""
    pattern = [
        WeatherType.CLEAR,
        WeatherType.RAIN,
        WeatherType.CLEAR,
        WeatherType.RAIN,
        WeatherType.CLEAR,
        WeatherType.RAIN,
        WeatherType.RAIN,
    ]
    days = []
    for offset, weather_type in enumerate(pattern):
        is_rain = weather_type == WeatherType.RAIN
        days.append(
            make_day(
                day=WEEK_START + timedelta(days=offset),
                weather_type=weather_type,
                min_c=14.0 + offset,
                max_c=20.0 + offset,
                pop=0.8 if is_rain else 0.1,
            )
        )
    return Forecast(location_name="Tokyo", latitude=35.6762, longitude=139.6503, days=days)


# =============================================================================
# Hobby Fixtures
# =============================================================================


@pytest.fixture
def hiking_hobby() -> Hobby:
    """Outdoor hobby that wants clear, mild weather."""
    return Hobby(
        id=1,
        name="Hiking",
        preferred_weather=[WeatherCondition(condition=WeatherType.CLEAR, weight=10)],
        is_outdoor=True,
        min_temperature=15,
        max_temperature=28,
    )


@pytest.fixture
def reading_hobby() -> Hobby:
    """Indoor hobby that enjoys rainy days."""
    return Hobby(
        id=2,
        name="Reading",
        preferred_weather=[
            WeatherCondition(condition=WeatherType.RAIN, weight=10),
            WeatherCondition(condition=WeatherType.CLEAR, weight=2),
        ],
        is_outdoor=False,
    )


@pytest.fixture
def neutral_hobby() -> Hobby:
    """Hobby without any preferences."""
    return Hobby(id=3, name="Chess")


@pytest.fixture
def morning_hobby() -> Hobby:
    """Hobby with a single preferred window."""
    return Hobby(
        id=4,
        name="Jogging",
        preferred_time_of_day=[TimeOfDay.MORNING],
        is_outdoor=True,
        min_temperature=10,
        max_temperature=25,
    )
