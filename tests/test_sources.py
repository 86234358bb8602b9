"""Tests for JSON input sources."""

import json

import pytest

from hobby_forecast.models.weather import WeatherType
from hobby_forecast.sources.base import SourceError, SourceFormatError, SourceNotFoundError
from hobby_forecast.sources.json_file import JsonForecastProvider, JsonHobbyStore

HOBBIES = [
    {
        "id": 1,
        "name": "Hiking",
        "preferred_weather": [{"condition": "clear", "weight": 10}],
        "is_outdoor": True,
        "min_temperature": 15,
        "max_temperature": 28,
    },
    {"id": 2, "name": "Pottery", "is_active": False},
]

FORECAST = {
    "location_name": "Tokyo",
    "days": [
        {
            "date": "2025-06-09",
            "weather_type": "clear",
            "temperature": {"min_c": 18, "max_c": 24},
            "pop": 0.1,
        },
        {
            "date": "2025-06-10",
            "weather_type": "rain",
            "temperature": {"min_c": 5, "max_c": 10},
            "pop": 0.8,
        },
    ],
}


@pytest.fixture
def hobbies_file(tmp_path):
    path = tmp_path / "hobbies.json"
    path.write_text(json.dumps(HOBBIES), encoding="utf-8")
    return path


@pytest.fixture
def forecast_file(tmp_path):
    path = tmp_path / "forecast.json"
    path.write_text(json.dumps(FORECAST), encoding="utf-8")
    return path


class TestJsonHobbyStore:
    """Tests for JsonHobbyStore."""

    def test_list_hobbies(self, hobbies_file):
        hobbies = JsonHobbyStore(hobbies_file).list_hobbies()
        assert [h.name for h in hobbies] == ["Hiking", "Pottery"]

    def test_list_active_hobbies(self, hobbies_file):
        hobbies = JsonHobbyStore(hobbies_file).list_active_hobbies()
        assert [h.name for h in hobbies] == ["Hiking"]

    def test_wrapped_document(self, tmp_path):
        path = tmp_path / "wrapped.json"
        path.write_text(json.dumps({"hobbies": HOBBIES}), encoding="utf-8")
        assert len(JsonHobbyStore(path).list_hobbies()) == 2

    def test_missing_file(self, tmp_path):
        with pytest.raises(SourceNotFoundError):
            JsonHobbyStore(tmp_path / "nope.json").list_hobbies()

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("[{", encoding="utf-8")
        with pytest.raises(SourceFormatError, match="Invalid JSON"):
            JsonHobbyStore(path).list_hobbies()

    def test_object_without_hobbies_key(self, tmp_path):
        """Test a mistyped wrapper is an error, not an empty hobby list."""
        path = tmp_path / "wrapped.json"
        path.write_text(json.dumps({"hobby": HOBBIES}), encoding="utf-8")
        with pytest.raises(SourceFormatError, match="hobbies"):
            JsonHobbyStore(path).list_hobbies()

    def test_invalid_utf8(self, tmp_path):
        path = tmp_path / "binary.json"
        path.write_bytes(b"\xff\xfe[\x80]")
        with pytest.raises(SourceFormatError, match="UTF-8"):
            JsonHobbyStore(path).list_hobbies()

    def test_directory_path(self, tmp_path):
        """Test an unreadable path is reported as a source error."""
        with pytest.raises(SourceError, match="Cannot read"):
            JsonHobbyStore(tmp_path).list_hobbies()

    def test_invalid_hobby(self, tmp_path):
        """Test validation errors are reported per field."""
        path = tmp_path / "bad.json"
        path.write_text(
            json.dumps([{"id": 1, "name": "Hiking", "preferred_weather": [{"condition": "clear", "weight": 42}]}]),
            encoding="utf-8",
        )
        with pytest.raises(SourceFormatError) as exc_info:
            JsonHobbyStore(path).list_hobbies()
        assert exc_info.value.source == "json"
        assert any("weight" in line for line in exc_info.value.errors)


class TestJsonForecastProvider:
    """Tests for JsonForecastProvider."""

    def test_get_forecast(self, forecast_file):
        forecast = JsonForecastProvider(forecast_file).get_forecast()
        assert forecast.location_name == "Tokyo"
        assert [d.weather_type for d in forecast.days] == [WeatherType.CLEAR, WeatherType.RAIN]

    def test_invalid_forecast(self, tmp_path):
        path = tmp_path / "forecast.json"
        path.write_text(json.dumps({"days": [{"date": "soon"}]}), encoding="utf-8")
        with pytest.raises(SourceFormatError):
            JsonForecastProvider(path).get_forecast()

    def test_missing_file(self, tmp_path):
        with pytest.raises(SourceNotFoundError):
            JsonForecastProvider(tmp_path / "missing.json").get_forecast()

    def test_invalid_utf8(self, tmp_path):
        path = tmp_path / "forecast.json"
        path.write_bytes(b"\xff\xfe{\x80}")
        with pytest.raises(SourceFormatError, match="UTF-8"):
            JsonForecastProvider(path).get_forecast()

    def test_directory_path(self, tmp_path):
        with pytest.raises(SourceError):
            JsonForecastProvider(tmp_path).get_forecast()
