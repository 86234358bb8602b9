"""Hobby Forecast - weather-based day recommendations for hobbies."""

__version__ = "0.1.0"
