"""Command-line interface for hobby forecast recommendations."""

from __future__ import annotations

import argparse
import datetime as dt
import json
import logging
import sys

from hobby_forecast import __version__
from hobby_forecast.config import get_settings
from hobby_forecast.logging_config import configure_logging
from hobby_forecast.models.recommendation import (
    DateRange,
    HobbyRecommendation,
    RecommendationFilters,
)
from hobby_forecast.models.weather import WeatherType
from hobby_forecast.recommendations.pipeline import RecommendationEngine
from hobby_forecast.sources.base import SourceError, SourceFormatError
from hobby_forecast.sources.json_file import JsonForecastProvider, JsonHobbyStore

logger = logging.getLogger(__name__)


def _parse_date(value: str) -> dt.date:
    try:
        return dt.date.fromisoformat(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid date '{value}', expected YYYY-MM-DD") from e


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="hobby-forecast",
        description="Hobby Forecast - Find the best upcoming days for your hobbies",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Recommend command
    recommend_parser = subparsers.add_parser(
        "recommend", help="Rank hobbies against a forecast"
    )
    recommend_parser.add_argument("hobbies", help="Path to a hobbies JSON file")
    recommend_parser.add_argument("forecast", help="Path to a forecast JSON file")
    recommend_parser.add_argument(
        "--min-score", type=float, default=None, help="Drop hobbies scoring below this"
    )
    recommend_parser.add_argument(
        "--start", type=_parse_date, default=None, help="First date to consider (YYYY-MM-DD)"
    )
    recommend_parser.add_argument(
        "--end", type=_parse_date, default=None, help="Last date to consider (YYYY-MM-DD)"
    )
    recommend_parser.add_argument(
        "--weather-type",
        dest="weather_types",
        action="append",
        choices=[w.value for w in WeatherType],
        help="Only recommend days with this weather (repeatable)",
    )
    recommend_parser.add_argument(
        "--exclude-weekends", action="store_true", help="Skip Saturday and Sunday"
    )
    recommend_parser.add_argument(
        "--exclude-weekdays", action="store_true", help="Skip Monday to Friday"
    )
    recommend_parser.add_argument(
        "--top", type=int, default=None, help="Show only the N best hobbies"
    )
    recommend_parser.add_argument(
        "--date", type=_parse_date, default=None, help="Rank hobbies on this date only"
    )
    recommend_parser.add_argument(
        "--json", action="store_true", help="Print recommendations as JSON"
    )

    # Serve command
    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default=None, help="Bind address")
    serve_parser.add_argument("--port", type=int, default=None, help="Bind port")

    return parser


def build_filters(args: argparse.Namespace) -> RecommendationFilters:
    """Translate command-line options into recommendation filters."""
    date_range = None
    if args.start is not None or args.end is not None:
        date_range = DateRange(
            start=args.start or dt.date.min,
            end=args.end or dt.date.max,
        )

    return RecommendationFilters(
        min_score=args.min_score,
        date_range=date_range,
        weather_types=[WeatherType(w) for w in args.weather_types] if args.weather_types else None,
        exclude_weekends=args.exclude_weekends,
        exclude_weekdays=args.exclude_weekdays,
    )


def format_recommendation(rank: int, recommendation: HobbyRecommendation) -> str:
    """Format one recommendation for terminal output."""
    best = recommendation.best_day
    lines = [
        f"{rank}. {recommendation.hobby.name} - {recommendation.overall_score} "
        f"({recommendation.band.value})",
        f"   Best day: {best.date.isoformat()} ({best.forecast.weather_type.value})",
    ]
    lines.extend(f"   + {factor}" for factor in best.matching_factors)
    lines.extend(f"   ! {factor}" for factor in best.warning_factors)

    others = recommendation.recommended_days[1:]
    if others:
        lines.append(
            "   Also: " + ", ".join(f"{d.date.isoformat()} ({d.score})" for d in others)
        )
    return "\n".join(lines)


def run_recommend(args: argparse.Namespace) -> int:
    """Run the recommend command."""
    settings = get_settings()
    engine = RecommendationEngine(settings.scoring)
    filters = build_filters(args)

    try:
        hobbies = JsonHobbyStore(args.hobbies).list_active_hobbies()
        forecast = JsonForecastProvider(args.forecast).get_forecast()
    except SourceFormatError as e:
        print(f"Error: {e}", file=sys.stderr)
        for line in e.errors:
            print(f"  {line}", file=sys.stderr)
        return 1
    except SourceError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.date is not None:
        recommendations = engine.recommendations_for_date(hobbies, forecast, args.date, filters)
    else:
        recommendations = engine.generate_recommendations(hobbies, forecast, filters)

    if args.top is not None:
        recommendations = recommendations[: max(args.top, 0)]

    if args.json:
        print(json.dumps([r.model_dump(mode="json") for r in recommendations], indent=2))
        return 0

    if not recommendations:
        print("No recommendations match the given filters.")
        return 0

    for rank, recommendation in enumerate(recommendations, start=1):
        print(format_recommendation(rank, recommendation))
    return 0


def run_serve(args: argparse.Namespace) -> int:
    """Run the serve command."""
    import uvicorn

    from hobby_forecast.api import create_app

    settings = get_settings()
    uvicorn.run(
        create_app(),
        host=args.host or settings.host,
        port=args.port or settings.port,
    )
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging("DEBUG" if args.verbose else get_settings().log_level)

    if args.command is None:
        parser.print_help()
        return 0

    if args.command == "recommend":
        return run_recommend(args)
    if args.command == "serve":
        return run_serve(args)

    logger.error(f"Unknown command: {args.command}")
    return 1


if __name__ == "__main__":
    sys.exit(main())
