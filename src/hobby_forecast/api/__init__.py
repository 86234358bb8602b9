"""FastAPI application and routes.

This module provides a stateless REST API over the recommendation engine.

## API Structure

- /health - Liveness check
- /api/recommendations - Ranked recommendations for posted hobbies and forecast
- /api/recommendations/top - The best N hobbies
- /api/recommendations/date/{date} - Recommendations for one date
- /api/recommendations/high-scores - Data for a high-score notification
"""

from hobby_forecast.api.app import create_app

__all__ = ["create_app"]
