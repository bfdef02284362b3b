"""
Converters: record store rows -> dashboard value objects.

Database schema (progress_tracking table):
- user_id: owning user
- weight: numeric, lbs
- notes: text
- track_date: timestamp, defaults to insert time

Database schema (nutrition_logs table):
- user_id, meal_type, food_name
- calories: integer
- protein_grams, carbs_grams, fats_grams: numeric
- log_date: timestamp, defaults to insert time
"""

from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional

from domain.models import NutritionTotals, WeightSample


def _parse_datetime(value: Any) -> Optional[datetime]:
    """Parse datetime from various formats."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, str):
        try:
            # PostgREST may return a trailing Z
            if value.endswith("Z"):
                value = value[:-1] + "+00:00"
            return datetime.fromisoformat(value)
        except ValueError:
            return None
    return None


def db_rows_to_weight_series(rows: Iterable[Dict[str, Any]]) -> List[WeightSample]:
    """
    Convert progress rows to weight samples, keeping the given order.

    Rows without a parsable date or weight are skipped.
    """
    samples: List[WeightSample] = []
    for row in rows:
        tracked = _parse_datetime(row.get("track_date"))
        weight = row.get("weight")
        if tracked is None or weight is None:
            continue
        samples.append(WeightSample(date=tracked, weight=float(weight)))
    return samples


def sum_nutrition_rows(rows: Iterable[Dict[str, Any]]) -> NutritionTotals:
    """
    Sum calories and protein.

    A missing, null or negative value counts as zero. Negative values can
    reach the store through pass-through submissions or other writers, and
    the totals never go below zero.
    """
    total_calories = 0
    total_protein = 0.0
    for row in rows:
        total_calories += max(row.get("calories") or 0, 0)
        total_protein += max(row.get("protein_grams") or 0, 0)
    return NutritionTotals(
        total_calories=int(total_calories),
        total_protein=float(total_protein),
    )
