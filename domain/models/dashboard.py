"""
Dashboard summary value objects.

Recomputed from the record store on every dashboard load; never cached or
updated incrementally.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class WeightSample(BaseModel):
    """A single point of the body-weight series."""

    date: datetime
    weight: float


class NutritionTotals(BaseModel):
    """Calories and protein summed over one calendar day."""

    total_calories: int = Field(default=0, ge=0)
    total_protein: float = Field(default=0.0, ge=0)


class DashboardSummary(BaseModel):
    """
    Data handed to the dashboard view.

    Either half is None when its fetch failed, so the view can still render
    the half that succeeded.
    """

    weight_series: Optional[List[WeightSample]] = None
    nutrition_totals: Optional[NutritionTotals] = None
