"""
Pydantic models for the dashboard API.
"""

from typing import List, Optional

from pydantic import BaseModel

from application.use_cases import DashboardResult, DashboardStatus
from domain.models import NutritionTotals, WeightSample


class DashboardResponse(BaseModel):
    """Dashboard summary for one user and day"""
    status: DashboardStatus
    message: Optional[str] = None
    weight_series: Optional[List[WeightSample]] = None
    nutrition_totals: Optional[NutritionTotals] = None
    failed_sections: List[str] = []

    @classmethod
    def from_result(cls, result: DashboardResult) -> "DashboardResponse":
        return cls(
            status=result.status,
            message=result.message,
            weight_series=result.summary.weight_series,
            nutrition_totals=result.summary.nutrition_totals,
            failed_sections=result.failed_sections,
        )
