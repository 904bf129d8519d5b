from datetime import date
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class BMICategory(str, Enum):
    UNDERWEIGHT = "Underweight"
    NORMAL = "Normal"
    OVERWEIGHT = "Overweight"
    OBESE = "Obese"


class BMIResult(BaseModel):
    bmi: float = Field(description="Body Mass Index rounded to one decimal.")
    category: BMICategory

    model_config = ConfigDict(use_enum_values=True)


class EnergyExpenditureResult(BaseModel):
    bmr: int
    tdee: int
    recommendation: str


class HydrationResult(BaseModel):
    daily_water_liters: float = Field(alias="dailyWaterLiters")
    daily_water: str = Field(
        alias="dailyWater", description="Human readable amount, e.g. '2.3 liters'."
    )
    glasses: int

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class GuidelineResult(BaseModel):
    recommended: str
    note: str


class MetricCalculation(BaseModel):
    """
    Envelope returned for a named metric. `result` is empty when the metric is
    unknown or the data needed to compute it is missing.
    """

    metric: str
    result: Dict[str, Any] = Field(default_factory=dict)


class BodyMetricsSnapshot(BaseModel):
    """Daily body metrics derived from a stored health profile."""

    snapshot_date: date = Field(alias="date")
    bmi: Optional[BMIResult] = None
    energy: Optional[EnergyExpenditureResult] = None
    hydration: Optional[HydrationResult] = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
