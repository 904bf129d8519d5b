from datetime import datetime
from enum import Enum
from typing import Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class InsightPriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Insight(BaseModel):
    """
    A short advisory record. Callers may turn it into a Reminder; the
    category is therefore one of the reminder categories.
    """

    title: str
    description: str
    priority: InsightPriority
    category: str

    model_config = ConfigDict(use_enum_values=True)


class HealthMetrics(BaseModel):
    """Latest known value of each metric the insight rules look at."""

    blood_pressure_systolic: Optional[float] = None
    blood_pressure_diastolic: Optional[float] = None
    heart_rate: Optional[float] = None
    blood_glucose: Optional[float] = None
    weight: Optional[float] = Field(default=None, description="Kilograms.")
    height: Optional[float] = Field(default=None, description="Centimetres.")
    steps: Optional[float] = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class HealthRecord(BaseModel):
    """
    A single uploaded health data point. `data_type` is free text, either an
    export label ('Blood Pressure Systolic') or a normalized key
    ('blood_pressure_systolic').
    """

    data_type: str = Field(
        validation_alias=AliasChoices("dataType", "type", "data_type"),
        serialization_alias="dataType",
    )
    value: Union[float, str, None] = None
    unit: Optional[str] = None
    timestamp: datetime
    source: str = "Apple Health"

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
