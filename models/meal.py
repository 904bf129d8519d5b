import enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ExerciseIntensity(str, enum.Enum):
    """Enumeration for the self-reported intensity of an exercise."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class TrackerInsightType(str, enum.Enum):
    SUCCESS = "success"
    WARNING = "warning"
    INFO = "info"


class MealDescription(BaseModel):
    """Free-text description of a meal as entered by the user."""

    name: str
    ingredients: str = ""
    portion: str = Field(description="e.g. '1 plate', '200g', 'large'.")


class ExerciseDescription(BaseModel):
    name: str
    duration_minutes: int = Field(gt=0, alias="durationMinutes")
    intensity: ExerciseIntensity = ExerciseIntensity.MEDIUM

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MealEntry(BaseModel):
    """A logged meal with its estimated energy."""

    name: str
    portion: str
    calories: int
    time: str = Field(default="12:00", description="24-hour 'HH:MM'.")
    ingredients: str = ""


class ExerciseEntry(BaseModel):
    """A logged exercise with its estimated energy burned."""

    name: str
    duration: int = Field(description="Minutes.")
    intensity: ExerciseIntensity
    calories_burned: int = Field(alias="caloriesBurned")

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TrackerInsight(BaseModel):
    type: TrackerInsightType
    message: str

    model_config = ConfigDict(use_enum_values=True)


class DailyLogSummary(BaseModel):
    total_calories_in: int
    total_calories_out: int
    net_calories: int
    total_exercise_minutes: int
    insights: List[TrackerInsight]

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
