from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Sex(str, Enum):
    MALE = "male"
    FEMALE = "female"


class HealthProfile(BaseModel):
    """Health profile stored on the user document. Every field may be missing."""

    sex: Optional[Sex] = Field(default=None, alias="gender")
    age: Optional[int] = Field(default=None, ge=1, le=120)
    height_cm: Optional[float] = Field(default=None, alias="height", ge=50, le=300)
    weight_kg: Optional[float] = Field(default=None, alias="weight", ge=20, le=500)
    activity_level: Optional[str] = Field(default=None, alias="activityLevel")
    goals: List[str] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True)


class BodyMetrics(BaseModel):
    """Input for the energy expenditure calculation."""

    weight_kg: float = Field(gt=0)
    height_cm: float = Field(gt=0)
    age_years: float = Field(gt=0)
    sex: Sex
    activity_level: Optional[str] = Field(
        default=None,
        description="sedentary, light, moderate, active or veryActive. "
        "Anything else is treated as sedentary.",
    )

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )
