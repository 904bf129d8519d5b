from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ReminderFrequency(str, Enum):
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    CUSTOM = "custom"


class ReminderCategory(str, Enum):
    """Declaration order is the tie-break order for the primary focus area."""

    MEDICATION = "medication"
    EXERCISE = "exercise"
    CHECKUP = "checkup"
    WELLNESS = "wellness"
    NUTRITION = "nutrition"


class ReminderPriority(str, Enum):
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Reminder(BaseModel):
    """A reminder as stored under the user's 'reminders' collection."""

    id: str
    title: str
    description: str = ""
    time: str = Field(description="24-hour 'HH:MM' time of day.")
    frequency: ReminderFrequency
    category: ReminderCategory
    is_active: bool = True
    ai_generated: bool = False
    priority: ReminderPriority = ReminderPriority.MEDIUM
    created_at: Optional[datetime] = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CategoryCoverage(BaseModel):
    category: ReminderCategory
    count: int
    recommendation: str
    coverage_percent: int = Field(
        description="Fill level for display, 25 per reminder up to 100."
    )

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, use_enum_values=True
    )


class TimingAnalysis(BaseModel):
    morning: int = 0
    afternoon: int = 0
    evening: int = 0
    night: int = 0
    recommendation: str = ""


class PriorityDistribution(BaseModel):
    critical: int = 0
    high: int = 0
    medium: int = 0
    low: int = 0


class PriorityPercentages(BaseModel):
    critical: float = 0.0
    high: float = 0.0
    medium: float = 0.0
    low: float = 0.0


class AnalysisResult(BaseModel):
    adherence_score: int = Field(ge=0, le=95)
    score_description: str
    coverage_analysis: List[CategoryCoverage]
    timing_analysis: TimingAnalysis
    priority_distribution: PriorityDistribution
    priority_percentages: PriorityPercentages
    insights: List[str]
    recommendations: List[str]

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
