from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class MetricSummary(BaseModel):
    data_type: str = Field(alias="dataType")
    count: int
    unit: Optional[str] = None
    average: Optional[float] = Field(
        default=None, description="Mean of the numeric values, two decimals."
    )
    min: Optional[float] = None
    max: Optional[float] = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class HealthSummary(BaseModel):
    period: str
    start: datetime
    end: datetime
    summary: List[MetricSummary]
