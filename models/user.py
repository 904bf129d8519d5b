from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel

from models.profile import HealthProfile


class UserInDB(BaseModel):
    """Represents the user document as stored in Firestore."""

    uid: str
    email: Optional[EmailStr] = None
    first_name: Optional[str] = Field(default=None, alias="firstName")
    last_name: Optional[str] = Field(default=None, alias="lastName")
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    health_profile: Optional[HealthProfile] = Field(
        default=None, alias="healthProfile"
    )

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )
