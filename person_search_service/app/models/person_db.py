import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class PersonDB(BaseModel):
    # Assigned by the caller (uuid4 string) before the first save; never generated here.
    id: Optional[str] = None

    first_name: Optional[str] = Field(default=None, alias="firstName")
    last_name: Optional[str] = Field(default=None, alias="lastName")
    birth_date: Optional[datetime.datetime] = Field(default=None, alias="birthDate") # local date-time, no tzinfo

    model_config = ConfigDict(populate_by_name=True)
