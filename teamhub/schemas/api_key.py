import datetime

from beanie import PydanticObjectId
from pydantic import BaseModel, Field


class APIKeyCreate(BaseModel):
    key: str
    user: PydanticObjectId
    created: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)


class APIKeyUpdate(BaseModel):
    pass
