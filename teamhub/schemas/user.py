from typing import Annotated

from beanie import PydanticObjectId
from pydantic import BaseModel, ConfigDict, EmailStr, Field


RemainingTeams = Annotated[int, Field(ge=0)]


# Shared properties
class UserBase(BaseModel):
    email: EmailStr
    name: str | None = None
    is_active: bool | None = True
    is_superuser: bool = False


class UserInfo(BaseModel):
    id: PydanticObjectId
    email: EmailStr
    name: str | None
    is_active: bool
    is_superuser: bool
    remaining_teams: int
    active_team: PydanticObjectId | None
    teams: list[PydanticObjectId] = []

    model_config = ConfigDict(from_attributes=True)


# Properties to receive via API on creation
class UserCreate(UserBase):
    remaining_teams: RemainingTeams | None = None


# Properties to receive via API on update
class UserUpdate(BaseModel):
    name: str | None = None
    is_active: bool | None = None
    remaining_teams: RemainingTeams | None = None


class UserCreationResponse(BaseModel):
    user: UserInfo
    key: str
