import datetime
from typing import Annotated

from beanie import PydanticObjectId
from pydantic import BaseModel, ConfigDict, Field, StringConstraints

from teamhub.config import settings

TeamName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=3, max_length=settings.max_len_team_name)]
TeamIdentifier = Annotated[
    str, StringConstraints(strip_whitespace=True, min_length=3, max_length=settings.max_len_team_identifier)
]


class TeamBase(BaseModel):
    name: TeamName
    identifier: TeamIdentifier


# Properties to receive via API on creation
class TeamCreate(TeamBase):
    team_type: PydanticObjectId = Field(alias="teamType")

    model_config = ConfigDict(populate_by_name=True)


# Properties to receive via API on update
class TeamUpdate(TeamBase):
    pass


class JoinTeamRequest(BaseModel):
    identifier: TeamIdentifier


class LeaveTeamRequest(BaseModel):
    team_id: PydanticObjectId


class TeamInfo(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: PydanticObjectId
    name: str
    identifier: str
    type_id: PydanticObjectId
    type_name: str
    leader: PydanticObjectId
    created_by: PydanticObjectId
    members: int
    created_at: datetime.datetime


class TeamTypeCreate(BaseModel):
    team: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=50)]


class TeamTypeInfo(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: PydanticObjectId
    team: str
