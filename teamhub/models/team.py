import datetime
from typing import TYPE_CHECKING

from beanie import Document, Indexed, Link, PydanticObjectId
from pydantic import Field

if TYPE_CHECKING:
    from .user import User


class Team(Document):
    name: Indexed(str, unique=True)  # type: ignore
    identifier: Indexed(str, unique=True)  # type: ignore
    type_id: PydanticObjectId
    type_name: str
    leader: PydanticObjectId
    created_by: PydanticObjectId
    members: int = 0
    users: list["Link[User]"] = []
    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)

    class Settings:
        name = "team"
