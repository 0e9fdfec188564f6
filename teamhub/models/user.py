from beanie import Document, Indexed, PydanticObjectId


class User(Document):
    email: Indexed(str, unique=True)  # type: ignore
    name: str | None = None
    is_active: bool
    is_superuser: bool
    remaining_teams: int
    active_team: PydanticObjectId | None = None

    class Settings:
        name = "user"
