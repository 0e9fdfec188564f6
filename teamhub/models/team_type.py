from beanie import Document, Indexed


class TeamType(Document):
    team: Indexed(str, unique=True)  # type: ignore

    class Settings:
        name = "team_type"
