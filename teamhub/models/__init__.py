from .user import User  # noqa: I001
from .api_key import APIKey
from .team import Team
from .team_type import TeamType

__all__ = [
    "APIKey",
    "User",
    "Team",
    "TeamType",
]

Team.model_rebuild()
