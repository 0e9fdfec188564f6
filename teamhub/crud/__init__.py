from .base import CRUDBase, CRUDError, DuplicateKeyCRUDError
from .crud_api_key import api_key
from .crud_team import CRUDTeam, team
from .crud_team_type import CRUDTeamType, team_type
from .crud_user import CRUDUser, user

__all__ = [
    "CRUDBase",
    "CRUDError",
    "CRUDTeam",
    "CRUDTeamType",
    "CRUDUser",
    "DuplicateKeyCRUDError",
    "api_key",
    "team",
    "team_type",
    "user",
]
