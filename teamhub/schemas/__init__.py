from .api_key import APIKeyCreate, APIKeyUpdate
from .team import (
    JoinTeamRequest,
    LeaveTeamRequest,
    TeamCreate,
    TeamInfo,
    TeamTypeCreate,
    TeamTypeInfo,
    TeamUpdate,
)
from .user import UserCreate, UserCreationResponse, UserInfo, UserUpdate

__all__ = [
    "APIKeyCreate",
    "APIKeyUpdate",
    "JoinTeamRequest",
    "LeaveTeamRequest",
    "TeamCreate",
    "TeamInfo",
    "TeamTypeCreate",
    "TeamTypeInfo",
    "TeamUpdate",
    "UserCreate",
    "UserCreationResponse",
    "UserInfo",
    "UserUpdate",
]
