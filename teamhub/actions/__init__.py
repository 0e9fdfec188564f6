from .teams import CreateTeamAction, JoinTeamAction, LeaveTeamAction, TeamTypeNotFoundError, UpdateTeamAction

__all__ = [
    "CreateTeamAction",
    "JoinTeamAction",
    "LeaveTeamAction",
    "TeamTypeNotFoundError",
    "UpdateTeamAction",
]
