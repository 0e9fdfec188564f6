from typing import Any

from teamhub import crud, models, schemas


def success(**data: Any) -> dict[str, Any]:
    return {"success": True, **data}


def fail(message: str) -> dict[str, Any]:
    return {"success": False, "message": message}


def team_info(team: models.Team | None) -> schemas.TeamInfo | None:
    if team is None:
        return None
    return schemas.TeamInfo.model_validate(team)


async def fresh_team(team: models.Team) -> schemas.TeamInfo | None:
    return team_info(await crud.team.get(team.id))


async def fresh_active_team(user: models.User) -> schemas.TeamInfo | None:
    fresh_user = await crud.user.get(user.id)
    if fresh_user is None or fresh_user.active_team is None:
        return None
    return team_info(await crud.team.get(fresh_user.active_team))


async def idfy_teams(user: models.User) -> schemas.UserInfo:
    assert user.id is not None
    teams = await crud.team.get_by_user(user_id=user.id)
    return schemas.UserInfo(
        id=user.id,
        email=user.email,
        name=user.name,
        is_active=user.is_active,
        is_superuser=user.is_superuser,
        remaining_teams=user.remaining_teams,
        active_team=user.active_team,
        teams=[team.id for team in teams],  # type: ignore
    )
