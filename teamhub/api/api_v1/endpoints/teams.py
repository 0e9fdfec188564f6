import logging
from typing import Annotated, Any

from fastapi import APIRouter, Depends, HTTPException
from starlette import status

from teamhub import actions, crud, schemas
from teamhub.api import deps
from teamhub.api.api_v1.endpoints.utils import fail, fresh_active_team, fresh_team, success, team_info

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/list")
async def list_teams(current_user: deps.ActiveUserDep) -> dict[str, Any]:
    """
    Teams the current user has joined.
    """
    assert current_user.id is not None
    teams = await crud.team.get_by_user(user_id=current_user.id)
    return success(teams=[team_info(team) for team in teams])


@router.post("/create")
async def create_team(
    team_in: schemas.TeamCreate,
    current_user: deps.ActiveUserDep,
    action: Annotated[actions.CreateTeamAction, Depends()],
) -> dict[str, Any]:
    """
    Create a new team led by the current user. Every user can only create a limited number of teams.
    """
    if current_user.remaining_teams == 0:
        logger.info("User %s has no teams left to create", current_user.id)
        return fail("max-teams-created")
    try:
        team = await action.run(current_user, team_in)
    except actions.TeamTypeNotFoundError as e:
        raise HTTPException(status.HTTP_404_NOT_FOUND, str(e))
    except crud.DuplicateKeyCRUDError as e:
        raise HTTPException(status.HTTP_409_CONFLICT, str(e))
    return success(team=team_info(team))


@router.post("/update/{team_id}")
async def update_team(
    team_in: schemas.TeamUpdate,
    team: deps.TeamDep,
    current_user: deps.ActiveUserDep,
    action: Annotated[actions.UpdateTeamAction, Depends()],
) -> dict[str, Any]:
    """
    Update the name and identifier of a team. Only the team leader can do this.
    """
    if current_user.id != team.leader:
        logger.info("User %s is not the leader of team %s", current_user.id, team.id)
        return fail("member-not-allowed")
    try:
        team = await action.run(team, team_in)
    except crud.DuplicateKeyCRUDError as e:
        raise HTTPException(status.HTTP_409_CONFLICT, str(e))
    return success(team=team_info(team))


@router.post("/join")
async def join_team(
    join_request: schemas.JoinTeamRequest,
    current_user: deps.ActiveUserDep,
    action: Annotated[actions.JoinTeamAction, Depends()],
) -> dict[str, Any]:
    """
    Join a team using its identifier. The joined team becomes the active team.
    """
    team = await crud.team.get_by_identifier(identifier=join_request.identifier)
    if team is None:
        raise HTTPException(status.HTTP_404_NOT_FOUND, "Team not found")
    assert current_user.id is not None and team.id is not None
    if await crud.team.is_member(user_id=current_user.id, team_id=team.id):
        logger.info("User %s is already a member of team %s", current_user.id, team.id)
        return fail("already-a-member")
    await action.run(current_user, team)
    return success(team=await fresh_team(team), activeTeam=await fresh_active_team(current_user))


@router.post("/leave")
async def leave_team(
    leave_request: schemas.LeaveTeamRequest,
    current_user: deps.ActiveUserDep,
    action: Annotated[actions.LeaveTeamAction, Depends()],
) -> dict[str, Any]:
    """
    Leave a team. The last member of a team cannot leave it.
    """
    team = await deps.get_team(leave_request.team_id)
    assert current_user.id is not None
    if not await crud.team.is_member(user_id=current_user.id, team_id=leave_request.team_id):
        logger.info("User %s is not a member of team %s", current_user.id, team.id)
        return fail("not-a-member")
    if await crud.team.count_users(team=team) <= 1:
        logger.info("User %s is the last member of team %s", current_user.id, team.id)
        return fail("you-are-last-member")
    await action.run(current_user, team)
    return success(team=await fresh_team(team), activeTeam=await fresh_active_team(current_user))


@router.get("/get-types")
async def get_team_types() -> dict[str, Any]:
    """
    Types of teams that can be created.
    """
    team_types = await crud.team_type.get_all()
    return success(types=[schemas.TeamTypeInfo.model_validate(team_type) for team_type in team_types])


@router.post("/types/create", response_model=schemas.TeamTypeInfo)
async def create_team_type(
    team_type_in: schemas.TeamTypeCreate, _: deps.ActiveSuperUserDep
) -> schemas.TeamTypeInfo:
    try:
        team_type = await crud.team_type.create(obj_in=team_type_in)
    except crud.DuplicateKeyCRUDError as e:
        raise HTTPException(status.HTTP_409_CONFLICT, str(e))
    return schemas.TeamTypeInfo.model_validate(team_type)
