from types import SimpleNamespace
from unittest.mock import AsyncMock, patch

import pytest
from beanie import PydanticObjectId
from fastapi import HTTPException
from starlette import status

from teamhub import crud, schemas
from teamhub.actions import TeamTypeNotFoundError
from teamhub.api.api_v1.endpoints import teams

from .factories import make_team


def _action(return_value=None, side_effect=None):
    return SimpleNamespace(run=AsyncMock(return_value=return_value, side_effect=side_effect))


def _team_create():
    return schemas.TeamCreate(name="Beach Cleaners", identifier="beach-cleaners", team_type=PydanticObjectId())


@pytest.mark.asyncio
async def test_list_returns_only_the_users_teams(user, team):
    with patch.object(crud.team, "get_by_user", AsyncMock(return_value=[team])) as get_by_user:
        result = await teams.list_teams(user)
    get_by_user.assert_awaited_once_with(user_id=user.id)
    assert result["success"] is True
    assert [t.id for t in result["teams"]] == [team.id]


@pytest.mark.asyncio
async def test_create_fails_when_no_teams_remaining(user):
    user.remaining_teams = 0
    action = _action()
    result = await teams.create_team(_team_create(), user, action)
    assert result == {"success": False, "message": "max-teams-created"}
    action.run.assert_not_awaited()


@pytest.mark.asyncio
async def test_create_delegates_to_action(user):
    team_in = _team_create()
    created = make_team(leader=user.id, created_by=user.id, users=[user])
    action = _action(return_value=created)
    result = await teams.create_team(team_in, user, action)
    action.run.assert_awaited_once_with(user, team_in)
    assert result["success"] is True
    assert result["team"].id == created.id
    assert result["team"].leader == user.id


@pytest.mark.asyncio
async def test_create_with_unknown_team_type(user):
    action = _action(side_effect=TeamTypeNotFoundError("Team type not found"))
    with pytest.raises(HTTPException) as exc_info:
        await teams.create_team(_team_create(), user, action)
    assert exc_info.value.status_code == status.HTTP_404_NOT_FOUND


@pytest.mark.asyncio
async def test_create_with_duplicate_identifier(user):
    action = _action(side_effect=crud.DuplicateKeyCRUDError("Duplicate team"))
    with pytest.raises(HTTPException) as exc_info:
        await teams.create_team(_team_create(), user, action)
    assert exc_info.value.status_code == status.HTTP_409_CONFLICT


@pytest.mark.asyncio
async def test_update_by_non_leader_is_refused(user, team):
    action = _action()
    team_in = schemas.TeamUpdate(name="New name", identifier="new-identifier")
    result = await teams.update_team(team_in, team, user, action)
    assert result == {"success": False, "message": "member-not-allowed"}
    action.run.assert_not_awaited()


@pytest.mark.asyncio
async def test_update_by_leader_delegates_to_action(other_user, team):
    team_in = schemas.TeamUpdate(name="New name", identifier="new-identifier")
    updated = make_team(id=team.id, name="New name", identifier="new-identifier", leader=other_user.id)
    action = _action(return_value=updated)
    result = await teams.update_team(team_in, team, other_user, action)
    action.run.assert_awaited_once_with(team, team_in)
    assert result["success"] is True
    assert result["team"].name == "New name"


@pytest.mark.asyncio
async def test_join_when_already_a_member(user, team):
    action = _action()
    with (
        patch.object(crud.team, "get_by_identifier", AsyncMock(return_value=team)),
        patch.object(crud.team, "is_member", AsyncMock(return_value=True)) as is_member,
    ):
        result = await teams.join_team(schemas.JoinTeamRequest(identifier=team.identifier), user, action)
    is_member.assert_awaited_once_with(user_id=user.id, team_id=team.id)
    assert result == {"success": False, "message": "already-a-member"}
    action.run.assert_not_awaited()


@pytest.mark.asyncio
async def test_join_unknown_identifier(user):
    action = _action()
    with patch.object(crud.team, "get_by_identifier", AsyncMock(return_value=None)):
        with pytest.raises(HTTPException) as exc_info:
            await teams.join_team(schemas.JoinTeamRequest(identifier="missing"), user, action)
    assert exc_info.value.status_code == status.HTTP_404_NOT_FOUND
    action.run.assert_not_awaited()


@pytest.mark.asyncio
async def test_join_returns_fresh_team_and_active_team(user, other_user, team):
    joined = make_team(id=team.id, leader=other_user.id, users=[other_user, user])
    fresh_user = SimpleNamespace(id=user.id, active_team=team.id)
    action = _action(return_value=joined)
    with (
        patch.object(crud.team, "get_by_identifier", AsyncMock(return_value=team)),
        patch.object(crud.team, "is_member", AsyncMock(return_value=False)),
        patch.object(crud.team, "get", AsyncMock(return_value=joined)),
        patch.object(crud.user, "get", AsyncMock(return_value=fresh_user)),
    ):
        result = await teams.join_team(schemas.JoinTeamRequest(identifier=team.identifier), user, action)
    action.run.assert_awaited_once_with(user, team)
    assert result["success"] is True
    assert result["team"].members == 2
    assert result["activeTeam"].id == team.id


@pytest.mark.asyncio
async def test_leave_when_not_a_member(user, team):
    action = _action()
    with (
        patch.object(crud.team, "get", AsyncMock(return_value=team)),
        patch.object(crud.team, "is_member", AsyncMock(return_value=False)),
    ):
        result = await teams.leave_team(schemas.LeaveTeamRequest(team_id=team.id), user, action)
    assert result == {"success": False, "message": "not-a-member"}
    action.run.assert_not_awaited()


@pytest.mark.asyncio
async def test_leave_as_last_member(user):
    team = make_team(leader=user.id, users=[user])
    action = _action()
    with (
        patch.object(crud.team, "get", AsyncMock(return_value=team)),
        patch.object(crud.team, "is_member", AsyncMock(return_value=True)),
    ):
        result = await teams.leave_team(schemas.LeaveTeamRequest(team_id=team.id), user, action)
    assert result == {"success": False, "message": "you-are-last-member"}
    action.run.assert_not_awaited()


@pytest.mark.asyncio
async def test_leave_unknown_team(user):
    action = _action()
    with patch.object(crud.team, "get", AsyncMock(return_value=None)):
        with pytest.raises(HTTPException) as exc_info:
            await teams.leave_team(schemas.LeaveTeamRequest(team_id=PydanticObjectId()), user, action)
    assert exc_info.value.status_code == status.HTTP_404_NOT_FOUND


@pytest.mark.asyncio
async def test_leave_returns_fresh_team_without_active_team(user, other_user):
    team = make_team(leader=other_user.id, users=[other_user, user])
    left = make_team(id=team.id, leader=other_user.id, users=[other_user])
    fresh_user = SimpleNamespace(id=user.id, active_team=None)
    action = _action(return_value=left)
    with (
        patch.object(crud.team, "get", AsyncMock(side_effect=[team, left])),
        patch.object(crud.team, "is_member", AsyncMock(return_value=True)),
        patch.object(crud.user, "get", AsyncMock(return_value=fresh_user)),
    ):
        result = await teams.leave_team(schemas.LeaveTeamRequest(team_id=team.id), user, action)
    action.run.assert_awaited_once_with(user, team)
    assert result["success"] is True
    assert result["team"].members == 1
    assert result["activeTeam"] is None


@pytest.mark.asyncio
async def test_types_only_expose_id_and_label():
    rows = [
        SimpleNamespace(id=PydanticObjectId(), team="community", revision_id=None),
        SimpleNamespace(id=PydanticObjectId(), team="school", revision_id=None),
    ]
    with patch.object(crud.team_type, "get_all", AsyncMock(return_value=rows)):
        result = await teams.get_team_types()
    assert result["success"] is True
    assert [t.model_dump() for t in result["types"]] == [{"id": row.id, "team": row.team} for row in rows]


def test_types_is_the_only_route_without_authentication():
    from teamhub.api import deps

    unauthenticated = []
    for route in teams.router.routes:
        dependencies = {dependency.call for dependency in route.dependant.dependencies}
        if not dependencies & {deps.get_current_active_user, deps.get_current_active_superuser}:
            unauthenticated.append(route.path)
    assert unauthenticated == ["/get-types"]
