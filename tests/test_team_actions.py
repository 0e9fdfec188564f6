from types import SimpleNamespace
from unittest.mock import AsyncMock, patch

import pytest
from beanie import PydanticObjectId

from teamhub import crud, schemas
from teamhub.actions import (
    CreateTeamAction,
    JoinTeamAction,
    LeaveTeamAction,
    TeamTypeNotFoundError,
    UpdateTeamAction,
)

from .factories import make_team, make_user


@pytest.mark.asyncio
async def test_create_makes_creator_leader_and_first_member(user):
    team_type = SimpleNamespace(id=PydanticObjectId(), team="school")
    new_team = make_team(leader=user.id, created_by=user.id, type_id=team_type.id, type_name="school")
    data = schemas.TeamCreate(name="Green School", identifier="green-school", team_type=team_type.id)
    with (
        patch.object(crud.team_type, "get", AsyncMock(return_value=team_type)),
        patch.object(crud.team, "create_for_user", AsyncMock(return_value=new_team)) as create_for_user,
    ):
        team = await CreateTeamAction().run(user, data)
    create_for_user.assert_awaited_once_with(obj_in=data, team_type=team_type, user=user)
    assert team is new_team
    assert team.users == [user]
    assert team.members == 1
    assert user.active_team == team.id
    assert user.remaining_teams == 0
    user.save.assert_awaited()


@pytest.mark.asyncio
async def test_create_with_unknown_team_type(user):
    data = schemas.TeamCreate(name="Green School", identifier="green-school", team_type=PydanticObjectId())
    with (
        patch.object(crud.team_type, "get", AsyncMock(return_value=None)),
        patch.object(crud.team, "create_for_user", AsyncMock()) as create_for_user,
    ):
        with pytest.raises(TeamTypeNotFoundError):
            await CreateTeamAction().run(user, data)
    create_for_user.assert_not_awaited()
    assert user.remaining_teams == 1


@pytest.mark.asyncio
async def test_update_saves_new_name_and_identifier(team):
    data = schemas.TeamUpdate(name="Renamed", identifier="renamed")
    with patch.object(crud.team, "update", AsyncMock(return_value=team)) as update:
        result = await UpdateTeamAction().run(team, data)
    update.assert_awaited_once_with(db_obj=team, obj_in=data)
    assert result is team


@pytest.mark.asyncio
async def test_join_adds_member_and_sets_active_team(user, other_user, team):
    result = await JoinTeamAction().run(user, team)
    assert result.users == [other_user, user]
    assert result.members == 2
    assert user.active_team == team.id
    team.save.assert_awaited()
    user.save.assert_awaited()


@pytest.mark.asyncio
async def test_join_twice_does_not_duplicate_membership(user, team):
    await JoinTeamAction().run(user, team)
    await JoinTeamAction().run(user, team)
    assert team.members == 2


@pytest.mark.asyncio
async def test_leave_falls_back_to_next_team(user, other_user):
    team = make_team(leader=other_user.id, users=[other_user, user])
    next_team = make_team(users=[user])
    user.active_team = team.id
    with patch.object(crud.team, "get_by_user", AsyncMock(return_value=[next_team])) as get_by_user:
        result = await LeaveTeamAction().run(user, team)
    get_by_user.assert_awaited_once_with(user_id=user.id)
    assert result.users == [other_user]
    assert result.members == 1
    assert result.leader == other_user.id
    assert user.active_team == next_team.id


@pytest.mark.asyncio
async def test_leave_last_team_clears_active_team(user, other_user):
    team = make_team(leader=other_user.id, users=[other_user, user])
    user.active_team = team.id
    with patch.object(crud.team, "get_by_user", AsyncMock(return_value=[])):
        await LeaveTeamAction().run(user, team)
    assert user.active_team is None


@pytest.mark.asyncio
async def test_leave_keeps_other_active_team(user, other_user):
    team = make_team(leader=other_user.id, users=[other_user, user])
    active_team_id = PydanticObjectId()
    user.active_team = active_team_id
    with patch.object(crud.team, "get_by_user", AsyncMock()) as get_by_user:
        await LeaveTeamAction().run(user, team)
    get_by_user.assert_not_awaited()
    assert user.active_team == active_team_id


@pytest.mark.asyncio
async def test_leader_leaving_hands_over_leadership(user):
    first, second = make_user(email="first@example.com"), make_user(email="second@example.com")
    team = make_team(leader=user.id, users=[user, first, second])
    with patch.object(crud.team, "get_by_user", AsyncMock(return_value=[])):
        result = await LeaveTeamAction().run(user, team)
    assert result.leader == first.id
    assert result.members == 2
