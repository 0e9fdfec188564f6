"""Single-purpose handlers for team membership changes.

The teams endpoints resolve one of these through `Depends`, run the cheap
membership checks themselves and call `run` only when the change is allowed.
"""

import logging

from teamhub import crud, models, schemas

logger = logging.getLogger(__name__)


class TeamTypeNotFoundError(LookupError):
    pass


class CreateTeamAction:
    async def run(self, user: models.User, data: schemas.TeamCreate) -> models.Team:
        """Create a team led by `user`, add them as its first member and make it their active team."""
        team_type = await crud.team_type.get(data.team_type)
        if team_type is None:
            raise TeamTypeNotFoundError(f"Team type '{data.team_type}' not found")
        team = await crud.team.create_for_user(obj_in=data, team_type=team_type, user=user)
        await crud.team.add_user(user=user, team=team)
        user.active_team = team.id
        user.remaining_teams = max(user.remaining_teams - 1, 0)
        await user.save()
        logger.info("User %s created team %s (%s)", user.id, team.id, team.identifier)
        return team


class UpdateTeamAction:
    async def run(self, team: models.Team, data: schemas.TeamUpdate) -> models.Team:
        team = await crud.team.update(db_obj=team, obj_in=data)
        logger.info("Team %s updated", team.id)
        return team


class JoinTeamAction:
    async def run(self, user: models.User, team: models.Team) -> models.Team:
        team = await crud.team.add_user(user=user, team=team)
        user.active_team = team.id
        await user.save()
        logger.info("User %s joined team %s", user.id, team.id)
        return team


class LeaveTeamAction:
    async def run(self, user: models.User, team: models.Team) -> models.Team:
        """Remove `user` from `team`.

        A user leaving their active team falls back to their next team, or to no
        active team. A leader leaving hands the team to its first remaining member.
        """
        team = await crud.team.remove_user(user=user, team=team)
        if team.leader == user.id and team.users:
            team.leader = team.users[0].id  # type: ignore
            await team.save()
            logger.info("Leadership of team %s passed to user %s", team.id, team.leader)
        if user.active_team == team.id:
            assert user.id is not None
            remaining_teams = await crud.team.get_by_user(user_id=user.id)
            user.active_team = remaining_teams[0].id if remaining_teams else None
            await user.save()
        logger.info("User %s left team %s", user.id, team.id)
        return team
