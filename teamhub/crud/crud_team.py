from beanie import PydanticObjectId
from pymongo.errors import DuplicateKeyError

from teamhub import models, schemas

from .base import CRUDBase, DuplicateKeyCRUDError


class CRUDTeam(CRUDBase[models.Team, schemas.TeamCreate, schemas.TeamUpdate]):
    async def create_for_user(
        self, *, obj_in: schemas.TeamCreate, team_type: models.TeamType, user: models.User
    ) -> models.Team:
        assert user.id is not None and team_type.id is not None
        db_obj = self.model(
            name=obj_in.name,
            identifier=obj_in.identifier,
            type_id=team_type.id,
            type_name=team_type.team,
            leader=user.id,
            created_by=user.id,
            members=0,
            users=[],
        )
        try:
            await db_obj.create()
        except DuplicateKeyError:
            raise DuplicateKeyCRUDError(
                f"Duplicate team: a team named '{obj_in.name}' or with identifier '{obj_in.identifier}' already exists"
            )
        return db_obj

    async def get_by_identifier(self, *, identifier: str) -> models.Team | None:
        return await self.model.find_one(self.model.identifier == identifier, fetch_links=True)

    async def get_by_user(self, *, user_id: PydanticObjectId) -> list[models.Team]:
        return await self.model.find({"users.$id": user_id}).to_list()

    async def is_member(self, *, user_id: PydanticObjectId, team_id: PydanticObjectId) -> bool:
        return await self.model.find({"_id": team_id, "users.$id": user_id}).count() > 0

    async def count_users(self, *, team: models.Team) -> int:
        return len(team.users)

    async def add_user(self, *, user: models.User, team: models.Team) -> models.Team:
        if user.id in [u.id for u in team.users]:  # type: ignore
            return team
        team.users.append(user)  # type: ignore
        team.members = len(team.users)
        await team.save()
        return team

    async def remove_user(self, *, user: models.User, team: models.Team) -> models.Team:
        team.users = [u for u in team.users if u.id != user.id]  # type: ignore
        team.members = len(team.users)
        await team.save()
        return team


team = CRUDTeam(models.Team)
