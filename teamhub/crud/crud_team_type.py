from teamhub import models, schemas

from .base import CRUDBase


class CRUDTeamType(CRUDBase[models.TeamType, schemas.TeamTypeCreate, schemas.TeamTypeCreate]):
    async def get_all(self) -> list[models.TeamType]:
        return await self.model.find_all().to_list()

    async def get_by_label(self, *, team: str) -> models.TeamType | None:
        return await self.model.find_one(self.model.team == team)

    async def get_or_create(self, *, obj_in: schemas.TeamTypeCreate) -> models.TeamType:
        db_obj = await self.get_by_label(team=obj_in.team)
        if db_obj is not None:
            return db_obj
        return await self.create(obj_in=obj_in)


team_type = CRUDTeamType(models.TeamType)
