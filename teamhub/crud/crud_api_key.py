from typing import Any

from beanie import PydanticObjectId

from teamhub import models, schemas

from .base import CRUDBase, CRUDError


class CRUDAPIKey(CRUDBase[models.APIKey, schemas.APIKeyCreate, schemas.APIKeyUpdate]):
    async def update(self, *, db_obj: models.APIKey, obj_in: schemas.APIKeyUpdate | dict[str, Any]) -> models.APIKey:
        raise NotImplementedError("Can't update API keys")

    async def create(self, *, obj_in: schemas.APIKeyCreate) -> models.APIKey:
        if await self.get_by_user(user_id=obj_in.user):
            raise CRUDError("User already has an API key")
        user = await models.User.get(obj_in.user)
        if user is None:
            raise CRUDError("User not found")
        db_obj = self.model(key=obj_in.key, user=user, created=obj_in.created)  # type: ignore
        await db_obj.create()
        return db_obj

    async def get_by_user(self, *, user_id: PydanticObjectId) -> models.APIKey | None:
        return await self.model.find_one(self.model.user.id == user_id, fetch_links=True)  # type: ignore

    async def get_by_key(self, *, key: str) -> models.APIKey | None:
        db_obj = await self.model.find_one(self.model.key == key, fetch_links=True)
        if db_obj is not None:
            await db_obj.fetch_all_links()
        return db_obj


api_key = CRUDAPIKey(models.APIKey)
