from pymongo.errors import DuplicateKeyError

from teamhub import models, schemas
from teamhub.config import settings

from .base import CRUDBase, DuplicateKeyCRUDError


class CRUDUser(CRUDBase[models.User, schemas.UserCreate, schemas.UserUpdate]):
    async def create(self, *, obj_in: schemas.UserCreate) -> models.User:
        remaining_teams = obj_in.remaining_teams
        db_obj = models.User(
            email=obj_in.email,
            name=obj_in.name,
            is_superuser=obj_in.is_superuser,
            is_active=True,
            remaining_teams=remaining_teams if remaining_teams is not None else settings.default_remaining_teams,
            active_team=None,
        )
        try:
            await db_obj.create()
        except DuplicateKeyError:
            raise DuplicateKeyCRUDError(f"Duplicate user: a user with email '{obj_in.email}' already exists")
        return db_obj

    @staticmethod
    def is_active(user: models.User) -> bool:
        return user.is_active

    @staticmethod
    def is_superuser(user: models.User) -> bool:
        return user.is_superuser

    @staticmethod
    async def deactivate_user(user: models.User) -> models.User:
        user.is_active = False
        await user.save()
        return user

    @staticmethod
    async def activate_user(user: models.User) -> models.User:
        user.is_active = True
        await user.save()
        return user


user = CRUDUser(models.User)
