from typing import Annotated

from beanie import PydanticObjectId
from fastapi import Depends, HTTPException, Security
from fastapi.security import APIKeyHeader
from starlette import status

from teamhub import crud, models

api_key_header = APIKeyHeader(
    name="X-API-Key",
    description="API Key for authentication, issued by an administrator.",
    scheme_name="X-API-Key",
    auto_error=False,
)


def get_current_active_user_fn(dependency):
    def f(current_user: Annotated[models.User, Security(dependency)]):
        if not crud.user.is_active(current_user):
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Inactive user")
        return current_user

    return f


def get_current_active_superuser_fn(dependency, custom_message: str | None = None):
    def f(current_user: Annotated[models.User, Security(dependency)]):
        if not crud.user.is_active(current_user):
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Inactive user")
        if not crud.user.is_superuser(current_user):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Not superuser" if custom_message is None else custom_message,
            )
        return current_user

    return f


async def get_current_user_api_key(key: Annotated[str | None, Security(api_key_header)]) -> models.User:
    if key is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Not authenticated")
    user_key = await crud.api_key.get_by_key(key=key)
    if user_key is None or not user_key.active:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="API key for your user not found.",
        )
    return user_key.user  # type: ignore


get_current_active_user = get_current_active_user_fn(get_current_user_api_key)
get_current_active_superuser = get_current_active_superuser_fn(get_current_user_api_key)


async def get_team(team_id: PydanticObjectId) -> models.Team:
    team = await crud.team.get(team_id)
    if team is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Team not found")
    return team


ActiveUserDep = Annotated[models.User, Depends(get_current_active_user)]
ActiveSuperUserDep = Annotated[models.User, Depends(get_current_active_superuser)]
TeamDep = Annotated[models.Team, Depends(get_team)]
