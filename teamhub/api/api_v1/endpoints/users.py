import logging
from collections.abc import Sequence

from beanie import PydanticObjectId
from fastapi import APIRouter, Depends, HTTPException
from starlette import status

from teamhub import crud, schemas, security
from teamhub.api import deps
from teamhub.api.api_v1.endpoints import utils

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/", response_model=Sequence[schemas.UserInfo])
async def read_users(
    _: deps.ActiveSuperUserDep,
    skip: int = 0,
    limit: int = 100,
) -> list[schemas.UserInfo]:
    """
    Retrieve users.
    """
    users = await crud.user.get_multi(skip=skip, limit=limit)
    return [await utils.idfy_teams(user) for user in users]


@router.get("/me", response_model=schemas.UserInfo)
async def read_user_me(
    current_user: deps.ActiveUserDep,
) -> schemas.UserInfo:
    """
    Get current user.
    """
    return await utils.idfy_teams(current_user)


@router.post("/create", response_model=schemas.UserCreationResponse)
async def create_user(user_in: schemas.UserCreate, _: deps.ActiveSuperUserDep) -> schemas.UserCreationResponse:
    """
    Create a user and issue their API key. The key is only shown once.
    """
    try:
        user = await crud.user.create(obj_in=user_in)
    except crud.DuplicateKeyCRUDError as e:
        raise HTTPException(status.HTTP_409_CONFLICT, str(e))
    assert user.id is not None
    key = security.create_api_key()
    await crud.api_key.create(obj_in=schemas.APIKeyCreate(key=key, user=user.id))
    logger.info("Created user %s", user.id)
    return schemas.UserCreationResponse(user=await utils.idfy_teams(user), key=key)


@router.get("/{user_id}", response_model=schemas.UserInfo)
async def read_user_by_id(
    user_id: PydanticObjectId,
    _: deps.ActiveSuperUserDep,
) -> schemas.UserInfo:
    """
    Get a specific user by id.
    """
    user = await crud.user.get(id=user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found.")
    return await utils.idfy_teams(user)


@router.post("/{user_id}/deactivate", dependencies=[Depends(deps.get_current_active_superuser)])
async def deactivate_user(user_id: PydanticObjectId) -> dict[str, str]:
    user = await crud.user.get(user_id)
    if user is None:
        raise HTTPException(status.HTTP_404_NOT_FOUND, detail="User not found")
    await crud.user.deactivate_user(user)
    return {"info": "User deactivated successfully"}


@router.post("/{user_id}/activate", dependencies=[Depends(deps.get_current_active_superuser)])
async def activate_user(user_id: PydanticObjectId) -> dict[str, str]:
    user = await crud.user.get(user_id)
    if user is None:
        raise HTTPException(status.HTTP_404_NOT_FOUND, detail="User not found")
    await crud.user.activate_user(user)
    return {"info": "User activated successfully"}
