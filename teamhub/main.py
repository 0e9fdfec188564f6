import logging

from beanie import init_beanie
from fastapi import FastAPI
from motor.motor_asyncio import AsyncIOMotorClient
from starlette import status
from starlette.requests import Request
from starlette.responses import JSONResponse

from teamhub import crud, models, schemas
from teamhub.api.api_v1.api import api_router
from teamhub.api.documentation_text import api_description, tags_metadata
from teamhub.config import settings

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.project_name,
    openapi_url=f"{settings.api_v1_str}/openapi.json",
    openapi_tags=tags_metadata,
    description=api_description,
)

DB_MODELS = [
    models.APIKey,
    models.User,
    models.Team,
    models.TeamType,
]


async def seed_team_types() -> list[models.TeamType]:
    team_types = [
        await crud.team_type.get_or_create(obj_in=schemas.TeamTypeCreate(team=label))
        for label in settings.default_team_types
    ]
    logger.info("Available team types: %s", ", ".join(team_type.team for team_type in team_types))
    return team_types


@app.on_event("startup")
async def app_init():
    mongo_client = AsyncIOMotorClient(settings.mongodb_url)
    await init_beanie(mongo_client.get_default_database(), document_models=DB_MODELS)
    await seed_team_types()


@app.exception_handler(crud.CRUDError)
async def crud_error_handler(request: Request, exc: crud.CRUDError):
    logger.warning("Unhandled CRUD error on %s: %s", request.url.path, exc)
    return JSONResponse(status_code=status.HTTP_409_CONFLICT, content={"detail": str(exc)})


app.include_router(api_router, prefix=settings.api_v1_str)
