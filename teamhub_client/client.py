from typing import Any

import requests
from beanie import PydanticObjectId
from pydantic import model_validator
from pydantic_settings import BaseSettings

from teamhub import schemas


class ClientSettings(BaseSettings):
    teamhub_api_key: str = ""
    hostname: str = "localhost"
    port: int = 8008
    api_v1_str: str = "/api/v1"
    base_url: str = f"https://{hostname}" if hostname != "localhost" else f"http://{hostname}:{port}"
    api_url: str = f"{base_url}{api_v1_str}"

    @model_validator(mode="after")
    def _set_base_url(self) -> "ClientSettings":
        hostname = self.hostname
        port = self.port
        self.base_url = f"https://{hostname}" if hostname != "localhost" else f"http://{hostname}:{port}"
        self.api_url = f"{self.base_url}{self.api_v1_str}"
        return self


class TeamsClient:
    """Thin wrapper around the TeamHub HTTP API.

    The team endpoints return their `{"success": ..., ...}` envelope untouched, so
    callers can inspect `message` when a request is refused.
    """

    def __init__(self, settings: ClientSettings | None = None):
        settings = settings if settings is not None else ClientSettings()
        self.api_key = settings.teamhub_api_key
        self.api_url = settings.api_url
        self.json_headers = {
            "accept": "application/json",
            "X-API-Key": self.api_key,
            "Content-Type": "application/json",
        }

    def _get(self, path: str, **params: Any) -> Any:
        response = requests.get(f"{self.api_url}{path}", params=params or None, headers=self.json_headers)
        response.raise_for_status()
        return response.json()

    def _post(self, path: str, data: dict[str, Any] | None = None) -> Any:
        response = requests.post(f"{self.api_url}{path}", json=data, headers=self.json_headers)
        response.raise_for_status()
        return response.json()

    def me(self) -> schemas.UserInfo:
        return schemas.UserInfo(**self._get("/users/me"))

    def list_teams(self) -> dict[str, Any]:
        return self._get("/teams/list")

    def create_team(self, name: str, identifier: str, team_type: PydanticObjectId | str) -> dict[str, Any]:
        return self._post("/teams/create", {"name": name, "identifier": identifier, "teamType": str(team_type)})

    def update_team(self, team_id: PydanticObjectId | str, name: str, identifier: str) -> dict[str, Any]:
        return self._post(f"/teams/update/{team_id}", {"name": name, "identifier": identifier})

    def join_team(self, identifier: str) -> dict[str, Any]:
        return self._post("/teams/join", {"identifier": identifier})

    def leave_team(self, team_id: PydanticObjectId | str) -> dict[str, Any]:
        return self._post("/teams/leave", {"team_id": str(team_id)})

    def get_team_types(self) -> dict[str, Any]:
        return self._get("/teams/get-types")

    # Administration, requires a superuser API key

    def get_users(self) -> list[schemas.UserInfo]:
        return [schemas.UserInfo(**user) for user in self._get("/users/", limit=1000000)]

    def create_user(
        self, email: str, name: str | None = None, remaining_teams: int | None = None
    ) -> schemas.UserCreationResponse:
        data = schemas.UserCreate(email=email, name=name, remaining_teams=remaining_teams)
        return schemas.UserCreationResponse(**self._post("/users/create", data.model_dump(mode="json")))

    def create_team_type(self, team: str) -> schemas.TeamTypeInfo:
        data = schemas.TeamTypeCreate(team=team)
        return schemas.TeamTypeInfo(**self._post("/teams/types/create", data.model_dump()))
