import logging
from typing import Any

from teamhub_client.store.base import ActionContext

logger = logging.getLogger(__name__)


def _refused(context: ActionContext, action: str, response: dict[str, Any]) -> bool:
    if response["success"]:
        return False
    logger.info("%s refused: %s", action, response["message"])
    context.commit("set_error", {"action": action, "message": response["message"]})
    return True


def get_user(context: ActionContext, _: Any = None) -> None:
    user = context.client.me()
    context.commit("set_user", user.model_dump(mode="json"))


def get_teams(context: ActionContext, _: Any = None) -> None:
    response = context.client.list_teams()
    context.commit("set_teams", response["teams"])


def get_team_types(context: ActionContext, _: Any = None) -> None:
    response = context.client.get_team_types()
    context.commit("set_team_types", response["types"])


def create_team(context: ActionContext, payload: dict[str, Any]) -> bool:
    response = context.client.create_team(payload["name"], payload["identifier"], payload["team_type"])
    if _refused(context, "create_team", response):
        return False
    context.commit("team_created", response["team"])
    return True


def update_team(context: ActionContext, payload: dict[str, Any]) -> bool:
    response = context.client.update_team(payload["team_id"], payload["name"], payload["identifier"])
    if _refused(context, "update_team", response):
        return False
    context.commit("team_updated", response["team"])
    return True


def join_team(context: ActionContext, identifier: str) -> bool:
    response = context.client.join_team(identifier)
    if _refused(context, "join_team", response):
        return False
    context.commit("team_joined", response)
    return True


def leave_team(context: ActionContext, team_id: str) -> bool:
    response = context.client.leave_team(team_id)
    if _refused(context, "leave_team", response):
        return False
    context.commit("team_left", response)
    return True


actions = {
    "get_user": get_user,
    "get_teams": get_teams,
    "get_team_types": get_team_types,
    "create_team": create_team,
    "update_team": update_team,
    "join_team": join_team,
    "leave_team": leave_team,
}
