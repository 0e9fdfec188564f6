from typing import Any

State = dict[str, Any]


def _replace_team(teams: list[dict[str, Any]], team: dict[str, Any]) -> list[dict[str, Any]]:
    return [team if t["id"] == team["id"] else t for t in teams]


def set_user(state: State, user: dict[str, Any]) -> None:
    state["user"] = user


def set_teams(state: State, teams: list[dict[str, Any]]) -> None:
    state["teams"] = teams


def set_team_types(state: State, team_types: list[dict[str, Any]]) -> None:
    state["team_types"] = team_types


def team_created(state: State, team: dict[str, Any]) -> None:
    """The creator is the first member, and a new team becomes the active one."""
    state["teams"] = [*state["teams"], team]
    state["active_team"] = team
    if state["user"] is not None:
        state["user"]["remaining_teams"] = max(state["user"]["remaining_teams"] - 1, 0)


def team_updated(state: State, team: dict[str, Any]) -> None:
    state["teams"] = _replace_team(state["teams"], team)
    if state["active_team"] is not None and state["active_team"]["id"] == team["id"]:
        state["active_team"] = team


def team_joined(state: State, payload: dict[str, Any]) -> None:
    team = payload["team"]
    state["teams"] = [*[t for t in state["teams"] if t["id"] != team["id"]], team]
    state["active_team"] = payload["activeTeam"]


def team_left(state: State, payload: dict[str, Any]) -> None:
    team = payload["team"]
    state["teams"] = [t for t in state["teams"] if t["id"] != team["id"]]
    state["active_team"] = payload["activeTeam"]


def set_error(state: State, payload: dict[str, str]) -> None:
    state["errors"] = {**state["errors"], payload["action"]: payload["message"]}


def clear_errors(state: State, _: Any = None) -> None:
    state["errors"] = {}


mutations = {
    "set_user": set_user,
    "set_teams": set_teams,
    "set_team_types": set_team_types,
    "team_created": team_created,
    "team_updated": team_updated,
    "team_joined": team_joined,
    "team_left": team_left,
    "set_error": set_error,
    "clear_errors": clear_errors,
}
