from typing import Any

from teamhub_client.store.base import Module

State = dict[str, Any]

init = {
    "show_public_profile": False,
    "show_name": False,
    "show_teams": False,
}


def set_settings(state: State, settings: dict[str, bool]) -> None:
    unknown = set(settings) - set(init)
    if unknown:
        raise KeyError(f"Unknown public profile settings: {', '.join(sorted(unknown))}")
    state.update(settings)


def toggle_public_profile(state: State, _: Any = None) -> None:
    state["show_public_profile"] = not state["show_public_profile"]


public_profile = Module(
    state=dict(init),
    mutations={
        "set_settings": set_settings,
        "toggle_public_profile": toggle_public_profile,
    },
)
