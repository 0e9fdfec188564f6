import copy

from teamhub_client.store.base import Module

from .actions import actions
from .init import init
from .mutations import mutations
from .public_profile import public_profile

state = copy.deepcopy(init)

user = Module(
    state=state,
    actions=actions,
    mutations=mutations,
    modules={
        "public_profile": public_profile,
    },
)

__all__ = ["user"]
