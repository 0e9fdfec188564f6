import copy
import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

logger = logging.getLogger(__name__)

State = dict[str, Any]
Mutation = Callable[[State, Any], None]


@dataclass
class Module:
    """A slice of client state with the handlers that change it.

    Mutations are synchronous setters. Actions may talk to the API and commit
    mutations through the `ActionContext` they receive.
    """

    state: State
    actions: dict[str, Callable[["ActionContext", Any], Any]] = field(default_factory=dict)
    mutations: dict[str, Mutation] = field(default_factory=dict)
    modules: dict[str, "Module"] = field(default_factory=dict)


@dataclass
class ActionContext:
    store: "Store"
    module: Module
    client: Any
    namespace: str = ""

    @property
    def state(self) -> State:
        return self.module.state

    def commit(self, mutation: str, payload: Any = None) -> None:
        self.store.commit(f"{self.namespace}{mutation}", payload)

    def dispatch(self, action: str, payload: Any = None) -> Any:
        return self.store.dispatch(f"{self.namespace}{action}", payload)


class Store:
    """Holds an independent copy of a module tree and routes commits and dispatches.

    Nested modules are addressed with a path, e.g. `public_profile/toggle_public_profile`.
    """

    def __init__(self, root: Module, client: Any = None):
        self.root = self._copy(root)
        self.client = client

    @classmethod
    def _copy(cls, module: Module) -> Module:
        return Module(
            state=copy.deepcopy(module.state),
            actions=module.actions,
            mutations=module.mutations,
            modules={name: cls._copy(sub) for name, sub in module.modules.items()},
        )

    @property
    def state(self) -> State:
        return self.module_state(self.root)

    def module_state(self, module: Module) -> State:
        return {**module.state, **{name: self.module_state(sub) for name, sub in module.modules.items()}}

    def _resolve(self, path: str) -> tuple[Module, str]:
        *names, handler = path.split("/")
        module = self.root
        for name in names:
            if name not in module.modules:
                raise KeyError(f"Unknown store module '{name}' in '{path}'")
            module = module.modules[name]
        return module, handler

    def commit(self, mutation: str, payload: Any = None) -> None:
        module, name = self._resolve(mutation)
        if name not in module.mutations:
            raise KeyError(f"Unknown mutation '{mutation}'")
        logger.debug("commit %s", mutation)
        module.mutations[name](module.state, payload)

    def dispatch(self, action: str, payload: Any = None) -> Any:
        module, name = self._resolve(action)
        if name not in module.actions:
            raise KeyError(f"Unknown action '{action}'")
        logger.debug("dispatch %s", action)
        namespace = action[: -len(name)]
        context = ActionContext(store=self, module=module, client=self.client, namespace=namespace)
        return module.actions[name](context, payload)
