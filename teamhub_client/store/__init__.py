from .base import ActionContext, Module, Store
from .user import user

__all__ = ["ActionContext", "Module", "Store", "user"]
