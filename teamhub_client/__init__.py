from .client import ClientSettings, TeamsClient

__all__ = ["ClientSettings", "TeamsClient"]
