import secrets

from teamhub.config import settings


def create_api_key() -> str:
    key = secrets.token_urlsafe(settings.api_key_length)
    return key
