from pydantic import SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(secrets_dir="/run/secrets")

    project_name: str = "TeamHub"
    api_v1_str: str = "/api/v1"
    hostname: str = "localhost"
    base_url: str = f"https://{hostname}" if hostname != "localhost" else f"http://{hostname}"
    log_level: str = "INFO"

    # Security
    api_key_length: int = 32  # 32 bytes = 256 bits

    # Database
    database_url: str | None = None
    mongodb_root_username: str | None = None
    mongodb_root_password: SecretStr = "TODO generate with `openssl rand -hex 32`"  # type: ignore

    # Teams
    default_remaining_teams: int = 1
    default_team_types: list[str] = ["community", "school"]
    max_len_team_name: int = 100
    max_len_team_identifier: int = 100

    @model_validator(mode="after")
    def _set_base_url(self) -> "Settings":
        hostname = self.hostname
        self.base_url = f"https://{hostname}" if hostname != "localhost" else f"http://{hostname}"
        return self

    @property
    def mongodb_url(self) -> str:
        return (
            f"mongodb://{self.mongodb_root_username}:{self.mongodb_root_password.get_secret_value()}"
            f"@{self.database_url}"
        )


settings = Settings()
