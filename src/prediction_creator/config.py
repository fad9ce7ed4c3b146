"""Environment configuration."""

from typing import Optional

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings

from prediction_creator.errors import ConfigError

HELIX_BASE_URL = "https://api.twitch.tv/helix"
OAUTH_BASE_URL = "https://id.twitch.tv/oauth2"


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    # Read without the prefix, the name Twitch tooling conventionally uses
    twitch_access_token: Optional[str] = Field(default=None, alias="TWITCH_ACCESS_TOKEN")

    # Twitch API settings
    helix_base_url: str = HELIX_BASE_URL
    oauth_base_url: str = OAUTH_BASE_URL
    timeout: float = 15.0

    log_file: str = "prediction_creator.log"

    model_config = {
        "env_prefix": "PREDICTION_CREATOR_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    def require_token(self) -> str:
        if not self.twitch_access_token:
            raise ConfigError("TWITCH_ACCESS_TOKEN is not set")
        return self.twitch_access_token


def get_settings() -> Settings:
    """Get application settings.

    Raises ConfigError when an override in the environment does not parse.
    """
    try:
        return Settings()
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in exc.errors()
        )
        raise ConfigError(f"Invalid configuration: {problems}") from exc
