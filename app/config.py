"""Application configuration via Pydantic Settings.

NOTE: Every setting is mapped to an explicit env variable name (GEOCODER_USER_AGENT,
PORT, etc.) so a typo in .env fails loudly instead of silently falling back.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Geocoder
    geocoder_base_url: str = Field(
        default="https://nominatim.openstreetmap.org",
        validation_alias="GEOCODER_BASE_URL",
    )
    geocoder_user_agent: str = Field(
        default="geodistance-service",
        validation_alias="GEOCODER_USER_AGENT",
    )
    geocoder_timeout: float = Field(default=10.0, validation_alias="GEOCODER_TIMEOUT")
    geocoder_parallel: bool = Field(default=False, validation_alias="GEOCODER_PARALLEL")

    # Inbound request deadline (seconds)
    request_timeout: float = Field(default=30.0, validation_alias="REQUEST_TIMEOUT")

    # Server
    host: str = Field(default="0.0.0.0", validation_alias="HOST")
    port: int = Field(default=8080, validation_alias="PORT")
    static_dir: str = Field(default=".", validation_alias="STATIC_DIR")
    debug: bool = Field(default=False, validation_alias="DEBUG")

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    @field_validator("geocoder_user_agent")
    @classmethod
    def _user_agent_not_blank(cls, value: str) -> str:
        # Nominatim rejects anonymous clients
        if not value.strip():
            raise ValueError("GEOCODER_USER_AGENT must not be empty")
        return value


settings = Settings()
