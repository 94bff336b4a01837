"""
Application configuration loaded from environment variables.

The API credential is deliberately absent: it is read from the process
environment on every resolve by the CredentialService.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


MAX_UPLOAD_BYTES = 5 * 1024 * 1024


class Settings(BaseSettings):
    """Application settings from environment variables"""

    environment: str = Field(default="development", alias="ENVIRONMENT")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        alias="LOG_FORMAT",
    )

    # Name of the environment variable holding the Gemini API key
    credential_env_var: str = Field(default="API_KEY", alias="CREDENTIAL_ENV_VAR")

    chat_search_model: str = Field(
        default="gemini-2.5-flash", alias="CHAT_SEARCH_MODEL"
    )
    chat_reasoning_model: str = Field(
        default="gemini-3-pro-preview", alias="CHAT_REASONING_MODEL"
    )
    vision_model: str = Field(default="gemini-3-pro-preview", alias="VISION_MODEL")
    image_model: str = Field(default="gemini-2.5-flash-image", alias="IMAGE_MODEL")

    max_upload_bytes: int = Field(default=MAX_UPLOAD_BYTES, alias="MAX_UPLOAD_BYTES")

    model_config = {"env_file": ".env", "case_sensitive": False, "extra": "ignore"}


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.model_validate({})
