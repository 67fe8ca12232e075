"""Runtime configuration for coraline."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from coraline.models import DEFAULT_SPEECH_MODEL, DEFAULT_TRANSCRIPTION_MODEL, Voice
from coraline.speech.errors import MissingCredentialError

API_KEY_ENV = "OPENAI_API_KEY"


class Settings(BaseSettings):
    """Environment-driven runtime settings."""

    model_config = SettingsConfigDict(
        env_prefix="CORALINE_",
        env_file=".env",
        extra="ignore",
        populate_by_name=True,
    )

    openai_api_key: str | None = Field(
        default=None,
        validation_alias=API_KEY_ENV,
        description="Bearer token for the speech API.",
    )
    api_base_url: str = "https://api.openai.com/v1"
    speech_model: str = DEFAULT_SPEECH_MODEL
    transcription_model: str = DEFAULT_TRANSCRIPTION_MODEL
    transcription_response_format: str = "text"
    default_voice: Voice = Voice.ALLOY
    request_timeout_seconds: float = Field(default=120.0, gt=0)
    log_level: str = "INFO"

    def require_api_key(self) -> str:
        if not self.openai_api_key:
            raise MissingCredentialError(API_KEY_ENV)
        return self.openai_api_key


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
