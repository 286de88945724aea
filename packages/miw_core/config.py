from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict
from packages.miw_core.errors import ConfigurationError


class MIWConfig(BaseSettings):
    """
    Application-wide settings.
    Values are read from the environment and from a local .env file.
    """
    PROJECT_NAME: str = "MIW Mock Interview"
    VERSION: str = "0.1.0"

    # Path prefix the API is mounted under (e.g. "/.netlify/functions/server")
    GATEWAY_PREFIX: str = ""
    CORS_ALLOW_ORIGINS: List[str] = ["*"]

    # Generative AI key. Only reported (masked) at startup; no code path calls the model.
    GEMINI_API_KEY: Optional[str] = None

    # Interview flow
    MAX_PREDEFINED_QUESTIONS: int = 10
    RESUME_PREVIEW_CHARS: int = 200
    MAX_RESUME_SIZE_MB: int = 10

    # Session store bounds (0 disables)
    SESSION_TTL_SECONDS: int = 6 * 60 * 60
    MAX_SESSIONS: int = 10000

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    @property
    def api_prefix(self) -> str:
        return f"{self.GATEWAY_PREFIX.rstrip('/')}/api"

    @property
    def max_resume_size_bytes(self) -> int:
        return self.MAX_RESUME_SIZE_MB * 1024 * 1024

    def masked_api_key(self) -> str:
        if not self.GEMINI_API_KEY:
            return "Not set"
        return f"{self.GEMINI_API_KEY[:5]}..."

    @classmethod
    def load(cls, **overrides) -> "MIWConfig":
        """
        Load settings, wrapping validation failures in ConfigurationError.
        """
        try:
            return cls(**overrides)
        except Exception as e:
            raise ConfigurationError(f"Failed to load configuration: {str(e)}") from e
