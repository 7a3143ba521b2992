from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator


# Output compatibility: existing consumers expect this exact literal
EMPTY_CELL_PLACEHOLDER = "N/A"

# Rows of the cleaned grid sent to the AI summarizer
AI_SAMPLE_SIZE = 20


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore"
    )

    # API
    API_V1_PREFIX: str = "/api/v1"
    PROJECT_NAME: str = "Sheet Cleaner"
    VERSION: str = "0.1.0"

    # CORS
    BACKEND_CORS_ORIGINS: List[str] = ["http://localhost:3000"]

    @field_validator("BACKEND_CORS_ORIGINS", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v: str | List[str]) -> List[str]:
        if isinstance(v, str):
            return [i.strip() for i in v.split(",")]
        return v

    # Cleaning
    EMPTY_CELL_PLACEHOLDER: str = EMPTY_CELL_PLACEHOLDER

    # AI summarizer (optional, off by default)
    AI_ENABLED: bool = False
    AI_API_KEY: str | None = None
    AI_API_ENDPOINT: str = "https://api.openai.com/v1/chat/completions"
    AI_MODEL: str = "gpt-3.5-turbo"
    AI_SAMPLE_SIZE: int = AI_SAMPLE_SIZE
    AI_MAX_TOKENS: int = 500
    AI_TEMPERATURE: float = 0.3
    AI_TIMEOUT_SECONDS: float = 30.0

    # Environment
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"


settings = Settings()
