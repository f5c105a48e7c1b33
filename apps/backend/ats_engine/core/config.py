import os
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    PROJECT_NAME: str = "ATS Scoring Engine"
    LOG_LEVEL: str = "INFO"

    # Generative analysis. LLM_PROVIDER is either "ollama" or a fully-qualified
    # llama_index LLM class such as "llama_index.llms.anthropic.Anthropic".
    LLM_ENABLED: bool = True
    LLM_PROVIDER: str = "ollama"
    LL_MODEL: str = "gemma3:4b"
    LLM_API_KEY: Optional[str] = None
    LLM_BASE_URL: Optional[str] = None
    LLM_TEMPERATURE: float = 0.2
    LLM_MAX_TOKENS: int = 4000
    LLM_TIMEOUT_SECONDS: float = 30.0

    DATABASE_URL: str = "sqlite+aiosqlite:///./ats_history.db"

    model_config = SettingsConfigDict(
        env_file=os.path.join(os.path.dirname(__file__), os.pardir, os.pardir, ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
