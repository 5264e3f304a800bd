# bizpilot/settings.py
import os

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # core
    APP_NAME: str = Field(default="Bizpilot")
    ENV: str = Field(default=os.getenv("APP_ENV", "dev"))
    DEBUG: bool = Field(default=True)
    LOG_LEVEL: str = Field(default="INFO")

    # external RAG service (ingest + retrieve)
    RAG_API_BASE_URL: str = Field(default="https://ragapibg.com")
    INGEST_TIMEOUT: float = Field(default=30.0, gt=0)

    # language model
    OPENAI_API_KEY: str | None = None
    OPENAI_MODEL: str = Field(default="gpt-4")

    model_config = SettingsConfigDict(
        env_file=".env.dev",
        extra="ignore",
    )

    @property
    def app_name(self) -> str:
        return self.APP_NAME


settings = Settings()
