import os

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    GEMINI_API_KEY: str = os.environ.get("GEMINI_API_KEY", "")
    CHAT_MODEL: str = "gemini-2.5-flash"
    CHAT_TEMPERATURE: float = 0.7
    CHAT_MAX_OUTPUT_TOKENS: int = 1000
    ALLOW_ORIGINS: list[str] = ["*"]
    HOST: str = "0.0.0.0"
    PORT: int = 3001
    LOG_LEVEL: str = "INFO"
    BACKEND_URL: str = os.environ.get("BACKEND_URL", "http://localhost:3001")


settings = Settings()
