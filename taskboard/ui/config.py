from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="TASKBOARD_", env_file=".env", extra="ignore")

    APP_TITLE: str = "Moji zadaci"
    API_URL: str = "http://localhost:8000/api/v1"
    REQUEST_TIMEOUT: float = 10.0
    LOG_LEVEL: str = "INFO"


def get_settings() -> Settings:
    return Settings()
