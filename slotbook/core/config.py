from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    API_BASE_URL: str = ""
    HTTP_TIMEOUT_SECONDS: float = 10.0

    ADMIN_EMAIL: str = "admin@example.com"
    SESSION_COOKIE_NAME: str = "slotbook_session"

    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"


settings = Settings()
