from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    APPS_SCRIPT_URL: str | None = None
    APPS_SCRIPT_SECRET: str = ""
    APPS_SCRIPT_TIMEOUT_SECONDS: float = 10.0

    HOST: str = "0.0.0.0"
    PORT: int = 10000

    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"


settings = Settings()
