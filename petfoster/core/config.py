from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List

class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    APP_ENV: str = "local"
    APP_NAME: str = "pet-foster-service"
    LOG_LEVEL: str = "INFO"
    LISTEN_HOST: str = "0.0.0.0"
    LISTEN_PORT: int = 8000

    JWT_SECRET: str = "change_me"
    JWT_TTL_MINUTES: int = 120

    CORS_ORIGINS: str = "http://localhost:3000"

    DATABASE_URL: str

    # Page size used when a list query does not carry its own limit.
    DEFAULT_PAGE_LIMIT: int = 10

    # Compose/infra vars that may exist in shared .env
    POSTGRES_USER: str = "postgres"
    POSTGRES_PASSWORD: str = "postgres"
    POSTGRES_DB: str = "petfoster"

    @property
    def cors_origins_list(self) -> List[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]

settings = Settings()
