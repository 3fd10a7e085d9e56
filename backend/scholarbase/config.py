from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Optional
from functools import lru_cache


class Settings(BaseSettings):
    # Application Settings
    APP_NAME: str = "Scholarbase API"
    APP_VERSION: str = "1.0.0"
    APP_DESCRIPTION: str = (
        "Complete REST API for Scholarbase learning platform with authentication, "
        "courses, enrollments, and user management"
    )
    DEBUG: bool = True
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None

    @property
    def debug(self) -> bool:
        return self.DEBUG

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT.lower() == "production"

    # API Settings
    API_PREFIX: str = ""
    DOCS_URL: str = "/api-docs"
    SECRET_KEY: str = "scholarbase-dev-secret"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_SECONDS: int = 3600
    REMEMBER_ME_EXPIRE_SECONDS: int = 2592000  # 30 days

    # Frontend URL (CORS origin)
    FRONTEND_URL: str = "http://localhost:3001"

    @property
    def cors_origins(self) -> List[str]:
        return [origin.strip() for origin in self.FRONTEND_URL.split(",") if origin.strip()]

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    @property
    def host(self) -> str:
        return self.HOST

    @property
    def port(self) -> int:
        return self.PORT

    # In-memory data
    SEED_ON_STARTUP: bool = True

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="allow",
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
