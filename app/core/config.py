# app/core/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore")

    PROJECT_NAME: str = "Clinic Directory API"
    VERSION: str = "1.0.0"
    PROJECT_TAG: str = "CMD-Telehealth"   # columna `project` de system_logs

    # DATABASE_URL gana sobre los DB_* sueltos
    DATABASE_URL: str | None = None
    DB_HOST: str | None = None
    DB_PORT: int = 3306
    DB_USER: str | None = None
    DB_PASSWORD: str | None = None
    DB_NAME: str | None = None
    DB_ECHO: bool = False

    CORS_ORIGINS: list[str] = [
        "http://localhost:5173",
        "http://127.0.0.1:5173",
        "http://localhost:3000",
    ]

    LOG_LEVEL: str = "INFO"
    SEED_ON_STARTUP: bool = True
    CLINIC_ID_MAX_ATTEMPTS: int = 10
    LOG_LIST_DEFAULT_LIMIT: int = 100

    @property
    def async_database_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        if self.DB_HOST and self.DB_USER and self.DB_NAME:
            return (f"mysql+aiomysql://{self.DB_USER}:{self.DB_PASSWORD or ''}"
                    f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}?charset=utf8mb4")
        return "sqlite+aiosqlite:///./clinic_directory.db"


settings = Settings()
