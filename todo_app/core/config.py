from typing import List, Optional
from urllib.parse import urlparse
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from pathlib import Path


class Settings(BaseSettings):
    """Настройки приложения"""

    # Основные настройки
    APP_NAME: str = "Todo App"
    APP_VERSION: str = "1.0.0"
    ENVIRONMENT: str = "development"
    DEBUG: bool = True

    # API настройки
    API_PREFIX: str = "/api/v1"
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000
    WORKERS: int = 1
    CORS_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:5173"]
    ALLOWED_HOSTS: List[str] = ["*"]

    # База данных
    DATABASE_URL: str = "sqlite+aiosqlite:///./todo.db"
    DB_AUTO_CREATE: bool = True

    @field_validator("DATABASE_URL", mode="before")
    @classmethod
    def validate_database_url(cls, v: str) -> str:
        """Преобразование для асинхронного драйвера"""
        if v.startswith("postgres://"):
            v = v.replace("postgres://", "postgresql://", 1)
        if v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        if v.startswith("sqlite:///"):
            return v.replace("sqlite:///", "sqlite+aiosqlite:///", 1)
        return v

    # Логирование
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"
    LOG_FILE: Optional[Path] = None

    @field_validator("LOG_FILE", mode="before")
    @classmethod
    def empty_log_file_to_none(cls, v):
        """Пустое значение отключает запись в файл"""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    # Деплой настройки
    RAILWAY_STATIC_URL: Optional[str] = None
    RENDER_EXTERNAL_URL: Optional[str] = None

    # Разработка
    DEV_SHOW_SQL: bool = False

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore"
    )

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        if self.LOG_FILE:
            self.LOG_FILE.parent.mkdir(parents=True, exist_ok=True)

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"

    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT == "development"

    @property
    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")

    @property
    def database_url_sync(self) -> str:
        """Синхронный URL для внешних утилит"""
        return (
            self.DATABASE_URL
            .replace("postgresql+asyncpg://", "postgresql://")
            .replace("sqlite+aiosqlite://", "sqlite://")
        )

    def get_cors_origins(self) -> List[str]:
        """Получение разрешенных CORS origins"""
        origins = self.CORS_ORIGINS.copy()
        if self.RAILWAY_STATIC_URL:
            origins.append(self.RAILWAY_STATIC_URL)
        if self.RENDER_EXTERNAL_URL:
            origins.append(self.RENDER_EXTERNAL_URL)
        return origins

    def get_allowed_hosts(self) -> List[str]:
        """Хосты для TrustedHostMiddleware в продакшене"""
        hosts = self.ALLOWED_HOSTS.copy()
        for url in (self.RAILWAY_STATIC_URL, self.RENDER_EXTERNAL_URL):
            if url:
                host = urlparse(url if "://" in url else f"https://{url}").hostname
                if host and host not in hosts:
                    hosts.append(host)
        return hosts


# Создание глобального объекта настроек
settings = Settings()
