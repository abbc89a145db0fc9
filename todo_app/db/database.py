from typing import Any, AsyncGenerator, Dict
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from todo_app.core.config import settings


def get_engine_options() -> Dict[str, Any]:
    """Параметры движка в зависимости от драйвера"""
    options: Dict[str, Any] = {"echo": settings.DEBUG and settings.DEV_SHOW_SQL}
    if settings.is_sqlite:
        # для SQLite пул настраивает сам диалект
        return options

    options.update(
        pool_pre_ping=True,
        pool_size=5,
        max_overflow=10
    )
    return options


# Создание асинхронного движка
engine = create_async_engine(settings.DATABASE_URL, **get_engine_options())

# Фабрика сессий
async_session_maker = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False
)


async def get_async_session() -> AsyncGenerator[AsyncSession, None]:
    """Dependency для получения сессии БД"""
    async with async_session_maker() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise


async def init_db(drop: bool = False):
    """Инициализация БД (создание таблиц)"""
    from todo_app.db.base import Base
    from todo_app.db import models  # noqa: F401

    async with engine.begin() as conn:
        if drop:
            await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)


async def close_db():
    """Закрытие соединений с БД"""
    await engine.dispose()
