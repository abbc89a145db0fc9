from datetime import datetime, timezone
from sqlalchemy import DateTime, Integer
from sqlalchemy.orm import Mapped, as_declarative, declared_attr, mapped_column


def utcnow() -> datetime:
    """Текущее время в UTC без tzinfo (так хранится в БД)"""
    return datetime.now(timezone.utc).replace(tzinfo=None)


@as_declarative()
class Base:
    """Базовый класс для всех моделей"""

    # Автогенерация имени таблицы
    @declared_attr
    def __tablename__(cls) -> str:
        return cls.__name__.lower() + "s"

    # Общие поля для всех таблиц
    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=utcnow, nullable=False, index=True
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=utcnow, onupdate=utcnow, nullable=False
    )
