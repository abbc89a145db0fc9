from typing import Optional
from sqlalchemy import Boolean, String, Text
from sqlalchemy.orm import Mapped, mapped_column
from todo_app.db.base import Base


class Task(Base):
    """Модель задачи списка дел"""
    __tablename__ = "tasks"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    completed: Mapped[bool] = mapped_column(
        Boolean, default=False, nullable=False, index=True
    )

    def __repr__(self):
        return f"<Task {self.id} {self.title!r}>"
