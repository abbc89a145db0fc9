from typing import Optional
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field, field_validator


def _blank_to_none(value):
    """Пустое описание хранится как null"""
    if isinstance(value, str) and not value.strip():
        return None
    return value


class TaskBase(BaseModel):
    """Базовая схема задачи"""
    title: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None

    @field_validator("title", mode="before")
    @classmethod
    def strip_title(cls, v):
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("description", mode="before")
    @classmethod
    def empty_description_to_none(cls, v):
        return _blank_to_none(v)


class TaskCreate(TaskBase):
    """Схема для создания задачи"""
    pass


class TaskUpdate(BaseModel):
    """
    Схема для частичного обновления задачи.

    Применяются только переданные поля. description можно явно
    сбросить в null, title - нет.
    """
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    completed: Optional[bool] = None

    @field_validator("title", mode="before")
    @classmethod
    def validate_title(cls, v):
        if v is None:
            raise ValueError("Название задачи не может быть пустым")
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("completed", mode="before")
    @classmethod
    def validate_completed(cls, v):
        if v is None:
            raise ValueError("Статус выполнения не может быть null")
        return v

    @field_validator("description", mode="before")
    @classmethod
    def empty_description_to_none(cls, v):
        return _blank_to_none(v)


class TaskToggle(BaseModel):
    """Схема для переключения статуса выполнения"""
    completed: bool


class Task(TaskBase):
    """Схема задачи для чтения"""
    id: int
    completed: bool
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class TaskDeleted(BaseModel):
    """Результат удаления задачи"""
    success: bool = True
    id: int


class TaskSummary(BaseModel):
    """Сводка по задачам"""
    total: int = 0
    completed: int = 0
    pending: int = 0
