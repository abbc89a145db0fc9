# Импорт всех моделей для регистрации в метаданных
from .task import Task

__all__ = ["Task"]
