from typing import Any, Dict, Optional
from fastapi import HTTPException


class TodoAppException(HTTPException):
    """Базовое исключение приложения"""

    def __init__(
        self,
        status_code: int,
        error_code: str,
        message: str,
        details: Optional[Dict[str, Any]] = None
    ):
        self.error_code = error_code
        self.message = message
        self.details = details or {}
        super().__init__(status_code=status_code, detail=message)


# Database Errors
class DatabaseError(TodoAppException):
    """Ошибка базы данных"""

    def __init__(self, message: str = "Ошибка при работе с базой данных"):
        super().__init__(
            status_code=500,
            error_code="DATABASE_ERROR",
            message=message
        )


class RecordNotFoundError(TodoAppException):
    """Запись не найдена"""

    def __init__(self, entity_type: str = "Запись", entity_id: Any = None):
        message = f"{entity_type} не найдена"
        if entity_id is not None:
            message += f" (ID: {entity_id})"

        super().__init__(
            status_code=404,
            error_code="RECORD_NOT_FOUND",
            message=message,
            details={"id": entity_id} if entity_id is not None else {}
        )


class TaskNotFoundError(RecordNotFoundError):
    """Задача не найдена"""

    def __init__(self, task_id: int):
        super().__init__("Задача", task_id)
        self.task_id = task_id
        self.error_code = "TASK_NOT_FOUND"
        self.message = f"Задача с ID {task_id} не найдена"
        self.detail = self.message
