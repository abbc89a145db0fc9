from typing import List, Optional, Dict
from datetime import datetime, timedelta
from sqlalchemy import select, func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from todo_app.db.base import utcnow
from todo_app.db.models.task import Task
from todo_app.db.schemas.task import TaskCreate, TaskUpdate
from todo_app.core.exceptions import TaskNotFoundError, DatabaseError
from todo_app.utils.logger import service_logger as logger


def next_timestamp(previous: Optional[datetime]) -> datetime:
    """Новое значение updated_at, строго больше предыдущего"""
    now = utcnow()
    if previous is not None and now <= previous:
        return previous + timedelta(microseconds=1)
    return now


class TaskService:
    """Сервис для работы с задачами"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def _commit(self) -> None:
        try:
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.exception(f"Commit failed: {e}")
            raise DatabaseError() from e

    async def create_task(self, task_data: TaskCreate) -> Task:
        """Создание новой задачи"""
        now = utcnow()
        task = Task(
            title=task_data.title,
            description=task_data.description,
            completed=False,
            created_at=now,
            updated_at=now
        )

        self.session.add(task)
        await self._commit()
        await self.session.refresh(task)

        logger.info(f"Task {task.id} created")
        return task

    async def list_tasks(self, completed: Optional[bool] = None) -> List[Task]:
        """Получение задач, новые первыми"""
        query = select(Task)
        if completed is not None:
            query = query.where(Task.completed == completed)
        query = query.order_by(Task.created_at.desc(), Task.id.desc())

        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def get_task(self, task_id: int) -> Task:
        """Получение задачи по ID"""
        task = await self.session.get(Task, task_id)
        if not task:
            logger.warning(f"Task {task_id} not found")
            raise TaskNotFoundError(task_id)
        return task

    async def update_task(self, task_id: int, task_data: TaskUpdate) -> Task:
        """Обновление переданных полей задачи"""
        task = await self.get_task(task_id)

        update_data = task_data.model_dump(exclude_unset=True)
        for field, value in update_data.items():
            setattr(task, field, value)
        # updated_at обновляется даже если поля не переданы
        task.updated_at = next_timestamp(task.updated_at)

        await self._commit()
        await self.session.refresh(task)

        logger.info(f"Task {task_id} updated: {sorted(update_data)}")
        return task

    async def toggle_task_completion(self, task_id: int, completed: bool) -> Task:
        """Установка статуса выполнения"""
        task = await self.get_task(task_id)

        task.completed = completed
        task.updated_at = next_timestamp(task.updated_at)

        await self._commit()
        await self.session.refresh(task)

        logger.info(f"Task {task_id} completed={completed}")
        return task

    async def delete_task(self, task_id: int) -> int:
        """Удаление задачи"""
        task = await self.get_task(task_id)

        await self.session.delete(task)
        await self._commit()

        logger.info(f"Task {task_id} deleted")
        return task_id

    async def get_summary(self) -> Dict[str, int]:
        """Количество задач по статусам"""
        query = select(
            Task.completed,
            func.count(Task.id)
        ).group_by(Task.completed)

        result = await self.session.execute(query)
        by_status = {bool(status): count for status, count in result.all()}

        completed = by_status.get(True, 0)
        pending = by_status.get(False, 0)
        return {
            "total": completed + pending,
            "completed": completed,
            "pending": pending
        }
