from typing import Annotated
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession
from todo_app.db.database import get_async_session
from todo_app.services.task import TaskService


async def get_task_service(
    session: Annotated[AsyncSession, Depends(get_async_session)]
) -> TaskService:
    """Сервис задач, привязанный к сессии запроса"""
    return TaskService(session)


TaskServiceDep = Annotated[TaskService, Depends(get_task_service)]
