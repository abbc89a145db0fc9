from typing import Annotated, List, Optional
from fastapi import APIRouter, Path, Query, status

from todo_app.api.dependencies import TaskServiceDep
from todo_app.db.schemas import (
    Task, TaskCreate, TaskUpdate, TaskToggle, TaskDeleted, TaskSummary
)

router = APIRouter()

TaskId = Annotated[int, Path(ge=1, description="ID задачи")]


@router.post("", response_model=Task, status_code=status.HTTP_201_CREATED)
async def create_task(task_data: TaskCreate, service: TaskServiceDep):
    """Создать новую задачу"""
    return await service.create_task(task_data)


@router.get("", response_model=List[Task])
async def get_tasks(
    service: TaskServiceDep,
    completed: Optional[bool] = Query(None, description="Фильтр по статусу")
):
    """Получить список задач, новые первыми"""
    return await service.list_tasks(completed=completed)


@router.get("/summary", response_model=TaskSummary)
async def get_task_summary(service: TaskServiceDep):
    """Получить количество задач по статусам"""
    return await service.get_summary()


@router.get("/{task_id}", response_model=Task)
async def get_task(task_id: TaskId, service: TaskServiceDep):
    """Получить задачу"""
    return await service.get_task(task_id)


@router.patch("/{task_id}", response_model=Task)
async def update_task(
    task_id: TaskId,
    task_update: TaskUpdate,
    service: TaskServiceDep
):
    """Обновить задачу"""
    return await service.update_task(task_id, task_update)


@router.post("/{task_id}/toggle", response_model=Task)
async def toggle_task_completion(
    task_id: TaskId,
    toggle: TaskToggle,
    service: TaskServiceDep
):
    """Отметить задачу выполненной или невыполненной"""
    return await service.toggle_task_completion(task_id, toggle.completed)


@router.delete("/{task_id}", response_model=TaskDeleted)
async def delete_task(task_id: TaskId, service: TaskServiceDep):
    """Удалить задачу"""
    deleted_id = await service.delete_task(task_id)
    return TaskDeleted(success=True, id=deleted_id)
