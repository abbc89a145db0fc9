from .task import (
    Task, TaskCreate, TaskUpdate, TaskToggle, TaskDeleted, TaskSummary
)

__all__ = [
    "Task", "TaskCreate", "TaskUpdate", "TaskToggle", "TaskDeleted", "TaskSummary"
]
