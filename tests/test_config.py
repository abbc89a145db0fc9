"""Tests for Settings parsing and helpers."""

import pytest

from todo_app.core.config import Settings
from todo_app.core.exceptions import RecordNotFoundError, TaskNotFoundError


@pytest.mark.parametrize(
    "url, expected",
    [
        ("postgresql://u:p@db/todo", "postgresql+asyncpg://u:p@db/todo"),
        ("postgres://u:p@db/todo", "postgresql+asyncpg://u:p@db/todo"),
        ("sqlite:///./todo.db", "sqlite+aiosqlite:///./todo.db"),
        ("sqlite+aiosqlite:///:memory:", "sqlite+aiosqlite:///:memory:"),
    ],
)
def test_database_url_uses_async_driver(url: str, expected: str) -> None:
    assert Settings(DATABASE_URL=url).DATABASE_URL == expected


def test_database_url_sync() -> None:
    settings = Settings(DATABASE_URL="postgresql://u:p@db/todo")
    assert settings.database_url_sync == "postgresql://u:p@db/todo"
    assert not settings.is_sqlite


def test_cors_origins_include_deploy_urls() -> None:
    settings = Settings(
        CORS_ORIGINS=["http://localhost:3000"],
        RENDER_EXTERNAL_URL="https://todo.onrender.com",
    )
    assert settings.get_cors_origins() == [
        "http://localhost:3000",
        "https://todo.onrender.com",
    ]


def test_environment_flags() -> None:
    assert Settings(ENVIRONMENT="production").is_production
    assert Settings(ENVIRONMENT="development").is_development


def test_task_not_found_error_payload() -> None:
    error = TaskNotFoundError(7)

    assert isinstance(error, RecordNotFoundError)
    assert error.status_code == 404
    assert error.error_code == "TASK_NOT_FOUND"
    assert error.details == {"id": 7}
    assert error.detail == error.message


@pytest.mark.parametrize("value", ["", "   "])
def test_empty_log_file_disables_file_sink(monkeypatch, value: str) -> None:
    monkeypatch.setenv("LOG_FILE", value)
    assert Settings().LOG_FILE is None


def test_log_file_path_is_kept(tmp_path) -> None:
    log_file = tmp_path / "logs" / "todo_app.log"
    settings = Settings(LOG_FILE=str(log_file))

    assert settings.LOG_FILE == log_file
    assert log_file.parent.is_dir()


def test_allowed_hosts_include_deploy_hosts() -> None:
    settings = Settings(
        ALLOWED_HOSTS=["todo.example.com"],
        RENDER_EXTERNAL_URL="https://todo.onrender.com",
        RAILWAY_STATIC_URL="todo.up.railway.app",
    )
    assert settings.get_allowed_hosts() == [
        "todo.example.com",
        "todo.onrender.com",
        "todo.up.railway.app",
    ]


def test_allowed_hosts_default_to_any() -> None:
    assert Settings().get_allowed_hosts() == ["*"]
