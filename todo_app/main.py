from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.trustedhost import TrustedHostMiddleware
from fastapi.responses import JSONResponse
import time
from todo_app.core.config import Settings, settings
from todo_app.db.database import init_db, close_db
from todo_app.api.v1 import tasks
from todo_app.core.exceptions import TodoAppException
from todo_app.utils.logger import setup_logging

# Настройка логирования
logger = setup_logging("api")


def create_app(app_settings: Settings = settings) -> FastAPI:
    """Создание и настройка приложения"""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Управление жизненным циклом приложения"""
        # Startup
        logger.info(f"Starting {app_settings.APP_NAME} v{app_settings.APP_VERSION}")
        logger.info(f"Environment: {app_settings.ENVIRONMENT}")

        # Инициализация БД
        if app_settings.DB_AUTO_CREATE:
            await init_db()
            logger.info("Database initialized")

        yield

        # Shutdown
        logger.info("Shutting down...")
        await close_db()
        logger.info("Database connections closed")

    prefix = app_settings.API_PREFIX
    app = FastAPI(
        title=app_settings.APP_NAME,
        version=app_settings.APP_VERSION,
        description="Список дел: создание, просмотр, изменение и удаление задач",
        docs_url=f"{prefix}/docs" if app_settings.DEBUG else None,
        redoc_url=f"{prefix}/redoc" if app_settings.DEBUG else None,
        openapi_url=f"{prefix}/openapi.json" if app_settings.DEBUG else None,
        lifespan=lifespan
    )

    # Middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.get_cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if app_settings.is_production:
        app.add_middleware(
            TrustedHostMiddleware,
            allowed_hosts=app_settings.get_allowed_hosts()
        )

    # Middleware для логирования времени запросов
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start_time = time.time()
        response = await call_next(request)
        process_time = time.time() - start_time

        logger.info(
            f"{request.method} {request.url.path} - "
            f"Status: {response.status_code} - "
            f"Time: {process_time:.3f}s"
        )

        response.headers["X-Process-Time"] = str(process_time)
        return response

    # Обработчик ошибок
    @app.exception_handler(TodoAppException)
    async def todo_app_exception_handler(request: Request, exc: TodoAppException):
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "error": exc.error_code,
                "message": exc.message,
                "details": exc.details
            }
        )

    # Health check
    @app.get("/health")
    async def health_check():
        return {
            "status": "healthy",
            "app": app_settings.APP_NAME,
            "version": app_settings.APP_VERSION,
            "environment": app_settings.ENVIRONMENT
        }

    # API routes
    app.include_router(tasks.router, prefix=f"{prefix}/tasks", tags=["Задачи"])

    # Root endpoint
    @app.get("/")
    async def root():
        return {
            "message": f"Welcome to {app_settings.APP_NAME}",
            "version": app_settings.APP_VERSION,
            "docs": f"{prefix}/docs" if app_settings.DEBUG else None
        }

    return app


# Создание приложения
app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "todo_app.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.is_development,
        workers=settings.WORKERS if settings.is_production else 1,
        log_level=settings.LOG_LEVEL.lower()
    )
