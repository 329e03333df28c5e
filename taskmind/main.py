from fastapi import FastAPI
from taskmind.core.config import settings
from taskmind.core.database import engine, Base
from taskmind.core.logging_setup import setup_logging
from taskmind.models import category, suggestion, task, user  # noqa: F401  (tables)
from taskmind.routers import health, auth, users, categories, tasks, board, suggestions, audio

setup_logging(settings.LOG_LEVEL, settings.LOG_FILE or None)

# Init DB
Base.metadata.create_all(bind=engine)

app = FastAPI(
    title="TaskMind API",
    version="0.3.0"
)

# Routes
app.include_router(health.router, prefix="/health")
app.include_router(auth.router)
app.include_router(users.router)
app.include_router(categories.router)
app.include_router(tasks.router)
app.include_router(board.router)
app.include_router(suggestions.router)
app.include_router(audio.router)
