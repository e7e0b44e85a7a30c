import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.config import RUN_MIGRATIONS, configure_logging
from app.database import engine
from app.errors import register_error_handlers
from app.migrations import upgrade_database
from app.routers import list_router, todo_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    if RUN_MIGRATIONS:
        async with engine.begin() as conn:
            await conn.run_sync(upgrade_database)
    logger.info("Todo lists API ready")
    yield
    await engine.dispose()


app = FastAPI(title="Todo Lists API", lifespan=lifespan)
register_error_handlers(app)

app.include_router(list_router.router, prefix="/lists", tags=["Lists"])
app.include_router(todo_router.router, prefix="/todos", tags=["Todos"])

# Root health
@app.get("/")
async def read_root():
    return {"status": "ok"}
