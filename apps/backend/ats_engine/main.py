import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from .api import v1_router
from .core import settings, setup_logging
from .core.database import get_engine, init_models

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    engine = get_engine()
    await init_models(engine)
    logger.info(f"{settings.PROJECT_NAME} started (LLM provider: {settings.LLM_PROVIDER}, enabled={settings.LLM_ENABLED})")
    yield
    await engine.dispose()


def create_app() -> FastAPI:
    setup_logging()
    app = FastAPI(title=settings.PROJECT_NAME, lifespan=lifespan)
    app.include_router(v1_router)

    @app.get("/ping", tags=["health"])
    async def ping():
        return {"message": "pong"}

    return app


app = create_app()
