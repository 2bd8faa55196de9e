import argparse
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from ..logging_setup import setup_logging
from .api.v1 import auth, health, tasks
from .core.config import settings
from .db.session import init_db

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(level=settings.LOG_LEVEL)
    init_db()
    logger.info("%s started prefix=%s", settings.APP_NAME, settings.API_V1_PREFIX)
    yield


app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)
app.include_router(health.router, prefix=settings.API_V1_PREFIX)
app.include_router(auth.router,   prefix=settings.API_V1_PREFIX)
app.include_router(tasks.router,  prefix=settings.API_V1_PREFIX)


def run() -> None:
    """Console entry point: serve the store with uvicorn."""
    import uvicorn

    parser = argparse.ArgumentParser(description="Run the Taskboard store API")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    parser.add_argument("--reload", action="store_true")
    args = parser.parse_args()

    uvicorn.run("taskboard.store.main:app", host=args.host, port=args.port, reload=args.reload)


if __name__ == "__main__":
    run()
