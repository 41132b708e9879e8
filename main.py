"""
TaskMaster API — application entry point.
"""

from __future__ import annotations

import logging
import sys

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.boards import router as boards_router
from api.middleware import register_exception_handlers, register_middleware
from api.system import API_NAME, API_VERSION, DOCS_URL
from api.system import router as system_router
from api.tasks import router as tasks_router
from auth.routes import router as auth_router
from config.settings import config
from database.session import init_models

logging.basicConfig(
    level=logging.DEBUG if config.debug else logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s — %(message)s",
    stream=sys.stdout,
)
for _noisy in ("aiosqlite", "asyncio", "httpcore", "httpx", "sqlalchemy.engine"):
    logging.getLogger(_noisy).setLevel(logging.WARNING)
logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    app = FastAPI(
        title=API_NAME,
        version=API_VERSION,
        description="Boards and tasks behind bearer-token authentication.",
        docs_url=DOCS_URL,
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_middleware(app)
    register_exception_handlers(app)

    # Routes
    app.include_router(system_router)
    app.include_router(auth_router, prefix="/api")
    app.include_router(boards_router, prefix="/api")
    app.include_router(tasks_router, prefix="/api")

    @app.on_event("startup")
    async def on_startup():
        logger.info("Ensuring database schema…")
        await init_models()
        logger.info("Application ready to accept requests (docs at %s).", DOCS_URL)

    return app


app = create_app()

if __name__ == "__main__":
    try:
        uvicorn.run(
            "main:app",
            host=config.host,
            port=config.port,
            reload=config.debug,
            log_level="debug" if config.debug else "info",
        )
    except Exception:
        logger.exception("Server failed to start")
        sys.exit(1)
