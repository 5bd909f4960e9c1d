import logging

from fastapi import FastAPI

from app.core.config import settings
from app.core.database import create_tables
from app.core.errors import register_error_handlers
from app.core.logger import register_logger
from app.api.posts import router as posts_router
from app.api.legacy import router as legacy_router


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.PROJECT_NAME,
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # -------------------------------------
    # Logging & errors
    # -------------------------------------
    register_logger(app)
    register_error_handlers(app)

    # -------------------------------------
    # Routing
    # -------------------------------------
    app.include_router(posts_router)
    if settings.LEGACY_ROUTES:
        app.include_router(legacy_router)

    @app.get("/health", include_in_schema=False)
    async def health():
        return {"status": "healthy"}

    # -------------------------------------
    # Startup event
    # -------------------------------------
    @app.on_event("startup")
    async def startup_event():
        logging.info("Server starting...")
        if settings.DEBUG:
            logging.info("DEBUG MODE: creating DB tables (dev mode)")
            await create_tables()

    @app.on_event("shutdown")
    async def shutdown_event():
        logging.info("Server shutting down...")

    return app


app = create_app()
