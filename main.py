import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from chirpy_app.api import admin, api_router
from chirpy_app.config import settings
from chirpy_app.database.connection import check_connection, init_db
from chirpy_app.errors import register_exception_handlers
from chirpy_app.metrics.hit_counter import HitCountingApp, hit_counter

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger("chirpy")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Fail fast if the database is unreachable, then create tables."""
    logger.info("Starting %s %s (platform=%s)", settings.app_name, settings.app_version, settings.platform)
    check_connection()
    init_db()
    logger.info("Serving static files from %s under /app/", settings.filepath_root)
    yield
    logger.info("Shutting down")


# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Chirpy: users, short posts and a hit counter",
    lifespan=lifespan,
)

register_exception_handlers(app)


######## Include routers
app.include_router(api_router)
# Same endpoints under /api for clients using the original paths
app.include_router(api_router, prefix="/api", include_in_schema=False)
app.include_router(admin.router)

######## Static files (every request is counted)
app.mount(
    "/app",
    HitCountingApp(StaticFiles(directory=settings.filepath_root, html=True), hit_counter),
    name="app",
)


if __name__ == "__main__":
    uvicorn.run(app, host=settings.host, port=settings.port)
