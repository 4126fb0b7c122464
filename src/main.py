"""
Production FastAPI Application
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from src.platform.app_factory import create_app
from src.platform.config.core_setting import settings
from src.platform.config.di import container
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.logging.loguru_io import Logger


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: startup and shutdown."""
    Logger.base.info('🚀 [Lodging Service] Starting up...')

    # Wire dependency injection for all modules
    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Lodging Service] Dependency injection wired')

    database = container.database()
    if settings.DEBUG:
        # Local runs only; deployed databases are migrated with Alembic
        await database.create_db_and_tables()

    Logger.base.info('✅ [Lodging Service] Ready to serve requests')

    yield

    Logger.base.info('🛑 [Lodging Service] Shutting down...')

    await database.dispose()

    # Unwire DI
    container.unwire()

    Logger.base.info('👋 [Lodging Service] Shutdown complete')


app = create_app(lifespan=lifespan)


@app.get('/')
async def root() -> RedirectResponse:
    """Root endpoint - redirect to docs."""
    return RedirectResponse(url='/docs')
