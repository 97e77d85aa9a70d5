"""
Production FastAPI Application

Run with: granian src.main:app --interface asgi --host 0.0.0.0 --port 8100
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from src.platform.app_factory import create_app
from src.platform.config.core_setting import settings
from src.platform.config.di import cleanup, container, setup
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.database.db_setting import create_db_and_tables, dispose_engine
from src.platform.logging.loguru_io import Logger
from src.platform.state.redis_client import redis_client


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: startup and shutdown."""
    Logger.base.info('🚀 [Flight Service] Starting up...')

    setup()
    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Flight Service] Dependency injection wired')

    await create_db_and_tables()
    Logger.base.info('🗄️  [Flight Service] Database tables ensured')

    # Redis is only needed when it backs the result cache (fail-fast)
    uses_redis = settings.SEARCH_CACHE_ENABLED and settings.SEARCH_CACHE_BACKEND == 'redis'
    if uses_redis:
        await redis_client.initialize()
        Logger.base.info('📡 [Flight Service] Redis initialized')

    Logger.base.info('✅ [Flight Service] Ready to serve requests')

    yield

    Logger.base.info('🛑 [Flight Service] Shutting down...')

    if uses_redis:
        await redis_client.disconnect()
        Logger.base.info('📡 [Flight Service] Redis disconnected')

    await dispose_engine()
    Logger.base.info('🗄️  [Flight Service] Database engine disposed')

    container.unwire()
    cleanup()

    Logger.base.info('👋 [Flight Service] Shutdown complete')


app = create_app(lifespan=lifespan)


@app.get('/')
async def root() -> RedirectResponse:
    """Root endpoint - redirect to docs."""
    return RedirectResponse(url='/docs')
