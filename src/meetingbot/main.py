# src/meetingbot/main.py
"""
MeetingBot API application.

Run with:
    uvicorn meetingbot.main:app --port 3000
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI

# Load environment variables from .env file
load_dotenv()

from .api.errors import register_exception_handlers
from .auth import AuthMiddleware
from .config import AppConfig, get_config
from .core.container import Container
from .domains.dashboard import router as dashboard_router
from .domains.meetings import router as meetings_router
from .domains.tasks import router as tasks_router
from .middleware import RequestLoggingMiddleware

logger = logging.getLogger(__name__)


def create_app(container: Optional[Container] = None, config: Optional[AppConfig] = None) -> FastAPI:
    """
    Build the FastAPI application.
    
    Args:
        container: Pre-built container (tests inject their own store and cache)
        config: Configuration; defaults to the container's or the global one
    """
    if config is None:
        config = container.config if container is not None else get_config()
    if container is None:
        container = Container(config)
    
    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await container.startup()
        logger.info(f"🚀 MeetingBot API ready (environment: {config.environment})")
        yield
        await container.shutdown()
    
    app = FastAPI(title="MeetingBot API", lifespan=lifespan)
    app.state.container = container
    
    # Middleware added last runs first: log, then authenticate
    app.add_middleware(AuthMiddleware, secret=config.jwt_secret)
    app.add_middleware(RequestLoggingMiddleware)
    
    register_exception_handlers(app)
    
    app.include_router(meetings_router)
    app.include_router(tasks_router)
    app.include_router(dashboard_router)
    
    @app.get("/")
    async def root():
        return {"message": "Welcome to the MeetingBot API"}
    
    return app


app = create_app()
