"""FastAPI server setup for Portline."""

import os
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from jinja2 import TemplateError

from .routers import keys, ports
from ..context import AppContext

logger = logging.getLogger(__name__)

API_DIR = os.path.dirname(__file__)
STATIC_PATH = os.path.join(API_DIR, "static")
TEMPLATES_PATH = os.path.join(API_DIR, "templates")


def create_api_app(context: AppContext) -> FastAPI:
    """Create the FastAPI application around an application context."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Manage application lifecycle."""
        logger.info("API app starting...")
        yield
        logger.info("API app shutting down...")
        context.close()

    app = FastAPI(
        title="Portline",
        description="Ports in use by containers on this host",
        version=context.version,
        lifespan=lifespan
    )

    app.state.context = context

    templates = Jinja2Templates(directory=TEMPLATES_PATH)

    app.mount("/static", StaticFiles(directory=STATIC_PATH), name="static")

    @app.get("/", include_in_schema=False)
    async def read_root(request: Request):
        """Serve the main web interface."""
        try:
            return templates.TemplateResponse(request, "index.html", {"version": context.version})
        except TemplateError as e:
            logger.error(f"Template error: {e}")
            raise HTTPException(500, "Failed to load template")

    app.include_router(ports.create_router(), prefix="/api")
    app.include_router(keys.create_router(), prefix="/api")
    logger.info("API routers included at /api")

    return app
