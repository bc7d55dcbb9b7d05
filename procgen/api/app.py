"""FastAPI application factory; the lifespan owns the GalaxySession."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from procgen import __version__
from procgen.api.dependencies import set_session
from procgen.api.routes import api_router
from procgen.config import GeneratorConfig
from procgen.session import GalaxySession
from procgen.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def create_app(config: GeneratorConfig | None = None) -> FastAPI:
    """Build the API for one campaign seed."""
    config = config or GeneratorConfig()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        setup_logging(config.log_level)
        set_session(GalaxySession(config))
        logger.info("Serving galaxy for seed %d", config.global_seed)
        try:
            yield
        finally:
            set_session(None)

    app = FastAPI(title="Galaxy Procgen", version=__version__, lifespan=lifespan)
    app.include_router(api_router)
    return app
