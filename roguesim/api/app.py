"""FastAPI application factory with lifespan management."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from roguesim.api.dependencies import set_engine_manager
from roguesim.api.engine_manager import EngineManager
from roguesim.api.routes import api_router
from roguesim.config import SimulationConfig
from roguesim.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def create_app(config: SimulationConfig | None = None) -> FastAPI:
    """Build and return the fully-configured FastAPI application."""
    if config is None:
        config = SimulationConfig()

    _config = config

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        setup_logging(_config.log_level)
        manager = EngineManager(_config)
        set_engine_manager(manager)
        manager.start()
        logger.info("API server started — waiting for the player's first move.")
        yield
        manager.stop()
        set_engine_manager(None)
        logger.info("API server shutting down.")

    app = FastAPI(
        title="Roguesim",
        description=(
            "Turn-based roguelike with GOAP-driven monsters — state & control API.\n\n"
            "## API Groups\n\n"
            "- **State** — Live game state: time, turn holder, entities, events\n"
            "- **Map** — Terrain plus the player's visible and explored cells\n"
            "- **Control** — Player actions, single-step and reset\n"
            "- **Config** — Read-only game configuration\n"
        ),
        version="0.1.0",
        lifespan=lifespan,
        openapi_tags=[
            {"name": "State", "description": "Live game state polled by a client: time, current actor, entities, recent events."},
            {"name": "Map", "description": "RLE terrain and the player's field of view / explored memory."},
            {"name": "Control", "description": "Submit player actions, advance one step, or reset the session."},
            {"name": "Config", "description": "Read-only configuration parameters (arena size, vision radii, action costs, budgets)."},
        ],
    )

    # CORS — allow any origin in dev
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # API routes
    app.include_router(api_router)

    return app
