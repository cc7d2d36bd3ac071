"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from logoforge.config import settings

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.logoforge_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)


def create_app() -> FastAPI:
    app = FastAPI(
        title="LogoForge",
        description="Deterministic generative logo engine: seeded algorithms, abstract icons and a designer pipeline",
        version="0.1.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Import every algorithm module so @algorithm decorators fire
    from logoforge.engine.registry import load_algorithms

    registry = load_algorithms()
    logging.getLogger(__name__).info("Registered %d base algorithms", registry.count)

    from logoforge.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
