"""
Upgrade Types API
Read-only catalog of upgrade targets and their csv keys.
"""

import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.api.v1.routers import api_router
from backend.config import Settings, parse_log_level

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str) -> None:
    logging.basicConfig(format=LOG_FORMAT)
    logging.getLogger().setLevel(parse_log_level(level))


def create_app(settings: Settings) -> FastAPI:
    app = FastAPI(
        title="Upgrade Types API",
        description="Upgrade targets (ability, item, weapon) and their csv keys.",
        version="0.1.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router, prefix="/api/v1")

    @app.get("/", tags=["Root"])
    async def read_root():
        return {"message": "Upgrade types API is running."}

    return app


def build_app() -> FastAPI:
    """App factory for uvicorn; reads settings from the environment."""
    return create_app(Settings.from_env())


app = create_app(Settings())


def run() -> None:
    settings = Settings.from_env()
    configure_logging(settings.log_level)
    uvicorn.run("backend.main:build_app", factory=True, host=settings.host, port=settings.port, reload=False)


if __name__ == "__main__":
    run()
