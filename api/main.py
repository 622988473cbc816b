"""FastAPI application factory and server entry point."""

from __future__ import annotations

import logging

from fastapi import FastAPI

from classifier import CategorizationOrchestrator, build_tables
from shared.config import find_config_file

from .config import APIConfig, load_config
from .routes import router

logger = logging.getLogger(__name__)


def create_app(config: APIConfig | None = None) -> FastAPI:
    """Create the API application.

    The classifier tables are compiled once here and shared by every
    request through `app.state`.

    Args:
        config: API configuration. Loaded from the environment and the
            nearest classifier.config.yaml when omitted.
    """
    if config is None:
        config = load_config(find_config_file())

    app = FastAPI(title="Question Classifier", debug=config.debug)
    app.state.config = config
    app.state.orchestrator = CategorizationOrchestrator(build_tables())
    app.include_router(router)
    return app


def run() -> None:
    """Serve the API with uvicorn using the loaded configuration."""
    import uvicorn

    config = load_config(find_config_file())
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Starting question classifier API on %s:%d", config.host, config.port)
    uvicorn.run(create_app(config), host=config.host, port=config.port, log_level=config.log_level.lower())


if __name__ == "__main__":
    run()
