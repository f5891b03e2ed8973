from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .graphql import create_graphql_router
from .links import LinkStore
from .middleware.request_logging import LoggingMiddleware
from .routes.system import router as system_router
from .settings import Settings

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"


def setup_logging(settings: Settings) -> None:
    level_map = {
        0: logging.CRITICAL + 1,
        1: logging.INFO,
        2: logging.DEBUG,
    }
    level = level_map.get(settings.log_level, logging.DEBUG)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(level)

    if settings.log_file:
        log_path = Path(settings.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_path, encoding="utf-8")
    else:
        handler = logging.StreamHandler()

    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.setLevel(level)
    root_logger.addHandler(handler)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"linkfeed {__version__} serving {len(app.state.store)} links at /graphql")
    yield
    logger.info("linkfeed shutting down")


def build_app(
    settings: Optional[Settings] = None,
    *,
    logging_enabled: bool = True,
    store: Optional[LinkStore] = None,
) -> FastAPI:
    """
    Create the link feed application.

    Every call gets its own store (seeded unless ``store`` is given), so two
    applications never share links.
    """
    if settings is None:
        settings = Settings.from_env()
    if logging_enabled:
        setup_logging(settings)
    if store is None:
        store = LinkStore.seeded()

    app = FastAPI(title="linkfeed", version=__version__, lifespan=lifespan)
    app.state.store = store
    app.state.settings = settings

    app.include_router(system_router)
    app.include_router(
        create_graphql_router(
            store,
            decorate_descriptions=settings.decorate_descriptions,
            graphiql=settings.graphiql,
        ),
        prefix="/graphql",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )
    # Added last so it runs first and also sees CORS preflights
    if logging_enabled:
        app.add_middleware(LoggingMiddleware)

    if settings.decorate_descriptions:
        logger.info("Link descriptions are decorated on read")
    return app
