from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import CollectorRegistry

from . import __version__
from .config import Settings
from .db import Database
from .errors import ApiError, api_error_handler
from .metrics import RequestMetrics, build_registry
from .routes import router


@asynccontextmanager
async def lifespan(app: FastAPI):
    # a failed connection is logged; requests retry it and answer 500 meanwhile
    app.state.db.try_open()
    yield
    app.state.db.close()


def create_app(
    settings: Optional[Settings] = None,
    db: Optional[Database] = None,
    registry: Optional[CollectorRegistry] = None,
) -> FastAPI:
    settings = settings or Settings()
    registry = registry or build_registry()

    app = FastAPI(title="Employee Directory API", version=__version__, lifespan=lifespan)
    app.state.settings = settings
    app.state.db = db or Database(settings)
    app.state.registry = registry

    # Allow any frontend to call the API unless origins are configured
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(RequestMetrics.register(registry))
    app.add_exception_handler(ApiError, api_error_handler)
    app.include_router(router)
    return app
