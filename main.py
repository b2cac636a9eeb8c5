# main.py
import logging
import sys
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from api_catalog import SERVER_ERROR, catalog_router
from services import config
from services.catalog_store import CatalogStore, StoreUnavailable, connect_store
from services.logging_config import setup_logging

logger = logging.getLogger("main")

SERVICE_INFO = {
    "message": "API de Autos - HubsAutos",
    "version": config.API_VERSION,
    "endpoints": {
        "brands": "/api/brands",
        "models": "/api/models?brand=",
        "versions": "/api/versions?brand=&model=",
        "autoInfo": "/api/auto-info?brand=&model=&version=",
        "modelVersions": "/api/model-versions?brand=",
        "health": "/health",
    },
    "description": "API para consultar marcas, modelos y versiones de autos desde MongoDB",
    "examples": {
        "brands": "/api/brands",
        "models": "/api/models?brand=AUDI",
        "versions": "/api/versions?brand=AUDI&model=A1",
        "autoInfo": "/api/auto-info?brand=AUDI&model=A1&version=1.4%20TFSi%20MT",
        "modelVersions": "/api/model-versions?brand=AUDI",
    },
}

# -----------------------------
# FastAPI setup
# -----------------------------
def create_app(store: Optional[CatalogStore] = None) -> FastAPI:
    """
    Build the app. With no `store`, the lifespan hook connects to MongoDB
    before the first request; a failed connection aborts startup.
    """
    setup_logging(config.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owned = None
        if getattr(app.state, "store", None) is None:
            owned = connect_store()
            app.state.store = owned
        try:
            yield
        finally:
            if owned is not None:
                owned.close()

    app = FastAPI(title="HubsAutos Catalog API", version=config.API_VERSION, lifespan=lifespan)
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["*"],
    )

    # every error leaves as {success: false, error: ...}
    @app.exception_handler(StarletteHTTPException)
    async def http_error(request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"success": False, "error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    # anything a router did not map, e.g. a bug or an unexpected driver error
    @app.exception_handler(Exception)
    async def unhandled_error(request, exc: Exception):
        logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
        return JSONResponse(status_code=500, content={"success": False, "error": SERVER_ERROR})

    app.include_router(catalog_router)   # /api/*

    @app.get("/")
    def index():
        return SERVICE_INFO

    @app.get("/health")
    def health():
        ts = datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
        return {"status": "OK", "timestamp": ts}

    return app

app = create_app()

# -----------------------------
# Entry point
# -----------------------------
def main() -> None:
    setup_logging(config.LOG_LEVEL)
    try:
        store = connect_store()
    except StoreUnavailable:
        logger.critical("Catalog store unavailable, exiting")
        sys.exit(1)

    logger.info("Server listening on %s:%s", config.HOST, config.PORT)
    try:
        uvicorn.run(create_app(store), host=config.HOST, port=config.PORT, log_level=config.LOG_LEVEL.lower())
    finally:
        store.close()


if __name__ == "__main__":
    main()
