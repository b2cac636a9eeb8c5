# api_catalog.py
import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from bson.errors import BSONError
from pymongo.errors import PyMongoError

from services import catalog
from services.catalog_store import CatalogStore

logger = logging.getLogger(__name__)

catalog_router = APIRouter(prefix="/api")

SERVER_ERROR = "Error interno del servidor"
NOT_FOUND = "No se encontró información para el auto especificado"

# driver and decode failures both count as store errors
STORE_ERRORS = (PyMongoError, BSONError)


def get_store(request: Request) -> CatalogStore:
    return request.app.state.store

def _require(**params: Optional[str]) -> Dict[str, str]:
    """Strip every param; 400 naming the ones that are missing or blank."""
    cleaned = {k: (v or "").strip() for k, v in params.items()}
    missing = [k for k, v in cleaned.items() if not v]
    if missing:
        noun = "Parámetro" if len(missing) == 1 else "Parámetros"
        verb = "es requerido" if len(missing) == 1 else "son requeridos"
        raise HTTPException(status_code=400, detail=f"{noun} {', '.join(missing)} {verb}")
    return cleaned

def _store_failed(what: str, e: Exception) -> HTTPException:
    logger.error("Error fetching %s: %s", what, e, exc_info=e)
    return HTTPException(status_code=500, detail=SERVER_ERROR)

def _listing(data: list) -> Dict[str, Any]:
    return {"success": True, "data": data, "count": len(data)}


@catalog_router.get("/brands")
def get_brands(store: CatalogStore = Depends(get_store)):
    try:
        brands = catalog.list_brands(store)
    except STORE_ERRORS as e:
        raise _store_failed("brands", e)
    return _listing([b.model_dump() for b in brands])

@catalog_router.get("/models")
def get_models(brand: Optional[str] = Query(default=None),
               store: CatalogStore = Depends(get_store)):
    p = _require(brand=brand)
    try:
        models = catalog.list_models(store, p["brand"])
    except STORE_ERRORS as e:
        raise _store_failed("models", e)
    return _listing(models)

@catalog_router.get("/versions")
def get_versions(brand: Optional[str] = Query(default=None),
                 model: Optional[str] = Query(default=None),
                 store: CatalogStore = Depends(get_store)):
    p = _require(brand=brand, model=model)
    try:
        versions = catalog.list_versions(store, p["brand"], p["model"])
    except STORE_ERRORS as e:
        raise _store_failed("versions", e)
    return _listing(versions)

@catalog_router.get("/auto-info")
def get_auto_info(brand: Optional[str] = Query(default=None),
                  model: Optional[str] = Query(default=None),
                  version: Optional[str] = Query(default=None),
                  store: CatalogStore = Depends(get_store)):
    p = _require(brand=brand, model=model, version=version)
    try:
        info = catalog.get_listing(store, p["brand"], p["model"], p["version"])
    except STORE_ERRORS as e:
        raise _store_failed("auto info", e)
    if info is None:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return {"success": True, "data": info.model_dump()}

# Older clients build their picker from brand -> "<model> - <version>" rows
@catalog_router.get("/model-versions")
def get_model_versions(brand: Optional[str] = Query(default=None),
                       store: CatalogStore = Depends(get_store)):
    p = _require(brand=brand)
    try:
        rows = catalog.list_model_versions(store, p["brand"])
    except STORE_ERRORS as e:
        raise _store_failed("model versions", e)
    return {"success": True, "data": [r.model_dump() for r in rows]}
