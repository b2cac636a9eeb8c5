# services/catalog.py
"""
Read-only lookups over the vehicle catalog collection.

All brand/model/version comparisons are whole-value and case-insensitive.
Inputs are escaped before being placed in the anchored pattern, so a value
such as "A.4" or "(" only ever matches itself.
"""
import re
from typing import Any, Dict, Iterable, List, Optional

from pydantic import BaseModel

from services.catalog_store import BRAND_FIELD, MODEL_FIELD, VERSION_FIELD, CatalogStore


class BrandItem(BaseModel):
    name: str


class ListingInfo(BaseModel):
    marca: str
    modelo: str
    version: str
    id: str


class ModelVersion(BaseModel):
    model: str
    version: str
    combined: str


def _clean(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ""

def exact_ci(value: str) -> Dict[str, str]:
    """Mongo condition: equals `value` ignoring case and surrounding whitespace."""
    return {"$regex": rf"^\s*{re.escape(value.strip())}\s*$", "$options": "i"}

def distinct_sorted(values: Iterable[Any]) -> List[str]:
    """Trim, drop empties and duplicates, then sort by code point."""
    return sorted({_clean(v) for v in values} - {""})

def _distinct(store: CatalogStore, field: str, query: Optional[Dict[str, Any]] = None) -> List[str]:
    kwargs: Dict[str, Any] = {}
    if store.max_time_ms:
        kwargs["maxTimeMS"] = store.max_time_ms
    return distinct_sorted(store.collection.distinct(field, query or {}, **kwargs))

def _find(store: CatalogStore, query: Dict[str, Any], sort: List[tuple], limit: int = 0):
    cursor = store.collection.find(query).sort(sort)
    if limit:
        cursor = cursor.limit(limit)
    if store.max_time_ms:
        cursor = cursor.max_time_ms(store.max_time_ms)
    return list(cursor)


# -----------------------------
# Lookups
# -----------------------------
def list_brands(store: CatalogStore) -> List[BrandItem]:
    return [BrandItem(name=b) for b in _distinct(store, BRAND_FIELD)]

def list_models(store: CatalogStore, brand: str) -> List[str]:
    return _distinct(store, MODEL_FIELD, {BRAND_FIELD: exact_ci(brand)})

def list_versions(store: CatalogStore, brand: str, model: str) -> List[str]:
    return _distinct(store, VERSION_FIELD, {
        BRAND_FIELD: exact_ci(brand),
        MODEL_FIELD: exact_ci(model),
    })

def get_listing(store: CatalogStore, brand: str, model: str, version: str) -> Optional[ListingInfo]:
    """
    First listing matching all three fields, or None.
    Several exact matches are possible; the lowest _id wins.
    """
    rows = _find(store, {
        BRAND_FIELD: exact_ci(brand),
        MODEL_FIELD: exact_ci(model),
        VERSION_FIELD: exact_ci(version),
    }, sort=[("_id", 1)], limit=1)
    if not rows:
        return None
    doc = rows[0]
    return ListingInfo(
        marca=_clean(doc.get(BRAND_FIELD)),
        modelo=_clean(doc.get(MODEL_FIELD)),
        version=_clean(doc.get(VERSION_FIELD)),
        id=str(doc.get("_id")),
    )

def list_model_versions(store: CatalogStore, brand: str) -> List[ModelVersion]:
    """Every listing of a brand (no dedup), ordered by model then version."""
    rows = _find(store, {BRAND_FIELD: exact_ci(brand)},
                 sort=[(MODEL_FIELD, 1), (VERSION_FIELD, 1)])
    out: List[ModelVersion] = []
    for doc in rows:
        model = doc.get(MODEL_FIELD)
        version = doc.get(VERSION_FIELD)
        model = model if isinstance(model, str) else ""
        version = version if isinstance(version, str) else ""
        out.append(ModelVersion(model=model, version=version, combined=f"{model} - {version}"))
    return out
