# tests/conftest.py
import mongomock
import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from main import create_app
from services.catalog_store import CatalogStore

LISTINGS = [
    {"_id": ObjectId("000000000000000000000001"), "Marca": "AUDI", "Modelo": "A1", "Submodelo": "1.4 TFSi MT"},
    {"_id": ObjectId("000000000000000000000002"), "Marca": "AUDI", "Modelo": "A1", "Submodelo": "1.0 TFSi"},
    {"_id": ObjectId("000000000000000000000003"), "Marca": "AUDI", "Modelo": "A1", "Submodelo": "   "},
    {"_id": ObjectId("000000000000000000000004"), "Marca": "AUDI", "Modelo": "A3", "Submodelo": "2.0 TDI"},
    {"_id": ObjectId("000000000000000000000005"), "Marca": " Audi ", "Modelo": "Q5", "Submodelo": "45 TFSI"},
    {"_id": ObjectId("000000000000000000000006"), "Marca": "BMW", "Modelo": "320i", "Submodelo": "Sport"},
    {"_id": ObjectId("000000000000000000000007"), "Marca": "Alfa Romeo", "Modelo": "Giulia", "Submodelo": "2.0 T"},
    {"_id": ObjectId("000000000000000000000008"), "Marca": "", "Modelo": "Orphan", "Submodelo": "X"},
    {"_id": ObjectId("000000000000000000000009"), "Marca": "AUDI", "Modelo": "A1", "Submodelo": "1.4 TFSi MT"},
    {"_id": ObjectId("00000000000000000000000a"), "Marca": "A.DI", "Modelo": "Fake", "Submodelo": "Dot"},
]

@pytest.fixture
def collection():
    coll = mongomock.MongoClient()["hubsautos"]["formAutos"]
    coll.insert_many([dict(d) for d in LISTINGS])
    return coll

@pytest.fixture
def store(collection):
    # mongomock cursors don't take a server-side time limit
    return CatalogStore(collection=collection, max_time_ms=0)

@pytest.fixture
def client(store):
    with TestClient(create_app(store)) as c:
        yield c
