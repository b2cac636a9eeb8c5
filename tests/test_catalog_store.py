import mongomock
import pytest
from fastapi.testclient import TestClient

import main
from services import config
from services.catalog_store import CatalogStore, StoreUnavailable, connect_store

# nothing listens on port 1
DEAD_URI = "mongodb://127.0.0.1:1/hubsautos"

def test_connect_store_fails_fast():
    with pytest.raises(StoreUnavailable):
        connect_store(uri=DEAD_URI, timeout_ms=100)

def test_main_exits_when_store_down(monkeypatch):
    def boom():
        raise StoreUnavailable("down")
    monkeypatch.setattr(main, "connect_store", boom)
    with pytest.raises(SystemExit) as exc:
        main.main()
    assert exc.value.code == 1

def test_startup_aborts_when_store_down(monkeypatch):
    def boom():
        raise StoreUnavailable("down")
    monkeypatch.setattr(main, "connect_store", boom)
    with pytest.raises(StoreUnavailable):
        with TestClient(main.create_app()):
            pass


class FakeClient:
    closed = False

    def close(self):
        self.closed = True

def test_startup_connects_and_closes_on_shutdown(monkeypatch):
    fake = FakeClient()
    coll = mongomock.MongoClient()["hubsautos"]["formAutos"]
    coll.insert_one({"Marca": "AUDI", "Modelo": "A1", "Submodelo": "1.4 TFSi MT"})
    owned = CatalogStore(collection=coll, client=fake, max_time_ms=0)
    monkeypatch.setattr(main, "connect_store", lambda: owned)

    app = main.create_app()
    with TestClient(app) as c:
        assert app.state.store is owned
        assert c.get("/api/brands").json()["data"] == [{"name": "AUDI"}]
        assert fake.closed is False
    assert fake.closed is True

@pytest.mark.parametrize("raw,expected", [
    ("verbose", "INFO"),
    ("notset", "INFO"),
    (" debug ", "DEBUG"),
    ("warning", "WARNING"),
])
def test_log_level_falls_back_to_info(monkeypatch, raw, expected):
    monkeypatch.setenv("LOG_LEVEL", raw)
    assert config._env_log_level("LOG_LEVEL", "INFO") == expected
