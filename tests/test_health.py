from fastapi.testclient import TestClient

from civiltech.main import create_app


def test_health_with_full_schema(client):
    body = client.get("/api/health").json()
    assert body["status"] == "ok"
    assert body["database"] == "connected"
    assert body["optional_tables"] == {"gis": True, "documents": True}


def test_health_with_core_schema(core_only_client):
    assert core_only_client.get("/api/health").json()["optional_tables"] == {"gis": False, "documents": False}


def test_request_id_is_echoed(client):
    res = client.get("/api/health", headers={"X-Request-ID": "abc-123"})
    assert res.headers["X-Request-ID"] == "abc-123"
    assert client.get("/api/health").headers["X-Request-ID"]


def test_upload_dir_created_on_startup_not_on_build(settings, engine, upload_dir):
    app = create_app(settings=settings, engine=engine)
    assert not upload_dir.exists()
    with TestClient(app):
        assert upload_dir.is_dir()
