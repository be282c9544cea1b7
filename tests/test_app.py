from pathlib import Path

from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from taskflow.core.config import settings
from taskflow.routers import tasks as tasks_router
from taskflow.routers.spa import resolve_asset


def test_healthz(client):
    response = client.get("/health/z")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}

def test_malformed_json_rejected(client):
    """JSON invalide -> 400 avant le handler"""
    for path in ("/api/tasks", "/api/categories", "/api/notes", "/api/users"):
        response = client.post(path, content="invalid json", headers={"Content-Type": "application/json"})
        assert response.status_code == 400
        assert response.json() == {"error": "Malformed JSON in request body"}

def test_no_cache_header(client):
    response = client.get("/api/tasks")
    assert response.headers["Cache-Control"] == "no-cache, no-store, must-revalidate"

def test_error_bodies_use_error_key(client):
    response = client.patch("/api/tasks")
    assert response.status_code == 405
    assert "error" in response.json()

def test_frontend_fallback_without_public_dir(client, monkeypatch, tmp_path):
    monkeypatch.setattr(settings, "PUBLIC_DIR", str(tmp_path / "absent"))
    response = client.get("/dashboard")
    assert response.status_code == 404
    assert response.json() == {"error": "Not found"}

def test_frontend_static_and_fallback(client, monkeypatch, tmp_path):
    (tmp_path / "index.html").write_text("<html>TaskFlow</html>")
    (tmp_path / "js").mkdir()
    (tmp_path / "js" / "app.js").write_text("console.log('ok');")
    monkeypatch.setattr(settings, "PUBLIC_DIR", str(tmp_path))

    assert "console.log" in client.get("/js/app.js").text
    assert "TaskFlow" in client.get("/").text
    assert "TaskFlow" in client.get("/calendar/2025").text

def test_resolve_asset_stays_in_public_dir(tmp_path):
    public = tmp_path / "public"
    public.mkdir()
    (tmp_path / "secret.txt").write_text("secret")
    (public / "style.css").write_text("body {}")

    assert resolve_asset(public, "style.css") == (public / "style.css").resolve()
    assert resolve_asset(public, "../secret.txt") is None
    assert resolve_asset(public, "missing.css") is None

def test_store_error_returns_json_500(client, monkeypatch):
    """Une erreur de la base hors stats renvoie aussi {"error": ...}"""
    def broken_list(*args, **kwargs):
        raise OperationalError("SELECT", {}, Exception("database is locked"))

    monkeypatch.setattr(tasks_router, "list_tasks", broken_list)

    response = client.get("/api/tasks")
    assert response.status_code == 500
    assert response.json() == {"error": "database is locked"}
    assert response.headers["Cache-Control"] == "no-cache, no-store, must-revalidate"

def test_delete_commit_failure_rolls_back(client, monkeypatch):
    task = client.post("/api/tasks", json={"title": "Reste là"}).json()

    def broken_commit(self):
        raise OperationalError("DELETE", {}, Exception("disk I/O error"))

    monkeypatch.setattr(Session, "commit", broken_commit)
    response = client.delete(f"/api/tasks/{task['_id']}")
    assert response.status_code == 500
    assert response.json() == {"error": "disk I/O error"}

    monkeypatch.undo()
    assert client.get(f"/api/tasks/{task['_id']}").status_code == 200
