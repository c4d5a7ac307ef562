"""
Tests for the HTTP interface.

The app's store, registry and scripts directory are swapped for per-test
instances through FastAPI dependency overrides.
"""

import pytest
from fastapi.testclient import TestClient

from backend.api import app
from backend.config import config
from backend.libs.dependencies import get_bots_dir, get_registry, get_store

from conftest import LONG_RUNNING_SCRIPT, PYTHON_LAUNCHER, SHORT_SCRIPT, wait_until


@pytest.fixture
def client(store, registry, bots_dir, monkeypatch):
    monkeypatch.setattr(config.runtime, "python_command", PYTHON_LAUNCHER)
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_registry] = lambda: registry
    app.dependency_overrides[get_bots_dir] = lambda: bots_dir
    yield TestClient(app)
    app.dependency_overrides.clear()


def upload(client, source=LONG_RUNNING_SCRIPT, username="alice", bot_name="echoBot"):
    response = client.post(
        "/api/bot/upload",
        data={"username": username, "bot_name": bot_name},
        files={"bot_file": ("echo.py", source, "text/x-python")},
    )
    assert response.status_code == 200
    return response.json()["bot_id"]


# --------------------------------------------------------------------------- #
# Root and core endpoints
# --------------------------------------------------------------------------- #


def test_root_endpoint(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json() == {"success": True, "status": "Bot Hosting API is running"}
    assert "x-process-time" in response.headers


def test_healthcheck(client):
    response = client.get("/core/healthcheck")

    assert response.status_code == 200
    assert response.json()["status"] == "OK"


def test_cors_allows_any_origin(client):
    response = client.get("/", headers={"Origin": "http://example.com"})

    assert response.headers["access-control-allow-origin"] == "*"


# --------------------------------------------------------------------------- #
# Upload and listing
# --------------------------------------------------------------------------- #


def test_upload_and_list(client):
    response = client.post(
        "/api/bot/upload",
        data={"username": "alice", "bot_name": "echoBot"},
        files={"bot_file": ("echo.py", b"print('hi')\n", "text/x-python")},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["bot_id"].startswith("alice_echoBot_")
    assert data["message"] == "Bot uploaded successfully"

    listing = client.get("/api/bots/alice").json()
    assert listing["success"] is True
    assert len(listing["bots"]) == 1
    bot = listing["bots"][0]
    assert bot["id"] == data["bot_id"]
    assert bot["name"] == "echoBot"
    assert bot["username"] == "alice"
    assert bot["file_type"] == "py"
    assert bot["status"] == "stopped"
    assert "created_at" in bot
    assert "started_at" not in bot


def test_list_unknown_owner_is_empty(client):
    response = client.get("/api/bots/nobody")

    assert response.status_code == 200
    assert response.json() == {"success": True, "bots": []}


@pytest.mark.parametrize(
    "data, files",
    [
        ({"bot_name": "echoBot"}, {"bot_file": ("echo.py", b"x", "text/plain")}),
        ({"username": "alice"}, {"bot_file": ("echo.py", b"x", "text/plain")}),
        ({"username": "alice", "bot_name": "echoBot"}, None),
        (
            {"username": "alice", "bot_name": "echoBot", "bot_file": "not a file"},
            None,
        ),
    ],
)
def test_upload_missing_fields(client, store, data, files):
    response = client.post("/api/bot/upload", data=data, files=files)

    assert response.status_code == 400
    assert response.json() == {"success": False, "message": "Missing required fields"}
    assert store.load() == {}


# --------------------------------------------------------------------------- #
# Lifecycle
# --------------------------------------------------------------------------- #


def test_start_status_stop(client, registry):
    bot_id = upload(client)

    response = client.post(f"/api/bot/start/{bot_id}")
    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Bot started successfully"}
    assert registry.is_running(bot_id)

    response = client.get(f"/api/bot/status/{bot_id}")
    assert response.json() == {
        "success": True,
        "status": "running",
        "cpu": 0,
        "memory": 0,
    }
    assert '"cpu":0,' in response.text

    response = client.post(f"/api/bot/stop/{bot_id}")
    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Bot stopped successfully"}
    assert not registry.is_running(bot_id)
    assert client.get(f"/api/bot/status/{bot_id}").json()["status"] == "stopped"


def test_double_start(client):
    bot_id = upload(client)
    client.post(f"/api/bot/start/{bot_id}")

    response = client.post(f"/api/bot/start/{bot_id}")

    assert response.status_code == 400
    assert response.json() == {"success": False, "message": "Bot already running"}


def test_stop_not_running(client):
    bot_id = upload(client)

    response = client.post(f"/api/bot/stop/{bot_id}")

    assert response.status_code == 400
    assert response.json() == {"success": False, "message": "Bot not running"}


def test_natural_exit_is_reported_as_stopped(client, registry, store):
    bot_id = upload(client, source=SHORT_SCRIPT)
    client.post(f"/api/bot/start/{bot_id}")

    assert wait_until(lambda: not registry.is_running(bot_id))

    assert client.get(f"/api/bot/status/{bot_id}").json()["status"] == "stopped"
    assert client.get("/api/bots/alice").json()["bots"][0]["status"] == "stopped"
    assert store.load()[bot_id].status.value == "running"


def test_logs(client):
    bot_id = upload(client)
    client.post(f"/api/bot/start/{bot_id}")

    response = client.get(f"/api/bot/logs/{bot_id}")

    assert response.status_code == 200
    logs = response.json()["logs"]
    assert logs.startswith("Bot: echoBot\nStatus: Running\nCreated: ")
    assert "Last started: " in logs


def test_delete_running_bot(client, registry, store):
    bot_id = upload(client)
    client.post(f"/api/bot/start/{bot_id}")
    process = registry.get(bot_id)

    response = client.delete(f"/api/bot/delete/{bot_id}")

    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Bot deleted successfully"}
    assert process.wait(timeout=5) is not None
    assert store.load() == {}
    assert client.get(f"/api/bot/status/{bot_id}").status_code == 404


@pytest.mark.parametrize(
    "method, path",
    [
        ("post", "/api/bot/start/{bot_id}"),
        ("post", "/api/bot/stop/{bot_id}"),
        ("delete", "/api/bot/delete/{bot_id}"),
        ("get", "/api/bot/logs/{bot_id}"),
        ("get", "/api/bot/status/{bot_id}"),
    ],
)
def test_unknown_bot_is_not_found(client, method, path):
    response = getattr(client, method)(path.format(bot_id="ghost_bot_0"))

    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Bot not found"}


# --------------------------------------------------------------------------- #
# Unexpected failures
# --------------------------------------------------------------------------- #


def test_corrupt_record_file_is_a_500(client, store):
    store.records_file.parent.mkdir(parents=True, exist_ok=True)
    store.records_file.write_text("{not json")

    response = client.get("/api/bots/alice")

    assert response.status_code == 500
    data = response.json()
    assert data["success"] is False
    assert data["message"]


# --------------------------------------------------------------------------- #
# Application lifespan
# --------------------------------------------------------------------------- #


def test_lifespan_initializes_storage_and_stops_bots_on_shutdown(tmp_path, monkeypatch):
    records_file = tmp_path / "state" / "bots.json"
    bots_dir = tmp_path / "scripts"
    monkeypatch.setattr(config.storage, "records_file", records_file)
    monkeypatch.setattr(config.storage, "bots_dir", bots_dir)
    monkeypatch.setattr(config.runtime, "python_command", PYTHON_LAUNCHER)
    app.dependency_overrides.clear()

    with TestClient(app) as lifespan_client:
        assert records_file.exists()
        assert bots_dir.is_dir()

        bot_id = upload(lifespan_client)
        assert (bots_dir / "alice" / f"{bot_id}.py").exists()
        lifespan_client.post(f"/api/bot/start/{bot_id}")
        process = app.state.registry.get(bot_id)
        assert process is not None

    assert process.wait(timeout=5) is not None
    assert app.state.registry.count() == 0
