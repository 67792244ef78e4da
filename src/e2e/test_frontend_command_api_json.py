import pytest
from backend.engine import Engine
from frontend.web import app as flask_app

@pytest.fixture
def client(monkeypatch):
    eng = Engine(); eng.start(db_dsn="memory://")
    import frontend.web as webmod
    monkeypatch.setattr(webmod, "_engine", eng)
    yield flask_app.test_client()
    eng.shutdown()

@pytest.mark.e2e
def test_session_command_round(client):
    rv = client.post("/api/sessions")
    assert rv.status_code == 201
    sid = rv.get_json()["id"]

    for line in ("i h", "i i", "l", "d"):
        rv = client.post(f"/api/sessions/{sid}/command", json={"command": line})
        assert rv.status_code == 200

    data = rv.get_json()
    for key in ("ok", "quit", "message", "text", "cursor_position"):
        assert key in data
    assert data["text"] == "i" and data["cursor_position"] == 0

    rv = client.get(f"/api/sessions/{sid}")
    assert rv.get_json() == {"id": sid, "text": "i", "cursor_position": 0}

@pytest.mark.e2e
def test_invalid_and_empty_pattern_are_400(client):
    sid = client.post("/api/sessions").get_json()["id"]
    rv = client.post(f"/api/sessions/{sid}/command", json={"command": "z"})
    assert rv.status_code == 400
    assert rv.get_json()["ok"] is False

    rv = client.post(f"/api/sessions/{sid}/command", json={"command": "s  x"})
    assert rv.status_code == 400

    rv = client.post(f"/api/sessions/{sid}/command", json={"nope": 1})
    assert rv.status_code == 400

@pytest.mark.e2e
def test_quit_closes_session(client):
    sid = client.post("/api/sessions").get_json()["id"]
    rv = client.post(f"/api/sessions/{sid}/command", json={"command": "q"})
    assert rv.status_code == 200 and rv.get_json()["quit"] is True
    assert client.get(f"/api/sessions/{sid}").status_code == 404

@pytest.mark.e2e
def test_unknown_and_deleted_sessions_404(client):
    assert client.get("/api/sessions/nope").status_code == 404
    assert client.post("/api/sessions/nope/command", json={"command": "d"}).status_code == 404
    sid = client.post("/api/sessions").get_json()["id"]
    assert client.delete(f"/api/sessions/{sid}").status_code == 200
    assert client.delete(f"/api/sessions/{sid}").status_code == 404
