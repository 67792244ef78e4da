import pytest
from backend.engine import Engine
from frontend.web import app as flask_app

@pytest.mark.e2e
def test_home_page_and_health(monkeypatch):
    eng = Engine(); eng.start(db_dsn="memory://")

    import frontend.web as webmod
    monkeypatch.setattr(webmod, "_engine", eng)

    client = flask_app.test_client()
    r = client.get("/")
    assert r.status_code == 200
    html = r.data.decode("utf-8", errors="ignore")
    assert "Line Editor" in html
    assert "&lt;char&gt;" in html  # help text is escaped

    client.post("/api/sessions")
    r = client.get("/api/health")
    assert r.status_code == 200
    assert r.get_json() == {"ok": True, "sessions": 1}

    eng.shutdown()

def test_health_without_engine_is_503(monkeypatch):
    import frontend.web as webmod
    monkeypatch.setattr(webmod, "_engine", None)
    r = flask_app.test_client().get("/api/health")
    assert r.status_code == 503
