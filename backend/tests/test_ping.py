def test_ping(client):
    r = client.get("/ping")
    assert r.status_code == 200
    assert r.json() == {"pong": True}

def test_healthz(client):
    r = client.get("/healthz")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"

def test_version(client):
    r = client.get("/version")
    assert r.status_code == 200
    assert "version" in r.json()

def test_request_id_is_echoed(client):
    r = client.get("/ping", headers={"X-Request-ID": "abc123"})
    assert r.headers["X-Request-ID"] == "abc123"
