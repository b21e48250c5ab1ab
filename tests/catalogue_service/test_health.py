from shared.core import HealthStatus, ServiceHealth


def test_health(client):
    resp = client.get("/health")

    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "pass"
    assert body["service"] == "catalogue-service"


def test_liveness(client):
    assert client.get("/health/live").json() == {"status": "alive"}


def test_readiness_checks_database(client, monkeypatch):
    healthy = {"status": HealthStatus.PASS, "componentType": "system"}
    monkeypatch.setattr(ServiceHealth, "_check_disk_space", lambda self: healthy)
    monkeypatch.setattr(ServiceHealth, "_check_memory", lambda self: healthy)

    resp = client.get("/health/ready")

    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "pass"
    assert body["checks"]["database:connectivity"]["status"] == "pass"


def test_readiness_fails_when_database_is_down(client, monkeypatch):
    healthy = {"status": HealthStatus.PASS, "componentType": "system"}
    monkeypatch.setattr(ServiceHealth, "_check_disk_space", lambda self: healthy)
    monkeypatch.setattr(ServiceHealth, "_check_memory", lambda self: healthy)
    monkeypatch.setattr(
        ServiceHealth, "_check_database",
        lambda self: {"status": HealthStatus.FAIL, "componentType": "datastore", "output": "down"},
    )

    resp = client.get("/health/ready")

    assert resp.status_code == 503
    assert resp.json()["status"] == "fail"


def test_startup_requires_products_table(client):
    resp = client.get("/health/startup")

    assert resp.status_code == 200
    assert resp.json()["checks"]["database:schema"]["status"] == "pass"


def test_metrics(client):
    body = client.get("/metrics").json()
    assert "uptime_seconds" in body
    assert body["service"] == "catalogue-service"


def test_info_lists_products_endpoint(client):
    assert client.get("/info").json()["endpoints"]["products"] == "/api/products"
