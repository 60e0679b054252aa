from playerkit.core.observability.metrics import reset_metrics


def test_metrics_snapshot_counts_renders(client):
    reset_metrics()
    client.get("/health/live")
    client.post("/api/v1/players/render", json={"config": {"play": "http://x/a.mp3"}})

    r = client.get("/api/v1/metrics/snapshot")
    assert r.status_code == 200
    body = r.json()
    assert isinstance(body["requests"], dict)
    assert body["requests_total"] >= 2
    assert body["health_live"] == 1
    assert body["player_render_rendered"] == 1


def test_prometheus_export(client):
    client.post("/api/v1/players/render", json={"config": {"play": "http://x/a.mp3"}})
    r = client.get("/metrics")
    assert r.status_code == 200
    assert "playerkit_player_renders_total" in r.text


def test_readiness(client):
    r = client.get("/health/ready")
    assert r.status_code == 200
    assert r.json() == {"status": "ready"}
