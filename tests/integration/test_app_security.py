def test_cors_allows_only_frontend_origin(client):
    ok = client.get("/health", headers={"origin": "http://localhost:8082"})
    assert ok.headers.get("access-control-allow-origin") == "http://localhost:8082"
    assert ok.headers.get("access-control-allow-credentials") == "true"

    foreign = client.get("/health", headers={"origin": "https://evil.test"})
    assert "access-control-allow-origin" not in foreign.headers


def test_unknown_host_is_rejected(client):
    assert client.get("/health").status_code == 200
    assert client.get("/health", headers={"host": "evil.test"}).status_code == 400
