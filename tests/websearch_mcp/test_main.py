import pytest
from fastapi.testclient import TestClient

from websearch_mcp.main import create_app
from websearch_mcp.api.response.response import NOT_FOUND_MESSAGE

client = TestClient(create_app())

def test_root_reports_status():
    response = client.get("/")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/plain")
    assert response.text == "Web Search Agent is running. Use the /mcp endpoint to interact."

def test_root_accepts_post():
    response = client.post("/", json={"hello": "world"})

    assert response.status_code == 200
    assert "Use the /mcp endpoint" in response.text

@pytest.mark.parametrize("path", ["/unknown", "/mcp/", "/mcp/extra", "/docs", "/openapi.json", "/v1/chat/completions"])
def test_other_paths_are_not_found(path):
    response = client.get(path)

    assert response.status_code == 404
    assert response.headers["content-type"].startswith("text/plain")
    assert response.text == NOT_FOUND_MESSAGE

def test_root_uses_configured_server_name(monkeypatch):
    monkeypatch.setenv("MCP_SERVER_NAME", "Brave Agent")
    from websearch_mcp.config import get_settings
    get_settings.cache_clear()

    named_client = TestClient(create_app())
    response = named_client.get("/")

    assert response.text == "Brave Agent is running. Use the /mcp endpoint to interact."

def test_cors_preflight_on_mcp():
    response = client.options(
        "/mcp",
        headers={
            "Origin": "https://inspector.example.com",
            "Access-Control-Request-Method": "POST",
        },
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "https://inspector.example.com"

@pytest.mark.parametrize("method", ["TRACE", "OPTIONS", "PROPFIND"])
def test_root_answers_any_method(method):
    response = client.request(method, "/")

    assert response.status_code == 200
    assert response.text == "Web Search Agent is running. Use the /mcp endpoint to interact."
