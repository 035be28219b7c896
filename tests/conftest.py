"""
Pytest configuration and fixtures
"""
import json
import logging
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest

from promptcraft.config import get_settings
from promptcraft.llm_adapter import MockProvider, reset_provider

_LLM_ENV = (
    "LLM_PROVIDER",
    "LLM_MODEL",
    "LLM_EMBEDDING_MODEL",
    "LLM_BASE_URL",
    "LLM_API_KEY",
    "OPENAI_API_KEY",
    "LLM_API_VERSION",
    "LLM_REQUEST_TIMEOUT",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_llm_env(monkeypatch):
    """Never let a developer's real credentials leak into a test run."""
    for name in _LLM_ENV:
        monkeypatch.delenv(name, raising=False)
    reset_provider()
    get_settings.cache_clear()
    # the CLI reconfigures the root logger; undo that between tests
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    yield
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)
    reset_provider()
    get_settings.cache_clear()


@pytest.fixture
def mock_provider() -> MockProvider:
    return MockProvider()


class _ChatCompletionHandler(BaseHTTPRequestHandler):
    """Minimal OpenAI-compatible endpoint that keeps connections alive."""

    protocol_version = "HTTP/1.1"

    def do_POST(self):
        length = int(self.headers.get("Content-Length", 0))
        payload = json.loads(self.rfile.read(length))
        self.server.prompts.append(payload["messages"][0]["content"])
        body = json.dumps(
            {
                "id": f"chatcmpl-{len(self.server.prompts)}",
                "object": "chat.completion",
                "created": 1700000000,
                "model": payload["model"],
                "choices": [
                    {
                        "index": 0,
                        "message": {"role": "assistant", "content": f"reply {len(self.server.prompts)}"},
                        "finish_reason": "stop",
                    }
                ],
                "usage": {"prompt_tokens": 3, "completion_tokens": 2, "total_tokens": 5},
            }
        ).encode()
        self.send_response(200)
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format, *args):
        pass


@pytest.fixture
def keepalive_server(monkeypatch):
    """Local chat-completions server on HTTP/1.1 keep-alive; yields its /v1 URL."""
    for name in ("HTTP_PROXY", "HTTPS_PROXY", "ALL_PROXY", "http_proxy", "https_proxy", "all_proxy"):
        monkeypatch.delenv(name, raising=False)
    server = ThreadingHTTPServer(("127.0.0.1", 0), _ChatCompletionHandler)
    server.daemon_threads = True
    server.prompts = []
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        host, port = server.server_address
        server.url = f"http://{host}:{port}/v1"
        yield server
    finally:
        server.shutdown()
        server.server_close()
