import os
import tempfile

os.environ.setdefault(
    "LOG_FILE", os.path.join(tempfile.gettempdir(), "cookie_api_tests.log")
)

import httpx  # noqa: E402
import pytest  # noqa: E402

from cookie_api import config  # noqa: E402
from cookie_api.core import http_client  # noqa: E402

TWEETSCOUT = "https://api.tweetscout.io/v2"
OPENAI_EDITS = "https://api.openai.com/v1/images/edits"


class FakeUpstream:
    """Routes outbound requests to canned responses and records them."""

    def __init__(self):
        self.routes = {}
        self.requests = []

    def add(self, method, url, status=200, json=None, content=None, headers=None, exc=None):
        self.routes[(method, url)] = dict(
            status=status, json=json, content=content, headers=headers, exc=exc
        )

    def calls(self, method, url):
        return [r for r in self.requests if r.method == method and str(r.url) == url]

    def __call__(self, request):
        self.requests.append(request)
        route = self.routes.get((request.method, str(request.url)))
        if route is None:
            raise AssertionError(f"Unexpected upstream request: {request.method} {request.url}")
        if route["exc"] is not None:
            raise route["exc"]
        if route["json"] is not None:
            return httpx.Response(route["status"], json=route["json"], headers=route["headers"])
        return httpx.Response(
            route["status"], content=route["content"] or b"", headers=route["headers"]
        )


@pytest.fixture(autouse=True)
def api_settings(monkeypatch):
    monkeypatch.setattr(config, "TWEETSCOUT_API_KEY", "ts-test-key")
    monkeypatch.setattr(config, "OPENAI_API_KEY", "sk-test-key")
    monkeypatch.setattr(config, "TWEETSCOUT_BASE_URL", TWEETSCOUT)
    monkeypatch.setattr(config, "OPENAI_BASE_URL", "https://api.openai.com/v1")
    monkeypatch.setattr(config, "OPENAI_IMAGE_MODEL", "gpt-image-1")
    monkeypatch.setattr(config, "OPENAI_IMAGE_SIZE", "1024x1024")


@pytest.fixture
def upstream(monkeypatch):
    fake = FakeUpstream()
    transport = httpx.MockTransport(fake)
    monkeypatch.setattr(
        http_client,
        "create_client",
        lambda timeout: httpx.AsyncClient(transport=transport, timeout=timeout),
    )
    return fake


@pytest.fixture
def alice(upstream):
    """Upstreams for an account that resolves, scores and bakes."""
    upstream.add(
        "GET",
        f"{TWEETSCOUT}/info/alice",
        json={
            "id": "42",
            "name": "Alice",
            "screen_name": "alice",
            "avatar": "https://x/y_normal.jpg",
        },
    )
    upstream.add("GET", f"{TWEETSCOUT}/score-id/42", json={"score": 650})
    upstream.add("GET", "https://x/y_400x400.jpg", content=b"\x89PNG-avatar")
    upstream.add("POST", OPENAI_EDITS, json={"data": [{"b64_json": "Y29va2ll"}]})
    return upstream
