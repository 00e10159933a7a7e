import asyncio

import httpx
import pytest

from cookie_api.client.sharing import (
    SHARE_TEXT,
    build_composer_url,
    decode_data_uri,
    share_cookie,
)

INLINE = "data:image/png;base64,Y29va2ll"


def run(coro):
    return asyncio.run(coro)


class Recorder:
    def __init__(self, window_opens=True):
        self.window_opens = window_opens
        self.opened = []
        self.navigated = []
        self.shared = []

    def open_window(self, url):
        self.opened.append(url)
        return self.window_opens

    def navigate(self, url):
        self.navigated.append(url)


def share(recorder, reference=INLINE, capability=None, handler=None):
    async def scenario():
        transport = httpx.MockTransport(handler or (lambda request: httpx.Response(500)))
        async with httpx.AsyncClient(transport=transport) as client:
            return await share_cookie(
                reference,
                client=client,
                open_window=recorder.open_window,
                navigate=recorder.navigate,
                share_capability=capability,
            )

    return run(scenario())


def test_composer_url_encodes_text():
    url = build_composer_url("hi there\n@you")
    assert url == "https://twitter.com/intent/tweet?text=hi%20there%0A%40you"


def test_decode_data_uri():
    assert decode_data_uri(INLINE) == b"cookie"


def test_decode_rejects_non_base64_uri():
    with pytest.raises(ValueError):
        decode_data_uri("data:text/plain,cookie")


def test_native_share_used_when_accepted():
    recorder = Recorder()

    async def capability(data):
        recorder.shared.append(data)
        return True

    assert share(recorder, capability=capability) == "native"
    assert recorder.shared[0].image_bytes == b"cookie"
    assert recorder.shared[0].text == SHARE_TEXT
    assert recorder.opened == []


def test_native_share_fetches_hosted_image():
    recorder = Recorder()

    async def capability(data):
        recorder.shared.append(data)
        return True

    def handler(request):
        assert str(request.url) == "https://cdn/c.png"
        return httpx.Response(200, content=b"remote-cookie")

    assert share(recorder, "https://cdn/c.png", capability, handler) == "native"
    assert recorder.shared[0].image_bytes == b"remote-cookie"


def test_refused_native_share_opens_composer():
    recorder = Recorder()

    async def capability(data):
        return False

    assert share(recorder, capability=capability) == "composer"
    assert recorder.opened == [build_composer_url()]


def test_broken_native_share_opens_composer():
    recorder = Recorder()

    async def capability(data):
        raise RuntimeError("share sheet crashed")

    assert share(recorder, capability=capability) == "composer"


def test_blocked_window_navigates():
    recorder = Recorder(window_opens=False)

    assert share(recorder) == "navigate"
    assert recorder.navigated == [build_composer_url()]
