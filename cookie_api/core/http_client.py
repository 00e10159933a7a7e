"""Factory for the outbound HTTP clients used to reach upstream APIs."""

import httpx


def create_client(timeout: float) -> httpx.AsyncClient:
    """Return a fresh async client; callers own it via ``async with``."""
    return httpx.AsyncClient(timeout=timeout, follow_redirects=True)


def is_http_url(value: str) -> bool:
    return value.startswith("http://") or value.startswith("https://")


__all__ = ["create_client", "is_http_url"]
