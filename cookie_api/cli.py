from __future__ import annotations

import argparse
import asyncio
import sys
from typing import List, Optional

import httpx

from cookie_api.client.orchestrator import CookieOrchestrator, CookieView
from cookie_api.core.score_tiers import ScoreTier

DEFAULT_API_URL = "http://localhost:3001"


class ConsoleView(CookieView):
    def show_loading(self, loading: bool) -> None:
        if loading:
            print("baking... (this can take a couple of minutes)")

    def show_original(self, image_url: str) -> None:
        print(f"original: {image_url}")

    def show_cookie(self, image_reference: str) -> None:
        if image_reference.startswith("data:"):
            print(f"cookie:   <inline image, {len(image_reference)} chars>")
        else:
            print(f"cookie:   {image_reference}")

    def show_score(self, tier: ScoreTier, progress: float) -> None:
        print(f"rating:   {tier.label}")
        print(f"present:  {tier.reward}")
        print(f"progress: {progress:.0f}%")

    def show_error(self, message: str) -> None:
        print(f"error: {message}", file=sys.stderr)


def _serve(args: argparse.Namespace) -> int:
    import uvicorn

    from cookie_api import config

    uvicorn.run("cookie_api.main:app", host=args.host, port=args.port or config.PORT)
    return 0


async def _bake(args: argparse.Namespace) -> int:
    orchestrator = CookieOrchestrator(api_url=args.api_url, view=ConsoleView())
    result = await orchestrator.bake(args.username, args.style)
    if result is None:
        return 1

    if args.download:
        location = orchestrator.download(args.download)
        if location:
            print(f"saved:    {location}")
    if args.share:
        await orchestrator.share()
    return 0


def _styles(args: argparse.Namespace) -> int:
    try:
        response = httpx.get(f"{args.api_url.rstrip('/')}/api/cookie-styles", timeout=10.0)
        response.raise_for_status()
    except httpx.HTTPError as exc:
        print(f"error: could not list styles: {exc}", file=sys.stderr)
        return 1

    payload = response.json()
    for style in payload.get("styles", []):
        marker = "*" if style["key"] == payload.get("default") else " "
        print(f"{marker} {style['key']:<14} {style['label']}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cookie-api", description="Turn profile pictures into holiday cookies."
    )
    sub = parser.add_subparsers(dest="command", required=True)

    serve = sub.add_parser("serve", help="Run the relay API")
    serve.add_argument("--host", default="0.0.0.0")
    serve.add_argument("--port", type=int, default=None)

    bake = sub.add_parser("bake", help="Bake a cookie for a username")
    bake.add_argument("username")
    bake.add_argument("--style", default="royal-icing")
    bake.add_argument("--api-url", default=DEFAULT_API_URL)
    bake.add_argument("--download", metavar="DIR", default=None, help="Save the cookie into DIR")
    bake.add_argument("--share", action="store_true", help="Open the share composer")

    styles = sub.add_parser("styles", help="List cookie styles")
    styles.add_argument("--api-url", default=DEFAULT_API_URL)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if args.command == "serve":
        return _serve(args)
    if args.command == "bake":
        return asyncio.run(_bake(args))
    return _styles(args)


if __name__ == "__main__":
    raise SystemExit(main())
