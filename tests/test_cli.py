"""Tests for the command-line parser and its dispatch."""

import pytest

from cookie_api import cli


def test_serve_defaults():
    args = cli.build_parser().parse_args(["serve"])

    assert args.command == "serve"
    assert args.host == "0.0.0.0"
    assert args.port is None


def test_serve_port_is_int():
    args = cli.build_parser().parse_args(["serve", "--host", "127.0.0.1", "--port", "8080"])

    assert args.host == "127.0.0.1"
    assert args.port == 8080


def test_bake_defaults():
    args = cli.build_parser().parse_args(["bake", "alice"])

    assert args.command == "bake"
    assert args.username == "alice"
    assert args.style == "royal-icing"
    assert args.api_url == cli.DEFAULT_API_URL
    assert args.download is None
    assert args.share is False


def test_bake_options():
    args = cli.build_parser().parse_args(
        ["bake", "@bob", "--style", "gingerbread", "--api-url", "http://api", "--download", "out", "--share"]
    )

    assert args.username == "@bob"
    assert args.style == "gingerbread"
    assert args.api_url == "http://api"
    assert args.download == "out"
    assert args.share is True


def test_styles_api_url():
    args = cli.build_parser().parse_args(["styles", "--api-url", "http://api"])

    assert args.command == "styles"
    assert args.api_url == "http://api"


@pytest.mark.parametrize("argv", [[], ["bake"], ["serve", "--port", "abc"], ["bogus"]])
def test_invalid_arguments_exit(argv):
    with pytest.raises(SystemExit) as exc_info:
        cli.build_parser().parse_args(argv)
    assert exc_info.value.code == 2


@pytest.fixture
def handlers(monkeypatch):
    calls = []

    def serve(args):
        calls.append(("serve", args.port))
        return 0

    async def bake(args):
        calls.append(("bake", args.username))
        return 1

    def styles(args):
        calls.append(("styles", args.api_url))
        return 0

    monkeypatch.setattr(cli, "_serve", serve)
    monkeypatch.setattr(cli, "_bake", bake)
    monkeypatch.setattr(cli, "_styles", styles)
    return calls


@pytest.mark.parametrize(
    "argv, expected, code",
    [
        (["serve", "--port", "9000"], ("serve", 9000), 0),
        (["bake", "alice"], ("bake", "alice"), 1),
        (["styles"], ("styles", cli.DEFAULT_API_URL), 0),
    ],
)
def test_main_dispatches_subcommand(handlers, argv, expected, code):
    assert cli.main(argv) == code
    assert handlers == [expected]
