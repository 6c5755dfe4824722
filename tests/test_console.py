"""
Tests for the console view and the browse loop.
"""

import pytest

from news_reader.client.console import browse, build_parser, render_feed
from news_reader.client.feed_controller import FAILURE_MESSAGE, FeedController
from news_reader.schemas.news_schemas import FeedMode, FeedQuery


def scripted(commands):
    remaining = list(commands)

    async def read_command():
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    return read_command


class TestRenderFeed:
    @pytest.mark.asyncio
    async def test_loaded_page(self, stub_client, make_envelope):
        controller = FeedController(
            stub_client(lambda q: make_envelope(2, count=2)),
            FeedQuery(mode=FeedMode.COUNTRY_NEWS, selector="us"),
        )
        await controller.start()

        text = render_feed(controller)

        assert text.startswith("Country News: us")
        assert "1. News 1" in text
        assert "Source 2 | Author 2 | 2024-10-01" in text
        assert "(← Prev)  1 of 1  (Next →)" in text

    def test_idle_is_loading(self, stub_client):
        controller = FeedController(stub_client(lambda q: None), FeedQuery())

        assert "Loading..." in render_feed(controller)

    @pytest.mark.asyncio
    async def test_error_message(self, stub_client):
        controller = FeedController(
            stub_client(lambda q: RuntimeError("boom")), FeedQuery()
        )
        await controller.start()

        assert FAILURE_MESSAGE in render_feed(controller)

    @pytest.mark.asyncio
    async def test_empty_page(self, stub_client, make_envelope):
        controller = FeedController(stub_client(lambda q: make_envelope(0)), FeedQuery())
        await controller.start()

        assert "No articles found." in render_feed(controller)


class TestBrowse:
    @pytest.mark.asyncio
    async def test_paging_and_navigation(self, stub_client, make_envelope):
        client = stub_client(lambda q: make_envelope(25, count=10))
        output = []

        controller = await browse(
            client,
            FeedQuery(),
            read_command=scripted(["n", "n", "n", "p", "g /country/gb", "x", "q"]),
            write=output.append,
        )

        assert [(q.mode, q.page) for q in client.requests] == [
            (FeedMode.ALL_NEWS, 1),
            (FeedMode.ALL_NEWS, 2),
            (FeedMode.ALL_NEWS, 3),
            (FeedMode.ALL_NEWS, 2),
            (FeedMode.COUNTRY_NEWS, 1),
        ]
        assert "Not available." in output
        assert any("Commands:" in line for line in output)
        assert controller.closed

    @pytest.mark.asyncio
    async def test_bad_route_is_reported(self, stub_client, make_envelope):
        output = []

        await browse(
            stub_client(lambda q: make_envelope(1, count=1)),
            FeedQuery(),
            read_command=scripted(["g /nowhere"]),
            write=output.append,
        )

        assert any("Unknown route" in line for line in output)

    @pytest.mark.asyncio
    async def test_selector_change(self, stub_client, make_envelope):
        client = stub_client(lambda q: make_envelope(1, count=1))

        await browse(
            client,
            FeedQuery(mode=FeedMode.TOP_HEADLINES, selector="sports"),
            read_command=scripted(["s health", "q"]),
            write=lambda text: None,
        )

        assert client.requests[-1].selector == "health"
        assert client.requests[-1].page == 1


class TestParser:
    def test_browse_defaults(self):
        args = build_parser().parse_args(["browse"])

        assert args.route == "/"
        assert args.query == ""
        assert args.page_size == 10

    def test_browse_route(self):
        args = build_parser().parse_args(["browse", "/country/us", "--page-size", "5"])

        assert args.route == "/country/us"
        assert args.page_size == 5
