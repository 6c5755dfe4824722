# client/console.py

"""
Plain-text view over a FeedController and the `news-reader` command.

Commands in browse mode:
    n            next page
    p            previous page
    r            retry / reload the current page
    g <route>    open another feed: /, /top-headlines/<category>, /country/<iso>
    s <text>     change the selector of the current feed (query, category or country)
    q            quit
"""

import argparse
import asyncio
import sys
from typing import Awaitable, Callable, List, Optional

from .feed_controller import FeedController, FeedState
from .gateway_client import GatewayClientInterface, HttpGatewayClient
from ..schemas.news_schemas import FeedMode, FeedQuery
from ..core.config import settings

ReadCommand = Callable[[], Awaitable[str]]
Write = Callable[[str], None]

_TITLES = {
    FeedMode.ALL_NEWS: "All News",
    FeedMode.TOP_HEADLINES: "Top Headlines",
    FeedMode.COUNTRY_NEWS: "Country News",
}


def render_feed(controller: FeedController) -> str:
    """Render the current state of the view as text."""
    query = controller.query
    heading = _TITLES[query.mode]
    if query.selector:
        heading = f"{heading}: {query.selector}"
    lines: List[str] = [heading, "=" * len(heading)]

    if controller.state in (FeedState.IDLE, FeedState.LOADING):
        lines.append("Loading...")
    elif controller.state == FeedState.ERRORED:
        lines.append(controller.error_message or "")
    elif not controller.articles:
        lines.append("No articles found.")
    else:
        first = (query.page - 1) * query.page_size
        for number, article in enumerate(controller.articles, start=first + 1):
            lines.append(f"{number}. {article.title or '(untitled)'}")
            byline = " | ".join(
                part
                for part in (article.source_name, article.author, article.published_at)
                if part
            )
            if byline:
                lines.append(f"   {byline}")
            if article.description:
                lines.append(f"   {article.description}")
            lines.append(f"   {article.url}")

    prev_label = "← Prev" if controller.can_prev else "(← Prev)"
    next_label = "Next →" if controller.can_next else "(Next →)"
    lines.append("")
    lines.append(f"{prev_label}  {controller.page_indicator}  {next_label}")
    return "\n".join(lines)


async def _read_stdin() -> str:
    return await asyncio.to_thread(input, "> ")


async def browse(
    client: GatewayClientInterface,
    query: FeedQuery,
    read_command: Optional[ReadCommand] = None,
    write: Write = print,
) -> FeedController:
    """
    Interactive loop over one feed view.

    Returns the controller once the user quits (or input ends), already closed.
    """
    read_command = read_command or _read_stdin
    controller = FeedController(client, query)
    await controller.start()
    write(render_feed(controller))

    while True:
        try:
            command = (await read_command()).strip()
        except EOFError:
            break

        name, _, argument = command.partition(" ")
        argument = argument.strip()

        if name == "q":
            break
        if name == "n":
            moved = await controller.next()
        elif name == "p":
            moved = await controller.prev()
        elif name == "r":
            moved = await controller.refresh()
        elif name == "g" and argument:
            try:
                target = FeedQuery.from_route(argument, page_size=query.page_size)
            except ValueError as e:
                write(str(e))
                continue
            moved = await controller.navigate(target)
        elif name == "s" and argument:
            moved = await controller.change_selector(argument)
        else:
            write("Commands: n, p, r, g <route>, s <text>, q")
            continue

        if not moved:
            write("Not available.")
            continue
        write(render_feed(controller))

    controller.close()
    return controller


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="news-reader", description="Browse news through the news reader gateway"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    browse_parser = subparsers.add_parser("browse", help="Open a paginated feed view")
    browse_parser.add_argument(
        "route",
        nargs="?",
        default="/",
        help="Feed route: /, /top-headlines/<category> or /country/<iso>",
    )
    browse_parser.add_argument("-q", "--query", default="", help="All-news search text")
    browse_parser.add_argument(
        "--gateway-url", default=settings.gateway_url, help="Gateway base URL"
    )
    browse_parser.add_argument(
        "--page-size",
        type=int,
        default=settings.default_page_size,
        help="Articles per page",
    )
    return parser


async def _run(args: argparse.Namespace) -> int:
    try:
        query = FeedQuery.from_route(
            args.route, page_size=args.page_size, query=args.query
        )
    except ValueError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 2

    async with HttpGatewayClient(base_url=args.gateway_url) as client:
        await browse(client, query)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        return asyncio.run(_run(args))
    except KeyboardInterrupt:
        return 130


if __name__ == "__main__":
    sys.exit(main())
