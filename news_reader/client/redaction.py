# client/redaction.py

"""
Redaction filter applied between fetch and render.
"""

from typing import Iterable, List

from ..schemas.news_schemas import Article, FeedPage


def filter_redacted(articles: Iterable[Article]) -> List[Article]:
    """Drop provider-redacted articles, keeping provider order."""
    return [article for article in articles if not article.is_redacted()]


def redact_page(page: FeedPage) -> FeedPage:
    """
    Filtered copy of a page.

    `total_results` stays the upstream count so page arithmetic keeps
    following the provider, not the number of surviving articles.
    """
    return FeedPage(
        total_results=page.total_results, articles=filter_redacted(page.articles)
    )
