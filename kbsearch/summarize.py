from typing import Sequence

from .logging_setup import get_logger
from .models import Article

logger = get_logger("kb_search.summarize")

NO_RELEVANT_PREFIX = "No relevant articles found for the query: "
SUMMARY_PREFIX = "Summary of relevant articles: "


def summarize(articles: Sequence[Article], query: str) -> str:
    """
    Build the answer text shown next to the search results.

    Only the titles are used, joined in the order they were filtered.
    """
    logger.info(f"Generating summary for query: {query}")
    if not articles:
        logger.warning("NO_RELEVANT_ARTICLES", extra={"query": query})
        return NO_RELEVANT_PREFIX + query
    return SUMMARY_PREFIX + ", ".join(a.title for a in articles)
