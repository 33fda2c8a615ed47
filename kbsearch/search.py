# kbsearch/search.py
from dataclasses import dataclass, field
from typing import List, Optional
import time

from .errors import InvalidArgument, ProcessingError
from .logging_setup import get_logger
from .models import Article
from .relevance import filter_relevant
from .store import ArticleStore
from .summarize import summarize

logger = get_logger("kb_search.search")

EMPTY_CORPUS_SUMMARY = "No articles found"


@dataclass(frozen=True)
class SearchResult:
    articles: List[Article] = field(default_factory=list)
    summary: str = ""


def search_articles(store: ArticleStore, query: Optional[str]) -> SearchResult:
    """
    Answer one search request:
    - reject a missing/blank query before touching the store
    - load every article
    - empty store -> "No articles found" (the filter never runs)
    - otherwise filter by substring, then summarize the matches

    Anything that blows up after validation comes back as ProcessingError.
    """
    logger.info(f"Processing search query: {query}")

    if query is None or not query.strip():
        logger.error("SEARCH_INVALID_QUERY", extra={"handled": True})
        raise InvalidArgument("Query cannot be null or empty")

    t0 = time.perf_counter()
    try:
        all_articles = store.retrieve_all()
        logger.info(f"Fetched {len(all_articles)} articles from the store")

        if not all_articles:
            logger.warning("SEARCH_EMPTY_STORE", extra={"query": query})
            return SearchResult(articles=[], summary=EMPTY_CORPUS_SUMMARY)

        relevant = filter_relevant(all_articles, query)
        summary = summarize(relevant, query)
    except Exception as e:
        logger.exception("SEARCH_FAILED", extra={"handled": False, "query": query})
        raise ProcessingError(f"Error processing AI search query: {e}") from e

    logger.info(
        "SEARCH_OK",
        extra={
            "query": query,
            "matched": len(relevant),
            "total": len(all_articles),
            "elapsed_ms": round((time.perf_counter() - t0) * 1000),
        },
    )
    return SearchResult(articles=relevant, summary=summary)
