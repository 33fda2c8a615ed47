from typing import List, Sequence

from .logging_setup import get_logger
from .models import Article

logger = get_logger("kb_search.relevance")


def matches(article: Article, query: str) -> bool:
    q = query.lower()
    return q in (article.title or "").lower() or q in (article.content or "").lower()


def filter_relevant(articles: Sequence[Article], query: str) -> List[Article]:
    """
    Keep the articles whose title or content contains `query`, ignoring case.
    Input order is preserved; nothing is re-ranked.
    """
    logger.info(f"Filtering relevant articles for query: {query}")
    return [a for a in articles if matches(a, query)]
