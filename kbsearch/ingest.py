# kbsearch/ingest.py
from .errors import InvalidArgument, ProcessingError
from .logging_setup import get_logger
from .schema import ArticleIn
from .store import ArticleStore

logger = get_logger("kb_search.ingest")


def _missing(value) -> bool:
    return value is None or not str(value).strip()


def create_article(store: ArticleStore, request: ArticleIn) -> str:
    """Validate, persist, and return a confirmation naming the new id."""
    logger.info(f"Creating article with title: {request.title}")

    if _missing(request.title) or _missing(request.content):
        logger.error("ARTICLE_INVALID", extra={"handled": True})
        raise InvalidArgument("Article title and content cannot be null")

    try:
        stored = store.insert(request.to_article())
    except Exception as e:
        logger.exception("ARTICLE_CREATE_FAILED", extra={"handled": False})
        raise ProcessingError(f"Error creating article: {e}") from e

    logger.info("ARTICLE_CREATED", extra={"article_id": stored.id})
    return f"Article created successfully with ID: {stored.id}"
