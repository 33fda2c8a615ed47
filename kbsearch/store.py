"""
store.py
========
The article store: a durable, keyed collection of Article rows.

Two implementations share the same small contract:

  insert(article)  -> the stored Article with a fresh id
  retrieve_all()   -> every stored Article, oldest first

SqlArticleStore talks to a real database through SQLModel. MemoryArticleStore
keeps rows in a list and is what the tests (and STORE_BACKEND=memory) use.
Both raise StorageError when their medium cannot be used.

The store is handed to the FastAPI app in main.create_app() and reaches the
routers through app.state, so nothing here is a process-wide singleton.
"""

import itertools
import threading
from typing import List, Optional, Protocol

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import SQLModel, Session, create_engine, select

from .config import DB_URL, DB_ECHO, STORE_BACKEND
from .errors import StorageError
from .logging_setup import get_logger
from .models import Article

logger = get_logger("kb_search.store")


class ArticleStore(Protocol):
    def setup(self) -> None: ...

    def insert(self, article: Article) -> Article: ...

    def retrieve_all(self) -> List[Article]: ...


def make_engine(url: str = DB_URL, echo: bool = DB_ECHO) -> Engine:
    """
    Build an engine for the given database URL.

    SQLite connections are shared across FastAPI's worker threads, so the
    same-thread check has to be switched off for it.
    """
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    return create_engine(url, echo=echo, connect_args=connect_args)


class SqlArticleStore:
    def __init__(self, engine: Optional[Engine] = None):
        self.engine = engine if engine is not None else make_engine()

    def setup(self) -> None:
        """
        Create the article table if it is missing. Safe to call on every startup;
        it never drops data.
        """
        try:
            SQLModel.metadata.create_all(self.engine)
        except SQLAlchemyError as e:
            logger.error("STORE_SETUP_FAILED", extra={"error": type(e).__name__})
            raise StorageError(f"Article store unavailable: {e}") from e

    def get_session(self) -> Session:
        return Session(self.engine)

    def insert(self, article: Article) -> Article:
        try:
            with self.get_session() as s:
                s.add(article)
                s.commit()
                # populate the generated id before the session closes
                s.refresh(article)
        except SQLAlchemyError as e:
            logger.error("STORE_INSERT_FAILED", extra={"error": type(e).__name__})
            raise StorageError(f"Article store unavailable: {e}") from e
        logger.debug("STORE_INSERT_OK", extra={"article_id": article.id})
        return article

    def retrieve_all(self) -> List[Article]:
        try:
            with self.get_session() as s:
                return list(s.exec(select(Article).order_by(Article.id)).all())
        except SQLAlchemyError as e:
            logger.error("STORE_READ_FAILED", extra={"error": type(e).__name__})
            raise StorageError(f"Article store unavailable: {e}") from e


class MemoryArticleStore:
    def __init__(self):
        self._rows: List[Article] = []
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def setup(self) -> None:
        pass

    def insert(self, article: Article) -> Article:
        with self._lock:
            stored = Article(
                id=next(self._ids),
                title=article.title,
                content=article.content,
                url=article.url,
                source=article.source,
            )
            self._rows.append(stored)
        logger.debug("STORE_INSERT_OK", extra={"article_id": stored.id})
        return stored

    def retrieve_all(self) -> List[Article]:
        with self._lock:
            return list(self._rows)


def build_store(backend: str = STORE_BACKEND) -> ArticleStore:
    if backend == "memory":
        return MemoryArticleStore()
    if backend == "sql":
        return SqlArticleStore()
    raise ValueError(f"Unknown STORE_BACKEND: {backend!r} (expected 'sql' or 'memory')")
