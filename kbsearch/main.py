# kbsearch/main.py
from typing import Optional

from fastapi import FastAPI

from .config import APP_NAME, APP_VERSION
from .logging_setup import setup_logging, get_logger
from .middleware import RequestContextMiddleware
from .exception_handling import register_exception_handlers
from .lifespan import lifespan
from .store import ArticleStore, build_store

from .routers import articles, health


setup_logging()  # <-- set up logging ASAP
logger = get_logger("kb_search.main")


def create_app(store: Optional[ArticleStore] = None) -> FastAPI:
    """Build the API around the given article store (configured backend if omitted)."""
    app = FastAPI(title=APP_NAME, version=APP_VERSION, lifespan=lifespan)
    app.state.article_store = store if store is not None else build_store()

    app.add_middleware(RequestContextMiddleware)
    register_exception_handlers(app)

    app.include_router(health.router)
    app.include_router(articles.router)
    return app


app = create_app()
