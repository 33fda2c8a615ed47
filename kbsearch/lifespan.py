# kbsearch/lifespan.py
from contextlib import asynccontextmanager
from fastapi import FastAPI

from .logging_setup import get_logger

logger = get_logger("kb_search.lifespan")

@asynccontextmanager
async def lifespan(app: FastAPI):
    # ---- Startup ----
    logger.info("APP STARTUP")
    store = app.state.article_store
    store.setup()
    logger.info(f"Article store ready: {type(store).__name__}")

    yield

    # ---- Shutdown ----
    logger.info("APP SHUTDOWN")
