# kbsearch/routers/articles.py
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import PlainTextResponse

from ..ingest import create_article
from ..logging_setup import get_logger
from ..schema import ArticleIn, ArticleOut, SearchResponse
from ..search import search_articles
from ..store import ArticleStore

logger = get_logger("kb_search.routes.articles")

router = APIRouter(prefix="/api", tags=["Articles"])


def get_article_store(request: Request) -> ArticleStore:
    return request.app.state.article_store


@router.post("/search-query", response_model=SearchResponse)
def search_query(
    query: Optional[str] = Query(None, description="Text to look for in article titles and content"),
    store: ArticleStore = Depends(get_article_store),
):
    logger.info(f"Received search query: {query}")
    result = search_articles(store, query)
    return SearchResponse(
        relevant_articles=[ArticleOut.model_validate(a) for a in result.articles],
        ai_summary_answer=result.summary,
    )


@router.post("/create-articles", response_class=PlainTextResponse)
def create_articles(body: ArticleIn, store: ArticleStore = Depends(get_article_store)):
    logger.info(f"Received request to create article: {body.title}")
    return PlainTextResponse(create_article(store, body))
