from pydantic import AnyUrl, BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator
from typing import List, Optional, Union

from .models import Article

_url_adapter = TypeAdapter(AnyUrl)


class ArticleIn(BaseModel):
    title: str = Field(max_length=255)
    content: str
    url: Optional[str] = Field(default=None, max_length=2083)
    source: Optional[str] = Field(default=None, max_length=255)

    @field_validator("title")
    @classmethod
    def _title_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Title cannot be blank")
        return v

    @field_validator("content")
    @classmethod
    def _content_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Content cannot be blank")
        return v

    @field_validator("url")
    @classmethod
    def _url_well_formed(cls, v: Optional[str]) -> Optional[str]:
        # stored verbatim, only checked here
        if v is None:
            return v
        try:
            _url_adapter.validate_python(v)
        except ValidationError as e:
            raise ValueError("Invalid URL format") from e
        return v

    def to_article(self) -> Article:
        return Article(title=self.title, content=self.content, url=self.url, source=self.source)


class ArticleOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    content: str
    url: Optional[str] = None
    source: Optional[str] = None


class SearchResponse(BaseModel):
    relevant_articles: List[ArticleOut]
    ai_summary_answer: str


class ErrorResponse(BaseModel):
    message: str
    detail: Union[str, list, None] = None
