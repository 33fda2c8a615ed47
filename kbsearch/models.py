from typing import Optional
from sqlalchemy import Text
from sqlmodel import SQLModel, Field, Column


class Article(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(max_length=255)
    content: str = Field(sa_column=Column(Text, nullable=False))
    url: Optional[str] = Field(default=None, max_length=2083)
    source: Optional[str] = Field(default=None, max_length=255)
