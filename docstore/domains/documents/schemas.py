from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional, List
from datetime import datetime

from docstore.domains.documents.entities import Author, Document, SearchRequest, as_utc, utcnow


class AuthorSchema(BaseModel):
    """Схема автора документа"""
    id: str = ""
    name: str = ""

    model_config = ConfigDict(from_attributes=True)

    def to_entity(self) -> Author:
        return Author(id=self.id, name=self.name)


class DocumentCreate(BaseModel):
    """Схема для сохранения документа, пустой id будет сгенерирован"""
    id: Optional[str] = ""
    title: str = ""
    content: str = ""
    author: Optional[AuthorSchema] = None
    created: datetime = Field(default_factory=utcnow)

    @field_validator("created")
    @classmethod
    def validate_created(cls, v):
        return as_utc(v)

    def to_entity(self) -> Document:
        return Document(
            id=self.id or "",
            title=self.title,
            content=self.content,
            author=self.author.to_entity() if self.author else None,
            created=self.created
        )


class DocumentResponse(BaseModel):
    """Схема для ответа с данными документа"""
    id: str
    title: Optional[str] = None
    content: Optional[str] = None
    author: Optional[AuthorSchema] = None
    created: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class DocumentSearchRequest(BaseModel):
    """Схема для поиска документов, принимает и camelCase имена полей"""
    title_prefixes: Optional[List[str]] = Field(None, alias="titlePrefixes")
    contains_contents: Optional[List[str]] = Field(None, alias="containsContents")
    author_ids: Optional[List[str]] = Field(None, alias="authorIds")
    created_from: Optional[datetime] = Field(None, alias="createdFrom")
    created_to: Optional[datetime] = Field(None, alias="createdTo")

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("created_from", "created_to")
    @classmethod
    def validate_bounds(cls, v):
        return as_utc(v) if v is not None else v

    def to_entity(self) -> SearchRequest:
        return SearchRequest(
            title_prefixes=self.title_prefixes,
            contains_contents=self.contains_contents,
            author_ids=self.author_ids,
            created_from=self.created_from,
            created_to=self.created_to
        )


class DocumentSearchResponse(BaseModel):
    """Схема для ответа с результатами поиска"""
    documents: List[DocumentResponse]
    total_found: int
