from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional, Collection


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Приведение времени к UTC, время без зоны считается UTC"""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


@dataclass
class Author:
    """Автор документа, хранится внутри документа"""
    id: str = ""
    name: str = ""


@dataclass
class Document:
    """Сущность документа хранилища"""
    id: str = ""
    title: str = ""
    content: str = ""
    author: Optional[Author] = None
    created: datetime = field(default_factory=utcnow)

    def has_id(self) -> bool:
        """Есть ли у документа назначенный id"""
        return bool(self.id)


@dataclass
class SearchRequest:
    """Параметры поиска документов, None означает отсутствие ограничения"""
    title_prefixes: Optional[Collection[str]] = None
    contains_contents: Optional[Collection[str]] = None
    author_ids: Optional[Collection[str]] = None
    created_from: Optional[datetime] = None
    created_to: Optional[datetime] = None

    def is_empty(self) -> bool:
        """Запрос без единого ограничения"""
        return all(
            value is None
            for value in (
                self.title_prefixes,
                self.contains_contents,
                self.author_ids,
                self.created_from,
                self.created_to,
            )
        )
