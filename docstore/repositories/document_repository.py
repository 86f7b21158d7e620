from typing import Callable, Dict, Iterable, List, Optional
import uuid

from docstore.domains.documents.entities import Document, SearchRequest, as_utc
from docstore.domains.documents.exceptions import DuplicateIdError

Condition = Callable[[Document], bool]


class DocumentRepository:
    """In-memory хранилище документов, ключ - id документа.

    Потокобезопасность не обеспечивается: при использовании из нескольких
    потоков все вызовы нужно оборачивать одной внешней блокировкой.
    """

    def __init__(self, order_by_id: bool = True):
        self.order_by_id = order_by_id
        self._documents: Dict[str, Document] = {}

    def save(self, document: Document) -> Document:
        """Сохранение документа с генерацией id, если он не задан.

        Несмотря на исходное описание операции как upsert, существующий
        документ не перезаписывается: повторный id приводит к DuplicateIdError,
        а содержимое хранилища не меняется.
        """
        if document.has_id():
            if document.id in self._documents:
                raise DuplicateIdError(document.id)
        else:
            document.id = self._generate_id()

        self._documents[document.id] = document
        return document

    def search(self, request: Optional[SearchRequest] = None) -> List[Document]:
        """Поиск документов: И между полями запроса, ИЛИ внутри одного поля"""
        if request is None or request.is_empty():
            return self.all()

        conditions = self._build_conditions(request)
        return [
            document
            for document in self._ordered()
            if all(condition(document) for condition in conditions)
        ]

    def find_by_id(self, document_id: str) -> Optional[Document]:
        """Получение документа по id"""
        return self._documents.get(document_id)

    def all(self) -> List[Document]:
        """Все документы в порядке выдачи"""
        return list(self._ordered())

    def __len__(self) -> int:
        return len(self._documents)

    def __contains__(self, document_id: object) -> bool:
        return document_id in self._documents

    def _ordered(self) -> Iterable[Document]:
        if self.order_by_id:
            return (self._documents[key] for key in sorted(self._documents))
        return list(self._documents.values())

    def _generate_id(self) -> str:
        document_id = str(uuid.uuid4())
        while document_id in self._documents:
            document_id = str(uuid.uuid4())
        return document_id

    @staticmethod
    def _build_conditions(request: SearchRequest) -> List[Condition]:
        conditions: List[Condition] = []

        if request.title_prefixes is not None:
            prefixes = tuple(request.title_prefixes)
            conditions.append(
                lambda doc: doc.title is not None and doc.title.startswith(prefixes)
            )

        if request.contains_contents is not None:
            fragments = list(request.contains_contents)
            conditions.append(
                lambda doc: doc.content is not None
                and any(fragment in doc.content for fragment in fragments)
            )

        if request.author_ids is not None:
            author_ids = set(request.author_ids)
            conditions.append(
                lambda doc: doc.author is not None and doc.author.id in author_ids
            )

        if request.created_from is not None:
            created_from = as_utc(request.created_from)
            conditions.append(
                lambda doc: doc.created is not None and as_utc(doc.created) > created_from
            )

        if request.created_to is not None:
            created_to = as_utc(request.created_to)
            conditions.append(
                lambda doc: doc.created is not None and as_utc(doc.created) < created_to
            )

        return conditions
