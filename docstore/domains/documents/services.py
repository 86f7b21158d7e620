from typing import Optional, List
import logging

from docstore.core.config import settings
from docstore.domains.documents.entities import Document, SearchRequest
from docstore.domains.documents.exceptions import DuplicateIdError
from docstore.domains.documents.schemas import (
    DocumentCreate, DocumentResponse, DocumentSearchRequest, DocumentSearchResponse
)
from docstore.repositories.document_repository import DocumentRepository

logger = logging.getLogger(__name__)


class DocumentService:
    """Сервис для работы с документами"""

    def __init__(self, repository: Optional[DocumentRepository] = None):
        if repository is None:
            repository = DocumentRepository(order_by_id=settings.order_by_id)
        self.document_repository = repository

    def save(self, document: Document) -> Document:
        """Сохранение документа"""
        requested_id = document.id
        try:
            saved = self.document_repository.save(document)
        except DuplicateIdError as e:
            logger.warning(f"Rejected document with duplicate id {e.document_id}")
            raise

        if requested_id:
            logger.info(f"Saved document {saved.id}")
        else:
            logger.info(f"Saved document with generated id {saved.id}")
        return saved

    def search(self, request: Optional[SearchRequest] = None) -> List[Document]:
        """Поиск документов"""
        documents = self.document_repository.search(request)
        logger.debug(f"Search {request} matched {len(documents)} documents")
        return documents

    def find_by_id(self, document_id: str) -> Optional[Document]:
        """Получение документа по id"""
        document = self.document_repository.find_by_id(document_id)
        if document is None:
            logger.debug(f"Document {document_id} not found")
        return document

    def save_document(self, document_data: DocumentCreate) -> DocumentResponse:
        """Сохранение документа из схемы запроса"""
        document = self.save(document_data.to_entity())
        return DocumentResponse.model_validate(document)

    def search_documents(self, search_request: DocumentSearchRequest) -> DocumentSearchResponse:
        """Поиск документов по схеме запроса"""
        documents = self.search(search_request.to_entity())
        return DocumentSearchResponse(
            documents=[DocumentResponse.model_validate(doc) for doc in documents],
            total_found=len(documents)
        )

    def get_document(self, document_id: str) -> Optional[DocumentResponse]:
        """Получение документа по id в виде схемы ответа"""
        document = self.find_by_id(document_id)
        return DocumentResponse.model_validate(document) if document else None
