from docstore.domains.documents.entities import Author, Document, SearchRequest
from docstore.domains.documents.exceptions import DocumentStoreError, DuplicateIdError
from docstore.domains.documents.schemas import (
    AuthorSchema, DocumentCreate, DocumentResponse,
    DocumentSearchRequest, DocumentSearchResponse
)
from docstore.domains.documents.services import DocumentService

__all__ = [
    "Author", "Document", "SearchRequest",
    "DocumentStoreError", "DuplicateIdError",
    "AuthorSchema", "DocumentCreate", "DocumentResponse",
    "DocumentSearchRequest", "DocumentSearchResponse",
    "DocumentService"
]
