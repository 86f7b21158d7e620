from docstore.domains.documents import (
    Author, Document, SearchRequest,
    DocumentStoreError, DuplicateIdError,
    DocumentService
)
from docstore.repositories import DocumentRepository

__all__ = [
    "Author", "Document", "SearchRequest",
    "DocumentStoreError", "DuplicateIdError",
    "DocumentService", "DocumentRepository"
]
