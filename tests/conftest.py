from __future__ import annotations

import pytest

from docstore.domains.documents.entities import Author, Document
from docstore.domains.documents.services import DocumentService
from docstore.repositories.document_repository import DocumentRepository
from tests.helpers import ts


@pytest.fixture
def repository() -> DocumentRepository:
    return DocumentRepository()


@pytest.fixture
def service(repository: DocumentRepository) -> DocumentService:
    return DocumentService(repository)


@pytest.fixture
def reports(repository: DocumentRepository):
    alpha = repository.save(Document(
        id="a", title="Alpha Report", content="quarterly numbers",
        author=Author(id="u1", name="Ann"), created=ts(2023, 1, 1),
    ))
    beta = repository.save(Document(
        id="b", title="Beta Report", content="yearly summary",
        author=Author(id="u2", name="Bob"), created=ts(2023, 6, 1),
    ))
    return alpha, beta
