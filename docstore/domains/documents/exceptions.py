class DocumentStoreError(Exception):
    """Базовая ошибка хранилища документов"""


class DuplicateIdError(DocumentStoreError, ValueError):
    """Документ с таким id уже есть в хранилище"""

    def __init__(self, document_id: str):
        self.document_id = document_id
        super().__init__(f"Document with id '{document_id}' already exists")
