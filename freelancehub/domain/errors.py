"""
Error taxonomy for the data-access layer and the record stores behind it.
"""


class CrudError(Exception):
    """Base class for every failure surfaced by BaseCrudService."""


class MissingRecordIdError(CrudError, ValueError):
    """Raised before any store call when a mutation has no record ID."""


class CreationError(CrudError):
    pass


class FetchError(CrudError):
    pass


class UpdateError(CrudError):
    pass


class DeletionError(CrudError):
    pass


# ── Store-level errors (raised by adapters) ───────────────────


class RecordStoreError(Exception):
    """A record store rejected an operation."""


class RecordNotFoundError(RecordStoreError, LookupError):
    def __init__(self, collection: str, record_id: str) -> None:
        super().__init__(f"No record '{record_id}' in {collection}")
        self.collection = collection
        self.record_id = record_id


class DuplicateRecordError(RecordStoreError):
    def __init__(self, collection: str, record_id: str) -> None:
        super().__init__(f"Record '{record_id}' already exists in {collection}")
        self.collection = collection
        self.record_id = record_id
