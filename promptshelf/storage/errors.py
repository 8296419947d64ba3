"""Storage error taxonomy.

Each error also derives from the closest builtin, so callers may catch
``IndexError`` or ``FileExistsError`` the same way they would for plain
file operations.
"""


class StorageError(Exception):
    """Base class for every refusal raised by the storage layer."""


class MissingField(StorageError, ValueError):
    def __init__(self, field: str) -> None:
        super().__init__(f"Missing required field: {field}")
        self.field = field


class InvalidArgument(StorageError, ValueError):
    pass


class DuplicateUser(StorageError, FileExistsError):
    pass


class DuplicateCategory(StorageError, FileExistsError):
    pass


class NotFound(StorageError, LookupError):
    pass


class IndexOutOfRange(StorageError, IndexError):
    pass


class OwnerMismatch(StorageError, PermissionError):
    pass


class InvalidCredentials(StorageError, PermissionError):
    pass


class LastCategoryError(StorageError, ValueError):
    pass
