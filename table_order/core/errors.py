"""
Table Order Service — Error taxonomy

ValidationFailure  caller-correctable input violation → 400
OperationError     storage failure → opaque 500; the driver error rides along
                   in ``cause`` for logging only.
"""
from enum import Enum


class ValidationFailure(Exception):
    """An out-of-range or malformed input, raised before any storage call."""

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field
        self.message = message


class ErrorKind(str, Enum):
    CONNECT = "connect"
    CREATE = "create"
    DETAIL = "detail"


class OperationError(Exception):
    """Base class for repository failures."""

    kind: ErrorKind
    description = "storage operation failed"

    def __init__(self, cause: BaseException | None = None):
        super().__init__(self.description)
        self.cause = cause

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind.value}, cause={self.cause!r})"


class ConnectionFailure(OperationError):
    """The pool could not hand out a connection (unreachable or exhausted)."""

    kind = ErrorKind.CONNECT
    description = "failed to acquire a storage connection"


class CreateFailure(OperationError):
    """Statement-level failure while creating or listing."""

    kind = ErrorKind.CREATE
    description = "storage rejected the create/list statement"


class MenuNotFound(CreateFailure):
    description = "menu item does not exist"

    def __init__(self, menu_id: int):
        super().__init__(None)
        self.menu_id = menu_id

    def __repr__(self) -> str:
        return f"MenuNotFound(menu_id={self.menu_id})"


class DetailFailure(OperationError):
    """Statement-level failure while looking up or deleting a single order."""

    kind = ErrorKind.DETAIL
    description = "storage rejected the detail/delete statement"
