"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class PersistenceError(Exception):
    """Raised when the backing store fails to execute a statement.

    Wraps the driver/ORM error so the presentation layer can answer with a
    500 without knowing which database library sits underneath.
    """

    def __init__(self, operation: str, cause: Exception | None = None):
        self.operation = operation
        self.cause = cause
        message = f"Failed to {operation}"
        if cause is not None:
            message += f": {type(cause).__name__}"
        super().__init__(message)
