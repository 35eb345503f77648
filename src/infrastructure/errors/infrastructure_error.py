"""Infrastructure layer error types.

Persistence failures are raised, not returned: they belong to the store's
transaction boundary and propagate to the caller unchanged. Uniqueness and
NOT NULL violations arrive as SQLAlchemy's own IntegrityError; the classes
here cover the checks the repositories perform themselves.

Architecture:
- Disjoint from ValidationError (entity rules, returned in Failure)
- Application handlers do not catch these
"""

from uuid import UUID


class PersistenceError(Exception):
    """Base class for failures raised by repository adapters."""


class InvalidReferenceError(PersistenceError):
    """An entity references a row that is not in the store.

    Raised when a Theme is saved with an office_id that does not name a
    stored Office.

    Attributes:
        resource_type: Type of the missing referenced resource.
        reference_id: ID that could not be resolved.
    """

    def __init__(self, resource_type: str, reference_id: UUID) -> None:
        """Initialize invalid reference error.

        Args:
            resource_type: Type of the missing referenced resource.
            reference_id: ID that could not be resolved.
        """
        super().__init__(f"{resource_type} {reference_id} does not exist")
        self.resource_type = resource_type
        self.reference_id = reference_id
