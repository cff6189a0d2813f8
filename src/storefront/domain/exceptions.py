"""Domain-level exceptions.

Every failure the engine reports is a subclass of DomainException so the
CLI layer can catch them uniformly and display user-friendly messages.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class ReferentialIntegrityError(EntityNotFoundError):
    """A sale line references a product that is not in the catalog."""

    def __init__(self, product_ids: list[str]) -> None:
        self.product_ids = list(product_ids)
        joined = ", ".join(f"'{pid}'" for pid in self.product_ids)
        super().__init__(f"Sale references unknown product(s): {joined}")


class StorageError(DomainException):
    """A store could not be read or written."""


class UpdateFailure(StorageError):
    """The final persist step of a product update failed."""


class AuditWriteFailure(StorageError):
    """A price-history entry could not be appended."""
