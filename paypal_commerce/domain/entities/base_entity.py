"""Base class for platform entities that can carry generic attributes."""

from dataclasses import dataclass


@dataclass(kw_only=True)
class BaseEntity:
    """Platform entity with an integer identity.

    Attributes:
        id: Persistent identifier. 0 means the entity has not been stored yet.
    """

    id: int = 0

    @property
    def key_group(self) -> str:
        """Generic-attribute key group (the entity type name)."""
        return type(self).__name__

    @property
    def is_persisted(self) -> bool:
        """True once the entity has been assigned an identifier."""
        return self.id > 0
