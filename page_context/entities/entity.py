"""
Entity domain entity.
"""

from typing import Any, Optional, Union


class Entity:
    """
    Content entity (node, term, user...) identified by its type and internal id.
    """

    def __init__(
        self,
        entity_type_id: str,
        id: Union[int, str],
        uuid: Optional[str] = None,
        revision_id: Optional[int] = None,
        label: Optional[str] = None,
    ):
        """
        Initialize the Entity.

        Args:
            entity_type_id: Entity type identifier (e.g. "node")
            id: Internal identifier of the entity
            uuid: Universally unique identifier, if the type supports UUIDs
            revision_id: Revision identifier, if the type is revisionable
            label: Human-readable label

        Raises:
            ValueError: If the entity type or id is missing
        """
        if not entity_type_id or not isinstance(entity_type_id, str):
            raise ValueError("Entity type id must be a non-empty string")
        if id is None or id == "":
            raise ValueError("Entity id is required")

        self.entity_type_id = entity_type_id
        self.id = id
        self.uuid = uuid or None
        self.revision_id = revision_id
        self.label = label or None

    def get_details(self) -> dict[str, Any]:
        """
        Get comprehensive entity details.

        Returns:
            Dictionary with entity information
        """
        return {
            "entity_type_id": self.entity_type_id,
            "id": self.id,
            "uuid": self.uuid,
            "revision_id": self.revision_id,
            "label": self.label,
        }

    def __str__(self) -> str:
        """String representation of the Entity."""
        parts = [f"type='{self.entity_type_id}'", f"id={self.id!r}"]
        if self.revision_id is not None:
            parts.append(f"revision_id={self.revision_id}")
        if self.label:
            parts.append(f"label='{self.label}'")
        return f"Entity({', '.join(parts)})"

    def __repr__(self) -> str:
        """Detailed string representation of the Entity."""
        return f"Entity(entity_type_id='{self.entity_type_id}', id={self.id!r})"
