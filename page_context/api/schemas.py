"""
Pydantic models for API responses.
"""

from typing import Optional, Union

from pydantic import BaseModel, Field


class EntityInfo(BaseModel):
    """Schema for a resolved entity."""

    entity_type_id: str = Field(..., description="Entity type identifier")
    id: Union[int, str] = Field(..., description="Internal entity identifier")
    uuid: Optional[str] = Field(None, description="Universally unique identifier")
    revision_id: Optional[int] = Field(None, description="Revision identifier")
    label: Optional[str] = Field(None, description="Human-readable label")

    @classmethod
    def from_entity(cls, entity):
        """Create an EntityInfo schema from any entity."""
        return cls(
            entity_type_id=entity.entity_type_id,
            id=entity.id,
            uuid=getattr(entity, "uuid", None),
            revision_id=getattr(entity, "revision_id", None),
            label=getattr(entity, "label", None),
        )


class ErrorResponse(BaseModel):
    """Schema for error responses."""

    detail: str = Field(..., description="Error message")
