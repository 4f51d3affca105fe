from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class EntityTypeDefinition:
    """Registration record of an entity type: what it supports and which storage backs it."""

    id: str
    label: str = ""
    revisionable: bool = False
    has_uuid: bool = True
    # Callable taking the definition and returning a storage; None is an invalid definition.
    storage_class: Optional[Any] = None
