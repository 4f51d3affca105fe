from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class EntityInterface(Protocol):
    """Anything exposing an entity type id and an id is treated as a loaded entity."""

    entity_type_id: str
    id: Any
