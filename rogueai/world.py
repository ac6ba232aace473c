"""A small entity-component store: entities hold components keyed by their type."""

from __future__ import annotations

from itertools import count
from typing import Any, Dict, Iterator, Optional, Tuple


class Entity:
    """A handle to a set of components living in a World."""

    __slots__ = ("_world", "_id", "_name", "_components")

    def __init__(self, world: World, entity_id: int, name: Optional[str] = None) -> None:
        self._world = world
        self._id = entity_id
        self._name = name
        self._components: Dict[type, Any] = {}

    @property
    def id(self) -> int:
        return self._id

    @property
    def name(self) -> Optional[str]:
        return self._name

    @property
    def world(self) -> World:
        return self._world

    def set(self, *args: Any) -> Entity:
        """Store each component instance under its own type, replacing older values."""
        for component in args:
            self._components[type(component)] = component
        return self

    def add(self, *args: Any) -> Entity:
        """Add tag types, or a (relation type, target entity) pair."""
        if len(args) == 2 and isinstance(args[1], Entity):
            relation, target = args
            if not isinstance(relation, type):
                raise TypeError("relation must be a type")
            self._components[relation] = target
            return self
        for tag in args:
            if not isinstance(tag, type):
                raise TypeError(f"expected a component type, got {tag!r}")
            self._components.setdefault(tag, tag())
        return self

    def get(self, component_type: type) -> Any:
        """Return the component of that type, the target of a relation, or None."""
        return self._components.get(component_type)

    def has(self, *args: Any) -> bool:
        """Tell whether all given types are present, or whether a relation points at a target."""
        if len(args) == 2 and isinstance(args[1], Entity):
            return self._components.get(args[0]) is args[1]
        return all(t in self._components for t in args)

    def remove(self, component_type: type) -> Entity:
        """Drop the component of that type if present."""
        self._components.pop(component_type, None)
        return self

    def __repr__(self) -> str:
        label = f" {self._name!r}" if self._name else ""
        return f"<Entity {self._id}{label}>"


class World:
    """The container of all entities; supports named lookup and component queries."""

    def __init__(self) -> None:
        self._ids = count(1)
        self._entities: Dict[int, Entity] = {}
        self._names: Dict[str, Entity] = {}

    def entity(self, name: Optional[str] = None) -> Entity:
        """Create an entity; a name that already exists returns the existing entity."""
        if name is not None and name in self._names:
            return self._names[name]
        ent = Entity(self, next(self._ids), name)
        self._entities[ent.id] = ent
        if name is not None:
            self._names[name] = ent
        return ent

    def lookup(self, name: str) -> Optional[Entity]:
        """Return the entity with that name, or None."""
        return self._names.get(name)

    def query(self, *args: type) -> Iterator[Tuple[Any, ...]]:
        """Yield (entity, component, ...) for every live entity holding all given types."""
        for ent in list(self._entities.values()):
            if ent.id not in self._entities:
                continue
            if ent.has(*args):
                yield (ent, *(ent.get(t) for t in args))

    def delete(self, entity: Entity) -> None:
        """Remove an entity from the world; raise KeyError if it is not in it."""
        if self._entities.get(entity.id) is not entity:
            raise KeyError(f"{entity!r} is not in this world")
        del self._entities[entity.id]
        if entity.name is not None:
            self._names.pop(entity.name, None)

    def __len__(self) -> int:
        return len(self._entities)