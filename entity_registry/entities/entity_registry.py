"""
Entity Registry - Stores entities by name, keyed internally by opaque handles

Two tables are kept side by side:
- identifier -> Handle  (lookup by name)
- Handle -> entity      (storage, insertion order is the enumeration order)

Example:
    registry = EntityRegistry({"a": 10, "b": 20})
    registry.filter(lambda value, *_: value > 15)  # [20]
    registry.map(lambda value, *_: value * 2)      # [20, 40]
"""

import logging
import types
from typing import (
    Any,
    Callable,
    Dict,
    Generic,
    Iterator,
    List,
    Mapping,
    Optional,
    Tuple,
    TypeVar,
)

from .handle import Handle

logger = logging.getLogger(__name__)

EntityType = TypeVar("EntityType")
ResultType = TypeVar("ResultType")

HandleView = Mapping[Handle, EntityType]


def _bind(callback: Callable[..., Any], context: Any) -> Callable[..., Any]:
    """Bind callback to context so it receives the context as first argument."""
    if context is None:
        return callback
    return types.MethodType(callback, context)


class EntityRegistry(Generic[EntityType]):
    """
    Keyed registry that routes every lookup through a per-entry Handle.

    Guarantees after every public call:
    - both tables hold the same number of entries
    - an identifier maps to exactly one live handle
    - identifiers, handles and entities enumerate in the same order

    Not thread-safe; callers sharing a registry across threads must lock.
    """

    def __init__(self, entities: Optional[Mapping[str, EntityType]] = None):
        """
        Create a registry, optionally pre-populated.

        Args:
            entities: Mapping of identifier -> entity, added in its own order
        """
        self._handles: Dict[str, Handle] = {}
        self._entities: Dict[Handle, EntityType] = {}
        # Live read-only view handed to callbacks and iteration
        self._view: HandleView = types.MappingProxyType(self._entities)

        if entities:
            for identifier, entity in entities.items():
                self.add(identifier, entity)

        logger.debug(f"Initialized EntityRegistry with {len(self._entities)} entities")

    # Mutation

    def add(self, identifier: str, entity: EntityType) -> "EntityRegistry[EntityType]":
        """
        Add an entity, replacing any entity already stored under identifier.

        A new handle is minted on every call. When the identifier is already
        known its old handle is evicted, so the replaced entry moves to the
        end of the enumeration order.

        Returns:
            The registry itself, for chaining
        """
        previous = self._handles.pop(identifier, None)
        if previous is not None:
            del self._entities[previous]
            logger.debug(f"Replacing handle for '{identifier}': {previous!r}")

        handle = Handle(identifier)
        self._entities[handle] = entity
        self._handles[identifier] = handle

        logger.debug(f"Added '{identifier}' as {handle!r}")
        return self

    def remove(self, identifier: str) -> bool:
        """Remove an entity by identifier. Returns False if it was unknown."""
        handle = self._handles.pop(identifier, None)
        if handle is None:
            logger.debug(f"Remove skipped, unknown identifier '{identifier}'")
            return False

        del self._entities[handle]
        logger.debug(f"Removed '{identifier}' ({handle!r})")
        return True

    def clear(self) -> None:
        """Remove every entity."""
        count = len(self._entities)
        self._entities.clear()
        self._handles.clear()
        if count:
            logger.debug(f"Cleared {count} entities")

    # Lookup

    def get(self, identifier: str) -> Optional[EntityType]:
        """Get an entity by identifier, or None if not found."""
        handle = self._handles.get(identifier)
        if handle is None:
            return None
        return self._entities[handle]

    def get_handle(self, identifier: str) -> Optional[Handle]:
        """Get the live handle for an identifier, or None if not found."""
        return self._handles.get(identifier)

    def has(self, identifier: str) -> bool:
        return identifier in self._handles

    @property
    def size(self) -> int:
        return len(self._entities)

    @property
    def length(self) -> int:
        return self.size

    @property
    def is_empty(self) -> bool:
        return len(self._entities) == 0

    def get_all_entities(self) -> Dict[str, EntityType]:
        """
        Snapshot of identifier -> entity.

        The returned dict is new on every call; changing it does not touch
        the registry. Entities themselves are shared, not copied.
        """
        return {identifier: entity for identifier, entity in self._walk()}

    def get_all_identifiers(self) -> List[str]:
        return list(self._handles.keys())

    def get_all_handles(self) -> List[Handle]:
        return list(self._entities.keys())

    # Combinators

    def _walk(self) -> Iterator[Tuple[str, EntityType]]:
        for identifier, handle in self._handles.items():
            yield identifier, self._entities[handle]

    def for_each(
        self,
        callback: Callable[[str, EntityType, HandleView], Any],
        context: Any = None,
    ) -> None:
        """Call callback(identifier, entity, handle_view) for every entity."""
        fn = _bind(callback, context)
        for identifier, entity in self._walk():
            fn(identifier, entity, self._view)

    def map(
        self,
        callback: Callable[[EntityType, str, HandleView], ResultType],
        context: Any = None,
    ) -> List[ResultType]:
        """Collect callback(entity, identifier, handle_view) for every entity."""
        fn = _bind(callback, context)
        return [fn(entity, identifier, self._view) for identifier, entity in self._walk()]

    def filter(
        self,
        callback: Callable[[EntityType, str, HandleView], Any],
        context: Any = None,
    ) -> List[EntityType]:
        """Entities for which callback(entity, identifier, handle_view) is truthy."""
        fn = _bind(callback, context)
        return [
            entity
            for identifier, entity in self._walk()
            if fn(entity, identifier, self._view)
        ]

    def find(
        self,
        callback: Callable[[EntityType, str, HandleView], Any],
        context: Any = None,
    ) -> Optional[EntityType]:
        """
        Find an entity matching callback.

        Note: every entity is visited and the LAST match wins, not the first.
        Callers relying on first-match semantics should use filter()[0].

        Returns:
            The last matching entity, or None if nothing matched
        """
        fn = _bind(callback, context)
        result: Optional[EntityType] = None
        for identifier, entity in self._walk():
            if fn(entity, identifier, self._view):
                result = entity
        return result

    def reduce(
        self,
        callback: Callable[[ResultType, EntityType, str, HandleView], ResultType],
        initial: ResultType,
        context: Any = None,
    ) -> ResultType:
        """Left fold: callback(accumulator, entity, identifier, handle_view)."""
        fn = _bind(callback, context)
        accumulator = initial
        for identifier, entity in self._walk():
            accumulator = fn(accumulator, entity, identifier, self._view)
        return accumulator

    # Protocols

    def __iter__(self) -> Iterator[Tuple[EntityType, Handle, Handle, HandleView]]:
        """
        Iterate as (entity, handle, handle, handle_view).

        The handle appears twice in each item to keep the tuple shape stable
        for existing callers. Adding or removing entities while iterating is
        not supported.
        """
        for handle, entity in zip(self._handles.values(), self._entities.values()):
            yield entity, handle, handle, self._view

    def __len__(self) -> int:
        return len(self._entities)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._handles

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.get_all_entities()!r})"
