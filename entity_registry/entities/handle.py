"""
Handle - Opaque per-entry token used as the key into the entity table

Every call to EntityRegistry.add() mints a new Handle. Two handles are never
equal, even when minted for the same identifier:

    Handle("jack") == Handle("jack")  # False

The identifier is kept on the handle for display only.
"""

import itertools
from typing import Iterator

_serials: Iterator[int] = itertools.count(1)


class Handle:
    """
    Unforgeable token minted for one identifier at one point in time.

    Equality and hashing are by identity, so a handle can only be obtained
    from the registry that minted it, never rebuilt from a string.
    """

    __slots__ = ("_identifier", "_serial")

    def __init__(self, identifier: str):
        self._identifier = identifier
        self._serial = next(_serials)

    @property
    def identifier(self) -> str:
        """Identifier this handle was minted for (display only)."""
        return self._identifier

    @property
    def serial(self) -> int:
        return self._serial

    def __repr__(self) -> str:
        return f"Handle({self._identifier!r})#{self._serial}"

    def __str__(self) -> str:
        return f"Handle({self._identifier})"
