"""Attribute stores keyed by hexes or edges.

Map data comes in four shapes: region attributes (biome), point attributes
(village, volcano), line attributes on the border between hexes (river,
coastline) and line attributes crossing between hexes (road, bridge). The
first two key on Hex, the last two on Edge, so a single store type keyed by
either covers all of them.

Keys are compared by value. Stores are filled once per key during a
generation phase and read afterwards; reading a key that was never written
is a phase-ordering bug and raises instead of returning a default.
"""

from typing import Generic, Hashable, Iterator, TypeVar


K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class MissingAttributeError(KeyError):
    """Raised when reading an attribute that was never written."""

    def __init__(self, store: str, key: object):
        self.store = store
        self.key = key
        super().__init__(f"{store}: no value for {key}")

    def __str__(self) -> str:
        return self.args[0]


class AttributeAlreadySetError(ValueError):
    """Raised when writing an attribute a second time."""

    def __init__(self, store: str, key: object):
        self.store = store
        self.key = key
        super().__init__(f"{store}: value for {key} already set")


class AttributeStore(Generic[K, V]):
    """Write-once mapping from a hex or edge to a value."""

    def __init__(self, name: str):
        self.name = name
        self._values: dict[K, V] = {}

    def get(self, key: K) -> V:
        """Return the stored value.

        Raises:
            MissingAttributeError: If the key was never written
        """
        try:
            return self._values[key]
        except KeyError:
            raise MissingAttributeError(self.name, key) from None

    def set(self, key: K, value: V) -> None:
        """Store a value for a key not yet written.

        Raises:
            AttributeAlreadySetError: If the key already has a value
        """
        if key in self._values:
            raise AttributeAlreadySetError(self.name, key)
        self._values[key] = value

    def has(self, key: K) -> bool:
        return key in self._values

    def delete(self, key: K) -> None:
        """Remove a value so the key can be written again."""
        try:
            del self._values[key]
        except KeyError:
            raise MissingAttributeError(self.name, key) from None

    def items(self) -> Iterator[tuple[K, V]]:
        return iter(self._values.items())

    def values(self) -> Iterator[V]:
        return iter(self._values.values())

    __getitem__ = get
    __setitem__ = set
    __contains__ = has
    __delitem__ = delete

    def __iter__(self) -> Iterator[K]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"AttributeStore({self.name!r}, {len(self)} entries)"
