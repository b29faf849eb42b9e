"""An ordered, bounded collection of properties."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from .database import MAX_PROPERTIES
from .models import Property


class CapacityError(Exception):
    """Raised when a catalog cannot hold any more properties."""


class Catalog:
    """Properties kept in insertion order, with no gaps and a fixed capacity."""

    def __init__(
        self,
        properties: Iterable[Property] = (),
        capacity: int = MAX_PROPERTIES,
    ) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[Property] = list(properties)
        if len(self._items) > capacity:
            raise CapacityError(
                f"{len(self._items)} properties exceed the capacity of {capacity}"
            )

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Property]:
        return iter(self._items)

    def __getitem__(self, index: int) -> Property:
        return self._items[index]

    def is_full(self) -> bool:
        """True when no further property can be added."""
        return len(self._items) >= self.capacity

    def add(self, prop: Property) -> None:
        """Append ``prop``; raise ``CapacityError`` when the catalog is full."""
        if self.is_full():
            raise CapacityError(
                f"maximum number of properties reached ({self.capacity})"
            )
        self._items.append(prop)

    def find_by_address(self, address: str) -> Optional[int]:
        """Index of the first property at exactly ``address``, or None."""
        return next(
            (index for index, prop in enumerate(self._items) if prop.address == address),
            None,
        )

    def remove(self, index: int) -> Property:
        """Remove and return the property at ``index``; later ones move left."""
        if not 0 <= index < len(self._items):
            raise IndexError(f"no property at position {index}")
        return self._items.pop(index)