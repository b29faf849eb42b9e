"""Filters over a sequence of properties.

Each filter returns ``(index, property)`` pairs, where ``index`` is the
zero-based position of the property in the sequence it was given.
"""

from __future__ import annotations

from typing import Iterable

from .models import Property

Match = tuple[int, Property]


def by_value_range(
    properties: Iterable[Property], purpose: str, minimum: float, maximum: float
) -> list[Match]:
    """Properties with the given purpose whose value lies in [minimum, maximum]."""
    return [
        (index, prop)
        for index, prop in enumerate(properties)
        if prop.purpose == purpose and minimum <= prop.value <= maximum
    ]


def by_amenities(
    properties: Iterable[Property],
    wardrobes: bool = False,
    air_conditioning: bool = False,
    heater: bool = False,
    fan: bool = False,
) -> list[Match]:
    """Properties that have every amenity that is required."""
    required = (wardrobes, air_conditioning, heater, fan)

    def satisfies(prop: Property) -> bool:
        present = (prop.wardrobes, prop.air_conditioning, prop.heater, prop.fan)
        return all(has or not wanted for wanted, has in zip(required, present))

    return [(index, prop) for index, prop in enumerate(properties) if satisfies(prop)]


def by_rooms(
    properties: Iterable[Property], min_bedrooms: int, min_suites: int
) -> list[Match]:
    """Properties with at least the given numbers of bedrooms and suites."""
    return [
        (index, prop)
        for index, prop in enumerate(properties)
        if prop.bedrooms >= min_bedrooms and prop.suites >= min_suites
    ]