"""Property records and their one-line text representation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, TypeVar

FIELD_COUNT = 22
YES = "sim"
NO = "nao"

_T = TypeVar("_T")


class RecordError(ValueError):
    """Raised when a line of the database cannot be read as a property."""


@dataclass
class Property:
    """A property offered for sale, rent or seasonal rent."""

    kind: str
    purpose: str
    address: str
    neighborhood: str
    city: str
    area: float
    value: float
    iptu: float
    bedrooms: int
    suites: int
    bathrooms: int
    parking_spaces: int
    kitchen: str
    living_room: str
    balcony: str
    service_area: str
    floor: str
    condition: str
    wardrobes: bool = False
    air_conditioning: bool = False
    heater: bool = False
    fan: bool = False

    def amenity_labels(self) -> list[str]:
        """Short labels of the amenities this property has, in a fixed order."""
        flags = (
            (self.wardrobes, "Armários"),
            (self.air_conditioning, "Ar-Cond."),
            (self.heater, "Aquecedor"),
            (self.fan, "Ventilador"),
        )
        return [label for present, label in flags if present]


def _convert(text: str, convert: Callable[[str], _T], name: str) -> _T:
    try:
        return convert(text)
    except ValueError:
        raise RecordError(f"invalid {name}: {text!r}") from None


def parse_line(line: str) -> Property:
    """Build a property from a line of whitespace-separated fields.

    Tokens beyond the twenty-second are ignored; fewer tokens is an error.
    A yes/no field counts as yes only when it reads exactly ``sim``.
    """
    tokens = line.split()
    if len(tokens) < FIELD_COUNT:
        raise RecordError(
            f"expected {FIELD_COUNT} fields, found {len(tokens)}: {line.strip()!r}"
        )
    (
        kind, purpose, address, neighborhood, city,
        area, value, iptu,
        bedrooms, suites, bathrooms, parking,
        kitchen, living_room, balcony, service_area, floor, condition,
        wardrobes, air_conditioning, heater, fan,
    ) = tokens[:FIELD_COUNT]
    return Property(
        kind=kind,
        purpose=purpose,
        address=address,
        neighborhood=neighborhood,
        city=city,
        area=_convert(area, float, "area"),
        value=_convert(value, float, "value"),
        iptu=_convert(iptu, float, "iptu"),
        bedrooms=_convert(bedrooms, int, "bedrooms"),
        suites=_convert(suites, int, "suites"),
        bathrooms=_convert(bathrooms, int, "bathrooms"),
        parking_spaces=_convert(parking, int, "parking spaces"),
        kitchen=kitchen,
        living_room=living_room,
        balcony=balcony,
        service_area=service_area,
        floor=floor,
        condition=condition,
        wardrobes=wardrobes == YES,
        air_conditioning=air_conditioning == YES,
        heater=heater == YES,
        fan=fan == YES,
    )


def _flag(value: bool) -> str:
    return YES if value else NO


def format_line(prop: Property) -> str:
    """Render a property as one line of space-separated fields, without newline."""
    parts = [
        prop.kind,
        prop.purpose,
        prop.address,
        prop.neighborhood,
        prop.city,
        f"{prop.area:g}",
        f"{prop.value:g}",
        f"{prop.iptu:g}",
        str(prop.bedrooms),
        str(prop.suites),
        str(prop.bathrooms),
        str(prop.parking_spaces),
        prop.kitchen,
        prop.living_room,
        prop.balcony,
        prop.service_area,
        prop.floor,
        prop.condition,
        _flag(prop.wardrobes),
        _flag(prop.air_conditioning),
        _flag(prop.heater),
        _flag(prop.fan),
    ]
    return " ".join(parts)