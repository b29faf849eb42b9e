"""Statistics over a collection of properties."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable, Optional

from .models import Property

HOUSE = "casa"
OFFICE = "sala_comercial"
CERAMIC = "ceramica"
PURPOSES = ("venda", "locacao", "temporada")


def _percentage(part: int, whole: int) -> Optional[float]:
    return part / whole * 100 if whole else None


@dataclass
class Statistics:
    """Counts gathered from a set of properties."""

    total: int = 0
    purposes: Counter = field(default_factory=Counter)
    houses: int = 0
    houses_with_suites: int = 0
    offices: int = 0
    ceramic_offices: int = 0

    def purpose_percentage(self, purpose: str) -> Optional[float]:
        """Share of all properties with ``purpose``, or None if there are none."""
        return _percentage(self.purposes[purpose], self.total)

    def houses_with_suites_percentage(self) -> Optional[float]:
        """Share of houses with at least one suite, or None without houses."""
        return _percentage(self.houses_with_suites, self.houses)

    def ceramic_offices_percentage(self) -> Optional[float]:
        """Share of commercial rooms with ceramic floor, or None without any."""
        return _percentage(self.ceramic_offices, self.offices)


def compute_statistics(properties: Iterable[Property]) -> Statistics:
    """Gather the counts the statistical report is built from."""
    stats = Statistics()
    for prop in properties:
        stats.total += 1
        stats.purposes[prop.purpose] += 1
        if prop.kind == HOUSE:
            stats.houses += 1
            if prop.suites > 0:
                stats.houses_with_suites += 1
        if prop.kind == OFFICE:
            stats.offices += 1
            if prop.floor == CERAMIC:
                stats.ceramic_offices += 1
    return stats