"""Driver number to display-name lookup."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

from pydantic import TypeAdapter, ValidationError

from f1laps.exceptions import F1LapsError

DEFAULT_ROSTER: Mapping[int, str] = MappingProxyType({
    1: "Max Verstappen",
    2: "Logan Sargeant",
    3: "Daniel Ricciardo",
    4: "Lando Norris",
    10: "Pierre Gasly",
    11: "Sergio Perez",
    14: "Fernando Alonso",
    16: "Charles Leclerc",
    18: "Lance Stroll",
    20: "Kevin Magnussen",
    21: "Nyck de Vries",
    22: "Yuki Tsunoda",
    23: "Alexander Albon",
    24: "Zhou Guanyu",
    27: "Nico Hulkenberg",
    30: "Liam Lawson",
    31: "Esteban Ocon",
    40: "Liam Lawson",
    43: "Franco Colapinto",
    44: "Lewis Hamilton",
    55: "Carlos Sainz",
    63: "George Russell",
    77: "Valtteri Bottas",
    81: "Oscar Piastri",
})

_ROSTER_ADAPTER = TypeAdapter(dict[int, str])


@dataclass(frozen=True)
class DriverDirectory:
    """Maps car numbers to driver names; unknown numbers get a generated label."""

    roster: Mapping[int, str] = field(default_factory=lambda: DEFAULT_ROSTER)

    def name_for(self, driver_number: int) -> str:
        return self.roster.get(driver_number, f"Driver #{driver_number}")

    @classmethod
    def from_file(cls, path: str | Path) -> DriverDirectory:
        """Load a roster from a JSON object such as ``{"1": "Max Verstappen"}``."""
        try:
            raw = Path(path).read_text(encoding="utf-8")
            roster = _ROSTER_ADAPTER.validate_json(raw)
        except (OSError, ValidationError) as exc:
            raise F1LapsError(f"Could not load driver roster from {path}: {exc}") from exc
        return cls(roster=MappingProxyType(roster))
