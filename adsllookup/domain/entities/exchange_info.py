"""
ExchangeInfo Entity - ADSL exchange details for a single address.
No framework dependencies. Built only once every field has been extracted.
"""

import math
from dataclasses import asdict, dataclass, field
from typing import Any, Callable, Dict, List

from ..errors import ExtractionError


@dataclass
class EquipmentProvider:
    """A provider with DSL equipment installed at the exchange."""

    name: str
    status: str
    estimate: str  # Free text, e.g. "Active" or "Q3 2014"
    available: bool = False

    def to_dict(self) -> dict:
        return asdict(self)


# (capture name, ExchangeInfo attribute, label used in errors, conversion)
_PRIMARY_FIELDS = [
    ("zone", "zone", "zone", int),
    ("distance", "distance", "distance", float),
    ("cablelength", "cable_length", "cable length", float),
    ("speed", "estimated_speed", "speed", int),
]


def _convert(captures: Dict[str, str], key: str, label: str, cast: Callable) -> Any:
    try:
        value = cast(captures[key])
    except (KeyError, TypeError, ValueError) as exc:
        raise ExtractionError(label) from exc
    # float() overflows to inf instead of failing
    if isinstance(value, float) and not math.isfinite(value):
        raise ExtractionError(label)
    return value


def convert_primary_fields(captures: Dict[str, str]) -> Dict[str, Any]:
    """
    Convert the raw strings captured from the page into typed values.

    `captures` maps exchange / distance / cablelength / speed / zone to text.
    Returns keyword arguments for ExchangeInfo. The first field that fails
    to convert raises ExtractionError naming it; nothing falls back to zero.
    An estimated speed with a decimal point is rejected, not truncated.
    """
    exchange = captures.get("exchange")
    if not exchange:
        raise ExtractionError("exchange")

    converted: Dict[str, Any] = {"exchange": exchange}
    for key, attribute, label, cast in _PRIMARY_FIELDS:
        converted[attribute] = _convert(captures, key, label, cast)
    return converted


@dataclass
class ExchangeInfo:
    """
    Core entity describing the exchange that serves an address,
    its distance from the address and the providers present there.
    """

    exchange: str
    zone: int
    distance: float  # metres, as the crow flies
    cable_length: float  # metres
    estimated_speed: int
    nbn_available: bool = False
    providers: List[EquipmentProvider] = field(default_factory=list)

    @property
    def available_providers(self) -> List[EquipmentProvider]:
        return [p for p in self.providers if p.available]

    @property
    def has_available_provider(self) -> bool:
        return any(p.available for p in self.providers)

    def to_dict(self) -> dict:
        return {
            "exchange": self.exchange,
            "zone": self.zone,
            "distance": self.distance,
            "cable_length": self.cable_length,
            "estimated_speed": self.estimated_speed,
            "nbn_available": self.nbn_available,
            "providers": [p.to_dict() for p in self.providers],
        }
