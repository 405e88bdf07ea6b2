from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from esg_dashboard.models.enums import Indicator, Pillar, ValueKind

# Global registry -- maps Indicator -> IndicatorDefinition
_REGISTRY: dict[Indicator, IndicatorDefinition] = {}


@dataclass(frozen=True)
class IndicatorDefinition:
    """Validation and display metadata for one indicator."""

    indicator: Indicator
    pillar: Pillar
    kind: ValueKind
    label: str
    unit: str = ""
    minimum: Optional[float] = None
    maximum: Optional[float] = None
    integer: bool = False
    max_length: int = 500

    @property
    def key(self) -> str:
        return self.indicator.value


def register_indicator(
    indicator: Indicator,
    pillar: Pillar,
    kind: ValueKind,
    label: str,
    unit: str = "",
    minimum: Optional[float] = None,
    maximum: Optional[float] = None,
    integer: bool = False,
    max_length: int = 500,
) -> IndicatorDefinition:
    """Register an indicator definition in the library."""
    if indicator in _REGISTRY:
        raise ValueError(f"Indicator already registered: {indicator.value}")
    definition = IndicatorDefinition(
        indicator=indicator,
        pillar=pillar,
        kind=kind,
        label=label,
        unit=unit,
        minimum=minimum,
        maximum=maximum,
        integer=integer,
        max_length=max_length,
    )
    _REGISTRY[indicator] = definition
    return definition


def get_indicator(indicator: Indicator | str) -> Optional[IndicatorDefinition]:
    """Look up a definition by enum member or raw API key."""
    try:
        member = Indicator(indicator)
    except ValueError:
        return None
    return _REGISTRY.get(member)


def get_all_indicators() -> dict[Indicator, IndicatorDefinition]:
    """Return the full registry (read-only copy)."""
    return dict(_REGISTRY)


def indicators_for_pillar(pillar: Pillar) -> list[IndicatorDefinition]:
    """Definitions belonging to one pillar, in registration order."""
    return [d for d in _REGISTRY.values() if d.pillar == pillar]
