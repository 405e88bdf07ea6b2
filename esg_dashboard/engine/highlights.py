"""Headline tiles shown above the dashboard, each with a tone."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from esg_dashboard.engine.formatting import format_currency, format_number, is_number
from esg_dashboard.engine.result import HeroHighlight
from esg_dashboard.models.enums import HighlightTone, Indicator
from esg_dashboard.models.snapshot import MetricSnapshot

MAX_HIGHLIGHTS = 4


@dataclass(frozen=True)
class ToneBands:
    """Tone cut-offs. ``higher_is_better`` flips the comparisons."""

    positive: float
    warning: float
    higher_is_better: bool = True

    def tone(self, value: float) -> HighlightTone:
        if self.higher_is_better:
            if value >= self.positive:
                return HighlightTone.POSITIVE
            if value >= self.warning:
                return HighlightTone.WARNING
            return HighlightTone.CRITICAL
        if value <= self.positive:
            return HighlightTone.POSITIVE
        if value <= self.warning:
            return HighlightTone.WARNING
        return HighlightTone.CRITICAL


@dataclass(frozen=True)
class HeroTile:
    id: str
    label: str
    indicator: Indicator
    bands: ToneBands
    formatter: Callable[[float], str]
    details: dict[HighlightTone, str]


HERO_TILES: tuple[HeroTile, ...] = (
    HeroTile(
        id="renewable",
        label="Energía renovable",
        indicator=Indicator.PORCENTAJE_RENOVABLE,
        bands=ToneBands(positive=60, warning=40),
        formatter=lambda v: f"{format_number(v, 1)}%",
        details={
            HighlightTone.POSITIVE: "Impulsa la transición energética",
            HighlightTone.WARNING: "Evaluar nuevas fuentes limpias",
            HighlightTone.CRITICAL: "Plan de acción para elevar el uso renovable",
        },
    ),
    HeroTile(
        id="emissions",
        label="Emisiones CO₂",
        indicator=Indicator.EMISIONES_CO2,
        bands=ToneBands(positive=20, warning=50, higher_is_better=False),
        formatter=lambda v: f"{format_number(v, 1)} t",
        details={
            HighlightTone.POSITIVE: "Desempeño bajo en emisiones",
            HighlightTone.WARNING: "Monitorear intensidad y eficiencia",
            HighlightTone.CRITICAL: "Implementar mitigaciones inmediatas",
        },
    ),
    HeroTile(
        id="community",
        label="Inversión social",
        indicator=Indicator.INVERSION_COMUNIDAD_USD,
        bands=ToneBands(positive=50000, warning=20000),
        formatter=format_currency,
        details={
            HighlightTone.POSITIVE: "Fortalece el impacto comunitario",
            HighlightTone.WARNING: "Considerar refuerzos en proyectos locales",
            HighlightTone.CRITICAL: "Planificar nuevas iniciativas de inversión",
        },
    ),
    HeroTile(
        id="compliance",
        label="Cumplimiento normativo",
        indicator=Indicator.CUMPLIMIENTO_NORMATIVO,
        bands=ToneBands(positive=85, warning=70),
        formatter=lambda v: f"{format_number(v, 1)}%",
        details={
            HighlightTone.POSITIVE: "Gobernanza alineada a estándares",
            HighlightTone.WARNING: "Revisar planes de cumplimiento",
            HighlightTone.CRITICAL: "Atender brechas regulatorias urgentes",
        },
    ),
)


def build_hero_highlights(snapshot: Optional[MetricSnapshot]) -> list[HeroHighlight]:
    """Tiles for the indicators the snapshot has values for."""
    if snapshot is None:
        return []
    highlights = []
    for tile in HERO_TILES:
        value = snapshot.get(tile.indicator)
        if not is_number(value):
            continue
        tone = tile.bands.tone(value)
        highlights.append(HeroHighlight(
            id=tile.id,
            label=tile.label,
            value=tile.formatter(value),
            detail=tile.details[tone],
            tone=tone,
        ))
    return highlights[:MAX_HIGHLIGHTS]
