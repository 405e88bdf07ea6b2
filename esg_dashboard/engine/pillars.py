"""Pillar summary cards and card-level severity resolution."""

from __future__ import annotations

from typing import Callable, Iterable, Mapping, Optional

from esg_dashboard.engine.formatting import NOT_AVAILABLE, format_number, format_score
from esg_dashboard.engine.result import PillarCard, PillarHighlightRow
from esg_dashboard.engine.scoring import compute_pillar_scores
from esg_dashboard.models.audit import SEVERITY_PRIORITY, parse_severity
from esg_dashboard.models.enums import Indicator, Pillar, Severity
from esg_dashboard.models.snapshot import MetricSnapshot

SEVERITY_LABELS: dict[Severity, str] = {
    Severity.CRITICAL: "Crítico",
    Severity.WARNING: "Advertencia",
    Severity.INFO: "Observación",
}

PILLAR_TITLES: dict[Pillar, str] = {
    Pillar.ENVIRONMENTAL: "Ambiental",
    Pillar.SOCIAL: "Social",
    Pillar.GOVERNANCE: "Gobernanza",
}

PILLAR_DESCRIPTIONS: dict[Pillar, str] = {
    Pillar.ENVIRONMENTAL: "Uso responsable de recursos, energía y emisiones.",
    Pillar.SOCIAL: "Talento, comunidad y bienestar de las personas.",
    Pillar.GOVERNANCE: "Transparencia, ética corporativa y cumplimiento.",
}


def _with_suffix(suffix: str, digits: int) -> Callable[[float], str]:
    return lambda value: f"{format_number(value, digits)}{suffix}"


# (indicator, label, formatter) per pillar card, in display order.
HIGHLIGHTS: dict[Pillar, tuple[tuple[Indicator, str, Callable[[float], str]], ...]] = {
    Pillar.ENVIRONMENTAL: (
        (Indicator.ENERGIA_KWH, "Energía total", _with_suffix(" kWh", 0)),
        (Indicator.EMISIONES_CO2, "Emisiones CO₂", _with_suffix(" t", 1)),
        (Indicator.PORCENTAJE_RENOVABLE, "Energía renovable", _with_suffix("%", 1)),
    ),
    Pillar.SOCIAL: (
        (Indicator.PORCENTAJE_MUJERES, "Mujeres en liderazgo", _with_suffix("%", 1)),
        (Indicator.INDICE_SATISFACCION, "Índice de satisfacción", _with_suffix("%", 1)),
        (Indicator.INVERSION_COMUNIDAD_USD, "Inversión comunitaria", lambda v: f"$ {format_number(v, 0)}"),
    ),
    Pillar.GOVERNANCE: (
        (Indicator.CUMPLIMIENTO_NORMATIVO, "Cumplimiento normativo", _with_suffix("%", 1)),
        (Indicator.PORCENTAJE_DIRECTORES_INDEPENDIENTES, "Directores independientes", _with_suffix("%", 1)),
        (Indicator.AUDITORIAS_COMPLIANCE, "Auditorías de compliance", _with_suffix("", 0)),
    ),
}

HIGHLIGHT_INDICATORS: dict[Pillar, tuple[Indicator, ...]] = {
    pillar: tuple(indicator for indicator, _, _ in rows) for pillar, rows in HIGHLIGHTS.items()
}


def resolve_pillar_severity(
    highlight_indicators: Iterable[Indicator | str],
    indicator_severity: Mapping[str, Severity | str],
) -> Optional[Severity]:
    """Highest severity among the highlighted indicators, or None.

    Priority is critical > warning > info; input order does not matter.
    """
    resolved: Optional[Severity] = None
    for indicator in highlight_indicators:
        key = getattr(indicator, "value", indicator)
        severity = parse_severity(indicator_severity.get(key))
        if severity is None:
            continue
        if resolved is None or SEVERITY_PRIORITY[severity] > SEVERITY_PRIORITY[resolved]:
            resolved = severity
    return resolved


def build_pillar_cards(
    snapshot: Optional[MetricSnapshot],
    indicator_severity: Mapping[str, Severity],
    scores: Optional[Mapping[Pillar, Optional[int]]] = None,
) -> list[PillarCard]:
    """One summary card per pillar; empty when there is no snapshot."""
    if snapshot is None:
        return []
    if scores is None:
        scores = compute_pillar_scores(snapshot)

    cards = []
    for pillar, rows in HIGHLIGHTS.items():
        highlights = []
        for indicator, label, formatter in rows:
            value = snapshot.get(indicator)
            severity = parse_severity(indicator_severity.get(indicator.value))
            highlights.append(PillarHighlightRow(
                indicator=indicator.value,
                label=label,
                value=formatter(value) if value is not None else NOT_AVAILABLE,
                severity=severity,
                severity_label=SEVERITY_LABELS[severity] if severity else None,
            ))

        score = scores.get(pillar)
        cards.append(PillarCard(
            pillar=pillar,
            title=PILLAR_TITLES[pillar],
            description=PILLAR_DESCRIPTIONS[pillar],
            score=score,
            score_label=f"{format_score(score)}%" if score is not None else format_score(None),
            highlights=highlights,
            severity=resolve_pillar_severity(HIGHLIGHT_INDICATORS[pillar], indicator_severity),
        ))
    return cards
