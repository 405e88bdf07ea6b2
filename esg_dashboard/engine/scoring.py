"""Pillar composite scores.

Each pillar score is the mean of a fixed subset of percentage indicators,
rounded half away from zero. Missing indicators are skipped; a pillar with
no data at all scores None ("N/D").
"""

from __future__ import annotations

from typing import Iterable, Optional

from esg_dashboard.engine.formatting import is_number, round_half_up
from esg_dashboard.models.enums import Indicator, Pillar
from esg_dashboard.models.snapshot import MetricSnapshot

PILLAR_SCORE_INDICATORS: dict[Pillar, tuple[Indicator, ...]] = {
    Pillar.ENVIRONMENTAL: (
        Indicator.PORCENTAJE_RENOVABLE,
        Indicator.RECICLAJE_PORC,
        Indicator.RESIDUOS_VALORIZADOS_PORC,
    ),
    Pillar.SOCIAL: (
        Indicator.PORCENTAJE_MUJERES,
        Indicator.INDICE_SATISFACCION,
        Indicator.CAPACITACION_DERECHOS_HUMANOS_PORC,
        Indicator.EVALUACIONES_PROVEEDORES_SOSTENIBLES_PORC,
    ),
    Pillar.GOVERNANCE: (
        Indicator.CUMPLIMIENTO_NORMATIVO,
        Indicator.PORCENTAJE_DIRECTORES_INDEPENDIENTES,
        Indicator.DIVERSIDAD_DIRECTORIO_PORC,
        Indicator.CAPACITACION_GOBIERNO_ESG_PORC,
    ),
}


def compute_score(values: Iterable[object]) -> Optional[int]:
    """Rounded mean of the finite numbers in ``values``; None if there are none."""
    valid = [float(v) for v in values if is_number(v)]
    if not valid:
        return None
    return int(round_half_up(sum(valid) / len(valid)))


def compute_pillar_score(snapshot: Optional[MetricSnapshot], pillar: Pillar) -> Optional[int]:
    if snapshot is None:
        return None
    return compute_score(snapshot.get(ind) for ind in PILLAR_SCORE_INDICATORS[pillar])


def compute_pillar_scores(snapshot: Optional[MetricSnapshot]) -> dict[Pillar, Optional[int]]:
    return {pillar: compute_pillar_score(snapshot, pillar) for pillar in Pillar}
