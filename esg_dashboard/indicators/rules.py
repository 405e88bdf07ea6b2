"""Static fallback rules used when an evaluation has no audit findings.

One table feeds both the alert list and the indicator severity map, so
the two views cannot disagree. Declaration order is the alert order.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Optional

from esg_dashboard.models.enums import AlertSeverity, Indicator

if TYPE_CHECKING:
    from esg_dashboard.models.snapshot import MetricSnapshot


class Comparison(str, Enum):
    GREATER_THAN = "gt"
    LESS_THAN = "lt"
    IS_FALSE = "is_false"


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)


@dataclass(frozen=True)
class ThresholdRule:
    """A single (indicator, predicate, severity) rule with its alert copy."""

    id: str
    indicator: Indicator
    comparison: Comparison
    severity: AlertSeverity
    title: str
    message: str
    threshold: Optional[float] = None

    def matches(self, value: Any) -> bool:
        """True when ``value`` trips the rule. Absent values never do."""
        if value is None:
            return False
        if self.comparison == Comparison.IS_FALSE:
            return value is False
        if not _is_number(value):
            return False
        if self.comparison == Comparison.GREATER_THAN:
            return value > self.threshold
        return value < self.threshold


FALLBACK_RULES: tuple[ThresholdRule, ...] = (
    ThresholdRule(
        id="env-emisiones",
        indicator=Indicator.EMISIONES_CO2,
        comparison=Comparison.GREATER_THAN,
        threshold=50,
        severity=AlertSeverity.DANGER,
        title="Emisiones elevadas",
        message="Las emisiones de CO₂ superan el umbral recomendado (50 ton).",
    ),
    ThresholdRule(
        id="env-renovable",
        indicator=Indicator.PORCENTAJE_RENOVABLE,
        comparison=Comparison.LESS_THAN,
        threshold=40,
        severity=AlertSeverity.WARNING,
        title="Energía renovable baja",
        message="El porcentaje de energía renovable está por debajo del 40%.",
    ),
    ThresholdRule(
        id="env-residuos",
        indicator=Indicator.RESIDUOS_PELIGROSOS_TON,
        comparison=Comparison.GREATER_THAN,
        threshold=5,
        severity=AlertSeverity.WARNING,
        title="Residuos peligrosos",
        message="El volumen de residuos peligrosos supera las 5 toneladas.",
    ),
    ThresholdRule(
        id="env-permisos",
        indicator=Indicator.PERMISOS_AMBIENTALES_AL_DIA,
        comparison=Comparison.IS_FALSE,
        severity=AlertSeverity.DANGER,
        title="Permisos ambientales vencidos",
        message="Hay permisos ambientales vencidos o pendientes de regularización.",
    ),
    ThresholdRule(
        id="env-incidentes",
        indicator=Indicator.INCIDENTES_AMBIENTALES,
        comparison=Comparison.GREATER_THAN,
        threshold=0,
        severity=AlertSeverity.WARNING,
        title="Incidentes ambientales",
        message="Se registraron incidentes ambientales que requieren planes de mitigación.",
    ),
    ThresholdRule(
        id="gov-cumplimiento",
        indicator=Indicator.CUMPLIMIENTO_NORMATIVO,
        comparison=Comparison.LESS_THAN,
        threshold=80,
        severity=AlertSeverity.DANGER,
        title="Cumplimiento normativo crítico",
        message="El cumplimiento normativo está por debajo del 80%.",
    ),
    ThresholdRule(
        id="gov-independencia",
        indicator=Indicator.PORCENTAJE_DIRECTORES_INDEPENDIENTES,
        comparison=Comparison.LESS_THAN,
        threshold=40,
        severity=AlertSeverity.WARNING,
        title="Independencia del directorio",
        message="La independencia del directorio es inferior al 40%.",
    ),
    ThresholdRule(
        id="gov-comite",
        indicator=Indicator.COMITE_SOSTENIBILIDAD,
        comparison=Comparison.IS_FALSE,
        severity=AlertSeverity.INFO,
        title="Falta de comité de sostenibilidad",
        message="No se cuenta con comité formal de sostenibilidad.",
    ),
    ThresholdRule(
        id="gov-canal",
        indicator=Indicator.CANAL_DENUNCIAS_ACTIVO,
        comparison=Comparison.IS_FALSE,
        severity=AlertSeverity.WARNING,
        title="Canal ético inactivo",
        message="El canal ético se encuentra inactivo: habilítalo para fortalecer la gobernanza.",
    ),
    ThresholdRule(
        id="gov-verificacion",
        indicator=Indicator.REPORTE_SOSTENIBILIDAD_VERIFICADO,
        comparison=Comparison.IS_FALSE,
        severity=AlertSeverity.INFO,
        title="Reporte sin verificación externa",
        message="El informe ESG aún no cuenta con verificación externa.",
    ),
    ThresholdRule(
        id="gov-riesgos",
        indicator=Indicator.EVALUACION_RIESGOS_ESG_TRIMESTRAL,
        comparison=Comparison.IS_FALSE,
        severity=AlertSeverity.WARNING,
        title="Evaluación de riesgos pendiente",
        message="Actualiza la evaluación trimestral de riesgos ESG para anticipar contingencias.",
    ),
    ThresholdRule(
        id="soc-accidentes",
        indicator=Indicator.ACCIDENTES_LABORALES,
        comparison=Comparison.GREATER_THAN,
        threshold=0,
        severity=AlertSeverity.DANGER,
        title="Accidentes laborales",
        message="Se registraron accidentes laborales en el periodo analizado.",
    ),
    ThresholdRule(
        id="soc-rotacion",
        indicator=Indicator.TASA_ROTACION,
        comparison=Comparison.GREATER_THAN,
        threshold=15,
        severity=AlertSeverity.WARNING,
        title="Rotación elevada",
        message="La tasa de rotación supera el 15%, revisa la retención de talento.",
    ),
    ThresholdRule(
        id="soc-satisfaccion",
        indicator=Indicator.INDICE_SATISFACCION,
        comparison=Comparison.LESS_THAN,
        threshold=70,
        severity=AlertSeverity.WARNING,
        title="Satisfacción baja",
        message="El índice de satisfacción del personal está por debajo de 70 puntos.",
    ),
    ThresholdRule(
        id="soc-derechos",
        indicator=Indicator.POLITICA_DERECHOS_HUMANOS,
        comparison=Comparison.IS_FALSE,
        severity=AlertSeverity.INFO,
        title="Política de derechos humanos pendiente",
        message="No hay política formal de derechos humanos publicada.",
    ),
    ThresholdRule(
        id="soc-capacitacion",
        indicator=Indicator.CAPACITACION_DERECHOS_HUMANOS_PORC,
        comparison=Comparison.LESS_THAN,
        threshold=50,
        severity=AlertSeverity.WARNING,
        title="Capacitación insuficiente",
        message="Menos del 50% del personal fue capacitado en derechos humanos.",
    ),
    ThresholdRule(
        id="soc-inversion",
        indicator=Indicator.INVERSION_COMUNIDAD_USD,
        comparison=Comparison.LESS_THAN,
        threshold=20000,
        severity=AlertSeverity.INFO,
        title="Inversión comunitaria baja",
        message="La inversión comunitaria anual está por debajo de la meta de 20.000 USD.",
    ),
    ThresholdRule(
        id="gov-stakeholders",
        indicator=Indicator.REUNIONES_STAKEHOLDERS,
        comparison=Comparison.LESS_THAN,
        threshold=4,
        severity=AlertSeverity.INFO,
        title="Relación con stakeholders",
        message="Se recomienda realizar al menos cuatro instancias formales con stakeholders al año.",
    ),
)


def evaluate_rules(
    snapshot: Optional[MetricSnapshot],
    rules: tuple[ThresholdRule, ...] = FALLBACK_RULES,
) -> list[ThresholdRule]:
    """Rules tripped by the snapshot, in declaration order."""
    if snapshot is None:
        return []
    return [rule for rule in rules if rule.matches(snapshot.get(rule.indicator))]
