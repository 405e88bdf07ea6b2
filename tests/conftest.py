"""Shared test fixtures for the ESG dashboard test suite."""

import pytest

from esg_dashboard.models.audit import AuditFinding
from esg_dashboard.models.enums import Pillar, Severity
from esg_dashboard.models.snapshot import HistoryRecord, MetricSnapshot


def make_snapshot(company_id=1, period="2024", environmental=None, social=None, governance=None):
    """Helper to create a MetricSnapshot with minimal boilerplate."""
    return MetricSnapshot(
        company_id=company_id,
        period=period,
        environmental=environmental or {},
        social=social or {},
        governance=governance or {},
    )


def make_finding(
    indicator="emisionesCO2",
    category=Pillar.ENVIRONMENTAL,
    severity=Severity.CRITICAL,
    period="2024",
    message="Valor fuera de rango",
    label="",
):
    return AuditFinding(
        indicator=indicator,
        category=category,
        period=period,
        severity=severity,
        message=message,
        label=label,
    )


@pytest.fixture
def snapshot_factory():
    return make_snapshot


@pytest.fixture
def finding_factory():
    return make_finding


@pytest.fixture
def healthy_snapshot() -> MetricSnapshot:
    """A company comfortably inside every fallback threshold."""
    return make_snapshot(
        environmental={
            "energiaKwh": 12500,
            "emisionesCO2": 18.5,
            "porcentajeRenovable": 72,
            "reciclajePorc": 64,
            "residuosValorizadosPorc": 58,
            "residuosPeligrososTon": 1.2,
            "permisosAmbientalesAlDia": True,
            "incidentesAmbientales": 0,
        },
        social={
            "porcentajeMujeres": 46,
            "indiceSatisfaccion": 82,
            "capacitacionDerechosHumanosPorc": 90,
            "evaluacionesProveedoresSosteniblesPorc": 70,
            "accidentesLaborales": 0,
            "tasaRotacion": 8,
            "politicaDerechosHumanos": True,
            "inversionComunidadUsd": 65000,
        },
        governance={
            "cumplimientoNormativo": 96,
            "porcentajeDirectoresIndependientes": 55,
            "diversidadDirectorioPorc": 40,
            "capacitacionGobiernoEsgPorc": 85,
            "comiteSostenibilidad": True,
            "canalDenunciasActivo": True,
            "reporteSostenibilidadVerificado": True,
            "evaluacionRiesgosEsgTrimestral": True,
            "reunionesStakeholders": 6,
            "auditoriasCompliance": 2,
        },
    )


@pytest.fixture
def energy_history() -> list[HistoryRecord]:
    return [
        HistoryRecord(period="2023", values={"energiaKwh": 1000}),
        HistoryRecord(period="2024", values={"energiaKwh": 1200}),
    ]


@pytest.fixture
def audit_summary_payload() -> dict:
    """Shape returned by GET /audit/summary."""
    return {
        "run": {
            "id": 14,
            "companyId": 1,
            "period": "2024",
            "status": "completed-with-findings",
            "totalIndicators": 42,
            "totalFindings": 3,
            "severityBreakdown": {"critical": 1, "warning": 1, "info": 1},
            "finishedAt": "2024-05-02T10:15:00Z",
            "summary": "Se detectaron 3 hallazgos.",
        },
        "findings": [
            {
                "indicator": "emisionesCO2",
                "label": "Emisiones CO₂",
                "category": "environmental",
                "period": "2024",
                "severity": "critical",
                "message": "Emisiones muy por encima del promedio histórico.",
                "suggestion": "Revisar la medición de alcance 1.",
            },
            {
                "indicator": "tasaRotacion",
                "label": "Tasa de rotación",
                "category": "social",
                "period": "2024",
                "severity": "warning",
                "message": "La rotación creció 9 puntos.",
            },
            {
                "indicator": "emisionesCO2",
                "label": "Emisiones CO₂",
                "category": "environmental",
                "period": "2024",
                "severity": "info",
                "message": "Falta la evidencia del cálculo.",
            },
        ],
        "indicatorSeverity": {"emisionesCO2": "critical", "tasaRotacion": "warning"},
        "totals": {"critical": 1, "warning": 1, "info": 1},
    }
