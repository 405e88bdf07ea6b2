"""Tests for the alert feed."""

from esg_dashboard.engine.alerts import (
    audit_alert_id,
    build_alerts,
    build_fallback_alerts,
    map_audit_severity,
)
from esg_dashboard.indicators.rules import FALLBACK_RULES
from esg_dashboard.models.enums import AlertSeverity, Pillar, Severity

from conftest import make_finding, make_snapshot


class TestFallbackAlerts:
    def test_renewable_and_emissions_in_rule_order(self):
        snapshot = make_snapshot(environmental={"porcentajeRenovable": 35, "emisionesCO2": 60})

        alerts = build_alerts([], snapshot)

        assert [a.title for a in alerts] == ["Emisiones elevadas", "Energía renovable baja"]
        assert [a.severity for a in alerts] == [AlertSeverity.DANGER, AlertSeverity.WARNING]
        assert [a.id for a in alerts] == ["env-emisiones", "env-renovable"]

    def test_every_rule_can_fire(self):
        snapshot = make_snapshot(
            environmental={
                "emisionesCO2": 51,
                "porcentajeRenovable": 10,
                "residuosPeligrososTon": 6,
                "permisosAmbientalesAlDia": False,
                "incidentesAmbientales": 1,
            },
            social={
                "accidentesLaborales": 1,
                "tasaRotacion": 16,
                "indiceSatisfaccion": 60,
                "politicaDerechosHumanos": False,
                "capacitacionDerechosHumanosPorc": 20,
                "inversionComunidadUsd": 1000,
            },
            governance={
                "cumplimientoNormativo": 70,
                "porcentajeDirectoresIndependientes": 30,
                "comiteSostenibilidad": False,
                "canalDenunciasActivo": False,
                "reporteSostenibilidadVerificado": False,
                "evaluacionRiesgosEsgTrimestral": False,
                "reunionesStakeholders": 1,
            },
        )

        alerts = build_fallback_alerts(snapshot)

        assert [a.id for a in alerts] == [rule.id for rule in FALLBACK_RULES]

    def test_thresholds_are_strict(self):
        snapshot = make_snapshot(
            environmental={"emisionesCO2": 50, "porcentajeRenovable": 40},
            social={"tasaRotacion": 15},
        )
        assert build_alerts([], snapshot) == []

    def test_no_snapshot_no_alerts(self):
        assert build_alerts([], None) == []


class TestAuditAlerts:
    def test_single_critical_finding_is_the_only_alert(self):
        snapshot = make_snapshot(environmental={"porcentajeRenovable": 35, "emisionesCO2": 60})
        finding = make_finding(label="Emisiones CO₂", message="Pico anómalo de emisiones")

        alerts = build_alerts([finding], snapshot)

        assert len(alerts) == 1
        assert alerts[0].severity == AlertSeverity.DANGER
        assert alerts[0].title == "Emisiones CO₂"
        assert alerts[0].message == "Pico anómalo de emisiones"

    def test_duplicate_keys_collapse_to_first(self):
        findings = [
            make_finding(message="primero"),
            make_finding(message="segundo", severity=Severity.INFO),
        ]

        alerts = build_alerts(findings, None)

        assert len(alerts) == 1
        assert alerts[0].message == "primero"
        assert alerts[0].severity == AlertSeverity.DANGER

    def test_order_follows_findings(self):
        findings = [
            make_finding(indicator="tasaRotacion", category=Pillar.SOCIAL, severity=Severity.WARNING),
            make_finding(indicator="emisionesCO2"),
        ]
        alerts = build_alerts(findings, None)
        assert [a.id for a in alerts] == [
            "audit-tasaRotacion-social-2024",
            "audit-emisionesCO2-environmental-2024",
        ]

    def test_title_falls_back_to_indicator(self):
        alerts = build_alerts([make_finding(label="")], None)
        assert alerts[0].title == "emisionesCO2"

    def test_id_without_period(self):
        assert audit_alert_id(make_finding(period=None)) == "audit-emisionesCO2-environmental-current"

    def test_severity_mapping(self):
        assert map_audit_severity(Severity.CRITICAL) == AlertSeverity.DANGER
        assert map_audit_severity("warning") == AlertSeverity.WARNING
        assert map_audit_severity("info") == AlertSeverity.INFO
        assert map_audit_severity("catastrophic") == AlertSeverity.WARNING
        assert map_audit_severity(None) == AlertSeverity.WARNING
