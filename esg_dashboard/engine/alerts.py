"""Alert feed construction.

With findings, every finding becomes an alert (first occurrence per id
wins, finding order kept). Without findings, each tripped fallback rule
becomes an alert in rule-table order. The two branches never mix.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence

from esg_dashboard.engine.result import Alert
from esg_dashboard.indicators.rules import FALLBACK_RULES, ThresholdRule, evaluate_rules
from esg_dashboard.models.audit import AuditFinding
from esg_dashboard.models.enums import AlertSeverity
from esg_dashboard.models.snapshot import MetricSnapshot

_AUDIT_SEVERITY_MAP: dict[str, AlertSeverity] = {
    "critical": AlertSeverity.DANGER,
    "warning": AlertSeverity.WARNING,
    "info": AlertSeverity.INFO,
}


def map_audit_severity(severity: Any) -> AlertSeverity:
    """critical -> danger, warning -> warning, info -> info, else warning."""
    key = getattr(severity, "value", severity)
    return _AUDIT_SEVERITY_MAP.get(key, AlertSeverity.WARNING)


def audit_alert_id(finding: AuditFinding) -> str:
    return f"audit-{finding.indicator}-{finding.category.value}-{finding.period or 'current'}"


def build_audit_alerts(findings: Sequence[AuditFinding]) -> list[Alert]:
    seen: set[str] = set()
    alerts: list[Alert] = []
    for finding in findings:
        alert_id = audit_alert_id(finding)
        if alert_id in seen:
            continue
        seen.add(alert_id)
        alerts.append(Alert(
            id=alert_id,
            title=finding.display_label,
            message=finding.message,
            severity=map_audit_severity(finding.severity),
        ))
    return alerts


def _rule_alert(rule: ThresholdRule) -> Alert:
    return Alert(id=rule.id, title=rule.title, message=rule.message, severity=rule.severity)


def build_fallback_alerts(
    snapshot: Optional[MetricSnapshot],
    rules: tuple[ThresholdRule, ...] = FALLBACK_RULES,
) -> list[Alert]:
    return [_rule_alert(rule) for rule in evaluate_rules(snapshot, rules)]


def build_alerts(
    findings: Sequence[AuditFinding],
    snapshot: Optional[MetricSnapshot],
) -> list[Alert]:
    """Alert feed for one evaluation. An empty list means "no alerts"."""
    if findings:
        return build_audit_alerts(findings)
    return build_fallback_alerts(snapshot)
