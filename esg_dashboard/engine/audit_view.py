"""Badges and stats for the automatic audit panel."""

from __future__ import annotations

from esg_dashboard.engine.pillars import SEVERITY_LABELS
from esg_dashboard.engine.result import AuditOverview, AuditStat, SeverityBadge
from esg_dashboard.models.audit import AuditSummary
from esg_dashboard.models.enums import AuditRunStatus, Severity

BADGE_ORDER = (Severity.CRITICAL, Severity.WARNING, Severity.INFO)

STATUS_LABELS: dict[AuditRunStatus, str] = {
    AuditRunStatus.PROCESSING: "En progreso",
    AuditRunStatus.COMPLETED: "Completada",
    AuditRunStatus.COMPLETED_WITH_FINDINGS: "Completada con hallazgos",
    AuditRunStatus.FAILED: "Fallida",
}


def build_audit_overview(summary: AuditSummary) -> AuditOverview:
    badges = [
        SeverityBadge(severity=s, label=SEVERITY_LABELS[s], count=summary.totals.get(s))
        for s in BADGE_ORDER
    ]

    run = summary.run
    if run is None:
        return AuditOverview(badges=badges, stats=[])

    status_label = STATUS_LABELS.get(run.status) if run.status else None
    status_label = status_label or run.raw_status or None

    total_findings = run.total_findings if run.total_findings is not None else len(summary.findings)
    stats = [
        AuditStat(id="indicators", label="Indicadores evaluados", value=str(run.total_indicators)),
        AuditStat(id="findings", label="Hallazgos detectados", value=str(total_findings)),
    ]
    if status_label:
        stats.append(AuditStat(id="status", label="Estado", value=status_label))

    return AuditOverview(
        badges=badges,
        stats=stats,
        status_label=status_label,
        finished_at=run.finished_at.isoformat() if run.finished_at else None,
        summary=run.summary,
    )
