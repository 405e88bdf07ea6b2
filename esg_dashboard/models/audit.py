"""Audit run, finding and summary models.

Payloads come from ``GET /audit/summary`` and ``POST /audit/run``. Both
answer ``{run, findings, indicatorSeverity}``; the summary endpoint also
sends ``totals`` while the run endpoint only has the run's breakdown.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Iterable, Mapping, Optional

from esg_dashboard.errors import ValidationError
from esg_dashboard.models.enums import AuditRunStatus, Pillar, Severity

logger = logging.getLogger(__name__)

SEVERITY_PRIORITY: dict[Severity, int] = {
    Severity.CRITICAL: 3,
    Severity.WARNING: 2,
    Severity.INFO: 1,
}


def parse_severity(raw: Any, default: Optional[Severity] = None) -> Optional[Severity]:
    """Parse a severity string; unknown values yield ``default``."""
    if isinstance(raw, Severity):
        return raw
    if not isinstance(raw, str):
        return default
    try:
        return Severity(raw.strip().lower())
    except ValueError:
        return default


def _parse_int(raw: Any, default: Optional[int] = 0) -> Optional[int]:
    if raw is None or isinstance(raw, bool):
        return default
    try:
        return int(raw)
    except (TypeError, ValueError):
        return default


def _parse_timestamp(raw: Any) -> Optional[datetime]:
    if isinstance(raw, datetime):
        return raw
    if not isinstance(raw, str) or not raw.strip():
        return None
    try:
        return datetime.fromisoformat(raw.strip().replace("Z", "+00:00"))
    except ValueError:
        logger.warning(f"Unparseable audit timestamp: {raw!r}")
        return None


@dataclass(frozen=True)
class SeverityCounts:
    critical: int = 0
    warning: int = 0
    info: int = 0

    def get(self, severity: Severity) -> int:
        return getattr(self, Severity(severity).value)

    @property
    def total(self) -> int:
        return self.critical + self.warning + self.info

    @classmethod
    def from_api(cls, raw: Any) -> Optional[SeverityCounts]:
        if not isinstance(raw, Mapping):
            return None
        return cls(
            critical=_parse_int(raw.get("critical")),
            warning=_parse_int(raw.get("warning")),
            info=_parse_int(raw.get("info")),
        )


@dataclass(frozen=True)
class AuditFinding:
    """One anomaly detected by an audit run (rule based or AI based)."""

    indicator: str
    category: Pillar
    period: Optional[str]
    severity: Severity
    message: str
    label: str = ""
    suggestion: Optional[str] = None

    @property
    def key(self) -> tuple[str, Pillar, Optional[str]]:
        """Identity used to collapse duplicates."""
        return (self.indicator, self.category, self.period)

    @property
    def display_label(self) -> str:
        return self.label or self.indicator

    @classmethod
    def from_api(cls, raw: Any) -> AuditFinding:
        """Normalize one finding payload.

        Raises ValidationError when the indicator or category is missing or
        unknown. Unrecognised severities are read as warning.
        """
        if not isinstance(raw, Mapping):
            raise ValidationError("Finding payload must be an object")
        indicator = str(raw.get("indicator") or "").strip()
        if not indicator:
            raise ValidationError("Finding has no indicator", field="indicator")
        try:
            category = Pillar(raw.get("category"))
        except ValueError:
            raise ValidationError(
                f"Unknown finding category: {raw.get('category')!r}", field="category"
            ) from None

        severity = parse_severity(raw.get("severity"))
        if severity is None:
            logger.warning(f"Finding {indicator} has unknown severity {raw.get('severity')!r}; reading as warning")
            severity = Severity.WARNING

        period = raw.get("period")
        return cls(
            indicator=indicator,
            category=category,
            period=str(period) if period not in (None, "") else None,
            severity=severity,
            message=str(raw.get("message") or ""),
            label=str(raw.get("label") or ""),
            suggestion=raw.get("suggestion") or None,
        )


def normalize_findings(raw_findings: Optional[Iterable[Any]]) -> list[AuditFinding]:
    """Normalize a findings list, dropping malformed entries."""
    findings = []
    for raw in raw_findings or []:
        try:
            findings.append(AuditFinding.from_api(raw))
        except ValidationError as e:
            logger.warning(f"Dropping malformed audit finding: {e.message}")
    return findings


def build_indicator_severity_index(findings: Iterable[AuditFinding]) -> dict[str, Severity]:
    """Highest-priority severity per indicator across the findings."""
    index: dict[str, Severity] = {}
    for finding in findings:
        current = index.get(finding.indicator)
        if current is None or SEVERITY_PRIORITY[finding.severity] > SEVERITY_PRIORITY[current]:
            index[finding.indicator] = finding.severity
    return index


@dataclass(frozen=True)
class AuditRun:
    """Metadata envelope of one audit execution. Purely descriptive."""

    status: Optional[AuditRunStatus]
    raw_status: str = ""
    id: Optional[int] = None
    period: Optional[str] = None
    total_indicators: int = 0
    total_findings: Optional[int] = None
    severity_breakdown: Optional[SeverityCounts] = None
    finished_at: Optional[datetime] = None
    summary: Optional[str] = None

    @classmethod
    def from_api(cls, raw: Any) -> Optional[AuditRun]:
        if not isinstance(raw, Mapping):
            return None
        raw_status = str(raw.get("status") or "")
        try:
            status: Optional[AuditRunStatus] = AuditRunStatus(raw_status)
        except ValueError:
            logger.warning(f"Unknown audit run status: {raw_status!r}")
            status = None

        breakdown = SeverityCounts.from_api(raw.get("severityBreakdown"))
        if breakdown is None and any(
            k in raw for k in ("criticalFindings", "warningFindings", "infoFindings")
        ):
            breakdown = SeverityCounts(
                critical=_parse_int(raw.get("criticalFindings")),
                warning=_parse_int(raw.get("warningFindings")),
                info=_parse_int(raw.get("infoFindings")),
            )

        return cls(
            status=status,
            raw_status=raw_status,
            id=_parse_int(raw.get("id"), default=None),
            period=raw.get("period"),
            total_indicators=_parse_int(raw.get("totalIndicators")),
            total_findings=_parse_int(raw.get("totalFindings"), default=None),
            severity_breakdown=breakdown,
            finished_at=_parse_timestamp(raw.get("finishedAt")),
            summary=raw.get("summary") or None,
        )


@dataclass(frozen=True)
class AuditSummary:
    """Normalized audit state for one (company, period)."""

    run: Optional[AuditRun] = None
    findings: tuple[AuditFinding, ...] = ()
    indicator_severity: Mapping[str, Severity] = field(default_factory=dict)
    totals: SeverityCounts = field(default_factory=SeverityCounts)

    @property
    def has_findings(self) -> bool:
        return bool(self.findings)

    @classmethod
    def empty(cls) -> AuditSummary:
        return cls()


def _parse_severity_index(raw: Any) -> Optional[dict[str, Severity]]:
    if not isinstance(raw, Mapping):
        return None
    index = {}
    for indicator, value in raw.items():
        severity = parse_severity(value)
        if severity is not None:
            index[str(indicator)] = severity
    return index


def normalize_audit_summary(payload: Any) -> AuditSummary:
    """Normalize an audit summary or audit run response.

    Totals come from ``totals`` when present, else from the run's severity
    breakdown (or its ``*Findings`` counters), else zero. The indicator
    severity index is taken from the payload, or rebuilt from the findings
    when the payload lacks one.
    """
    if not isinstance(payload, Mapping):
        return AuditSummary.empty()

    run = AuditRun.from_api(payload.get("run"))
    findings = normalize_findings(payload.get("findings"))

    totals = SeverityCounts.from_api(payload.get("totals"))
    if totals is None:
        totals = (run.severity_breakdown if run else None) or SeverityCounts()

    index = _parse_severity_index(payload.get("indicatorSeverity"))
    if index is None:
        index = build_indicator_severity_index(findings)

    return AuditSummary(
        run=run,
        findings=tuple(findings),
        indicator_severity=index,
        totals=totals,
    )
