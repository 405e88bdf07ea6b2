"""Indicator severity classification.

Audit findings take precedence over the static fallback rules as a whole:
when an evaluation has at least one finding, the map is built from the
findings alone and no fallback rule is consulted, not even for indicators
the findings do not mention.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence

from esg_dashboard.indicators.rules import FALLBACK_RULES, ThresholdRule, evaluate_rules
from esg_dashboard.models.audit import (
    SEVERITY_PRIORITY,
    AuditFinding,
    build_indicator_severity_index,
)
from esg_dashboard.models.enums import AlertSeverity, Severity
from esg_dashboard.models.snapshot import MetricSnapshot

logger = logging.getLogger(__name__)

IndicatorSeverityMap = dict[str, Severity]

_RULE_SEVERITY: dict[AlertSeverity, Severity] = {
    AlertSeverity.DANGER: Severity.CRITICAL,
    AlertSeverity.WARNING: Severity.WARNING,
    AlertSeverity.INFO: Severity.INFO,
}


def rule_severity(rule: ThresholdRule) -> Severity:
    """Indicator-level severity of a fallback rule (danger reads as critical)."""
    return _RULE_SEVERITY[rule.severity]


def classify_with_rules(
    snapshot: Optional[MetricSnapshot],
    rules: tuple[ThresholdRule, ...] = FALLBACK_RULES,
) -> IndicatorSeverityMap:
    """Severity map from the static rules alone."""
    severity_map: IndicatorSeverityMap = {}
    for rule in evaluate_rules(snapshot, rules):
        key = rule.indicator.value
        severity = rule_severity(rule)
        current = severity_map.get(key)
        if current is None or SEVERITY_PRIORITY[severity] > SEVERITY_PRIORITY[current]:
            severity_map[key] = severity
    return severity_map


def classify(
    snapshot: Optional[MetricSnapshot],
    findings: Sequence[AuditFinding],
) -> IndicatorSeverityMap:
    """Severity per indicator for one evaluation.

    Any finding switches the fallback rules off for the whole evaluation.
    """
    if findings:
        return build_indicator_severity_index(findings)
    return classify_with_rules(snapshot)


def filter_findings_for_period(
    findings: Iterable[AuditFinding],
    period: str,
) -> list[AuditFinding]:
    """Drop findings that belong to another period.

    Findings without a period are kept; they describe the current run.
    """
    kept = []
    for finding in findings:
        if finding.period is not None and finding.period != period:
            logger.debug(f"Discarding finding {finding.indicator} for period {finding.period} (evaluating {period})")
            continue
        kept.append(finding)
    return kept
