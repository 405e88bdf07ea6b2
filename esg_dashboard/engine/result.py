"""Immutable view records handed to the presentation layer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from esg_dashboard.models.enums import (
    AlertSeverity,
    HighlightTone,
    Pillar,
    Severity,
    Trend,
)


@dataclass(frozen=True)
class Alert:
    """Display-ready alert; ``id`` is the dedup key."""

    id: str
    title: str
    message: str
    severity: AlertSeverity


@dataclass(frozen=True)
class Delta:
    delta_text: str
    trend: Trend


@dataclass(frozen=True)
class TrendInsight:
    id: str
    title: str
    current_value_formatted: str
    delta_text: str
    trend: Trend


@dataclass(frozen=True)
class HeroHighlight:
    id: str
    label: str
    value: str
    detail: str
    tone: HighlightTone


@dataclass(frozen=True)
class PillarHighlightRow:
    indicator: str
    label: str
    value: str
    severity: Optional[Severity] = None
    severity_label: Optional[str] = None


@dataclass(frozen=True)
class PillarCard:
    pillar: Pillar
    title: str
    description: str
    score: Optional[int]
    score_label: str
    highlights: list[PillarHighlightRow]
    severity: Optional[Severity] = None


@dataclass(frozen=True)
class SeverityBadge:
    severity: Severity
    label: str
    count: int


@dataclass(frozen=True)
class AuditStat:
    id: str
    label: str
    value: str


@dataclass(frozen=True)
class AuditOverview:
    badges: list[SeverityBadge]
    stats: list[AuditStat]
    status_label: Optional[str] = None
    finished_at: Optional[str] = None
    summary: Optional[str] = None


@dataclass(frozen=True)
class DashboardView:
    """Everything the dashboard renders for one (company, period)."""

    company_id: int
    period: str
    scores: dict[Pillar, Optional[int]]
    indicator_severity: dict[str, Severity]
    alerts: list[Alert]
    insights: list[TrendInsight]
    hero_highlights: list[HeroHighlight] = field(default_factory=list)
    pillar_cards: list[PillarCard] = field(default_factory=list)
    previous_period: Optional[str] = None
