from esg_dashboard.engine.alerts import build_alerts
from esg_dashboard.engine.audit_view import build_audit_overview
from esg_dashboard.engine.dashboard import EvaluationCache, evaluate_dashboard, findings_fingerprint
from esg_dashboard.engine.highlights import build_hero_highlights
from esg_dashboard.engine.pillars import build_pillar_cards, resolve_pillar_severity
from esg_dashboard.engine.result import Alert, DashboardView, Delta, TrendInsight
from esg_dashboard.engine.scoring import compute_pillar_score, compute_pillar_scores, compute_score
from esg_dashboard.engine.severity import classify, filter_findings_for_period
from esg_dashboard.engine.trends import DeltaOptions, build_trend_insights, compute_delta

__all__ = [
    "Alert",
    "DashboardView",
    "Delta",
    "DeltaOptions",
    "EvaluationCache",
    "TrendInsight",
    "build_alerts",
    "build_audit_overview",
    "build_hero_highlights",
    "build_pillar_cards",
    "build_trend_insights",
    "classify",
    "compute_delta",
    "compute_pillar_score",
    "compute_pillar_scores",
    "compute_score",
    "evaluate_dashboard",
    "filter_findings_for_period",
    "findings_fingerprint",
    "resolve_pillar_severity",
]
