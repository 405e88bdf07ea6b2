"""One-shot dashboard evaluation and a small memo keyed per evaluation."""

from __future__ import annotations

import hashlib
import json
import logging
from collections import OrderedDict
from typing import Callable, Hashable, Optional, Sequence

from esg_dashboard.engine.alerts import build_alerts
from esg_dashboard.engine.highlights import build_hero_highlights
from esg_dashboard.engine.pillars import build_pillar_cards
from esg_dashboard.engine.result import DashboardView
from esg_dashboard.engine.scoring import compute_pillar_scores
from esg_dashboard.engine.severity import classify, filter_findings_for_period
from esg_dashboard.engine.trends import build_insights, select_periods
from esg_dashboard.models.audit import AuditFinding
from esg_dashboard.models.snapshot import HistoryRecord, MetricSnapshot

logger = logging.getLogger(__name__)

CacheKey = tuple[int, str, Hashable]


def evaluate_dashboard(
    snapshot: MetricSnapshot,
    findings: Sequence[AuditFinding] = (),
    history: Sequence[HistoryRecord] = (),
) -> DashboardView:
    """Scores, severities, alerts and insights for one snapshot.

    Findings for a period other than the snapshot's are discarded before
    classification.
    """
    scoped = filter_findings_for_period(findings, snapshot.period)
    severity_map = classify(snapshot, scoped)
    scores = compute_pillar_scores(snapshot)
    current, previous = select_periods(history, snapshot.period)

    return DashboardView(
        company_id=snapshot.company_id,
        period=snapshot.period,
        scores=scores,
        indicator_severity=severity_map,
        alerts=build_alerts(scoped, snapshot),
        insights=build_insights(current, previous),
        hero_highlights=build_hero_highlights(snapshot),
        pillar_cards=build_pillar_cards(snapshot, severity_map, scores),
        previous_period=previous.period if previous else None,
    )


def findings_fingerprint(findings: Sequence[AuditFinding]) -> str:
    """Stable digest of a findings list, usable as ``findings_version``."""
    payload = [
        [f.indicator, f.category.value, f.period, f.severity.value, f.message, f.label]
        for f in findings
    ]
    encoded = json.dumps(payload, ensure_ascii=False).encode("utf-8")
    return hashlib.sha1(encoded).hexdigest()[:16]


class EvaluationCache:
    """LRU of dashboard views keyed by ``(company_id, period, findings_version)``.

    A new findings version or a reloaded snapshot produces a different key
    or an explicit ``invalidate``; entries are never patched in place.
    """

    def __init__(self, maxsize: int = 64):
        if maxsize < 1:
            raise ValueError("maxsize must be at least 1")
        self.maxsize = maxsize
        self._entries: OrderedDict[CacheKey, DashboardView] = OrderedDict()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def get(self, key: CacheKey) -> Optional[DashboardView]:
        view = self._entries.get(key)
        if view is not None:
            self._entries.move_to_end(key)
        return view

    def put(self, key: CacheKey, view: DashboardView) -> None:
        self._entries[key] = view
        self._entries.move_to_end(key)
        while len(self._entries) > self.maxsize:
            evicted, _ = self._entries.popitem(last=False)
            logger.debug(f"Evicted dashboard view {evicted}")

    def get_or_evaluate(
        self,
        key: CacheKey,
        evaluate: Callable[[], DashboardView],
    ) -> DashboardView:
        view = self.get(key)
        if view is None:
            view = evaluate()
            self.put(key, view)
        return view

    def invalidate(self, company_id: int, period: Optional[str] = None) -> int:
        """Drop every entry for a company (optionally one period). Returns the count."""
        stale = [
            key for key in self._entries
            if key[0] == company_id and (period is None or key[1] == period)
        ]
        for key in stale:
            del self._entries[key]
        return len(stale)

    def clear(self) -> None:
        self._entries.clear()
