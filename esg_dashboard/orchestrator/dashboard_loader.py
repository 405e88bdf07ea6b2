"""Dashboard loader -- fetches metrics and history for the active selection."""

from __future__ import annotations

import asyncio
import logging
from typing import Optional, Sequence

from esg_dashboard.engine.dashboard import EvaluationCache, evaluate_dashboard, findings_fingerprint
from esg_dashboard.engine.result import DashboardView
from esg_dashboard.errors import DataUnavailableError
from esg_dashboard.models.audit import AuditFinding
from esg_dashboard.models.snapshot import HistoryRecord, MetricSnapshot, normalize_history
from esg_dashboard.providers.base import MetricsProvider

logger = logging.getLogger(__name__)

LOAD_ERROR_MESSAGE = "No se pudieron cargar los datos"


class DashboardLoader:
    """Holds the current snapshot, history and findings for one selection.

    Only the latest ``load`` call may publish its results; a response for a
    (company, period) that is no longer active is dropped.
    """

    def __init__(self, provider: MetricsProvider, cache: Optional[EvaluationCache] = None):
        self._provider = provider
        self._cache = cache if cache is not None else EvaluationCache()
        self._generation = 0
        self.active_key: Optional[tuple[int, str]] = None
        self.snapshot: Optional[MetricSnapshot] = None
        self.history: list[HistoryRecord] = []
        self.findings: tuple[AuditFinding, ...] = ()
        self.loading = False
        self.error: Optional[str] = None
        self.exception: Optional[DataUnavailableError] = None

    async def load(self, company_id: int, period: str) -> Optional[DashboardView]:
        """Fetch metrics and history concurrently and publish them.

        Returns the evaluated view, or None when the load failed or was
        superseded by a later one.
        """
        self._generation += 1
        generation = self._generation
        self.active_key = (company_id, period)
        self.loading = True
        self.error = None
        self.exception = None

        # Both fetches run to completion even when one of them fails.
        raw_metrics, raw_history = await asyncio.gather(
            self._provider.fetch_company_metrics(company_id, period),
            self._provider.fetch_history(company_id),
            return_exceptions=True,
        )
        failure = next(
            (r for r in (raw_metrics, raw_history) if isinstance(r, BaseException)), None
        )
        if isinstance(failure, DataUnavailableError):
            if generation != self._generation:
                logger.debug(f"Ignoring stale failure for company {company_id} / {period}")
                return None
            logger.error(f"Dashboard load failed for company {company_id} / {period}: {failure.message}")
            self.snapshot = None
            self.history = []
            self.error = failure.message or LOAD_ERROR_MESSAGE
            self.exception = failure
            self.loading = False
            self._cache.invalidate(company_id)
            return None
        if failure is not None:
            self.loading = False
            raise failure

        if generation != self._generation:
            logger.debug(f"Discarding stale dashboard data for company {company_id} / {period}")
            return None

        self.snapshot = MetricSnapshot.from_api(raw_metrics, company_id=company_id, period=period)
        self.history = normalize_history(raw_history)
        self.loading = False
        # Fresh data supersedes anything memoized for this selection.
        self._cache.invalidate(company_id, period)
        return self.view()

    def set_findings(self, findings: Sequence[AuditFinding]) -> Optional[DashboardView]:
        """Replace the audit findings and return the re-evaluated view."""
        self.findings = tuple(findings)
        return self.view()

    def view(self) -> Optional[DashboardView]:
        """Evaluated view for the current state, or None without a snapshot."""
        snapshot = self.snapshot
        if snapshot is None:
            return None
        key = (snapshot.company_id, snapshot.period, findings_fingerprint(self.findings))
        return self._cache.get_or_evaluate(
            key, lambda: evaluate_dashboard(snapshot, self.findings, self.history)
        )
