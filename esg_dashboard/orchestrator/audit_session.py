"""Audit panel session: loads the audit summary and runs new audits.

State machine::

    idle -> loading -> ready | error
    ready | error -> running -> ready | error

Changing the (company, period) selection goes back to ``loading``. A
failed request clears previously loaded data. Responses that arrive after
the selection changed, or after a newer request started, are dropped.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from esg_dashboard.engine.audit_view import build_audit_overview
from esg_dashboard.engine.result import AuditOverview
from esg_dashboard.errors import DataUnavailableError
from esg_dashboard.models.audit import AuditSummary, normalize_audit_summary
from esg_dashboard.models.enums import PanelState
from esg_dashboard.providers.base import MetricsProvider

logger = logging.getLogger(__name__)

LOAD_ERROR_MESSAGE = "No se pudo cargar la auditoría."
RUN_ERROR_MESSAGE = "No se pudo ejecutar la auditoría automática."

_RUNNABLE_STATES = (PanelState.READY, PanelState.ERROR)


class AuditSession:
    def __init__(
        self,
        provider: MetricsProvider,
        on_change: Optional[Callable[[AuditSummary], None]] = None,
    ):
        self._provider = provider
        self._on_change = on_change
        self._generation = 0
        self.state = PanelState.IDLE
        self.company_id: Optional[int] = None
        self.period: Optional[str] = None
        self.summary = AuditSummary.empty()
        self.error: Optional[str] = None

    @property
    def overview(self) -> AuditOverview:
        return build_audit_overview(self.summary)

    @property
    def can_run(self) -> bool:
        return self.company_id is not None and bool(self.period) and self.state in _RUNNABLE_STATES

    def _publish(self, summary: AuditSummary) -> None:
        self.summary = summary
        if self._on_change is not None:
            self._on_change(summary)

    def _fail(self, message: str) -> None:
        self.state = PanelState.ERROR
        self.error = message
        self._publish(AuditSummary.empty())

    async def load(self, company_id: Optional[int], period: Optional[str]) -> AuditSummary:
        """Select (company, period) and fetch its audit summary."""
        self._generation += 1
        generation = self._generation
        self.company_id = company_id
        self.period = period
        self.error = None

        if company_id is None or not period:
            self.state = PanelState.IDLE
            self._publish(AuditSummary.empty())
            return self.summary

        self.state = PanelState.LOADING
        try:
            payload = await self._provider.fetch_audit_summary(company_id, period)
        except DataUnavailableError as e:
            if generation == self._generation:
                logger.error(f"Audit summary failed for company {company_id} / {period}: {e.message}")
                self._fail(e.message or LOAD_ERROR_MESSAGE)
            return self.summary

        if generation != self._generation:
            logger.debug(f"Discarding stale audit summary for company {company_id} / {period}")
            return self.summary

        self.state = PanelState.READY
        self._publish(normalize_audit_summary(payload))
        return self.summary

    async def run_audit(self) -> AuditSummary:
        """Run a new audit for the current selection.

        Raises RuntimeError when nothing is selected or a request is in flight.
        """
        if not self.can_run:
            raise RuntimeError(f"Cannot run an audit from state '{self.state.value}'")

        self._generation += 1
        generation = self._generation
        company_id, period = self.company_id, self.period
        self.state = PanelState.RUNNING
        self.error = None
        try:
            result = await self._provider.run_audit(company_id, period)
        except DataUnavailableError as e:
            if generation == self._generation:
                logger.error(f"Audit run failed for company {company_id} / {period}: {e.message}")
                self._fail(e.message or RUN_ERROR_MESSAGE)
            return self.summary

        if generation != self._generation:
            logger.debug(f"Discarding stale audit run for company {company_id} / {period}")
            return self.summary

        # Run responses carry no totals; counts come from the run's breakdown.
        payload = {k: result.get(k) for k in ("run", "findings", "indicatorSeverity")}
        self.state = PanelState.READY
        self._publish(normalize_audit_summary(payload))
        return self.summary
