from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional


class MetricsProvider(ABC):
    """Abstract source of ESG metrics, history and audit payloads.

    Implementations return raw JSON-like payloads; normalization into
    models happens in the caller.
    """

    @abstractmethod
    async def fetch_company_metrics(self, company_id: int, period: str) -> dict[str, Any]:
        """Snapshot payload for one company and period."""
        ...

    @abstractmethod
    async def fetch_history(self, company_id: int) -> list[dict[str, Any]]:
        """Flat per-period records; empty when the company has no history."""
        ...

    @abstractmethod
    async def fetch_audit_summary(self, company_id: int, period: str) -> dict[str, Any]:
        ...

    @abstractmethod
    async def run_audit(self, company_id: int, period: Optional[str] = None) -> dict[str, Any]:
        ...

    @abstractmethod
    async def health_check(self) -> bool:
        """Verify the remote API is reachable."""
        ...

    async def aclose(self) -> None:
        """Release transport resources. No-op by default."""
