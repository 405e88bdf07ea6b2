"""Tests for DashboardLoader -- concurrent fetch, stale discard, error clearing."""

import asyncio
from unittest.mock import AsyncMock

import pytest

from esg_dashboard.engine.dashboard import EvaluationCache, findings_fingerprint
from esg_dashboard.errors import DataUnavailableError
from esg_dashboard.models.enums import AlertSeverity
from esg_dashboard.orchestrator.dashboard_loader import DashboardLoader
from esg_dashboard.providers.base import MetricsProvider

from conftest import make_finding

METRICS = {
    "companyId": 1,
    "period": "2024",
    "environmental": {"porcentajeRenovable": 35, "emisionesCO2": 60, "energiaKwh": 1200},
}
HISTORY = [
    {"period": "2023", "energiaKwh": 1000},
    {"period": "2024", "energiaKwh": 1200},
]


@pytest.fixture
def provider():
    mock = AsyncMock(spec=MetricsProvider)
    mock.fetch_company_metrics.return_value = METRICS
    mock.fetch_history.return_value = HISTORY
    return mock


class TestDashboardLoader:

    @pytest.mark.asyncio
    async def test_load_publishes_snapshot_and_history(self, provider):
        loader = DashboardLoader(provider)

        view = await loader.load(1, "2024")

        provider.fetch_company_metrics.assert_awaited_once_with(1, "2024")
        provider.fetch_history.assert_awaited_once_with(1)
        assert loader.snapshot.get("emisionesCO2") == 60
        assert [r.period for r in loader.history] == ["2023", "2024"]
        assert loader.loading is False
        assert loader.error is None
        assert [a.id for a in view.alerts] == ["env-emisiones", "env-renovable"]
        assert view.insights[0].delta_text == "+200 kWh vs periodo anterior"

    @pytest.mark.asyncio
    async def test_failure_clears_previous_data(self, provider):
        loader = DashboardLoader(provider)
        await loader.load(1, "2024")

        provider.fetch_company_metrics.side_effect = DataUnavailableError("Servicio caído", status_code=503)
        view = await loader.load(1, "2024")

        assert view is None
        assert loader.snapshot is None
        assert loader.history == []
        assert loader.error == "Servicio caído"
        assert loader.exception.status_code == 503
        assert loader.view() is None

    @pytest.mark.asyncio
    async def test_failure_without_message_uses_default(self, provider):
        provider.fetch_history.side_effect = DataUnavailableError("")
        loader = DashboardLoader(provider)

        await loader.load(1, "2024")

        assert loader.error == "No se pudieron cargar los datos"

    @pytest.mark.asyncio
    async def test_failure_waits_for_sibling_fetch(self, provider):
        finished = []

        async def slow_history(company_id):
            for _ in range(3):
                await asyncio.sleep(0)
            finished.append(company_id)
            return HISTORY

        provider.fetch_company_metrics.side_effect = DataUnavailableError("Servicio caído")
        provider.fetch_history.side_effect = slow_history
        loader = DashboardLoader(provider)

        assert await loader.load(1, "2024") is None
        assert finished == [1]
        assert loader.error == "Servicio caído"
        assert loader.history == []

    @pytest.mark.asyncio
    async def test_unexpected_error_propagates(self, provider):
        provider.fetch_history.side_effect = RuntimeError("boom")
        loader = DashboardLoader(provider)

        with pytest.raises(RuntimeError, match="boom"):
            await loader.load(1, "2024")
        assert loader.loading is False

    @pytest.mark.asyncio
    async def test_shared_empty_cache_is_used(self, provider):
        cache = EvaluationCache()
        loader = DashboardLoader(provider, cache=cache)

        await loader.load(1, "2024")

        assert (1, "2024", findings_fingerprint(())) in cache

    @pytest.mark.asyncio
    async def test_stale_response_is_discarded(self, provider):
        gate = asyncio.Event()

        async def fetch_metrics(company_id, period):
            if period == "2023":
                await gate.wait()
                return {"environmental": {"emisionesCO2": 99}}
            return METRICS

        provider.fetch_company_metrics.side_effect = fetch_metrics
        loader = DashboardLoader(provider)

        first = asyncio.create_task(loader.load(1, "2023"))
        await asyncio.sleep(0)
        await loader.load(1, "2024")
        gate.set()

        assert await first is None
        assert loader.active_key == (1, "2024")
        assert loader.snapshot.period == "2024"
        assert loader.snapshot.get("emisionesCO2") == 60

    @pytest.mark.asyncio
    async def test_findings_replace_fallback_alerts(self, provider):
        loader = DashboardLoader(provider)
        await loader.load(1, "2024")

        view = loader.set_findings([make_finding(message="Pico de emisiones")])

        assert len(view.alerts) == 1
        assert view.alerts[0].severity == AlertSeverity.DANGER
        assert view.alerts[0].message == "Pico de emisiones"

    @pytest.mark.asyncio
    async def test_views_are_memoized_until_reload(self, provider):
        cache = EvaluationCache()
        loader = DashboardLoader(provider, cache=cache)
        await loader.load(1, "2024")

        assert loader.view() is loader.view()
        assert len(cache) == 1

        before = loader.view()
        await loader.load(1, "2024")
        assert loader.view() is not before

    def test_view_without_snapshot(self, provider):
        assert DashboardLoader(provider).view() is None
