"""Tests for dashboard evaluation and the evaluation cache."""

from unittest.mock import MagicMock

import pytest

from esg_dashboard.engine.dashboard import EvaluationCache, evaluate_dashboard, findings_fingerprint
from esg_dashboard.models.enums import AlertSeverity, Pillar, Severity, Trend

from conftest import make_finding, make_snapshot


class TestEvaluateDashboard:
    def test_fallback_evaluation(self, energy_history):
        snapshot = make_snapshot(environmental={
            "porcentajeRenovable": 35,
            "emisionesCO2": 60,
            "energiaKwh": 1200,
        })

        view = evaluate_dashboard(snapshot, [], energy_history)

        assert view.company_id == 1
        assert view.period == "2024"
        assert view.scores[Pillar.ENVIRONMENTAL] == 35
        assert view.indicator_severity == {
            "emisionesCO2": Severity.CRITICAL,
            "porcentajeRenovable": Severity.WARNING,
        }
        assert [a.title for a in view.alerts] == ["Emisiones elevadas", "Energía renovable baja"]
        assert view.insights[0].delta_text == "+200 kWh vs periodo anterior"
        assert view.insights[0].trend == Trend.UP
        assert view.previous_period == "2023"
        assert view.pillar_cards[0].severity == Severity.CRITICAL
        assert [h.id for h in view.hero_highlights] == ["renewable", "emissions"]

    def test_findings_take_over(self):
        snapshot = make_snapshot(environmental={"porcentajeRenovable": 35, "emisionesCO2": 60})

        view = evaluate_dashboard(snapshot, [make_finding()])

        assert len(view.alerts) == 1
        assert view.alerts[0].severity == AlertSeverity.DANGER
        assert view.indicator_severity == {"emisionesCO2": Severity.CRITICAL}

    def test_findings_from_other_periods_are_ignored(self):
        snapshot = make_snapshot(environmental={"porcentajeRenovable": 35})

        view = evaluate_dashboard(snapshot, [make_finding(period="2023")])

        assert [a.id for a in view.alerts] == ["env-renovable"]

    def test_without_history(self):
        view = evaluate_dashboard(make_snapshot())
        assert all(i.delta_text == "Sin datos previos" for i in view.insights)
        assert view.previous_period is None
        assert view.alerts == []


class TestFindingsFingerprint:
    def test_stable_and_sensitive(self):
        a = findings_fingerprint([make_finding()])
        assert a == findings_fingerprint([make_finding()])
        assert a != findings_fingerprint([make_finding(severity=Severity.INFO)])
        assert findings_fingerprint([]) != a


class TestEvaluationCache:
    def test_memoizes_by_key(self):
        cache = EvaluationCache(maxsize=4)
        view = MagicMock()
        evaluate = MagicMock(return_value=view)

        assert cache.get_or_evaluate((1, "2024", "v1"), evaluate) is view
        assert cache.get_or_evaluate((1, "2024", "v1"), evaluate) is view
        evaluate.assert_called_once()

    def test_new_findings_version_recomputes(self):
        cache = EvaluationCache()
        evaluate = MagicMock(side_effect=[MagicMock(), MagicMock()])

        first = cache.get_or_evaluate((1, "2024", "v1"), evaluate)
        second = cache.get_or_evaluate((1, "2024", "v2"), evaluate)

        assert first is not second
        assert evaluate.call_count == 2

    def test_lru_eviction(self):
        cache = EvaluationCache(maxsize=2)
        cache.put((1, "2022", "v"), MagicMock())
        cache.put((1, "2023", "v"), MagicMock())
        cache.get((1, "2022", "v"))
        cache.put((1, "2024", "v"), MagicMock())

        assert (1, "2022", "v") in cache
        assert (1, "2023", "v") not in cache
        assert len(cache) == 2

    def test_invalidate(self):
        cache = EvaluationCache()
        cache.put((1, "2023", "v"), MagicMock())
        cache.put((1, "2024", "v"), MagicMock())
        cache.put((2, "2024", "v"), MagicMock())

        assert cache.invalidate(1, "2024") == 1
        assert cache.invalidate(1) == 1
        assert len(cache) == 1

        cache.clear()
        assert len(cache) == 0

    def test_rejects_zero_size(self):
        with pytest.raises(ValueError):
            EvaluationCache(maxsize=0)
