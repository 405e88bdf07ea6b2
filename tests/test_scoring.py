"""Tests for pillar composite scores."""

import math

from esg_dashboard.engine.scoring import (
    PILLAR_SCORE_INDICATORS,
    compute_pillar_score,
    compute_pillar_scores,
    compute_score,
)
from esg_dashboard.models.enums import Pillar

from conftest import make_snapshot


class TestComputeScore:
    def test_mean_of_values(self):
        assert compute_score([80, 60, 40]) == 60

    def test_all_none_is_none(self):
        assert compute_score([None, None]) is None

    def test_empty_is_none(self):
        assert compute_score([]) is None

    def test_missing_values_are_skipped_not_zero(self):
        assert compute_score([90, None, 70]) == 80

    def test_rounds_half_away_from_zero(self):
        assert compute_score([70, 71]) == 71
        assert compute_score([0.5]) == 1
        assert compute_score([2.5]) == 3

    def test_ignores_non_numeric_values(self):
        assert compute_score([True, "80", math.nan, math.inf, 50]) == 50


class TestPillarScores:
    def test_environmental_uses_fixed_subset(self):
        snapshot = make_snapshot(environmental={
            "porcentajeRenovable": 70,
            "reciclajePorc": 50,
            "residuosValorizadosPorc": 60,
            "energiaKwh": 90000,
        })
        assert compute_pillar_score(snapshot, Pillar.ENVIRONMENTAL) == 60

    def test_partial_block(self):
        snapshot = make_snapshot(governance={"cumplimientoNormativo": 95})
        scores = compute_pillar_scores(snapshot)
        assert scores[Pillar.GOVERNANCE] == 95
        assert scores[Pillar.SOCIAL] is None
        assert scores[Pillar.ENVIRONMENTAL] is None

    def test_no_snapshot(self):
        assert compute_pillar_scores(None) == {p: None for p in Pillar}

    def test_healthy_snapshot(self, healthy_snapshot):
        scores = compute_pillar_scores(healthy_snapshot)
        assert scores[Pillar.ENVIRONMENTAL] == 65  # (72 + 64 + 58) / 3 = 64.67
        assert scores[Pillar.SOCIAL] == 72  # (46 + 82 + 90 + 70) / 4
        assert scores[Pillar.GOVERNANCE] == 69  # (96 + 55 + 40 + 85) / 4

    def test_subsets_cover_every_pillar(self):
        assert set(PILLAR_SCORE_INDICATORS) == set(Pillar)


class TestLargeScores:
    def test_mean_beyond_default_decimal_precision(self):
        assert compute_score([1e30]) == 10**30
