from . import catalog  # noqa: F401  (populates the registry)
from .registry import (
    IndicatorDefinition,
    get_all_indicators,
    get_indicator,
    indicators_for_pillar,
)
from .rules import FALLBACK_RULES, ThresholdRule, evaluate_rules
from .validation import coerce_value, validate_metric_payload

__all__ = [
    "IndicatorDefinition",
    "get_indicator",
    "get_all_indicators",
    "indicators_for_pillar",
    "FALLBACK_RULES",
    "ThresholdRule",
    "evaluate_rules",
    "coerce_value",
    "validate_metric_payload",
]
