"""Metric snapshots and history records normalized from the ESG API."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterable, Mapping, Optional

from esg_dashboard.errors import ValidationError
from esg_dashboard.indicators.registry import get_indicator
from esg_dashboard.indicators.validation import IndicatorValue, coerce_value
from esg_dashboard.models.enums import Indicator, Pillar, ValueKind

logger = logging.getLogger(__name__)

# Bookkeeping keys the API sends alongside indicator values.
_RECORD_METADATA_KEYS = {"id", "companyId", "company_id", "period", "createdAt", "updatedAt", "plantId"}


def normalize_pillar_block(pillar: Pillar, raw: Any) -> dict[str, IndicatorValue]:
    """Keep the known indicators of one pillar, coerced to their kind.

    Invalid values are dropped (logged, never raised) so that a malformed
    field reads as absent. Indicators registered under another pillar and
    unknown keys are ignored.
    """
    if not isinstance(raw, Mapping):
        if raw is not None:
            logger.warning(f"Ignoring non-mapping {pillar.value} block: {type(raw).__name__}")
        return {}

    block: dict[str, IndicatorValue] = {}
    for key, value in raw.items():
        definition = get_indicator(key)
        if definition is None or definition.pillar != pillar:
            if key not in _RECORD_METADATA_KEYS:
                logger.debug(f"Dropping unknown {pillar.value} indicator '{key}'")
            continue
        try:
            coerced = coerce_value(definition, value)
        except ValidationError as e:
            logger.warning(f"Dropping invalid value for {pillar.value}.{key} ({value!r}): {e.message}")
            continue
        if coerced is not None:
            block[definition.key] = coerced
    return block


def _parse_company_id(raw: Any) -> int:
    if raw is None or isinstance(raw, bool):
        return 0
    try:
        return int(raw)
    except (TypeError, ValueError):
        logger.warning(f"Ignoring unparseable companyId {raw!r}")
        return 0


@dataclass(frozen=True)
class MetricSnapshot:
    """Indicator values for one company and reporting period.

    Pillar blocks only hold indicators with a value; absence means "no
    data", never zero.
    """

    company_id: int
    period: str
    environmental: Mapping[str, IndicatorValue] = field(default_factory=dict)
    social: Mapping[str, IndicatorValue] = field(default_factory=dict)
    governance: Mapping[str, IndicatorValue] = field(default_factory=dict)

    def __post_init__(self) -> None:
        for pillar in Pillar:
            block = getattr(self, pillar.value) or {}
            cleaned = {
                getattr(key, "value", key): value
                for key, value in block.items()
                if value is not None
            }
            object.__setattr__(self, pillar.value, MappingProxyType(cleaned))

    @classmethod
    def from_api(
        cls,
        payload: Any,
        company_id: Optional[int] = None,
        period: Optional[str] = None,
    ) -> MetricSnapshot:
        """Build a snapshot from ``GET /metrics/company/{id}/{period}`` JSON."""
        data = payload if isinstance(payload, Mapping) else {}
        if company_id is None:
            company_id = _parse_company_id(data.get("companyId"))
        if period is None:
            period = str(data.get("period") or "")
        return cls(
            company_id=company_id,
            period=period,
            **{p.value: normalize_pillar_block(p, data.get(p.value)) for p in Pillar},
        )

    def block(self, pillar: Pillar) -> Mapping[str, IndicatorValue]:
        return getattr(self, Pillar(pillar).value)

    def get(self, indicator: Indicator | str) -> IndicatorValue:
        """Value of an indicator, or None when absent."""
        definition = get_indicator(indicator)
        if definition is None:
            return None
        return self.block(definition.pillar).get(definition.key)

    def available_indicators(self) -> list[str]:
        """Names of every indicator holding a value."""
        return [key for pillar in Pillar for key in self.block(pillar)]

    def is_empty(self) -> bool:
        return not any(self.block(pillar) for pillar in Pillar)


@dataclass(frozen=True)
class HistoryRecord:
    """Flat per-period record from ``GET /indicadores/historico/{id}``."""

    period: str
    values: Mapping[str, float] = field(default_factory=dict)

    def __post_init__(self) -> None:
        cleaned = {
            getattr(key, "value", key): value
            for key, value in (self.values or {}).items()
            if value is not None
        }
        object.__setattr__(self, "values", MappingProxyType(cleaned))

    @classmethod
    def from_api(cls, raw: Any) -> Optional[HistoryRecord]:
        """Normalize one record; None when it carries no period."""
        if not isinstance(raw, Mapping):
            return None
        period = raw.get("period")
        if period is None or not str(period).strip():
            return None

        values: dict[str, float] = {}
        for key, value in raw.items():
            definition = get_indicator(key)
            if definition is None or definition.kind != ValueKind.NUMERIC:
                continue
            try:
                coerced = coerce_value(definition, value)
            except ValidationError:
                logger.debug(f"Dropping invalid history value {key}={value!r}")
                continue
            if coerced is not None:
                values[definition.key] = coerced
        return cls(period=str(period).strip(), values=values)

    def get(self, indicator: Indicator | str) -> Optional[float]:
        key = indicator.value if isinstance(indicator, Indicator) else indicator
        return self.values.get(key)


def normalize_history(records: Optional[Iterable[Any]]) -> list[HistoryRecord]:
    """Normalize a history payload, skipping records without a period."""
    history = []
    for raw in records or []:
        record = HistoryRecord.from_api(raw)
        if record is None:
            logger.warning(f"Skipping history record without period: {raw!r}")
            continue
        history.append(record)
    return history
