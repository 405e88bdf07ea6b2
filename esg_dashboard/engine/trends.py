"""Period-over-period deltas for the headline indicators.

``trend`` is the arithmetic direction of the change, flipped for
indicators where a decrease is the desired outcome (``invert_trend``).
The flip never touches the sign printed in ``delta_text``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional, Sequence

from esg_dashboard.engine.formatting import (
    NOT_AVAILABLE,
    format_currency,
    format_fixed,
    format_number,
    is_number,
)
from esg_dashboard.engine.result import Delta, TrendInsight
from esg_dashboard.models.enums import DeltaFormat, Indicator, Trend
from esg_dashboard.models.snapshot import HistoryRecord

NO_PRIOR_DATA = "Sin datos previos"
NO_CHANGE = "Sin variación"
DELTA_SUFFIX = " vs periodo anterior"


@dataclass(frozen=True)
class DeltaOptions:
    unit: str = ""
    style: DeltaFormat = DeltaFormat.PLAIN
    invert_trend: bool = False


def _invert(trend: Trend) -> Trend:
    if trend == Trend.UP:
        return Trend.DOWN
    if trend == Trend.DOWN:
        return Trend.UP
    return trend


def compute_delta(
    current: Any,
    previous: Any,
    options: Optional[DeltaOptions] = None,
) -> Delta:
    """Signed change between two values.

    Missing or non-numeric input gives a neutral "no prior data" delta
    instead of raising or reading the gap as zero.
    """
    options = options or DeltaOptions()
    if not is_number(current) or not is_number(previous):
        return Delta(delta_text=NO_PRIOR_DATA, trend=Trend.NEUTRAL)

    difference = current - previous
    if difference == 0:
        return Delta(delta_text=NO_CHANGE, trend=Trend.NEUTRAL)

    base_trend = Trend.UP if difference > 0 else Trend.DOWN
    trend = _invert(base_trend) if options.invert_trend else base_trend
    sign = "+" if difference > 0 else "-"

    if options.style == DeltaFormat.PERCENT:
        magnitude = f"{format_fixed(abs(difference), 1)} pp"
    elif options.style == DeltaFormat.CURRENCY:
        magnitude = format_currency(abs(difference))
    else:
        magnitude = f"{format_number(abs(difference), 1)}{options.unit}"

    return Delta(delta_text=f"{sign}{magnitude}{DELTA_SUFFIX}", trend=trend)


def select_periods(
    history: Sequence[HistoryRecord],
    period: str,
) -> tuple[Optional[HistoryRecord], Optional[HistoryRecord]]:
    """Current record and the nearest available distinct earlier entry.

    Periods are ordered as strings ascending; the "previous" record is the
    last one in that order whose period differs from ``period``, which may
    be a later period when the current one is the oldest on file.
    """
    if not history:
        return None, None
    current = next((r for r in history if r.period == period), None)
    ordered = sorted(history, key=lambda r: r.period)
    previous = next((r for r in reversed(ordered) if r.period != period), None)
    return current, previous


@dataclass(frozen=True)
class HeadlineInsight:
    id: str
    title: str
    indicator: Indicator
    formatter: Callable[[float], str]
    options: DeltaOptions


HEADLINE_INSIGHTS: tuple[HeadlineInsight, ...] = (
    HeadlineInsight(
        id="energy",
        title="Consumo energético",
        indicator=Indicator.ENERGIA_KWH,
        formatter=lambda v: f"{format_number(v, 0)} kWh",
        options=DeltaOptions(unit=" kWh"),
    ),
    HeadlineInsight(
        id="emissions",
        title="Emisiones CO₂",
        indicator=Indicator.EMISIONES_CO2,
        formatter=lambda v: f"{format_number(v, 1)} t",
        options=DeltaOptions(unit=" t", invert_trend=True),
    ),
    HeadlineInsight(
        id="investment",
        title="Inversión social",
        indicator=Indicator.INVERSION_COMUNIDAD_USD,
        formatter=format_currency,
        options=DeltaOptions(style=DeltaFormat.CURRENCY),
    ),
    HeadlineInsight(
        id="compliance",
        title="Cumplimiento normativo",
        indicator=Indicator.CUMPLIMIENTO_NORMATIVO,
        formatter=lambda v: f"{format_number(v, 1)}%",
        options=DeltaOptions(style=DeltaFormat.PERCENT),
    ),
)


def build_insights(
    current: Optional[HistoryRecord],
    previous: Optional[HistoryRecord],
) -> list[TrendInsight]:
    insights = []
    for headline in HEADLINE_INSIGHTS:
        current_value = current.get(headline.indicator) if current else None
        previous_value = previous.get(headline.indicator) if previous else None
        delta = compute_delta(current_value, previous_value, headline.options)
        insights.append(TrendInsight(
            id=headline.id,
            title=headline.title,
            current_value_formatted=(
                headline.formatter(current_value) if current_value is not None else NOT_AVAILABLE
            ),
            delta_text=delta.delta_text,
            trend=delta.trend,
        ))
    return insights


def build_trend_insights(
    history: Sequence[HistoryRecord],
    period: str,
) -> list[TrendInsight]:
    """Headline insights for ``period`` against its previous period."""
    current, previous = select_periods(history, period)
    return build_insights(current, previous)
