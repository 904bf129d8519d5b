import logging
from datetime import datetime, timedelta, timezone
from typing import Dict, Iterable, List, Optional

import numpy as np

import config
from models.health_summary import HealthSummary, MetricSummary
from models.insight import HealthRecord
from utils.numbers import round_to


def get_period_start(period: str, now: datetime) -> datetime:
    if period == config.YEAR_PERIOD:
        try:
            return now.replace(year=now.year - 1)
        except ValueError:
            # 29 February
            return now.replace(year=now.year - 1, day=28)
    days = config.SUMMARY_PERIOD_DAYS.get(period)
    if days is None:
        # Empty window: only records stamped exactly at `now` fall inside.
        logging.warning(f"Unknown summary period '{period}', using an empty window.")
        return now
    return now - timedelta(days=days)


def _as_utc(timestamp: datetime) -> datetime:
    if timestamp.tzinfo is None:
        return timestamp.replace(tzinfo=timezone.utc)
    return timestamp


def summarize_health_data(
    records: Iterable[HealthRecord],
    period: str = config.DEFAULT_SUMMARY_PERIOD,
    now: Optional[datetime] = None,
) -> HealthSummary:
    """
    Groups the records inside the period by data type. Average, min and max
    only consider numeric values; types without any are reported by count.
    """
    end = _as_utc(now or datetime.now(timezone.utc))
    start = get_period_start(period, end)

    counts: Dict[str, int] = {}
    units: Dict[str, Optional[str]] = {}
    values: Dict[str, List[float]] = {}
    for record in records:
        timestamp = _as_utc(record.timestamp)
        if not start <= timestamp <= end:
            continue
        data_type = record.data_type
        if data_type not in counts:
            counts[data_type] = 0
            units[data_type] = record.unit
            values[data_type] = []
        counts[data_type] += 1
        if isinstance(record.value, float):
            values[data_type].append(record.value)

    summary = []
    for data_type, count in counts.items():
        metric = MetricSummary(data_type=data_type, count=count, unit=units[data_type])
        if values[data_type]:
            array = np.array(values[data_type])
            metric.average = round_to(float(array.mean()), 2)
            metric.min = float(array.min())
            metric.max = float(array.max())
        summary.append(metric)

    return HealthSummary(period=period, start=start, end=end, summary=summary)
