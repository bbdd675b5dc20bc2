"""Climatology sources: month-indexed seasonal extremes behind a small interface."""

import logging
from collections.abc import Iterable
from datetime import date
from pathlib import Path
from typing import Protocol

import yaml
from pydantic import TypeAdapter

from skyrisk.config.defaults import DEMO_CLIMATOLOGY
from skyrisk.config.schema import ClimatologyRow
from skyrisk.models.climatology import ClimatologyRecord
from skyrisk.models.common import month_index

logger = logging.getLogger(__name__)

MONTHS = range(12)
_ROWS = TypeAdapter(list[ClimatologyRow])


class ClimatologySource(Protocol):
    def record_for_month(self, month: int) -> ClimatologyRecord: ...

    def record_for_date(self, day: date) -> ClimatologyRecord: ...


class StaticClimatologyTable:
    """Immutable 12-month table."""

    def __init__(self, records: Iterable[ClimatologyRecord]):
        by_month: dict[int, ClimatologyRecord] = {}
        for record in records:
            if record.month not in MONTHS:
                raise ValueError(f"month out of range 0-11: {record.month}")
            if record.month in by_month:
                raise ValueError(f"duplicate climatology month: {record.month}")
            by_month[record.month] = record
        missing = sorted(set(MONTHS) - by_month.keys())
        if missing:
            raise ValueError(f"climatology table missing months: {missing}")
        self._records = by_month

    def record_for_month(self, month: int) -> ClimatologyRecord:
        if month not in self._records:
            raise KeyError(f"No climatology for month {month}")
        return self._records[month]

    def record_for_date(self, day: date) -> ClimatologyRecord:
        return self.record_for_month(month_index(day))

    def records(self) -> list[ClimatologyRecord]:
        return [self._records[m] for m in MONTHS]


def demo_table() -> StaticClimatologyTable:
    return StaticClimatologyTable(DEMO_CLIMATOLOGY)


def load_climatology_file(path: str | Path) -> StaticClimatologyTable:
    """Load a 12-row table from YAML: a list of {month, tmax, tmin, precip, wind}.

    Rows are validated with pydantic; a bad row raises ValidationError naming
    its index and field.
    """
    path = Path(path)
    with open(path) as f:
        raw = yaml.safe_load(f) or []
    rows = _ROWS.validate_python(raw)
    records = [ClimatologyRecord(**row.model_dump()) for row in rows]
    logger.info("Loaded climatology table from %s", path)
    return StaticClimatologyTable(records)


def climatology_from_config(climatology_file: str | None) -> StaticClimatologyTable:
    if climatology_file:
        return load_climatology_file(climatology_file)
    return demo_table()
