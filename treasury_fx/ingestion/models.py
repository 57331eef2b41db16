"""Data models shared across ingestion and resolution."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterator, Mapping

import pandas as pd

BASE_CURRENCY = "USD"
FRAME_COLUMNS = ("code", "name", "rate_to_usd", "effective_date")


@dataclass(frozen=True, slots=True)
class RateRecord:
    """Resolved state of a single currency within a :class:`RateTable`."""

    code: str
    display_name: str
    rate_to_usd: float
    effective_date: str


@dataclass(frozen=True, eq=False)
class RateTable(Mapping[str, RateRecord]):
    """Read-only registry of USD-anchored rates keyed by ISO currency code.

    ``last_updated`` is the newest effective date seen across every accepted
    source row, which may be later than the date of any single winning record.
    """

    records: Mapping[str, RateRecord]
    last_updated: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "records", MappingProxyType(dict(self.records)))

    def __getitem__(self, code: str) -> RateRecord:
        return self.records[code]

    def __iter__(self) -> Iterator[str]:
        return iter(self.records)

    def __len__(self) -> int:
        return len(self.records)

    def codes(self) -> list[str]:
        """Return every currency code in ascending order."""

        return sorted(self.records)

    def to_frame(self) -> pd.DataFrame:
        """Return the table as a DataFrame with one row per currency, sorted by code."""

        rows = [
            (record.code, record.display_name, record.rate_to_usd, record.effective_date)
            for record in (self.records[code] for code in self.codes())
        ]
        return pd.DataFrame(rows, columns=list(FRAME_COLUMNS))


__all__ = ["BASE_CURRENCY", "FRAME_COLUMNS", "RateRecord", "RateTable"]
