"""Public interface for the treasury_fx package."""

from __future__ import annotations

import threading
from importlib import metadata as importlib_metadata
from pathlib import Path
from typing import Sequence

from treasury_fx.data import DEFAULT_RATES_CSV_PATH
from treasury_fx.ingestion.currency_mapping import (
    DEFAULT_MAPPING,
    CurrencyMapping,
    TreasuryCurrencyMapping,
)
from treasury_fx.ingestion.models import BASE_CURRENCY, RateRecord, RateTable
from treasury_fx.ingestion.treasury_csv import TreasuryTableBuilder, build_table, load_table
from treasury_fx.resolver import (
    BatchView,
    ConversionView,
    CurrencySummary,
    DetailView,
    ErrorKind,
    Failure,
    RateResolutionError,
    RatesView,
    RateView,
    Result,
    Success,
    batch_convert,
    convert,
    currency_detail,
    list_currencies,
    lookup_rate,
    rebase,
)
from treasury_fx.utils.logger import get_logger

__all__ = [
    "__version__",
    "BASE_CURRENCY",
    "CurrencyMapping",
    "ErrorKind",
    "Failure",
    "RateRecord",
    "RateResolutionError",
    "RateTable",
    "Success",
    "TreasuryCurrencyMapping",
    "TreasuryRates",
    "TreasuryTableBuilder",
    "batch_convert",
    "build_table",
    "convert",
    "currency_detail",
    "list_currencies",
    "load_table",
    "lookup_rate",
    "rebase",
]

try:
    __version__ = importlib_metadata.version("treasury-fx")
except importlib_metadata.PackageNotFoundError:  # pragma: no cover - fallback for local runs
    __version__ = "0.1.0"

LOGGER = get_logger(__name__)


class TreasuryRates:
    """Package facade that owns the cached rate table.

    The table is built from ``raw_text`` when given, otherwise from the CSV at
    ``source`` (the bundled sample by default). It is built lazily on first
    access, exactly once, and every query runs against that cached instance.
    """

    __slots__ = ("source", "raw_text", "mapping", "_table", "_lock")

    __version__ = __version__

    def __init__(
        self,
        source: str | Path | None = None,
        *,
        raw_text: str | None = None,
        mapping: CurrencyMapping | None = None,
    ) -> None:
        if source is not None and raw_text is not None:
            raise ValueError("Provide either source or raw_text, not both")
        self.source = Path(source) if source is not None else DEFAULT_RATES_CSV_PATH
        self.raw_text = raw_text
        self.mapping: CurrencyMapping = DEFAULT_MAPPING if mapping is None else mapping
        self._table: RateTable | None = None
        self._lock = threading.Lock()

    @property
    def table(self) -> RateTable:
        """Return the cached table, building it on first access."""

        table = self._table
        if table is None:
            with self._lock:
                if self._table is None:
                    self._table = self._build()
                table = self._table
        return table

    def reload(self) -> RateTable:
        """Rebuild the table from the configured source and swap it in."""

        origin = "raw text" if self.raw_text is not None else self.source
        LOGGER.info("Reloading rate table from %s", origin)
        table = self._build()
        with self._lock:
            self._table = table
        return table

    def _build(self) -> RateTable:
        if self.raw_text is not None:
            return build_table(self.raw_text, self.mapping)
        return load_table(self.source, self.mapping)

    @property
    def last_updated(self) -> str:
        return self.table.last_updated

    def rate(self, from_currency: str | None, to_currency: str | None) -> Result[RateView]:
        return lookup_rate(self.table, from_currency, to_currency, mapping=self.mapping)

    def convert(
        self,
        from_currency: str | None,
        to_currency: str | None,
        amount: str | float | None,
    ) -> Result[ConversionView]:
        return convert(self.table, from_currency, to_currency, amount, mapping=self.mapping)

    def rates(self, base: str | None = None) -> Result[RatesView]:
        return rebase(self.table, base, mapping=self.mapping)

    def currency(self, code: str | None) -> Result[DetailView]:
        return currency_detail(self.table, code, mapping=self.mapping)

    def batch_convert(
        self,
        from_currency: str | None,
        to_currency: str | None,
        amounts: Sequence[float] | None,
    ) -> Result[BatchView]:
        return batch_convert(self.table, from_currency, to_currency, amounts, mapping=self.mapping)

    def currencies(self) -> list[CurrencySummary]:
        return list_currencies(self.table)
