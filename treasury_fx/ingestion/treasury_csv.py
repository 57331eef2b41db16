"""Build USD-anchored rate tables from Treasury exchange-rate CSV exports."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator

from treasury_fx.data import DEFAULT_RATES_CSV_PATH
from treasury_fx.ingestion.currency_mapping import DEFAULT_MAPPING, CurrencyMapping
from treasury_fx.ingestion.models import BASE_CURRENCY, RateRecord, RateTable
from treasury_fx.utils.logger import get_logger

LOGGER = get_logger(__name__)

HEADER_DESCRIPTION = "Country - Currency Description"
BASE_CURRENCY_NAME = "United States-Dollar"
MIN_FIELDS = 4
BOM = "\ufeff"


def split_line(line: str, *, delimiter: str = ",", quotechar: str = '"') -> list[str]:
    """Split one delimited line into trimmed fields.

    Quote characters toggle whether the delimiter separates fields and are
    dropped from the output. A leading byte-order-mark is discarded.
    """

    if line.startswith(BOM):
        line = line[1:]

    fields: list[str] = []
    current: list[str] = []
    in_quotes = False
    for char in line:
        if char == quotechar:
            in_quotes = not in_quotes
        elif char == delimiter and not in_quotes:
            fields.append("".join(current).strip())
            current = []
        else:
            current.append(char)
    fields.append("".join(current).strip())
    return fields


def _parse_rate(value: str) -> float | None:
    try:
        rate = float(value)
    except ValueError:
        return None
    if not math.isfinite(rate) or rate <= 0:
        return None
    return rate


@dataclass(slots=True)
class TreasuryTableBuilder:
    """Parse raw Treasury CSV text into a :class:`RateTable`.

    Malformed rows, repeated headers, unmapped descriptions and rates that are
    not positive finite numbers are skipped without raising. When a currency
    appears more than once the row with the latest effective date is kept.
    """

    mapping: CurrencyMapping = field(default_factory=lambda: DEFAULT_MAPPING)
    delimiter: str = ","
    quotechar: str = '"'

    def build(self, raw_text: str) -> RateTable:
        records: dict[str, RateRecord] = {}
        last_updated = ""
        skipped = 0

        for fields in self._data_rows(raw_text):
            if len(fields) < MIN_FIELDS:
                LOGGER.debug("Skipping row with %s fields: %r", len(fields), fields)
                skipped += 1
                continue

            _record_date, description, rate_text, effective_date = fields[:MIN_FIELDS]
            if description == HEADER_DESCRIPTION:
                continue

            code = self.mapping.code_for(description)
            if not code:
                LOGGER.debug("Skipping unmapped currency description %r", description)
                skipped += 1
                continue

            rate = _parse_rate(rate_text)
            if rate is None:
                LOGGER.debug("Skipping %s row with non-numeric rate %r", code, rate_text)
                skipped += 1
                continue

            existing = records.get(code)
            if existing is None or effective_date > existing.effective_date:
                records[code] = RateRecord(
                    code=code,
                    display_name=description,
                    rate_to_usd=rate,
                    effective_date=effective_date,
                )

            if effective_date > last_updated:
                last_updated = effective_date

        records[BASE_CURRENCY] = RateRecord(
            code=BASE_CURRENCY,
            display_name=self.mapping.name_for(BASE_CURRENCY) or BASE_CURRENCY_NAME,
            rate_to_usd=1.0,
            effective_date=last_updated,
        )
        LOGGER.info(
            "Built rate table with %s currencies (%s rows skipped, last updated %s)",
            len(records),
            skipped,
            last_updated or "n/a",
        )
        return RateTable(records=records, last_updated=last_updated)

    def _data_rows(self, raw_text: str) -> Iterator[list[str]]:
        """Yield split fields for every non-empty line after the header."""

        header_seen = False
        for raw_line in raw_text.split("\n"):
            line = raw_line.strip()
            if not line:
                continue
            if not header_seen:
                header_seen = True
                continue
            yield split_line(line, delimiter=self.delimiter, quotechar=self.quotechar)


def build_table(
    raw_text: str,
    mapping: CurrencyMapping | None = None,
    *,
    delimiter: str = ",",
    quotechar: str = '"',
) -> RateTable:
    """Build a :class:`RateTable` from raw CSV text."""

    builder = TreasuryTableBuilder(
        mapping=DEFAULT_MAPPING if mapping is None else mapping,
        delimiter=delimiter,
        quotechar=quotechar,
    )
    return builder.build(raw_text)


def load_table(
    csv_path: str | Path = DEFAULT_RATES_CSV_PATH,
    mapping: CurrencyMapping | None = None,
) -> RateTable:
    """Read a Treasury CSV export from disk and build its rate table."""

    path = Path(csv_path)
    if not path.exists():
        raise FileNotFoundError(path)
    LOGGER.info("Loading exchange rates from %s", path)
    return build_table(path.read_text(encoding="utf-8-sig"), mapping)


__all__ = [
    "BASE_CURRENCY_NAME",
    "HEADER_DESCRIPTION",
    "TreasuryTableBuilder",
    "build_table",
    "load_table",
    "split_line",
]
