"""Tests for the public package facade."""

import threading
from pathlib import Path

import pytest

import treasury_fx
from treasury_fx import (
    ErrorKind,
    Failure,
    TreasuryCurrencyMapping,
    TreasuryRates,
    __version__,
)
from treasury_fx.data import DEFAULT_RATES_CSV_PATH

RAW_TABLE = """Record Date,Country - Currency Description,Exchange Rate,Effective Date
2025-12-31,Euro Zone-Euro,0.851,2025-12-31
2025-12-31,United Kingdom-Pound,0.79,2025-12-31
"""


def test_treasury_rates_class_is_exposed() -> None:
    assert TreasuryRates.__version__ == __version__


def test_defaults_to_bundled_table() -> None:
    service = TreasuryRates()

    assert service.source == DEFAULT_RATES_CSV_PATH
    assert len(service.table) == 20
    assert service.last_updated == "2025-12-31"
    assert service.currency("cdf").unwrap().name == "Congo, Dem. Rep-Congolese Franc"


def test_rejects_source_and_raw_text_together() -> None:
    with pytest.raises(ValueError):
        TreasuryRates("rates.csv", raw_text=RAW_TABLE)


def test_missing_source_raises_on_first_access(tmp_path: Path) -> None:
    service = TreasuryRates(tmp_path / "missing.csv")

    with pytest.raises(FileNotFoundError):
        service.table


def test_table_is_built_once(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[str] = []
    original = treasury_fx.build_table

    def _counting_build(raw_text, mapping=None):
        calls.append(raw_text)
        return original(raw_text, mapping)

    monkeypatch.setattr(treasury_fx, "build_table", _counting_build)
    service = TreasuryRates(raw_text=RAW_TABLE)

    first = service.table
    service.rate("EUR", "GBP")
    service.rates()

    assert service.table is first
    assert len(calls) == 1


def test_concurrent_first_access_builds_once(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[int] = []
    original = treasury_fx.build_table
    barrier = threading.Barrier(8)

    def _counting_build(raw_text, mapping=None):
        calls.append(1)
        return original(raw_text, mapping)

    monkeypatch.setattr(treasury_fx, "build_table", _counting_build)
    service = TreasuryRates(raw_text=RAW_TABLE)
    seen: list[object] = []

    def _worker() -> None:
        barrier.wait()
        seen.append(service.table)

    threads = [threading.Thread(target=_worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(calls) == 1
    assert all(table is seen[0] for table in seen)


def test_reload_rebuilds_from_source(tmp_path: Path) -> None:
    csv_path = tmp_path / "rates.csv"
    csv_path.write_text(RAW_TABLE, encoding="utf-8")
    service = TreasuryRates(csv_path)
    assert service.rate("USD", "EUR").unwrap().rate == 0.851

    csv_path.write_text(
        RAW_TABLE + "2026-01-15,Euro Zone-Euro,0.86,2026-01-15\n",
        encoding="utf-8",
    )
    refreshed = service.reload()

    assert service.table is refreshed
    assert service.rate("USD", "EUR").unwrap().rate == 0.86
    assert service.last_updated == "2026-01-15"


def test_facade_delegates_queries() -> None:
    service = TreasuryRates(raw_text=RAW_TABLE)

    assert service.rate("eur", "gbp").unwrap().rate == 0.92832
    assert service.convert("USD", "EUR", "100").unwrap().converted_amount == 85.1
    assert service.rates("GBP").unwrap().rates["GBP"] == 1.0
    assert service.currency("USD").unwrap().rate_to_usd == 1.0
    batch = service.batch_convert("USD", "EUR", [100, 200]).unwrap()
    assert [item.converted_amount for item in batch.conversions] == [85.1, 170.2]
    assert [item.code for item in service.currencies()] == ["EUR", "GBP", "USD"]


def test_facade_returns_failures() -> None:
    service = TreasuryRates(raw_text=RAW_TABLE)

    result = service.batch_convert("USD", "EUR", [100, "x", 300])

    assert isinstance(result, Failure)
    assert result.kind is ErrorKind.INVALID_AMOUNT
    assert service.rate("USD", "JPY").kind is ErrorKind.INVALID_CURRENCY


def test_facade_uses_injected_mapping() -> None:
    mapping = TreasuryCurrencyMapping({"Atlantis-Coin": "ATL", "United States-Dollar": "USD"})
    service = TreasuryRates(
        raw_text=RAW_TABLE + "2025-12-31,Atlantis-Coin,4.0,2025-12-31\n",
        mapping=mapping,
    )

    assert set(service.table) == {"ATL", "USD"}
    assert service.convert("ATL", "USD", 10).unwrap().converted_amount == 2.5
