from dataclasses import FrozenInstanceError

import pytest

from treasury_fx.ingestion.models import FRAME_COLUMNS, RateRecord, RateTable


@pytest.fixture
def table() -> RateTable:
    records = {
        "USD": RateRecord("USD", "United States-Dollar", 1.0, "2025-12-31"),
        "EUR": RateRecord("EUR", "Euro Zone-Euro", 0.851, "2025-12-31"),
        "AUD": RateRecord("AUD", "Australia-Dollar", 1.495, "2025-12-30"),
    }
    return RateTable(records=records, last_updated="2025-12-31")


def test_rate_table_behaves_like_a_mapping(table: RateTable) -> None:
    assert len(table) == 3
    assert "EUR" in table
    assert "CHF" not in table
    assert table.get("CHF") is None
    assert table["AUD"].rate_to_usd == 1.495
    assert table.codes() == ["AUD", "EUR", "USD"]


def test_rate_table_is_read_only(table: RateTable) -> None:
    with pytest.raises(TypeError):
        table.records["CHF"] = RateRecord("CHF", "Switzerland-Franc", 0.793, "2025-12-31")  # type: ignore[index]
    with pytest.raises(FrozenInstanceError):
        table.last_updated = "2026-01-01"  # type: ignore[misc]
    with pytest.raises(FrozenInstanceError):
        table["EUR"].rate_to_usd = 2.0  # type: ignore[misc]


def test_rate_table_compares_as_a_mapping(table: RateTable) -> None:
    assert table == dict(table)
    assert table == RateTable(records=dict(table), last_updated="2026-01-01")
    assert table != {"USD": table["USD"]}
    with pytest.raises(TypeError):
        hash(table)


def test_rate_table_copies_input_records() -> None:
    records = {"USD": RateRecord("USD", "United States-Dollar", 1.0, "")}
    table = RateTable(records=records, last_updated="")

    records["EUR"] = RateRecord("EUR", "Euro Zone-Euro", 0.851, "")

    assert "EUR" not in table


def test_to_frame_sorted_by_code(table: RateTable) -> None:
    frame = table.to_frame()

    assert list(frame.columns) == list(FRAME_COLUMNS)
    assert frame["code"].tolist() == ["AUD", "EUR", "USD"]
    assert frame.loc[frame["code"] == "EUR", "rate_to_usd"].item() == 0.851
