"""Rate lookups, conversions and rebasing over a built :class:`RateTable`.

Every public function validates its inputs completely before computing
anything and returns either :class:`Success` carrying a view object or
:class:`Failure` carrying an :class:`ErrorKind`. Expected bad input never
raises. Derived rates always go through :func:`pair_rate`, the quotient of the
two USD-anchored rates, and rounding happens only when a view is built.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from numbers import Number
from typing import Any, ClassVar, Dict, Generic, List, NoReturn, Sequence, TypeVar, Union

from treasury_fx.ingestion.currency_mapping import DEFAULT_MAPPING, CurrencyMapping
from treasury_fx.ingestion.models import BASE_CURRENCY, RateTable
from treasury_fx.utils.logger import get_logger
from treasury_fx.utils.rounding import round_amount, round_rate

LOGGER = get_logger(__name__)

T = TypeVar("T")


class ErrorKind(str, Enum):
    """Reasons a resolver query can be rejected."""

    MISSING_PARAMETER = "MISSING_PARAMETER"
    INVALID_AMOUNT = "INVALID_AMOUNT"
    INVALID_CURRENCY = "INVALID_CURRENCY"


class RateResolutionError(ValueError):
    """Raised by :meth:`Failure.unwrap` for callers that prefer exceptions."""

    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T
    ok: ClassVar[bool] = True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Failure:
    kind: ErrorKind
    message: str
    ok: ClassVar[bool] = False

    def unwrap(self) -> NoReturn:
        raise RateResolutionError(self.kind, self.message)

    def to_dict(self) -> Dict[str, str]:
        return {"error": self.message, "code": self.kind.value}


Result = Union[Success[T], Failure]


@dataclass(frozen=True, slots=True)
class RateView:
    from_currency: str
    to_currency: str
    rate: float
    effective_date: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "from": self.from_currency,
            "to": self.to_currency,
            "rate": self.rate,
            "effectiveDate": self.effective_date,
        }


@dataclass(frozen=True, slots=True)
class ConversionView:
    from_currency: str
    to_currency: str
    amount: float
    converted_amount: float
    rate: float
    effective_date: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "from": self.from_currency,
            "to": self.to_currency,
            "amount": self.amount,
            "convertedAmount": self.converted_amount,
            "rate": self.rate,
            "effectiveDate": self.effective_date,
        }


@dataclass(frozen=True, slots=True)
class RatesView:
    base: str
    effective_date: str
    rates: Dict[str, float]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "base": self.base,
            "effectiveDate": self.effective_date,
            "rates": dict(self.rates),
        }


@dataclass(frozen=True, slots=True)
class DetailView:
    code: str
    name: str
    rate_to_usd: float
    effective_date: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "name": self.name,
            "rateToUSD": self.rate_to_usd,
            "effectiveDate": self.effective_date,
        }


@dataclass(frozen=True, slots=True)
class BatchConversion:
    amount: float
    converted_amount: float

    def to_dict(self) -> Dict[str, float]:
        return {"amount": self.amount, "convertedAmount": self.converted_amount}


@dataclass(frozen=True, slots=True)
class BatchView:
    from_currency: str
    to_currency: str
    rate: float
    effective_date: str
    conversions: List[BatchConversion]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "from": self.from_currency,
            "to": self.to_currency,
            "rate": self.rate,
            "effectiveDate": self.effective_date,
            "conversions": [conversion.to_dict() for conversion in self.conversions],
        }


@dataclass(frozen=True, slots=True)
class CurrencySummary:
    code: str
    name: str

    def to_dict(self) -> Dict[str, str]:
        return {"code": self.code, "name": self.name}


def pair_rate(table: RateTable, from_code: str, to_code: str) -> float:
    """Return the unrounded rate converting one unit of ``from_code`` into ``to_code``."""

    return table[to_code].rate_to_usd / table[from_code].rate_to_usd


def pair_effective_date(table: RateTable, from_code: str, to_code: str) -> str:
    """Return the later of the two currencies' effective dates."""

    return max(table[from_code].effective_date, table[to_code].effective_date)


def _normalise_code(value: str | None) -> str | None:
    if not value:
        return None
    return value.upper()


def _is_known(table: RateTable, code: str, mapping: CurrencyMapping) -> bool:
    return mapping.is_valid_code(code) and code in table


def _fail(kind: ErrorKind, message: str) -> Failure:
    LOGGER.debug("Rejected query (%s): %s", kind.value, message)
    return Failure(kind=kind, message=message)


def _check_pair(
    table: RateTable, from_code: str, to_code: str, mapping: CurrencyMapping
) -> Failure | None:
    for code in (from_code, to_code):
        if not _is_known(table, code, mapping):
            return _fail(ErrorKind.INVALID_CURRENCY, f"Invalid currency code: {code}")
    return None


def _coerce_number(value: object) -> float | None:
    if isinstance(value, (bool, complex)) or not isinstance(value, Number):
        return None
    try:
        amount = float(value)  # type: ignore[arg-type]
    except (OverflowError, TypeError, ValueError):
        return None
    return amount if math.isfinite(amount) else None


def _parse_amount(value: object) -> float | None:
    if isinstance(value, str):
        try:
            amount = float(value.strip())
        except ValueError:
            return None
        return amount if math.isfinite(amount) else None
    return _coerce_number(value)


def _parse_batch_amounts(values: object) -> list[float] | None:
    if isinstance(values, (str, bytes)) or not isinstance(values, Sequence) or not values:
        return None
    amounts: list[float] = []
    for value in values:
        amount = _coerce_number(value)
        if amount is None:
            return None
        amounts.append(amount)
    return amounts


def lookup_rate(
    table: RateTable,
    from_currency: str | None,
    to_currency: str | None,
    *,
    mapping: CurrencyMapping | None = None,
) -> Result[RateView]:
    """Return the rate converting ``from_currency`` into ``to_currency``."""

    mapping = DEFAULT_MAPPING if mapping is None else mapping
    from_code = _normalise_code(from_currency)
    to_code = _normalise_code(to_currency)
    if not from_code or not to_code:
        return _fail(ErrorKind.MISSING_PARAMETER, "Missing required parameters: from and to")
    failure = _check_pair(table, from_code, to_code, mapping)
    if failure is not None:
        return failure

    return Success(
        RateView(
            from_currency=from_code,
            to_currency=to_code,
            rate=round_rate(pair_rate(table, from_code, to_code)),
            effective_date=pair_effective_date(table, from_code, to_code),
        )
    )


def convert(
    table: RateTable,
    from_currency: str | None,
    to_currency: str | None,
    amount: str | float | None,
    *,
    mapping: CurrencyMapping | None = None,
) -> Result[ConversionView]:
    """Convert ``amount`` units of ``from_currency`` into ``to_currency``.

    ``amount`` may be a number or numeric text, as received from a query string.
    """

    mapping = DEFAULT_MAPPING if mapping is None else mapping
    from_code = _normalise_code(from_currency)
    to_code = _normalise_code(to_currency)
    if not from_code or not to_code or amount is None or amount == "":
        return _fail(
            ErrorKind.MISSING_PARAMETER,
            "Missing required parameters: from, to, and amount",
        )
    parsed_amount = _parse_amount(amount)
    if parsed_amount is None:
        return _fail(ErrorKind.INVALID_AMOUNT, "Invalid amount: must be a number")
    failure = _check_pair(table, from_code, to_code, mapping)
    if failure is not None:
        return failure

    rate = pair_rate(table, from_code, to_code)
    return Success(
        ConversionView(
            from_currency=from_code,
            to_currency=to_code,
            amount=parsed_amount,
            converted_amount=round_amount(parsed_amount, rate),
            rate=round_rate(rate),
            effective_date=pair_effective_date(table, from_code, to_code),
        )
    )


def rebase(
    table: RateTable,
    base: str | None = None,
    *,
    mapping: CurrencyMapping | None = None,
) -> Result[RatesView]:
    """Express every rate in the table relative to ``base`` (USD by default)."""

    mapping = DEFAULT_MAPPING if mapping is None else mapping
    base_code = _normalise_code(base) or BASE_CURRENCY
    if not _is_known(table, base_code, mapping):
        return _fail(ErrorKind.INVALID_CURRENCY, f"Invalid base currency code: {base_code}")

    latest = table[base_code].effective_date
    rates: dict[str, float] = {}
    for code in table.codes():
        rates[code] = round_rate(pair_rate(table, base_code, code))
        latest = max(latest, table[code].effective_date)
    return Success(RatesView(base=base_code, effective_date=latest, rates=rates))


def currency_detail(
    table: RateTable,
    code: str | None,
    *,
    mapping: CurrencyMapping | None = None,
) -> Result[DetailView]:
    """Return the stored record for a single currency."""

    mapping = DEFAULT_MAPPING if mapping is None else mapping
    upper_code = (code or "").upper()
    if not _is_known(table, upper_code, mapping):
        return _fail(ErrorKind.INVALID_CURRENCY, f"Invalid currency code: {upper_code}")

    record = table[upper_code]
    return Success(
        DetailView(
            code=record.code,
            name=record.display_name,
            rate_to_usd=record.rate_to_usd,
            effective_date=record.effective_date,
        )
    )


def batch_convert(
    table: RateTable,
    from_currency: str | None,
    to_currency: str | None,
    amounts: Sequence[float] | None,
    *,
    mapping: CurrencyMapping | None = None,
) -> Result[BatchView]:
    """Convert several amounts at one pairwise rate, preserving input order."""

    mapping = DEFAULT_MAPPING if mapping is None else mapping
    from_code = _normalise_code(from_currency)
    to_code = _normalise_code(to_currency)
    if not from_code or not to_code or amounts is None:
        return _fail(
            ErrorKind.MISSING_PARAMETER,
            "Missing required parameters: from, to, and amounts",
        )
    parsed_amounts = _parse_batch_amounts(amounts)
    if parsed_amounts is None:
        return _fail(
            ErrorKind.INVALID_AMOUNT,
            "amounts must be a non-empty array of valid numbers",
        )
    failure = _check_pair(table, from_code, to_code, mapping)
    if failure is not None:
        return failure

    rate = pair_rate(table, from_code, to_code)
    conversions = [
        BatchConversion(amount=amount, converted_amount=round_amount(amount, rate))
        for amount in parsed_amounts
    ]
    return Success(
        BatchView(
            from_currency=from_code,
            to_currency=to_code,
            rate=round_rate(rate),
            effective_date=pair_effective_date(table, from_code, to_code),
            conversions=conversions,
        )
    )


def list_currencies(table: RateTable) -> list[CurrencySummary]:
    """Return every currency in the table as ``(code, name)`` pairs sorted by code."""

    return [CurrencySummary(code=code, name=table[code].display_name) for code in table.codes()]


__all__ = [
    "BatchConversion",
    "BatchView",
    "ConversionView",
    "CurrencySummary",
    "DetailView",
    "ErrorKind",
    "Failure",
    "RateResolutionError",
    "RateView",
    "RatesView",
    "Result",
    "Success",
    "batch_convert",
    "convert",
    "currency_detail",
    "list_currencies",
    "lookup_rate",
    "pair_effective_date",
    "pair_rate",
    "rebase",
]
