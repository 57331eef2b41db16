"""Lookup between Treasury currency descriptions and ISO 4217 codes."""

from __future__ import annotations

from typing import Mapping, Protocol

TREASURY_NAME_TO_CODE: dict[str, str] = {
    "Afghanistan-Afghani": "AFN",
    "Albania-Lek": "ALL",
    "Algeria-Dinar": "DZD",
    "Angola-Kwanza": "AOA",
    "Antigua & Barbuda-East Caribbean Dollar": "XCD",
    "Argentina-Peso": "ARS",
    "Armenia-Dram": "AMD",
    "Australia-Dollar": "AUD",
    "Austria-Euro": "EUR",
    "Azerbaijan-Manat": "AZN",
    "Bahamas-Dollar": "BSD",
    "Bahrain-Dinar": "BHD",
    "Bangladesh-Taka": "BDT",
    "Barbados-Dollar": "BBD",
    "Belarus-New Ruble": "BYN",
    "Belgium-Euro": "EUR",
    "Belize-Dollar": "BZD",
    "Benin-Cfa Franc": "XOF",
    "Bermuda-Dollar": "BMD",
    "Bolivia-Boliviano": "BOB",
    "Bosnia-Marka": "BAM",
    "Botswana-Pula": "BWP",
    "Brazil-Real": "BRL",
    "Brunei-Dollar": "BND",
    "Bulgaria-Lev New": "BGN",
    "Burkina Faso-Cfa Franc": "XOF",
    "Burundi-Franc": "BIF",
    "Cambodia-Riel": "KHR",
    "Cameroon-Cfa Franc": "XAF",
    "Canada-Dollar": "CAD",
    "Cape Verde-Escudo": "CVE",
    "Cayman Islands-Dollar": "KYD",
    "Central African Republic-Cfa Franc": "XAF",
    "Chad-Cfa Franc": "XAF",
    "Chile-Peso": "CLP",
    "China-Renminbi": "CNY",
    "Colombia-Peso": "COP",
    "Comoros-Franc": "KMF",
    "Congo, Dem. Rep-Congolese Franc": "CDF",
    "Costa Rica-Colon": "CRC",
    "Cote D'Ivoire-Cfa Franc": "XOF",
    "Croatia-Euro": "EUR",
    "Czech Republic-Koruna": "CZK",
    "Denmark-Krone": "DKK",
    "Djibouti-Franc": "DJF",
    "Dominica-East Caribbean Dollar": "XCD",
    "Dominican Republic-Peso": "DOP",
    "Egypt-Pound": "EGP",
    "Euro Zone-Euro": "EUR",
    "Fiji-Dollar": "FJD",
    "France-Euro": "EUR",
    "Gabon-Cfa Franc": "XAF",
    "Gambia-Dalasi": "GMD",
    "Georgia-Lari": "GEL",
    "Germany-Euro": "EUR",
    "Ghana-Cedi": "GHS",
    "Grenada-East Caribbean Dollar": "XCD",
    "Guatemala-Quetzal": "GTQ",
    "Hong Kong-Dollar": "HKD",
    "Hungary-Forint": "HUF",
    "Iceland-Krona": "ISK",
    "India-Rupee": "INR",
    "Indonesia-Rupiah": "IDR",
    "Iraq-Dinar": "IQD",
    "Ireland-Euro": "EUR",
    "Israel-Shekel": "ILS",
    "Italy-Euro": "EUR",
    "Jamaica-Dollar": "JMD",
    "Japan-Yen": "JPY",
    "Jordan-Dinar": "JOD",
    "Kazakhstan-Tenge": "KZT",
    "Kenya-Shilling": "KES",
    "Korea-Won": "KRW",
    "Kuwait-Dinar": "KWD",
    "Lebanon-Pound": "LBP",
    "Malaysia-Ringgit": "MYR",
    "Mali-Cfa Franc": "XOF",
    "Mexico-Peso": "MXN",
    "Morocco-Dirham": "MAD",
    "Netherlands-Euro": "EUR",
    "New Zealand-Dollar": "NZD",
    "Niger-Cfa Franc": "XOF",
    "Nigeria-Naira": "NGN",
    "Norway-Krone": "NOK",
    "Oman-Rial": "OMR",
    "Pakistan-Rupee": "PKR",
    "Peru-Sol": "PEN",
    "Philippines-Peso": "PHP",
    "Poland-Zloty": "PLN",
    "Qatar-Riyal": "QAR",
    "Romania-New Leu": "RON",
    "Saudi Arabia-Riyal": "SAR",
    "Senegal-Cfa Franc": "XOF",
    "Serbia-Dinar": "RSD",
    "Singapore-Dollar": "SGD",
    "South Africa-Rand": "ZAR",
    "Spain-Euro": "EUR",
    "Sri Lanka-Rupee": "LKR",
    "Sweden-Krona": "SEK",
    "Switzerland-Franc": "CHF",
    "Taiwan-Dollar": "TWD",
    "Thailand-Baht": "THB",
    "Togo-Cfa Franc": "XOF",
    "Tonga-Pa'Anga": "TOP",
    "Trinidad & Tobago-Dollar": "TTD",
    "Tunisia-Dinar": "TND",
    "Turkey-New Lira": "TRY",
    "Ukraine-Hryvnia": "UAH",
    "United Arab Emirates-Dirham": "AED",
    "United Kingdom-Pound": "GBP",
    "United States-Dollar": "USD",
    "Uruguay-Peso": "UYU",
    "Vietnam-Dong": "VND",
    "Zambia-New Kwacha": "ZMW",
}

# Shared codes are labelled by their union-wide description rather than the
# first member state listed above.
_PREFERRED_NAMES: dict[str, str] = {
    "EUR": "Euro Zone-Euro",
    "XOF": "Cote D'Ivoire-Cfa Franc",
    "XAF": "Cameroon-Cfa Franc",
    "XCD": "Antigua & Barbuda-East Caribbean Dollar",
}


class CurrencyMapping(Protocol):
    """Contract for resolving source descriptions to ISO currency codes."""

    def code_for(self, name: str) -> str | None:
        ...  # pragma: no cover - protocol definition

    def name_for(self, code: str) -> str | None:
        ...  # pragma: no cover - protocol definition

    def is_valid_code(self, code: str) -> bool:
        ...  # pragma: no cover - protocol definition


class TreasuryCurrencyMapping:
    """Static :class:`CurrencyMapping` backed by a description → code table."""

    __slots__ = ("_name_to_code", "_code_to_name")

    def __init__(
        self,
        name_to_code: Mapping[str, str] | None = None,
        *,
        preferred_names: Mapping[str, str] | None = None,
    ) -> None:
        table = TREASURY_NAME_TO_CODE if name_to_code is None else name_to_code
        preferred = _PREFERRED_NAMES if preferred_names is None else preferred_names
        self._name_to_code: dict[str, str] = dict(table)
        code_to_name: dict[str, str] = {}
        for name, code in self._name_to_code.items():
            code_to_name.setdefault(code, name)
        for code, name in preferred.items():
            if self._name_to_code.get(name) == code:
                code_to_name[code] = name
        self._code_to_name = code_to_name

    def code_for(self, name: str) -> str | None:
        return self._name_to_code.get(name)

    def name_for(self, code: str) -> str | None:
        return self._code_to_name.get(code)

    def is_valid_code(self, code: str) -> bool:
        return code in self._code_to_name

    def codes(self) -> list[str]:
        """Return every code the mapping recognises, sorted."""

        return sorted(self._code_to_name)


DEFAULT_MAPPING = TreasuryCurrencyMapping()

__all__ = [
    "CurrencyMapping",
    "DEFAULT_MAPPING",
    "TREASURY_NAME_TO_CODE",
    "TreasuryCurrencyMapping",
]
