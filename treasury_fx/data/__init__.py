"""Location of the exchange-rate table bundled with the package."""

from __future__ import annotations

from pathlib import Path
from typing import Final

__all__ = ["DEFAULT_RATES_CSV_PATH"]

# Resolved against this file so the sample table is found from site-packages
# as well as from a source checkout.
DEFAULT_RATES_CSV_PATH: Final[Path] = Path(__file__).resolve().with_name("exchange_rates.csv")
