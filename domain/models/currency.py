from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal


@dataclass(frozen=True)
class RegionCurrencyEntry:
    region: str
    currency_code: str
    symbol: str


@dataclass(frozen=True)
class DollarPrice:
    timestamp: datetime
    currency: str  # Quote key as returned by the provider, e.g. USDCOP
    currency_symbol: str
    price: Decimal
