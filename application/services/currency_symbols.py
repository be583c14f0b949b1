import logging
from collections.abc import Iterable, Mapping
from types import MappingProxyType

from domain.exceptions.currency import RegionLookupError
from infrastructure.locale import LOCALE_NAMES, get_region

logger = logging.getLogger(__name__)


class CurrencySymbolIndex:
    """Read-only map from ISO currency code to display symbol.

    Built once at startup from the bundled locale database and shared by
    reference afterwards; it is never mutated, so concurrent lookups need
    no locking.
    """

    def __init__(self, symbols: Mapping[str, str]):
        self._symbols = MappingProxyType(dict(symbols))

    @classmethod
    def build(cls, locale_names: Iterable[str] = LOCALE_NAMES) -> 'CurrencySymbolIndex':
        symbols: dict[str, str] = {}
        for locale_name in locale_names:
            try:
                entry = get_region(locale_name)
            except RegionLookupError:
                continue
            # first region seen for a currency wins
            symbols.setdefault(entry.currency_code, entry.symbol)

        logger.debug(f'Currency symbol index built with {len(symbols)} currencies')
        return cls(symbols)

    @property
    def symbols(self) -> Mapping[str, str]:
        return self._symbols

    def lookup(self, code: str) -> str:
        if not isinstance(code, str):
            return ''
        return self._symbols.get(code, '')

    def __contains__(self, code: object) -> bool:
        return code in self._symbols

    def __len__(self) -> int:
        return len(self._symbols)
