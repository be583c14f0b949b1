import logging
from decimal import Decimal

from application.services.currency_symbols import CurrencySymbolIndex
from application.utils.time import unix_timestamp_to_datetime
from domain.exceptions.currency import ProviderError
from domain.models.currency import DollarPrice
from infrastructure.providers.base import QuoteProvider
from infrastructure.providers.currencylayer import CurrencyLayerResponse

logger = logging.getLogger(__name__)

SOURCE_CURRENCY = 'USD'


class DollarPriceService:
    def __init__(self, provider: QuoteProvider, symbol_index: CurrencySymbolIndex):
        self.provider = provider
        self.symbol_index = symbol_index

    async def get_price(self, currency_code: str | None) -> DollarPrice | None:
        if not currency_code or not currency_code.strip():
            return None

        currency_code = currency_code.strip().upper()

        try:
            data = await self.provider.fetch_quotes(currency_code)
            quote_key, price = self._select_quote(data, currency_code)
            return DollarPrice(
                timestamp=unix_timestamp_to_datetime(data.timestamp),
                currency=quote_key,
                currency_symbol=self.symbol_index.lookup(currency_code),
                price=price,
            )
        except Exception as e:
            logger.error(f'Dollar price for {currency_code} failed: {e}')
            return None

    def _select_quote(
        self, data: CurrencyLayerResponse, currency_code: str
    ) -> tuple[str, Decimal]:
        if not data.quotes:
            raise ProviderError(f'No quotes returned for {currency_code}')

        expected_key = f'{SOURCE_CURRENCY}{currency_code}'
        if expected_key in data.quotes:
            return expected_key, data.quotes[expected_key]

        if len(data.quotes) == 1:
            return next(iter(data.quotes.items()))

        raise ProviderError(f'Quote {expected_key} not found in provider response')

