from .base import QuoteProvider
from .currencylayer import CurrencyLayerProvider, CurrencyLayerResponse

__all__ = ['QuoteProvider', 'CurrencyLayerProvider', 'CurrencyLayerResponse']
