from .currency_symbols import CurrencySymbolIndex
from .dollar_price_service import DollarPriceService
from .hypotenuse_service import HypotenuseService

__all__ = ['CurrencySymbolIndex', 'DollarPriceService', 'HypotenuseService']
