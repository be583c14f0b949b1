from .requests import HypotenuseRequest
from .responses import DollarPriceResponse

__all__ = [
	'HypotenuseRequest',
	'DollarPriceResponse',
]
