from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from domain.models.currency import DollarPrice


class DollarPriceResponse(BaseModel):
	timestamp: datetime = Field(..., description='When the provider quoted the rate (UTC)')
	currency: str = Field(..., description='Quote pair returned by the provider')
	currency_symbol: str = Field(..., description='Display symbol of the requested currency')
	price: Decimal = Field(..., description='Units of the requested currency per 1 USD')

	@classmethod
	def from_domain(cls, price: DollarPrice) -> 'DollarPriceResponse':
		return cls(
			timestamp=price.timestamp,
			currency=price.currency,
			currency_symbol=price.currency_symbol,
			price=price.price,
		)

	model_config = ConfigDict(
		json_schema_extra={
			'example': {
				'timestamp': '2021-01-01T00:00:00Z',
				'currency': 'USDCOP',
				'currency_symbol': '$',
				'price': 3432.5,
			}
		}
	)
