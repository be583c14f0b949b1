from decimal import Decimal

import httpx
from pydantic import BaseModel, Field, ValidationError

from domain.exceptions.currency import ProviderError


class CurrencyLayerResponse(BaseModel):
	success: bool
	timestamp: int
	quotes: dict[str, Decimal] = Field(default_factory=dict)


class CurrencyLayerProvider:
	SOURCE_CURRENCY = 'USD'

	def __init__(
		self,
		base_url: str,
		endpoint: str,
		access_key: str,
		client: httpx.AsyncClient | None = None,
		timeout: int = 10,
	):
		self.base_url = base_url.rstrip('/')
		self.endpoint = endpoint.strip('/')
		self.access_key = access_key
		self._client = client or httpx.AsyncClient(timeout=timeout)

	@property
	def name(self) -> str:
		return 'currencylayer'

	def build_url(self) -> str:
		return f'{self.base_url}/{self.endpoint}'

	async def fetch_quotes(self, currency: str) -> CurrencyLayerResponse:
		params = {
			'access_key': self.access_key,
			'source': self.SOURCE_CURRENCY,
			'currencies': currency,
		}

		try:
			response = await self._client.get(self.build_url(), params=params)
			response.raise_for_status()
			data = response.json()
		except httpx.HTTPStatusError as e:
			raise ProviderError(
				f'CurrencyLayer HTTP error {e.response.status_code}: {e.response.text[:200]}'
			) from e
		except httpx.RequestError as e:
			raise ProviderError(f'CurrencyLayer request failed: {e.__class__.__name__}') from e
		except Exception as e:
			raise ProviderError(f'CurrencyLayer response parsing error: {str(e)}') from e

		if not isinstance(data, dict):
			raise ProviderError('CurrencyLayer returned an empty response body')

		if not data.get('success', False):
			info = (data.get('error') or {}).get('info', 'Unknown error')
			raise ProviderError(f'CurrencyLayer API error: {info}')

		try:
			return CurrencyLayerResponse.model_validate(data)
		except ValidationError as e:
			raise ProviderError(f'CurrencyLayer response parsing error: {e}') from e

	async def close(self) -> None:
		await self._client.aclose()
