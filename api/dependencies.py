import logging
from typing import Annotated

from fastapi import Depends

from application.services import CurrencySymbolIndex, DollarPriceService, HypotenuseService
from config.settings import Settings, get_settings
from infrastructure.providers import CurrencyLayerProvider, QuoteProvider

logger = logging.getLogger(__name__)


class AppDependencies:
	"""Container for application-wide singleton dependencies."""

	symbol_index: CurrencySymbolIndex | None = None
	provider: QuoteProvider | None = None


deps = AppDependencies()


def init_dependencies() -> None:
	"""Initialize all singleton dependencies. Called at app startup."""
	logger.info('Initializing dependencies...')
	settings = get_settings()

	deps.symbol_index = CurrencySymbolIndex.build()
	logger.info(f'Currency symbol index ready ({len(deps.symbol_index)} currencies)')

	deps.provider = CurrencyLayerProvider(
		base_url=settings.CURRENCYLAYER_BASE_URL,
		endpoint=settings.CURRENCYLAYER_ENDPOINT,
		access_key=settings.CURRENCYLAYER_ACCESS_KEY,
		timeout=settings.HTTP_TIMEOUT,
	)
	logger.info('Dependencies initialized')


async def cleanup_dependencies() -> None:
	logger.info('Cleaning up dependencies...')

	if deps.provider:
		await deps.provider.close()
	deps.provider = None
	deps.symbol_index = None

	logger.info('Cleanup complete')


def get_symbol_index() -> CurrencySymbolIndex:
	if deps.symbol_index is None:
		raise RuntimeError('Currency symbol index not initialized')
	return deps.symbol_index


def get_provider() -> QuoteProvider:
	if deps.provider is None:
		raise RuntimeError('Quote provider not initialized')
	return deps.provider


def get_dollar_price_service(
	provider: Annotated[QuoteProvider, Depends(get_provider)],
	symbol_index: Annotated[CurrencySymbolIndex, Depends(get_symbol_index)],
) -> DollarPriceService:
	return DollarPriceService(provider=provider, symbol_index=symbol_index)


def get_hypotenuse_service() -> HypotenuseService:
	return HypotenuseService()


def get_app_settings() -> Settings:
	return get_settings()
