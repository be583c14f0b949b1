from typing import Protocol

from infrastructure.providers.currencylayer import CurrencyLayerResponse


class QuoteProvider(Protocol):
    """A source of live USD quotes for a single target currency."""

    @property
    def name(self) -> str:
        ...

    async def fetch_quotes(self, currency: str) -> CurrencyLayerResponse:
        ...

    async def close(self) -> None:
        ...
