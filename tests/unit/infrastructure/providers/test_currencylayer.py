# nosec B101


import pytest
from decimal import Decimal
from unittest.mock import Mock, AsyncMock
import httpx

from infrastructure.providers.currencylayer import CurrencyLayerProvider, CurrencyLayerResponse
from domain.exceptions.currency import ProviderError


def make_provider(mock_client, access_key='test_key'):
    return CurrencyLayerProvider(
        base_url='http://api.currencylayer.com/',
        endpoint='/live',
        access_key=access_key,
        client=mock_client,
    )


def make_response(payload):
    mock_response = Mock()
    mock_response.json.return_value = payload
    mock_response.raise_for_status = Mock()
    return mock_response


@pytest.mark.asyncio
async def test_fetch_quotes_success_returns_parsed_response():
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    mock_client.get.return_value = make_response({
        'success': True,
        'timestamp': 1609459200,
        'source': 'USD',
        'quotes': {'USDCOP': 3432.5}
    })

    provider = make_provider(mock_client)

    data = await provider.fetch_quotes('COP')

    assert isinstance(data, CurrencyLayerResponse)
    assert data.success is True
    assert data.timestamp == 1609459200
    assert data.quotes == {'USDCOP': Decimal('3432.5')}
    mock_client.get.assert_called_once()
    call_args = mock_client.get.call_args
    assert call_args[0][0] == 'http://api.currencylayer.com/live'
    assert call_args[1]['params']['access_key'] == 'test_key'
    assert call_args[1]['params']['source'] == 'USD'
    assert call_args[1]['params']['currencies'] == 'COP'


@pytest.mark.asyncio
async def test_fetch_quotes_preserves_provider_order():
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    mock_client.get.return_value = make_response({
        'success': True,
        'timestamp': 1609459200,
        'quotes': {'USDGBP': 0.73, 'USDEUR': 0.82}
    })

    provider = make_provider(mock_client)

    data = await provider.fetch_quotes('EUR')

    assert list(data.quotes) == ['USDGBP', 'USDEUR']


@pytest.mark.asyncio
async def test_fetch_quotes_api_returns_error():
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    mock_client.get.return_value = make_response({
        'success': False,
        'error': {
            'code': 101,
            'info': 'You have not supplied a valid API Access Key.'
        }
    })

    provider = make_provider(mock_client, access_key='invalid_key')

    with pytest.raises(ProviderError) as exc_info:
        await provider.fetch_quotes('EUR')

    assert 'valid API Access Key' in str(exc_info.value)


@pytest.mark.asyncio
async def test_fetch_quotes_null_body():
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    mock_client.get.return_value = make_response(None)

    provider = make_provider(mock_client)

    with pytest.raises(ProviderError) as exc_info:
        await provider.fetch_quotes('EUR')

    assert 'empty response body' in str(exc_info.value)


@pytest.mark.asyncio
async def test_fetch_quotes_malformed_json():
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    mock_response = Mock()
    mock_response.raise_for_status = Mock()
    mock_response.json.side_effect = ValueError('Expecting value: line 1 column 1 (char 0)')
    mock_client.get.return_value = mock_response

    provider = make_provider(mock_client)

    with pytest.raises(ProviderError) as exc_info:
        await provider.fetch_quotes('EUR')

    assert 'parsing error' in str(exc_info.value)
    assert isinstance(exc_info.value.__cause__, ValueError)


@pytest.mark.asyncio
async def test_fetch_quotes_invalid_quote_value():
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    mock_client.get.return_value = make_response({
        'success': True,
        'timestamp': 1609459200,
        'quotes': {'USDEUR': 'not-a-number'}
    })

    provider = make_provider(mock_client)

    with pytest.raises(ProviderError) as exc_info:
        await provider.fetch_quotes('EUR')

    assert 'parsing error' in str(exc_info.value)


@pytest.mark.asyncio
async def test_fetch_quotes_http_500_error():
    mock_client = AsyncMock(spec=httpx.AsyncClient)

    error_response = Mock()
    error_response.status_code = 500
    error_response.text = 'Internal Server Error'

    mock_client.get.side_effect = httpx.HTTPStatusError(
        'Server error',
        request=Mock(),
        response=error_response
    )

    provider = make_provider(mock_client)

    with pytest.raises(ProviderError) as exc_info:
        await provider.fetch_quotes('EUR')

    assert 'HTTP error 500' in str(exc_info.value)


@pytest.mark.asyncio
async def test_fetch_quotes_network_timeout():
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    mock_client.get.side_effect = httpx.TimeoutException('Request timed out')

    provider = make_provider(mock_client)

    with pytest.raises(ProviderError) as exc_info:
        await provider.fetch_quotes('EUR')

    assert 'TimeoutException' in str(exc_info.value)
    assert mock_client.get.call_count == 1


@pytest.mark.asyncio
async def test_close_closes_client():
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    provider = make_provider(mock_client)

    await provider.close()

    mock_client.aclose.assert_called_once()


def test_build_url_normalizes_slashes():
    provider = make_provider(AsyncMock(spec=httpx.AsyncClient))

    assert provider.build_url() == 'http://api.currencylayer.com/live'
    assert provider.name == 'currencylayer'
