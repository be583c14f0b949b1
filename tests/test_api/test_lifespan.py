import logging

from fastapi.testclient import TestClient

from api.dependencies import deps
from api.main import app


def test_lifespan_builds_and_releases_dependencies():
    with TestClient(app) as client:
        assert deps.symbol_index is not None
        assert deps.symbol_index.lookup('EUR') == '€'
        assert deps.provider is not None

        response = client.get('/api/DollarPrice', params={'currency': ''})
        assert response.status_code == 200
        assert response.json() is None

    assert deps.symbol_index is None
    assert deps.provider is None

    # drop the console handler installed by setup_logging
    logging.getLogger().handlers.clear()
