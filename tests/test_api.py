"""Tests for the HTTP endpoints"""

import pytest
from fastapi.testclient import TestClient

from crypto_stats.analytics.aggregator import PriceAggregator
from crypto_stats.api.dependencies import get_aggregator
from crypto_stats.data.store import PriceStore
from crypto_stats.main import create_app


@pytest.fixture
def client(aggregator):
    app = create_app()
    app.dependency_overrides[get_aggregator] = lambda: aggregator
    return TestClient(app)


@pytest.fixture
def broken_client(prices_dir):
    """Client whose LTC price file is missing."""
    (prices_dir / "LTC_values.csv").unlink()
    app = create_app()
    aggregator = PriceAggregator(PriceStore(prices_dir))
    app.dependency_overrides[get_aggregator] = lambda: aggregator
    return TestClient(app)


class TestCurrencyEndpoint:
    """GET /v1/{currency}"""

    def test_stats(self, client):
        response = client.get("/v1/BTC")

        assert response.status_code == 200
        assert response.json() == {"max": 5.0, "min": 2.0, "oldest": 2.0, "newest": 4.0}

    def test_lowercase_symbol(self, client):
        assert client.get("/v1/eth").json()["max"] == 4.0

    def test_empty_series_gives_nulls(self, client):
        assert client.get("/v1/XRP").json() == {"max": None, "min": None, "oldest": None, "newest": None}

    def test_unknown_symbol_is_400(self, client):
        response = client.get("/v1/ABC")

        assert response.status_code == 400
        assert "ABC" in response.json()["detail"]

    def test_missing_file_is_500(self, broken_client):
        response = broken_client.get("/v1/LTC")

        assert response.status_code == 500
        assert response.json()["detail"] == "Error fetching prices"


class TestPricesEndpoint:
    """GET /v1/prices"""

    def test_all_currencies(self, client, all_currencies):
        response = client.get("/v1/prices")

        assert response.status_code == 200
        body = response.json()
        assert list(body) == all_currencies
        assert body["LTC"] == {"max": 11.0, "min": 10.0, "oldest": 10.0, "newest": 11.0}

    def test_missing_file_is_500(self, broken_client):
        response = broken_client.get("/v1/prices")

        assert response.status_code == 500
        assert response.json()["detail"] == "Error fetching all prices"


class TestNormalizedEndpoints:
    """GET /v1/normalized and /v1/normalized/{day}"""

    def test_ranking(self, client):
        response = client.get("/v1/normalized")

        assert response.status_code == 200
        assert response.json() == [
            {"BTC": 1.5}, {"ETH": 1.0}, {"LTC": 0.1}, {"DOGE": 0.0}, {"XRP": 0.0},
        ]

    def test_ranking_missing_file_is_500(self, broken_client):
        assert broken_client.get("/v1/normalized").status_code == 500

    def test_day_winner(self, client):
        response = client.get("/v1/normalized/2022-01-01")

        assert response.status_code == 200
        assert response.text == "BTC"
        assert response.headers["content-type"].startswith("text/plain")

    def test_day_without_data_is_404(self, client):
        response = client.get("/v1/normalized/1999-12-31")

        assert response.status_code == 404
        assert response.json()["detail"] == "No data available for the given day"

    def test_bad_date_is_400(self, client):
        assert client.get("/v1/normalized/2022-13-45").status_code == 400
        assert client.get("/v1/normalized/yesterday").status_code == 400

    def test_day_missing_file_is_500(self, broken_client):
        assert broken_client.get("/v1/normalized/2022-01-01").status_code == 500


class TestHealth:
    """GET /health"""

    def test_reports_loaded_currencies(self, client, prices_dir):
        client.get("/v1/BTC")

        body = client.get("/health").json()

        assert body["status"] == "ok"
        assert body["prices_dir"] == str(prices_dir)
        assert body["prices_dir_exists"] is True
        assert body["loaded"] == ["BTC"]

    def test_uninitialized_is_503(self, monkeypatch):
        from crypto_stats.api import dependencies
        monkeypatch.setattr(dependencies, "_aggregator", None)

        assert TestClient(create_app()).get("/health").status_code == 503
