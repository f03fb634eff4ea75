"""
Tests for HyResult page fetching and the parser service.
"""

import asyncio

import httpx
import pytest

from app.features.results import (
    FetchError,
    HyResultFetcher,
    InvalidResultUrlError,
    ResultParserService,
    StationKey,
)
from app.features.results.fetcher import validate_hyresult_url

RESULT_URL = "https://www.hyresult.com/result/abc123"

PAGE = (
    "<table><tr><td>SkiErg Out</td><td>10:00:00</td><td>0:04:45</td><td>0:04:45</td></tr>"
    "<tr><td>Total Time</td><td>10:45:00</td><td>0:45:00</td><td>0:00:00</td></tr></table>"
)


def make_fetcher(handler) -> HyResultFetcher:
    return HyResultFetcher(timeout=5, transport=httpx.MockTransport(handler))


# =============================================================================
# URL validation
# =============================================================================

class TestValidateUrl:

    def test_valid(self):
        assert validate_hyresult_url(f"  {RESULT_URL} ") == RESULT_URL

    def test_empty(self):
        with pytest.raises(InvalidResultUrlError):
            validate_hyresult_url("")

    def test_other_site(self):
        with pytest.raises(InvalidResultUrlError):
            validate_hyresult_url("https://example.com/result/1")


# =============================================================================
# Fetching
# =============================================================================

class TestHyResultFetcher:

    def test_returns_page_text(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["ua"] = request.headers["User-Agent"]
            return httpx.Response(200, text=PAGE)

        html = asyncio.run(make_fetcher(handler).fetch(RESULT_URL))
        assert html == PAGE
        assert seen["ua"].startswith("Mozilla/5.0")

    def test_http_error_status(self):
        def handler(request):
            return httpx.Response(404, text="not found")

        with pytest.raises(FetchError) as exc_info:
            asyncio.run(make_fetcher(handler).fetch(RESULT_URL))
        assert exc_info.value.status_code == 404

    def test_network_error(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(FetchError) as exc_info:
            asyncio.run(make_fetcher(handler).fetch(RESULT_URL))
        assert exc_info.value.status_code is None

    def test_invalid_url_not_requested(self):
        def handler(request):
            raise AssertionError("should not be called")

        with pytest.raises(InvalidResultUrlError):
            asyncio.run(make_fetcher(handler).fetch("https://example.com"))


# =============================================================================
# Service
# =============================================================================

class TestResultParserService:

    def test_parse_url(self):
        service = ResultParserService(
            make_fetcher(lambda request: httpx.Response(200, text=PAGE))
        )
        result = asyncio.run(service.parse_url(RESULT_URL))
        assert result.station_times == {StationKey.SKI_ERG: 285}
        assert result.total_time == 2700

    def test_parse_csv(self):
        service = ResultParserService(HyResultFetcher())
        result = service.parse_csv("Station,Diff\nWall Balls,05:00")
        assert result.station_times == {StationKey.WALL_BALLS: 300}
