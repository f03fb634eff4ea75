"""ResultParserService: source document → RaceResult."""

from __future__ import annotations

import logging

from .extractor import SourceKind, extract_raw_rows
from .fetcher import HyResultFetcher
from .models import RaceResult
from .reducer import reduce_to_result

logger = logging.getLogger(__name__)


def parse_result(source_text: str, source_kind: SourceKind | str) -> RaceResult:
    """Run the full pipeline: extract rows, classify and reduce."""
    rows = extract_raw_rows(source_text, source_kind)
    return reduce_to_result(rows)


class ResultParserService:
    """Parses race results from HyResult URLs, pages and CSV exports."""

    def __init__(self, fetcher: HyResultFetcher):
        self.fetcher = fetcher

    async def parse_url(self, url: str) -> RaceResult:
        """Fetch a HyResult page and parse it.

        Raises:
            InvalidResultUrlError: URL is not a HyResult result page.
            FetchError: Page could not be downloaded.
        """
        html = await self.fetcher.fetch(url)
        result = parse_result(html, SourceKind.HTML)
        logger.info(
            f"Parsed {url}: {len(result.station_times)} stations, "
            f"total={result.total_time}"
        )
        return result

    def parse_html(self, html: str) -> RaceResult:
        return parse_result(html, SourceKind.HTML)

    def parse_csv(self, csv_text: str) -> RaceResult:
        return parse_result(csv_text, SourceKind.CSV)
