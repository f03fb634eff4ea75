"""HyResult page fetching."""

from __future__ import annotations

import logging

import httpx

logger = logging.getLogger(__name__)

HYRESULT_PATH_MARKER = "hyresult.com/result/"
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"
)


class FetchError(Exception):
    """Result page could not be downloaded."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)


class InvalidResultUrlError(ValueError):
    """URL is not a HyResult result page."""
    pass


def validate_hyresult_url(url: str) -> str:
    """Return the stripped URL or raise InvalidResultUrlError."""
    url = (url or "").strip()
    if not url:
        raise InvalidResultUrlError("URL is required")
    if HYRESULT_PATH_MARKER not in url:
        raise InvalidResultUrlError(
            "Invalid HyResult URL. Use a URL like: "
            "https://www.hyresult.com/result/..."
        )
    return url


class HyResultFetcher:
    """Downloads HyResult result pages."""

    def __init__(
        self,
        timeout: float = 30.0,
        user_agent: str = DEFAULT_USER_AGENT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Args:
            timeout: Request timeout in seconds.
            user_agent: Sent as User-Agent; HyResult rejects bare clients.
            transport: Optional httpx transport (used by tests).
        """
        self.timeout = timeout
        self.user_agent = user_agent
        self._transport = transport

    async def fetch(self, url: str) -> str:
        """Fetch a result page and return its HTML."""
        url = validate_hyresult_url(url)
        logger.info(f"Fetching HyResult page: {url}")

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                follow_redirects=True,
                headers={"User-Agent": self.user_agent},
                transport=self._transport,
            ) as client:
                resp = await client.get(url)
                resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.warning(f"HyResult returned {status} for {url}")
            raise FetchError(f"HyResult returned HTTP {status}", status_code=status) from e
        except httpx.HTTPError as e:
            logger.error(f"HyResult request failed: {e}")
            raise FetchError(f"Could not reach HyResult: {e}") from e

        return resp.text
