import logging
from typing import List, Optional

import httpx

from config.settings import settings
from services.errors import UpstreamError

logger = logging.getLogger(__name__)


class MarketstackClient:
    def __init__(self, api_key: str = None, base_url: str = None, timeout: float = None, transport=None):
        self.api_key = settings.MARKETSTACK_API_KEY if api_key is None else api_key
        self.base = (base_url or settings.MARKETSTACK_BASE_URL).rstrip("/")
        self.timeout = settings.MARKET_TIMEOUT if timeout is None else timeout
        self.transport = transport

    def get(self, path: str, params: dict) -> dict:
        url = f"{self.base}{path}"
        with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
            try:
                r = client.get(url, params={"access_key": self.api_key, **params})
                r.raise_for_status()
                return r.json()
            except httpx.HTTPError as e:
                logger.error("Marketstack request failed: %s", type(e).__name__)
                raise UpstreamError("marketstack", "Failed to fetch market data") from e

    def end_of_day(self, symbol: str, limit: int = 10) -> List[dict]:
        """Latest ``limit`` end-of-day bars, returned oldest first."""
        data = self.get("/eod", {"symbols": symbol.upper(), "limit": limit})
        if "error" in data:
            message = data["error"].get("message", "unknown error") if isinstance(data["error"], dict) else str(data["error"])
            raise UpstreamError("marketstack", message)
        return sorted(data.get("data") or [], key=lambda bar: bar.get("date", ""))

    def latest(self, symbol: str) -> Optional[dict]:
        bars = self.end_of_day(symbol, limit=1)
        return bars[-1] if bars else None


def get_market_client() -> MarketstackClient:
    return MarketstackClient()
