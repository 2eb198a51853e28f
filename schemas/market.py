from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class EodQuote(BaseModel):
    symbol: str
    date: str
    open: Optional[float] = None
    high: Optional[float] = None
    low: Optional[float] = None
    close: Optional[float] = None
    volume: Optional[float] = None

    model_config = ConfigDict(extra="ignore")


class WatchlistEntry(BaseModel):
    symbol: str
    quote: Optional[EodQuote] = None


class Watchlist(BaseModel):
    entries: List[WatchlistEntry]
