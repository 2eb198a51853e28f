from typing import Optional

from fastapi import APIRouter, Depends, Query

from config.settings import settings
from schemas.market import EodQuote, Watchlist, WatchlistEntry
from services.market_client import MarketstackClient, get_market_client

router = APIRouter(prefix="/market", tags=["market"])


# ✅ [EOD] end-of-day history for one symbol, oldest first
@router.get("/eod")
def read_eod(
    symbol: str = Query("AAPL", min_length=1, max_length=10),
    limit: int = Query(10, ge=1, le=100),
    client: MarketstackClient = Depends(get_market_client),
):
    bars = client.end_of_day(symbol, limit=limit)
    return {
        "success": True,
        "data": [EodQuote.model_validate(b).model_dump() for b in bars],
    }


# ✅ [WATCHLIST] latest bar per symbol
@router.get("/watchlist")
def read_watchlist(
    symbols: Optional[str] = Query(None, description="comma separated, e.g. AAPL,TSLA,MSFT"),
    client: MarketstackClient = Depends(get_market_client),
):
    wanted = [s.strip().upper() for s in symbols.split(",") if s.strip()] if symbols else settings.DEFAULT_WATCHLIST

    entries = []
    for symbol in dict.fromkeys(wanted):
        latest = client.latest(symbol)
        entries.append(WatchlistEntry(symbol=symbol, quote=EodQuote.model_validate(latest) if latest else None))
    return {"success": True, "data": Watchlist(entries=entries).model_dump()}
