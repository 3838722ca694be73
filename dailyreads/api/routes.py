"""HTTP endpoints."""

import logging
from typing import Optional

from fastapi import APIRouter, Query, Request
from fastapi.responses import JSONResponse

from ..config import Config
from ..pipeline import DailyArticlesAggregator
from ..reader import ReaderClient

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["articles"])


@router.get("/daily-articles")
async def daily_articles(request: Request) -> JSONResponse:
    """Today's diversified top articles as ``[{title, url}, ...]``.

    Dead feeds only shorten the list; a 500 is returned only when the
    pipeline itself blows up.
    """
    settings: Config = request.app.state.settings
    try:
        config = settings.config
        aggregator = DailyArticlesAggregator(
            config,
            sources=settings.enabled_sources,
            transport=request.app.state.transport,
        )
        articles = await aggregator.aggregate()
    except Exception as e:
        logger.exception("Daily article aggregation failed")
        return JSONResponse({"error": str(e)}, status_code=500)

    return JSONResponse(
        [article.model_dump() for article in articles],
        headers={
            "Access-Control-Allow-Origin": config.server.allow_origin,
            "Cache-Control": f"public, max-age={config.server.cache_max_age}",
        },
    )


@router.get("/read-article")
async def read_article(
    request: Request,
    url: Optional[str] = Query(None, description="Article URL to read"),
) -> JSONResponse:
    """Readable HTML version of a single article."""
    if not url:
        return JSONResponse({"error": "Missing url"}, status_code=400)

    settings: Config = request.app.state.settings
    try:
        config = settings.config
        reader = ReaderClient(config.reader, transport=request.app.state.transport)
        document = await reader.read(url)
    except Exception as e:
        logger.warning("Reading %s failed: %s", url, e)
        return JSONResponse({"error": str(e)}, status_code=500)

    return JSONResponse(
        {"title": document.title, "content": document.content},
        headers={"Access-Control-Allow-Origin": config.server.allow_origin},
    )
