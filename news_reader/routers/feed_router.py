# routers/feed_router.py

from fastapi import APIRouter, Depends, Query, Path
from fastapi.responses import JSONResponse

from ..services.feed_gateway_service import FeedGatewayService, GatewayResult
from ..schemas.news_schemas import GatewayEnvelope
from ..utils.dependencies import get_gateway_service
from ..core.config import settings
from common.logger import LoggerFactory, LoggerType, LogLevel

# Initialize router
router = APIRouter(tags=["feed"])

# Setup logging
logger = LoggerFactory.get_logger(
    name="feed-router",
    logger_type=LoggerType.STANDARD,
    level=LogLevel.INFO,
    file_level=LogLevel.DEBUG,
    log_file=settings.log_file("feed_router"),
)


def _respond(result: GatewayResult) -> JSONResponse:
    status_code, envelope = result
    return JSONResponse(status_code=status_code, content=envelope.to_content())


@router.get("/all-news", response_model=GatewayEnvelope)
async def get_all_news(
    q: str = Query("", description="Free-text query, provider default when empty"),
    page: int = Query(1, ge=1, description="1-based page number"),
    page_size: int = Query(
        settings.default_page_size, ge=1, alias="pageSize", description="Page size"
    ),
    gateway: FeedGatewayService = Depends(get_gateway_service),
) -> JSONResponse:
    """
    Keyword search across all news

    - **q**: free-text query
    - **page**: page number (1-based)
    - **pageSize**: articles per page
    """
    return _respond(await gateway.get_all_news(q, page, page_size))


@router.get("/top-headlines", response_model=GatewayEnvelope)
async def get_top_headlines(
    category: str = Query(..., min_length=1, description="News category"),
    page: int = Query(1, ge=1, description="1-based page number"),
    page_size: int = Query(
        settings.default_page_size, ge=1, alias="pageSize", description="Page size"
    ),
    gateway: FeedGatewayService = Depends(get_gateway_service),
) -> JSONResponse:
    """Top headlines of one category"""
    return _respond(await gateway.get_top_headlines(category, page, page_size))


@router.get("/country/{iso}", response_model=GatewayEnvelope)
async def get_country_news(
    iso: str = Path(..., description="Two-letter ISO country code"),
    page: int = Query(1, ge=1, description="1-based page number"),
    page_size: int = Query(
        settings.default_page_size, ge=1, alias="pageSize", description="Page size"
    ),
    gateway: FeedGatewayService = Depends(get_gateway_service),
) -> JSONResponse:
    """Top headlines of one country"""
    return _respond(await gateway.get_country_news(iso, page, page_size))
