from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from morizo_web.config import Settings
from morizo_web.api.v1.deps import get_morizo_client, get_settings
from morizo_web.core.models import UsageResponse
from morizo_web.services.auth import authenticate_request
from morizo_web.services.exceptions import UpstreamError
from morizo_web.services.morizo_client import MorizoAIClient
from morizo_web.telemetry import LogCategory, get_logger, log_api_call, start_timer

router = APIRouter(tags=["subscription"])
logger = get_logger(LogCategory.API)

PATH = "/api/subscription/usage"


@router.get(PATH, response_model=UsageResponse)
async def get_usage(
    token: str = Depends(authenticate_request),
    client: MorizoAIClient = Depends(get_morizo_client),
    settings: Settings = Depends(get_settings),
):
    timer = start_timer("subscription-usage-api")
    try:
        usage = await client.get_usage(token)
    except UpstreamError as e:
        log_api_call("GET", PATH, 500, duration_ms=timer(), error=str(e), settings=settings)
        return JSONResponse(
            status_code=500,
            content={"error": "Failed to communicate with Morizo AI", "details": str(e)},
        )

    logger.info(
        "usage date=%s plan=%s bulk=%d step=%d ocr=%d",
        usage.date,
        usage.plan_type,
        usage.menu_bulk_count or 0,
        usage.menu_step_count or 0,
        usage.ocr_count or 0,
    )
    log_api_call("GET", PATH, 200, duration_ms=timer(), settings=settings)
    return usage
