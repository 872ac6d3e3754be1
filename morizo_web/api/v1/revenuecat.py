from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Header
from fastapi.responses import JSONResponse

from morizo_web.config import Settings
from morizo_web.api.v1.deps import get_morizo_client, get_settings
from morizo_web.services.exceptions import UpstreamError
from morizo_web.services.morizo_client import MorizoAIClient
from morizo_web.telemetry import LogCategory, get_logger, log_api_call, start_timer

router = APIRouter(tags=["subscription"])
logger = get_logger(LogCategory.API)

PATH = "/api/revenuecat/webhook"


@router.post(PATH)
async def revenuecat_webhook(
    payload: Dict[str, Any] = Body(...),
    authorization: Optional[str] = Header(None),
    client: MorizoAIClient = Depends(get_morizo_client),
    settings: Settings = Depends(get_settings),
):
    """
    Relay a RevenueCat subscription event to Morizo AI. The shared-secret
    Authorization header is forwarded as-is and verified upstream.
    """
    timer = start_timer("revenuecat-webhook-api")
    logger.debug(
        "webhook event=%s app_user_id=%s has_auth=%s",
        payload.get("type", "UNKNOWN"),
        payload.get("app_user_id"),
        authorization is not None,
    )
    try:
        data = await client.forward_revenuecat_webhook(payload, authorization)
    except UpstreamError as e:
        log_api_call("POST", PATH, 500, duration_ms=timer(), error=str(e), settings=settings)
        return JSONResponse(
            status_code=500,
            content={"status": "error", "message": "Internal server error", "details": str(e)},
        )

    logger.info("webhook relayed status=%s event_type=%s", data.get("status"), data.get("event_type"))
    log_api_call("POST", PATH, 200, duration_ms=timer(), settings=settings)
    return data
