from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from morizo_web.config import Settings
from morizo_web.api.v1.deps import get_morizo_client, get_settings
from morizo_web.services.auth import authenticate_request
from morizo_web.services.exceptions import UpstreamError
from morizo_web.services.morizo_client import MorizoAIClient
from morizo_web.telemetry import LogCategory, get_logger, log_api_call, start_timer

router = APIRouter(tags=["menu"])
logger = get_logger(LogCategory.API)


@router.delete("/api/menu/history/{history_id}")
async def delete_menu_history(
    history_id: str,
    token: str = Depends(authenticate_request),
    client: MorizoAIClient = Depends(get_morizo_client),
    settings: Settings = Depends(get_settings),
):
    timer = start_timer("recipe-history-delete-api")
    path = f"/api/menu/history/{history_id}"
    try:
        data = await client.delete_menu_history(token, history_id)
    except UpstreamError as e:
        log_api_call("DELETE", path, 500, duration_ms=timer(), error=str(e), settings=settings)
        return JSONResponse(
            status_code=500,
            content={"error": "Failed to communicate with Morizo AI", "details": str(e)},
        )

    logger.info("deleted menu history %s success=%s", history_id, data.get("success"))
    log_api_call("DELETE", path, 200, duration_ms=timer(), settings=settings)
    return data
