from __future__ import annotations

from fastapi import APIRouter, Depends

from morizo_web.config import Settings
from morizo_web.api.v1.deps import get_settings
from morizo_web.core.ingredients import get_missing_ingredients
from morizo_web.core.models import CheckMissingIngredientsRequest, CheckMissingIngredientsResponse
from morizo_web.services.auth import authenticate_request
from morizo_web.telemetry import LogCategory, get_logger, log_api_call, start_timer

router = APIRouter(tags=["ingredients"])
logger = get_logger(LogCategory.API)

PATH = "/api/recipe/ingredients/check-missing"

# ---- Routes ------------------------------------------------------------------

@router.post(PATH, response_model=CheckMissingIngredientsResponse, response_model_by_alias=True,
             response_model_exclude_none=True)
def check_missing_ingredients(
    body: CheckMissingIngredientsRequest,
    token: str = Depends(authenticate_request),
    settings: Settings = Depends(get_settings),
):
    """
    Report which recipe ingredients are not covered by the user's inventory.

    The bearer token is checked while dependencies resolve, before the body is
    validated: a request without a token gets 401 even when its body would
    also fail validation (400).
    """
    timer = start_timer("check-missing-ingredients-api")
    logger.debug(
        "check-missing: recipe=%d available=%d",
        len(body.recipe_ingredients),
        len(body.available_ingredients),
    )

    missing = get_missing_ingredients(body.recipe_ingredients, body.available_ingredients)
    logger.info("check-missing: %d missing %s", len(missing), missing)

    log_api_call("POST", PATH, 200, duration_ms=timer(), settings=settings)
    return CheckMissingIngredientsResponse(success=True, missing_ingredients=missing)
