# morizo_web/core/models.py
from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


# ---------- Missing-ingredient check ----------

class CheckMissingIngredientsRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    recipe_ingredients: List[str] = Field(
        ..., alias="recipeIngredients", description="Ingredients the recipe calls for"
    )
    available_ingredients: List[str] = Field(
        ..., alias="availableIngredients", description="Ingredients the user has on hand"
    )


class CheckMissingIngredientsResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool
    missing_ingredients: List[str] = Field(default_factory=list, alias="missingIngredients")
    error: Optional[str] = None


# ---------- Voice ----------

class TranscriptionResponse(BaseModel):
    text: str
    success: bool = True


# ---------- Subscription ----------

class UsageResponse(BaseModel):
    """Daily usage counters as reported by the Morizo AI backend."""
    success: Optional[bool] = None
    date: Optional[str] = None
    menu_bulk_count: Optional[int] = None
    menu_step_count: Optional[int] = None
    ocr_count: Optional[int] = None
    plan_type: Optional[str] = None
    limits: Optional[Dict[str, Any]] = None
