"""Pydantic schemas and helpers for validating service IO payloads."""

from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from models.taxonomy import validate_category


class InventoryRecord(BaseModel):
    """One wardrobe item as stored by the surrounding application."""

    model_config = ConfigDict(extra="ignore")

    id: str = Field(min_length=1)
    category: Optional[str] = None
    ai_analysis: Optional[str] = None
    color: Optional[str] = None
    description: Optional[str] = None
    style_tags: List[str] = []

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> str:
        return str(value) if value is not None else value


class ManualMatchLink(BaseModel):
    """Persisted user-to-template-item link row."""

    model_config = ConfigDict(extra="ignore")

    template_id: str = Field(min_length=1)
    template_item_id: str = Field(min_length=1)
    wardrobe_item_id: str = Field(min_length=1)
    match_type: str = "manual"


class RecommendRequest(BaseModel):
    inventory: List[InventoryRecord] = []


class MatchRequest(BaseModel):
    inventory: List[InventoryRecord] = []
    manual_links: List[ManualMatchLink] = []


class OutfitCountRequest(BaseModel):
    items: List[InventoryRecord]
    candidate_pool: List[InventoryRecord] = []
    top_n: Optional[int] = Field(default=None, ge=0, le=50)


class OutfitPotentialRequest(BaseModel):
    category: str
    inventory: List[InventoryRecord] = []
    category_counts: Dict[str, int] = {}

    @field_validator("category")
    @classmethod
    def _validate_category(cls, value: str) -> str:
        return validate_category(value).value


class ValidationResult(BaseModel):
    """Wrapper returned to callers when validation fails."""

    status: Literal["needs_review"] = "needs_review"
    message: str
    details: List[Dict[str, Any]]


def validation_failure(message: str, exc: ValidationError) -> Dict[str, Any]:
    """Translate Pydantic errors into a consistent review payload."""

    details = [
        {key: value for key, value in error.items() if key in {"type", "loc", "msg"}}
        for error in exc.errors()
    ]
    return ValidationResult(message=message, details=details).model_dump()


__all__ = [
    "InventoryRecord",
    "ManualMatchLink",
    "RecommendRequest",
    "MatchRequest",
    "OutfitCountRequest",
    "OutfitPotentialRequest",
    "ValidationResult",
    "validation_failure",
]
