"""FastAPI server exposing capsule template and outfit endpoints."""

from typing import List, Optional

from fastapi import FastAPI, HTTPException, Query

from capsule_app.app import CapsuleWardrobeApp, template_summary
from capsule_app.logging_config import configure_logging
from logic.validation import MatchRequest, OutfitCountRequest, OutfitPotentialRequest, RecommendRequest
from models.capsule_template import TemplateNotFoundError

configure_logging()

capsule_app = CapsuleWardrobeApp()
app = FastAPI(title="Capsule Wardrobe", version="0.1.0")


def _ensure_ok(response: dict, fallback: str) -> dict:
    if response.get("status") != "ok":
        raise HTTPException(status_code=422, detail=response.get("message", fallback))
    return response


@app.get("/healthz")
async def healthcheck() -> dict:
    """Lightweight readiness probe."""

    return {
        "status": "ok",
        "service": "capsule-wardrobe",
        "environment": capsule_app.config.environment or "local",
        "templates": len(capsule_app.templates),
    }


@app.get("/templates")
async def list_templates(
    category: Optional[List[str]] = Query(None),
    style_type: Optional[List[str]] = Query(None),
    occasion: Optional[List[str]] = Query(None),
) -> dict:
    """Browse the catalog, optionally narrowed by facet filters."""

    templates = capsule_app.list_templates(category or (), style_type or (), occasion or ())
    return {"templates": [template_summary(template) for template in templates]}


@app.post("/templates/recommend")
async def recommend_templates(request: RecommendRequest) -> dict:
    """Rank every template against the caller's inventory."""

    response = capsule_app.recommend_templates(**request.model_dump())
    return _ensure_ok(response, "recommendation failed")


@app.post("/templates/{template_id}/match")
async def match_template(template_id: str, request: MatchRequest) -> dict:
    """Owned / similar / missing breakdown plus completion and budget."""

    try:
        response = capsule_app.match_template(template_id, **request.model_dump())
    except TemplateNotFoundError:
        raise HTTPException(status_code=404, detail=f"Unknown template '{template_id}'")
    return _ensure_ok(response, "matching failed")


@app.post("/capsule/outfits")
async def capsule_outfits(request: OutfitCountRequest) -> dict:
    """Outfit count, category breakdown and next-item suggestions."""

    response = capsule_app.outfit_summary(**request.model_dump())
    return _ensure_ok(response, "outfit calculation failed")


@app.post("/wishlist/outfit-potential")
async def wishlist_outfit_potential(request: OutfitPotentialRequest) -> dict:
    """New outfits one more item of the given category would unlock."""

    response = capsule_app.wishlist_outfit_potential(**request.model_dump())
    return _ensure_ok(response, "outfit potential failed")


def get_app() -> FastAPI:
    """Expose the FastAPI instance for ASGI servers."""

    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("server.api:app", host="0.0.0.0", port=int("8080"), reload=False)
