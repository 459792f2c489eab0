"""
Pricing API — HTTP entry point to the shared pricing engine.

POST /api/pricing/estimate  — Validate a project description and price it
POST /api/pricing/validate  — Pre-flight validation only
GET  /api/pricing/defaults  — Default user pricing settings
GET  /api/pricing/rate-card — Service and add-on tables for building a form
"""

import logging

from fastapi import APIRouter, Body, HTTPException
from pydantic import ValidationError

from ..config import settings
from ..models import Addon, ServiceType
from ..pricing_engine import PricingEngine, resolve_settings
from ..rate_card import DEFAULT_RATE_CARD
from ..schemas import PricingResult, ProjectSpecification, UserSettings, ValidationResult
from ..validator import validate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/pricing", tags=["pricing"])

# Singleton engine, shared by every request
engine = PricingEngine(DEFAULT_RATE_CARD)


def _format_errors(exc: ValidationError) -> list:
    return [
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
        for err in exc.errors()
    ]


@router.post("/estimate", response_model=PricingResult)
def estimate_pricing(payload: dict = Body(...)):
    """
    Price a project description.

    Body: ProjectSpecification fields plus optional "user_settings"
    (any subset of UserSettings). Omitted pages/products default to 0,
    addons to [], currency to the configured default.
    """
    validation = validate(payload)
    if not validation.valid:
        logger.info("Estimate rejected: %d validation error(s)", len(validation.errors))
        raise HTTPException(
            status_code=400,
            detail={"error": "Validation failed", "details": validation.errors},
        )

    raw_settings = payload.get("user_settings") or {}
    if not isinstance(raw_settings, dict):
        raise HTTPException(
            status_code=422,
            detail={"error": "Invalid user settings", "details": ["user_settings must be an object"]},
        )
    try:
        user_settings = resolve_settings(raw_settings)
    except ValidationError as e:
        raise HTTPException(
            status_code=422,
            detail={"error": "Invalid user settings", "details": _format_errors(e)},
        )

    fields = {
        key: value for key, value in payload.items()
        if key != "user_settings" and value is not None
    }
    fields.setdefault("pages", 0)
    fields.setdefault("products", 0)
    fields.setdefault("addons", [])
    fields.setdefault("currency", settings.DEFAULT_CURRENCY)
    spec = ProjectSpecification(**fields)

    try:
        return engine.calculate(spec, user_settings)
    except Exception:
        logger.exception("Pricing failed for %s", spec.service_type.value)
        raise


@router.post("/validate", response_model=ValidationResult)
def validate_pricing_input(payload: dict = Body(...)):
    """Run the validator only. Always 200; check "valid" in the body."""
    return validate(payload)


@router.get("/defaults", response_model=UserSettings)
def get_default_settings():
    return UserSettings()


@router.get("/rate-card")
def get_rate_card():
    """Services and add-ons with bilingual labels, prices and hours."""
    card = engine.rate_card
    return {
        "services": [
            {
                "id": service_type.value,
                "label": card.service_labels[service_type].en,
                "label_ar": card.service_labels[service_type].ar,
                "base_price": card.base_prices[service_type],
                "base_hours": card.base_hours[service_type],
            }
            for service_type in ServiceType
        ],
        "addons": [
            {
                "id": addon.value,
                "label": card.addon_labels[addon].en,
                "label_ar": card.addon_labels[addon].ar,
                "price": card.addon_prices[addon],
                "hours": card.addon_hours[addon],
            }
            for addon in Addon
        ],
        "multipliers": card.multipliers,
    }
