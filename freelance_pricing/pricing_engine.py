"""
Pricing Engine — turns a ProjectSpecification into a PricingResult.

Pure math, no I/O, no clock. Base rate + add-ons + overage extras, times
the combined multiplier, floored at the minimum project price and rounded
to the currency step. The in-process API and the HTTP router share this
one engine and one rate card.

Input: ProjectSpecification + (partial) UserSettings
Output: PricingResult
"""

import logging
import math

from .models import BreakdownKind, ServiceType, WEBSITE_SERVICE_TYPES
from .narrative import build_paragraph_ar, build_paragraph_en
from .packages import PackageBuilder
from .rate_card import DEFAULT_RATE_CARD, RateCard
from .rounding import round_half_up, round_price
from .schemas import (
    BreakdownItem, HoursRange, PricingResult, ProjectSpecification, UserSettings,
)

logger = logging.getLogger(__name__)

# (rate card category, settings toggle, spec attribute), applied in this order
MULTIPLIER_CATEGORIES = (
    ("complexity", "enable_complexity_multiplier", "complexity"),
    ("language", "enable_language_multiplier", "languages"),
    ("content", "enable_content_multiplier", "content_ready"),
    ("design", "enable_design_multiplier", "design"),
    ("urgency", "enable_urgency_multiplier", "urgency"),
)


def resolve_settings(settings=None) -> UserSettings:
    """
    Merge partial settings over the documented defaults.
    Accepts a UserSettings, a mapping of some of its fields, or None.
    None values in a mapping mean "not set".
    """
    if settings is None:
        return UserSettings()
    if isinstance(settings, UserSettings):
        return settings
    overrides = {key: value for key, value in settings.items() if value is not None}
    return UserSettings(**overrides)


class PricingEngine:
    """
    Prices one project at a time against a fixed rate card.
    Holds no per-call state, so one instance can serve every caller.
    """

    PRICE_RANGE_LOW = 0.85
    PRICE_RANGE_HIGH = 1.20
    HOURS_RANGE_LOW = 0.85
    HOURS_RANGE_HIGH = 1.15

    def __init__(self, rate_card: RateCard = None):
        self.rate_card = rate_card or DEFAULT_RATE_CARD
        self.package_builder = PackageBuilder(self.rate_card)

    def calculate(self, spec, settings=None) -> PricingResult:
        """
        Price a project.

        Args:
            spec: ProjectSpecification (or a mapping of its fields)
            settings: UserSettings, a partial mapping of it, or None for defaults

        Returns:
            PricingResult with price range, effort range, breakdown,
            three packages and the two summary paragraphs.
        """
        if not isinstance(spec, ProjectSpecification):
            spec = ProjectSpecification(**spec)
        effective = resolve_settings(settings)
        card = self.rate_card
        currency = spec.currency

        breakdown = []

        # --- Base ---
        service_label = card.service_labels.get(spec.service_type)
        base_price = card.base_prices.get(spec.service_type, 0)
        base_hours = card.base_hours.get(spec.service_type, 0)
        breakdown.append(BreakdownItem(
            label=f"Base ({service_label.en if service_label else spec.service_type.value})",
            label_ar=f"الأساس ({service_label.ar if service_label else spec.service_type.value})",
            amount=base_price,
            kind=BreakdownKind.BASE,
        ))

        # --- Add-ons, in input order ---
        addons_price = 0
        addons_hours = 0
        for addon in spec.addons:
            price = card.addon_prices.get(addon, 0)
            addons_price += price
            addons_hours += card.addon_hours.get(addon, 0)
            label = card.addon_labels.get(addon)
            breakdown.append(BreakdownItem(
                label=f"Add-on: {label.en if label else addon.value}",
                label_ar=f"إضافة: {label.ar if label else addon.value}",
                amount=price,
                kind=BreakdownKind.ADDON,
            ))

        # --- Extras (pages / products / endpoints) ---
        extras_price, extras_hours = self._calculate_extras(spec)
        if extras_price > 0:
            breakdown.append(BreakdownItem(
                label="Extra pages/products",
                label_ar="صفحات/منتجات إضافية",
                amount=extras_price,
                kind=BreakdownKind.EXTRA,
            ))

        subtotal_price = base_price + addons_price + extras_price
        subtotal_hours = base_hours + addons_hours + extras_hours

        # --- Multipliers ---
        multiplier, multiplier_items = self._combine_multipliers(spec, effective)
        breakdown.extend(multiplier_items)

        # --- Price ---
        typical_price = round_price(
            max(subtotal_price * multiplier, effective.minimum_project_price),
            currency,
        )
        min_price = round_price(typical_price * self.PRICE_RANGE_LOW, currency)
        max_price = round_price(typical_price * self.PRICE_RANGE_HIGH, currency)

        # --- Effort (never floored) ---
        typical_hours = subtotal_hours * multiplier
        min_hours = round_half_up(typical_hours * self.HOURS_RANGE_LOW)
        max_hours = round_half_up(typical_hours * self.HOURS_RANGE_HIGH)

        packages = self.package_builder.build(spec, typical_price, typical_hours)

        narrative_args = dict(
            typical_price=typical_price,
            min_price=min_price,
            max_price=max_price,
            min_hours=min_hours,
            max_hours=max_hours,
        )

        logger.debug(
            "Priced %s: subtotal=%s hours=%s multiplier=%.4f typical=%s %s",
            spec.service_type.value, subtotal_price, subtotal_hours,
            multiplier, typical_price, currency,
        )

        return PricingResult(
            typical_price=typical_price,
            min_price=min_price,
            max_price=max_price,
            hours=HoursRange(min=min_hours, max=max_hours),
            breakdown=breakdown,
            packages=packages,
            pricing_paragraph_en=build_paragraph_en(spec, card, **narrative_args),
            pricing_paragraph_ar=build_paragraph_ar(spec, card, **narrative_args),
        )

    def _calculate_extras(self, spec: ProjectSpecification) -> tuple:
        """
        Overage beyond what the base rate includes.
        Counts at or below the included threshold (or negative) add nothing.
        Returns (price, hours).
        """
        card = self.rate_card
        price = 0
        hours = 0.0

        if spec.service_type in WEBSITE_SERVICE_TYPES:
            extra_pages = max(0, spec.pages - card.pages_included_for(spec.service_type))
            price += extra_pages * card.extra_page_price
            hours += extra_pages * card.extra_page_hours

        if spec.service_type == ServiceType.WOOCOMMERCE_STORE and spec.products > card.included_products:
            extra_products = spec.products - card.included_products
            price += extra_products * card.extra_product_price
            # Effort accrues per started block of products
            hours += math.ceil(extra_products / card.product_block_size) * card.product_block_hours

        if (spec.service_type == ServiceType.API_INTEGRATION and spec.api_endpoints
                and spec.api_endpoints > card.included_endpoints):
            extra_endpoints = spec.api_endpoints - card.included_endpoints
            price += extra_endpoints * card.extra_endpoint_price
            hours += extra_endpoints * card.extra_endpoint_hours

        return price, hours

    def _combine_multipliers(self, spec: ProjectSpecification, settings: UserSettings) -> tuple:
        """
        Fold the enabled category factors left to right.
        Returns (combined factor, breakdown items for the non-neutral factors).
        """
        combined = 1.0
        items = []
        for category, toggle, attribute in MULTIPLIER_CATEGORIES:
            if not getattr(settings, toggle):
                continue
            option = getattr(spec, attribute).value
            factor = self.rate_card.factor(category, option)
            combined *= factor
            if factor == 1.0:
                continue
            items.append(self._multiplier_item(category, option, factor))
        return combined, items

    def _multiplier_item(self, category: str, option: str, factor: float) -> BreakdownItem:
        card = self.rate_card
        category_label = card.category_labels.get(category)
        option_label = card.option_label(category, option)
        delta = round_half_up((factor - 1) * 100)
        return BreakdownItem(
            label=(
                f"Multiplier: {category_label.en if category_label else category} "
                f"({option_label.en} ×{factor:g})"
            ),
            label_ar=(
                f"معامل: {category_label.ar if category_label else category} "
                f"({option_label.ar} ×{factor:g})"
            ),
            amount=f"{delta:+d}%",
            kind=BreakdownKind.MULTIPLIER,
        )


_default_engine = PricingEngine()


def calculate(spec, settings=None, rate_card: RateCard = None) -> PricingResult:
    """Price a project with the default engine, or with a one-off rate card."""
    engine = PricingEngine(rate_card) if rate_card is not None else _default_engine
    return engine.calculate(spec, settings)
