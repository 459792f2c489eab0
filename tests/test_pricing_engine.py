"""
Pricing engine tests — calculate() end to end.

Tests:
1-4.   Base rates and the minimum project price
5-9.   Multipliers (values, toggles, breakdown entries)
10-15. Extras (pages, products, API endpoints, out-of-range counts)
16-18. Add-ons (pricing, order, duplicates)
19-21. Price and effort ranges
22-24. Injected rate cards
25-27. Purity (idempotence, no argument mutation, property sweep)

No I/O, the engine is pure math.
"""

import pytest

from freelance_pricing import PricingEngine, calculate, round_price
from freelance_pricing.models import BreakdownKind, ServiceType
from freelance_pricing.rate_card import BASE_PRICES, MULTIPLIERS, RateCard
from freelance_pricing.schemas import ProjectSpecification, UserSettings


ALL_TOGGLES_OFF = {
    "enable_complexity_multiplier": False,
    "enable_language_multiplier": False,
    "enable_content_multiplier": False,
    "enable_design_multiplier": False,
    "enable_urgency_multiplier": False,
}


def _spec(**overrides):
    """Neutral project: every multiplier at 1.0, no add-ons, no extras."""
    fields = {
        "service_type": "wordpress_website",
        "pricing_model": "fixed",
        "complexity": "low",
        "pages": 5,
        "products": 0,
        "languages": "arabic",
        "addons": [],
        "content_ready": "ready",
        "design": "template",
        "urgency": "normal",
        "currency": "USD",
    }
    fields.update(overrides)
    return ProjectSpecification(**fields)


def _kinds(result):
    return [item.kind for item in result.breakdown]


# ============================================================
# 1-4. Base rates and minimum price
# ============================================================

def test_basic_wordpress_website():
    """Neutral WordPress project prices at the base rate."""
    result = calculate(_spec())
    assert result.typical_price == 350
    assert result.min_price == 300
    assert result.max_price == 420
    assert _kinds(result) == [BreakdownKind.BASE]
    assert result.breakdown[0].label == "Base (WordPress Website)"
    assert result.breakdown[0].amount == 350


@pytest.mark.parametrize("service_type", list(ServiceType))
def test_neutral_project_prices_at_base_rate(service_type):
    """No add-ons, no extras, neutral multipliers: typical = base, floored at 100."""
    spec = _spec(service_type=service_type.value, pages=0, products=0)
    result = calculate(spec)
    expected = round_price(max(BASE_PRICES[service_type], 100), "USD")
    assert result.typical_price == expected


def test_minimum_project_price_overrides_small_base():
    """ui_fixes base is 80; a 150 floor wins."""
    spec = _spec(service_type="ui_fixes", pages=0)
    result = calculate(spec, {"minimum_project_price": 150})
    assert result.typical_price == 150


def test_default_minimum_project_price_is_100():
    spec = _spec(service_type="ui_fixes", pages=0)
    assert calculate(spec).typical_price == 100


# ============================================================
# 5-9. Multipliers
# ============================================================

def test_complexity_multiplier():
    low = calculate(_spec(service_type="api_integration", complexity="low", pages=0))
    medium = calculate(_spec(service_type="api_integration", complexity="medium", pages=0))
    high = calculate(_spec(service_type="api_integration", complexity="high", pages=0))
    assert low.typical_price == 250
    assert medium.typical_price == 300
    assert high.typical_price == 350


def test_urgency_multiplier():
    """Landing page base 150: rush 187.5 rounds to 190, extreme 210."""
    normal = calculate(_spec(service_type="landing_page", pages=1))
    rush = calculate(_spec(service_type="landing_page", pages=1, urgency="rush"))
    extreme = calculate(_spec(service_type="landing_page", pages=1, urgency="extreme"))
    assert normal.typical_price == 150
    assert rush.typical_price == 190
    assert extreme.typical_price == 210


def test_combined_multipliers_with_addons():
    """250 + 300 + 250 = 800; 1.4 x 1.15 = 1.61; 800 x 1.61 = 1288 -> 1290."""
    spec = _spec(
        service_type="api_integration",
        complexity="high",
        languages="both",
        pages=0,
        addons=["admin_dashboard", "api_sync"],
    )
    result = calculate(spec)
    assert result.typical_price == 1290

    assert _kinds(result) == [
        BreakdownKind.BASE,
        BreakdownKind.ADDON,
        BreakdownKind.ADDON,
        BreakdownKind.MULTIPLIER,
        BreakdownKind.MULTIPLIER,
    ]
    complexity, language = result.breakdown[3], result.breakdown[4]
    assert complexity.label == "Multiplier: Complexity (High ×1.4)"
    assert complexity.amount == "+40%"
    assert language.label == "Multiplier: Languages (Both ×1.15)"
    assert language.amount == "+15%"


def test_multiplier_entries_follow_fixed_category_order():
    spec = _spec(
        complexity="medium",
        languages="both",
        content_ready="needs_copywriting",
        design="custom",
        urgency="rush",
    )
    result = calculate(spec)
    multipliers = [item for item in result.breakdown if item.kind == BreakdownKind.MULTIPLIER]
    assert [item.label.split(" (")[0] for item in multipliers] == [
        "Multiplier: Complexity",
        "Multiplier: Languages",
        "Multiplier: Content",
        "Multiplier: Design",
        "Multiplier: Urgency",
    ]
    assert [item.amount for item in multipliers] == ["+20%", "+15%", "+15%", "+20%", "+25%"]
    assert multipliers[4].label == "Multiplier: Urgency (Rush <7 days ×1.25)"
    assert multipliers[4].label_ar == "معامل: الاستعجال (مستعجل <7 أيام ×1.25)"


def test_disabled_multipliers_are_ignored():
    """All toggles off: price is the subtotal whatever the choices are."""
    spec = _spec(
        service_type="api_integration",
        complexity="high",
        languages="both",
        content_ready="needs_copywriting",
        design="custom",
        urgency="extreme",
        pages=0,
    )
    result = calculate(spec, ALL_TOGGLES_OFF)
    assert result.typical_price == 250
    assert BreakdownKind.MULTIPLIER not in _kinds(result)


def test_single_toggle_only_skips_its_category():
    spec = _spec(complexity="high", urgency="rush")
    result = calculate(spec, {"enable_urgency_multiplier": False})
    # 350 x 1.4 = 490
    assert result.typical_price == 490
    labels = [item.label for item in result.breakdown]
    assert any(label.startswith("Multiplier: Complexity") for label in labels)
    assert not any(label.startswith("Multiplier: Urgency") for label in labels)


# ============================================================
# 10-15. Extras
# ============================================================

def test_extra_pages():
    """10 pages = 5 over the included 5, at 30 each."""
    result = calculate(_spec(pages=10))
    assert result.typical_price == 500
    extra = result.breakdown[-1]
    assert extra.kind == BreakdownKind.EXTRA
    assert extra.amount == 150
    assert extra.label == "Extra pages/products"


def test_landing_page_includes_one_page():
    result = calculate(_spec(service_type="landing_page", pages=3))
    # 150 + 2 x 30
    assert result.typical_price == 210


def test_woocommerce_extra_products():
    """50 products = 30 over the included 20, at 2 each."""
    result = calculate(_spec(service_type="woocommerce_store", products=50))
    assert result.typical_price == 660
    assert result.breakdown[-1].amount == 60


def test_product_effort_accrues_per_started_block():
    """21 products: 1 extra product still costs a whole 0.5 h block."""
    twenty = calculate(_spec(service_type="woocommerce_store", products=20), ALL_TOGGLES_OFF)
    twenty_one = calculate(_spec(service_type="woocommerce_store", products=21), ALL_TOGGLES_OFF)
    # 35 h -> max round(40.25) = 40; 35.5 h -> max round(40.825) = 41
    assert twenty.hours.max == 40
    assert twenty_one.hours.max == 41
    assert twenty_one.breakdown[-1].amount == 2


def test_api_endpoints_beyond_first():
    result = calculate(_spec(service_type="api_integration", pages=0, api_endpoints=3))
    # 250 + 2 x 50
    assert result.typical_price == 350
    assert result.breakdown[-1].amount == 100


@pytest.mark.parametrize("overrides", [
    {"pages": 0},
    {"pages": -5},
    {"pages": 500},
    {"service_type": "woocommerce_store", "products": -10},
    {"service_type": "woocommerce_store", "products": 50000},
    {"service_type": "api_integration", "api_endpoints": None},
    {"service_type": "api_integration", "api_endpoints": 0},
    {"service_type": "ui_fixes", "pages": 40, "products": 999},
])
def test_out_of_range_counts_never_raise(overrides):
    result = calculate(_spec(**overrides))
    assert result.typical_price >= 0
    assert result.hours.min >= 0
    assert result.min_price <= result.typical_price <= result.max_price


def test_counts_ignored_for_unrelated_service_types():
    """Pages only price website types; products only the store."""
    result = calculate(_spec(service_type="maintenance", pages=50, products=500))
    assert result.typical_price == 120
    assert BreakdownKind.EXTRA not in _kinds(result)


# ============================================================
# 16-18. Add-ons
# ============================================================

def test_addon_breakdown_amounts():
    result = calculate(_spec(addons=["admin_dashboard"]))
    addon = result.breakdown[1]
    assert addon.kind == BreakdownKind.ADDON
    assert addon.label == "Add-on: Admin Dashboard"
    assert addon.label_ar == "إضافة: لوحة تحكم المدير"
    assert addon.amount == 300
    assert result.typical_price == 650


def test_addons_keep_input_order():
    result = calculate(_spec(addons=["seo_setup", "payment_gateway", "blog_setup"]))
    labels = [item.label for item in result.breakdown if item.kind == BreakdownKind.ADDON]
    assert labels == ["Add-on: SEO Setup", "Add-on: Payment Gateway", "Add-on: Blog Setup"]


def test_duplicate_addons_each_count():
    result = calculate(_spec(addons=["seo_setup", "seo_setup"]))
    assert result.typical_price == 550
    assert _kinds(result).count(BreakdownKind.ADDON) == 2


# ============================================================
# 19-21. Price and effort ranges
# ============================================================

def test_price_range_is_minus_15_plus_20():
    result = calculate(_spec(pages=10))
    assert result.min_price == round_price(500 * 0.85, "USD")
    assert result.max_price == round_price(500 * 1.20, "USD")


def test_hours_range():
    """20 + 4 (blog) = 24 h; x 1.2 = 28.8; 24.48 -> 24, 33.12 -> 33."""
    result = calculate(_spec(complexity="medium", addons=["blog_setup"]))
    assert result.hours.min == 24
    assert result.hours.max == 33


def test_hours_not_floored_by_minimum_price():
    """The price floor does not inflate effort."""
    result = calculate(_spec(service_type="ui_fixes", pages=0), {"minimum_project_price": 1000})
    assert result.typical_price == 1000
    # 4 h -> 3.4 -> 3, 4.6 -> 5
    assert result.hours.min == 3
    assert result.hours.max == 5


def test_non_usd_currency_rounds_to_tens():
    result = calculate(_spec(currency="EUR"))
    assert result.typical_price == 350
    assert result.min_price == 300
    assert result.max_price == 420
    rush = calculate(_spec(service_type="landing_page", pages=1, urgency="rush", currency="SAR"))
    # 187.5 -> 190 on a 10 step
    assert rush.typical_price == 190
    assert rush.typical_price % 10 == 0


# ============================================================
# 22-24. Injected rate cards
# ============================================================

def test_alternate_base_rates():
    card = RateCard(base_prices={**BASE_PRICES, ServiceType.WORDPRESS_WEBSITE: 150})
    result = calculate(_spec(), rate_card=card)
    assert result.typical_price == 150


def test_discount_multiplier_renders_negative_delta():
    multipliers = dict(MULTIPLIERS)
    multipliers["complexity"] = {"low": 0.9, "medium": 1.2, "high": 1.4}
    engine = PricingEngine(RateCard(multipliers=multipliers))
    result = engine.calculate(_spec())
    # 350 x 0.9 = 315
    assert result.typical_price == 315
    assert result.breakdown[-1].kind == BreakdownKind.MULTIPLIER
    assert result.breakdown[-1].amount == "-10%"


def test_default_engine_unaffected_by_alternate_card():
    RateCard(base_prices={**BASE_PRICES, ServiceType.WORDPRESS_WEBSITE: 1})
    assert calculate(_spec()).typical_price == 350


# ============================================================
# 25-27. Purity
# ============================================================

def test_calculate_is_idempotent():
    spec = _spec(
        service_type="woocommerce_store",
        complexity="medium",
        pages=10,
        products=50,
        languages="both",
        addons=["payment_gateway", "shipping_integration"],
        design="custom",
        urgency="rush",
    )
    first = calculate(spec)
    second = calculate(spec)
    assert first == second
    assert first.model_dump_json() == second.model_dump_json()


def test_settings_argument_is_not_mutated():
    partial = {"minimum_project_price": 150, "enable_design_multiplier": False}
    snapshot = dict(partial)
    calculate(_spec(), partial)
    assert partial == snapshot

    settings = UserSettings(hourly_rate=40)
    calculate(_spec(), settings)
    assert settings == UserSettings(hourly_rate=40)


def test_accepts_plain_mapping_spec():
    fields = _spec().model_dump(mode="json")
    assert calculate(fields).typical_price == 350


@pytest.mark.parametrize("service_type", list(ServiceType))
@pytest.mark.parametrize("complexity", ["low", "medium", "high"])
@pytest.mark.parametrize("currency", ["USD", "EUR"])
def test_price_ordering_properties(service_type, complexity, currency):
    spec = _spec(
        service_type=service_type.value,
        complexity=complexity,
        pages=12,
        products=75,
        api_endpoints=4,
        addons=["user_accounts", "seo_setup"],
        currency=currency,
    )
    result = calculate(spec)
    basic, standard, premium = result.packages
    assert result.min_price <= result.typical_price <= result.max_price
    assert basic.price <= standard.price == result.typical_price <= premium.price
    assert result.hours.min <= result.hours.max
