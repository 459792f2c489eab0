"""
Rate card — the static pricing configuration the calculator reads.

Base rates, add-on rates, overage rates, multiplier tables and the
bilingual label text all live here. PricingEngine takes a RateCard as a
constructor argument, so tests and deployments can swap in a different
card without touching calculation logic.

All amounts are in the project currency (no conversion).
"""

from typing import Dict, Union

from pydantic import BaseModel

from .models import ServiceType, Addon


class Label(BaseModel):
    """Display text in both supported languages."""
    en: str
    ar: str
    class Config:
        frozen = True


# --- Base price and effort per service type ---

BASE_PRICES = {
    ServiceType.LANDING_PAGE: 150,
    ServiceType.WORDPRESS_WEBSITE: 350,
    ServiceType.WOOCOMMERCE_STORE: 600,
    ServiceType.UI_FIXES: 80,
    ServiceType.API_INTEGRATION: 250,
    ServiceType.MAINTENANCE: 120,
    ServiceType.SEO_BASIC: 120,
}

BASE_HOURS = {
    ServiceType.LANDING_PAGE: 8,
    ServiceType.WORDPRESS_WEBSITE: 20,
    ServiceType.WOOCOMMERCE_STORE: 35,
    ServiceType.UI_FIXES: 4,
    ServiceType.API_INTEGRATION: 15,
    ServiceType.MAINTENANCE: 6,
    ServiceType.SEO_BASIC: 8,
}

# --- Add-ons ---

ADDON_PRICES = {
    Addon.PAYMENT_GATEWAY: 150,
    Addon.SHIPPING_INTEGRATION: 120,
    Addon.USER_ACCOUNTS: 120,
    Addon.ADMIN_DASHBOARD: 300,
    Addon.API_SYNC: 250,
    Addon.BLOG_SETUP: 80,
    Addon.PERFORMANCE_OPTIMIZATION: 120,
    Addon.SEO_SETUP: 100,
}

ADDON_HOURS = {
    Addon.PAYMENT_GATEWAY: 8,
    Addon.SHIPPING_INTEGRATION: 6,
    Addon.USER_ACCOUNTS: 6,
    Addon.ADMIN_DASHBOARD: 16,
    Addon.API_SYNC: 12,
    Addon.BLOG_SETUP: 4,
    Addon.PERFORMANCE_OPTIMIZATION: 6,
    Addon.SEO_SETUP: 5,
}

# --- Multiplier tables, keyed by category then option value ---
# A factor of exactly 1.0 is the neutral option of its category.

MULTIPLIERS = {
    "complexity": {"low": 1.0, "medium": 1.2, "high": 1.4},
    "language": {"arabic": 1.0, "english": 1.0, "both": 1.15},
    "content": {"ready": 1.0, "needs_copywriting": 1.15},
    "design": {"template": 1.0, "custom": 1.2},
    "urgency": {"normal": 1.0, "rush": 1.25, "extreme": 1.4},
}

# --- Labels ---

SERVICE_LABELS = {
    ServiceType.LANDING_PAGE: Label(en="Landing Page", ar="صفحة هبوط"),
    ServiceType.WORDPRESS_WEBSITE: Label(en="WordPress Website", ar="موقع ووردبريس"),
    ServiceType.WOOCOMMERCE_STORE: Label(en="WooCommerce Store", ar="متجر ووكومرس"),
    ServiceType.UI_FIXES: Label(en="UI Fixes", ar="إصلاحات واجهة المستخدم"),
    ServiceType.API_INTEGRATION: Label(en="API Integration", ar="ربط API"),
    ServiceType.MAINTENANCE: Label(en="Maintenance", ar="صيانة"),
    ServiceType.SEO_BASIC: Label(en="SEO Basic", ar="تحسين محركات البحث الأساسي"),
}

ADDON_LABELS = {
    Addon.PAYMENT_GATEWAY: Label(en="Payment Gateway", ar="بوابة الدفع"),
    Addon.SHIPPING_INTEGRATION: Label(en="Shipping Integration", ar="ربط الشحن"),
    Addon.USER_ACCOUNTS: Label(en="User Accounts", ar="حسابات المستخدمين"),
    Addon.ADMIN_DASHBOARD: Label(en="Admin Dashboard", ar="لوحة تحكم المدير"),
    Addon.API_SYNC: Label(en="API Sync", ar="مزامنة API"),
    Addon.BLOG_SETUP: Label(en="Blog Setup", ar="إعداد المدونة"),
    Addon.PERFORMANCE_OPTIMIZATION: Label(en="Performance Optimization", ar="تحسين الأداء"),
    Addon.SEO_SETUP: Label(en="SEO Setup", ar="إعداد SEO"),
}

CATEGORY_LABELS = {
    "complexity": Label(en="Complexity", ar="التعقيد"),
    "language": Label(en="Languages", ar="اللغات"),
    "content": Label(en="Content", ar="المحتوى"),
    "design": Label(en="Design", ar="التصميم"),
    "urgency": Label(en="Urgency", ar="الاستعجال"),
}

OPTION_LABELS = {
    "complexity": {
        "low": Label(en="Low", ar="منخفض"),
        "medium": Label(en="Medium", ar="متوسط"),
        "high": Label(en="High", ar="عالي"),
    },
    "language": {
        "arabic": Label(en="Arabic", ar="عربي"),
        "english": Label(en="English", ar="إنجليزي"),
        "both": Label(en="Both", ar="كلاهما"),
    },
    "content": {
        "ready": Label(en="Ready", ar="جاهز"),
        "needs_copywriting": Label(en="Needs Copywriting", ar="يحتاج كتابة"),
    },
    "design": {
        "template": Label(en="Template", ar="قالب"),
        "custom": Label(en="Custom", ar="مخصص"),
    },
    "urgency": {
        "normal": Label(en="Normal", ar="عادي"),
        "rush": Label(en="Rush <7 days", ar="مستعجل <7 أيام"),
        "extreme": Label(en="Extreme <3 days", ar="طارئ <3 أيام"),
    },
}

# Display symbols only; amounts are never converted.
CURRENCY_SYMBOLS = {
    "USD": Label(en="$", ar="دولار"),
    "EUR": Label(en="€", ar="يورو"),
    "GBP": Label(en="£", ar="جنيه إسترليني"),
    "SAR": Label(en="SAR", ar="ريال"),
    "AED": Label(en="AED", ar="درهم"),
    "EGP": Label(en="EGP", ar="جنيه"),
}


Amount = Union[int, float]


class RateCard(BaseModel):
    """
    Every number and label the calculator needs, as one read-only object.
    Defaults are the production rate card.
    """

    base_prices: Dict[ServiceType, Amount] = BASE_PRICES
    base_hours: Dict[ServiceType, float] = BASE_HOURS
    addon_prices: Dict[Addon, Amount] = ADDON_PRICES
    addon_hours: Dict[Addon, float] = ADDON_HOURS

    # Overage pricing
    landing_page_included_pages: int = 1
    included_pages: int = 5
    extra_page_price: Amount = 30
    extra_page_hours: float = 1.5
    included_products: int = 20
    extra_product_price: Amount = 2
    product_block_size: int = 10
    product_block_hours: float = 0.5
    included_endpoints: int = 1
    extra_endpoint_price: Amount = 50
    extra_endpoint_hours: float = 3

    multipliers: Dict[str, Dict[str, float]] = MULTIPLIERS

    service_labels: Dict[ServiceType, Label] = SERVICE_LABELS
    addon_labels: Dict[Addon, Label] = ADDON_LABELS
    category_labels: Dict[str, Label] = CATEGORY_LABELS
    option_labels: Dict[str, Dict[str, Label]] = OPTION_LABELS
    currency_symbols: Dict[str, Label] = CURRENCY_SYMBOLS

    class Config:
        frozen = True

    def pages_included_for(self, service_type: ServiceType) -> int:
        if service_type == ServiceType.LANDING_PAGE:
            return self.landing_page_included_pages
        return self.included_pages

    def factor(self, category: str, option: str) -> float:
        """Multiplier for one option; unknown options are neutral."""
        return self.multipliers.get(category, {}).get(option, 1.0)

    def option_label(self, category: str, option: str) -> Label:
        labels = self.option_labels.get(category, {})
        return labels.get(option, Label(en=option, ar=option))

    def currency_symbol(self, currency: str) -> Label:
        return self.currency_symbols.get(currency, Label(en=currency, ar=currency))


DEFAULT_RATE_CARD = RateCard()
