"""
Pricing paragraphs — ready-to-paste summary text for a priced project.

One template per display language. The Arabic variant also asks the
client about page/product counts left at zero for website-type services.
"""

import math

from .models import Addon, ServiceType
from .rate_card import RateCard

HOURS_PER_DAY = 6
TOP_ADDONS = 3

# Service types whose page count is worth asking about when left at zero
PAGE_QUESTION_SERVICE_TYPES = (
    ServiceType.WORDPRESS_WEBSITE,
    ServiceType.WOOCOMMERCE_STORE,
)


def _duration_days(min_hours: int, max_hours: int) -> tuple:
    return math.ceil(min_hours / HOURS_PER_DAY), math.ceil(max_hours / HOURS_PER_DAY)


def _includes(spec, rate_card: RateCard, lang: str) -> list:
    """Service label plus the first few add-ons, in input order."""
    service = rate_card.service_labels.get(spec.service_type)
    items = [getattr(service, lang) if service else spec.service_type.value]
    for addon in spec.addons[:TOP_ADDONS]:
        label = rate_card.addon_labels.get(addon)
        items.append(getattr(label, lang) if label else addon.value)
    return items


def _excludes(spec, lang: str) -> list:
    excludes = []
    if Addon.SEO_SETUP not in spec.addons:
        excludes.append("Advanced SEO" if lang == "en" else "تحسين SEO متقدم")
    if Addon.PERFORMANCE_OPTIMIZATION not in spec.addons:
        excludes.append("Monthly maintenance" if lang == "en" else "الصيانة الشهرية")
    return excludes


def _money_en(amount: int, symbol: str) -> str:
    # Single-character symbols go in front ($350), codes go after (350 SAR)
    if len(symbol) == 1:
        return f"{symbol}{amount}"
    return f"{amount} {symbol}"


def build_paragraph_en(spec, rate_card: RateCard, typical_price: int, min_price: int,
                       max_price: int, min_hours: int, max_hours: int) -> str:
    symbol = rate_card.currency_symbol(spec.currency).en
    days_min, days_max = _duration_days(min_hours, max_hours)

    paragraph = (
        f"💰 **Suggested Price Range:** {_money_en(min_price, symbol)} - "
        f"{_money_en(max_price, symbol)} (Typical: {_money_en(typical_price, symbol)})\n"
    )
    paragraph += f"⏱️ **Estimated Duration:** {days_min}-{days_max} business days\n\n"
    paragraph += "✅ **Price Includes:**\n"
    for item in _includes(spec, rate_card, "en"):
        paragraph += f"• {item}\n"

    excludes = _excludes(spec, "en")
    if excludes:
        paragraph += f"\n❌ **Not Included:** {', '.join(excludes)}\n"

    return paragraph


def build_paragraph_ar(spec, rate_card: RateCard, typical_price: int, min_price: int,
                       max_price: int, min_hours: int, max_hours: int) -> str:
    symbol = rate_card.currency_symbol(spec.currency).ar
    days_min, days_max = _duration_days(min_hours, max_hours)

    questions = []
    if spec.pages == 0 and spec.service_type in PAGE_QUESTION_SERVICE_TYPES:
        questions.append("كم عدد الصفحات المطلوبة؟")
    if spec.service_type == ServiceType.WOOCOMMERCE_STORE and spec.products == 0:
        questions.append("كم عدد المنتجات المتوقعة؟")

    paragraph = (
        f"💰 **نطاق السعر المقترح:** {min_price} - {max_price} {symbol} "
        f"(السعر النموذجي: {typical_price} {symbol})\n"
    )
    paragraph += f"⏱️ **مدة التنفيذ المتوقعة:** {days_min}-{days_max} أيام عمل\n\n"
    paragraph += "✅ **يشمل السعر:**\n"
    for item in _includes(spec, rate_card, "ar"):
        paragraph += f"• {item}\n"

    excludes = _excludes(spec, "ar")
    if excludes:
        paragraph += f"\n❌ **لا يشمل:** {'، '.join(excludes)}\n"

    if questions:
        paragraph += "\n❓ **للتوضيح:**\n"
        for question in questions:
            paragraph += f"• {question}\n"

    return paragraph
