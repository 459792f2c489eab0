"""
Package Builder — the Basic / Standard / Premium tiers shown with every estimate.

Tiers are priced off the typical price and sized off the typical effort,
assuming 6 productive hours per working day. Standard is always the
typical price itself.
"""

import math

from .rate_card import Label, RateCard
from .rounding import round_price
from .schemas import Package


class PackageBuilder:
    """Builds the three Package tiers for one priced project."""

    HOURS_PER_DAY = 6

    BASE_FEATURES = (
        Label(en="{service} development", ar="تطوير {service}"),
        Label(en="Responsive design", ar="تصميم متجاوب"),
        Label(en="Basic testing", ar="اختبار أساسي"),
    )
    STANDARD_ADDITIONS = (
        Label(en="Performance optimization", ar="تحسين الأداء"),
        Label(en="Basic SEO setup", ar="إعداد SEO أساسي"),
        Label(en="Browser compatibility", ar="توافق المتصفحات"),
    )
    PREMIUM_ADDITIONS = (
        Label(en="1 month support", ar="دعم لمدة شهر"),
        Label(en="Priority revisions", ar="مراجعات ذات أولوية"),
        Label(en="Documentation", ar="توثيق"),
        Label(en="Training session", ar="جلسة تدريبية"),
    )
    BASIC_EXCLUDES = (
        Label(en="Performance optimization", ar="تحسين الأداء"),
        Label(en="SEO setup", ar="إعداد SEO"),
        Label(en="Extended support", ar="دعم ممتد"),
    )
    STANDARD_EXCLUDES = (
        Label(en="Extended support", ar="دعم ممتد"),
        Label(en="Training", ar="تدريب"),
        Label(en="Documentation", ar="توثيق"),
    )

    # name, name_ar, price factor, (first day offset, last day offset), includes, excludes
    TIERS = (
        ("Basic", "أساسي", 0.9, (0, 3), BASE_FEATURES, BASIC_EXCLUDES),
        ("Standard", "قياسي", 1.0, (0, 3),
         BASE_FEATURES + STANDARD_ADDITIONS, STANDARD_EXCLUDES),
        ("Premium", "متميز", 1.25, (2, 7),
         BASE_FEATURES + STANDARD_ADDITIONS + PREMIUM_ADDITIONS, ()),
    )

    def __init__(self, rate_card: RateCard):
        self.rate_card = rate_card

    def build(self, spec, typical_price: int, typical_hours: float) -> list:
        """
        Args:
            spec: the ProjectSpecification being priced
            typical_price: already floored and rounded typical price
            typical_hours: unrounded typical effort

        Returns:
            [Basic, Standard, Premium] Package list
        """
        service = self.rate_card.service_labels.get(spec.service_type)
        service_en = service.en if service else spec.service_type.value
        service_ar = service.ar if service else spec.service_type.value
        base_days = self.base_days(typical_hours)

        packages = []
        for name, name_ar, factor, (first, last), includes, excludes in self.TIERS:
            if factor == 1.0:
                price = typical_price
            else:
                price = round_price(typical_price * factor, spec.currency)
            min_days = base_days + first
            max_days = base_days + last
            packages.append(Package(
                name=name,
                name_ar=name_ar,
                price=price,
                min_days=min_days,
                max_days=max_days,
                duration_days=f"{min_days}-{max_days}",
                includes=[f.en.format(service=service_en) for f in includes],
                includes_ar=[f.ar.format(service=service_ar) for f in includes],
                excludes=[f.en for f in excludes],
                excludes_ar=[f.ar for f in excludes],
            ))
        return packages

    def base_days(self, typical_hours: float) -> int:
        """Working days for the typical effort, rounded up."""
        return math.ceil(typical_hours / self.HOURS_PER_DAY)
