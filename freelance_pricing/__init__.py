"""
Freelance pricing estimator.

Deterministic pricing engine for freelance web projects: base rate,
add-ons, overage extras and multipliers in; price range, effort range,
itemized breakdown, service packages and summary paragraphs out.
"""

from .pricing_engine import PricingEngine, calculate
from .rounding import round_price
from .validator import validate

__all__ = ["PricingEngine", "calculate", "round_price", "validate"]
