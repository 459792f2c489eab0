"""
Input Validator — pre-flight check for a project description.

Runs before the calculator and reports one readable message per bad
field instead of raising. The calculator never validates; it trusts
enum-valid input and tolerates any numbers.
"""

import logging
from typing import Mapping

from .models import (
    Addon, Complexity, ContentReadiness, DesignType, Language, PricingModel,
    ServiceType, Urgency,
)
from .schemas import ProjectSpecification, ValidationResult

logger = logging.getLogger(__name__)


def _is_whole_number(value) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and value.is_integer()


def _raw(value):
    """Enum members compare by their wire value."""
    return getattr(value, "value", value)


class InputValidator:
    """
    Checks a (possibly partial) project description.
    Every required choice must be present and allowed; counts must be in range.
    """

    # field, message label, allowed values
    REQUIRED_CHOICES = (
        ("service_type", "Service type", ServiceType),
        ("pricing_model", "Pricing model", PricingModel),
        ("complexity", "Complexity level", Complexity),
        ("languages", "Language selection", Language),
        ("content_ready", "Content readiness", ContentReadiness),
        ("design", "Design type", DesignType),
        ("urgency", "Urgency level", Urgency),
    )

    # field, message label, inclusive bounds
    COUNT_RANGES = (
        ("pages", "Pages", 0, 100),
        ("products", "Products", 0, 10000),
    )

    def validate(self, partial_spec) -> ValidationResult:
        """
        Args:
            partial_spec: mapping of ProjectSpecification fields (any may be missing),
                          or a ProjectSpecification

        Returns:
            ValidationResult(valid, errors), errors in field order, one per bad field
        """
        if isinstance(partial_spec, ProjectSpecification):
            partial_spec = partial_spec.model_dump()
        elif not isinstance(partial_spec, Mapping):
            partial_spec = {}

        errors = []

        for field, label, choices in self.REQUIRED_CHOICES:
            value = _raw(partial_spec.get(field))
            if value is None or value == "":
                errors.append(f"{label} is required")
                continue
            allowed = [choice.value for choice in choices]
            if value not in allowed:
                errors.append(f"{label} must be one of: {', '.join(allowed)}")

        for field, label, low, high in self.COUNT_RANGES:
            value = partial_spec.get(field)
            if value is None:
                continue
            if not _is_whole_number(value) or not low <= value <= high:
                errors.append(f"{label} must be between {low} and {high}")

        errors.extend(self._check_addons(partial_spec.get("addons")))

        endpoints = partial_spec.get("api_endpoints")
        if endpoints is not None and (not _is_whole_number(endpoints) or endpoints < 1):
            errors.append("API endpoints must be a positive whole number")

        currency = partial_spec.get("currency")
        if currency is not None and (not isinstance(currency, str) or not currency.strip()):
            errors.append("Currency must be a currency code")

        if errors:
            logger.info("Rejected project specification: %s", "; ".join(errors))

        return ValidationResult(valid=not errors, errors=errors)

    def _check_addons(self, addons) -> list:
        if addons is None:
            return []
        if isinstance(addons, (str, bytes)) or not isinstance(addons, (list, tuple, set, frozenset)):
            return ["Add-ons must be a list"]
        allowed = [addon.value for addon in Addon]
        return [
            f"Unknown add-on: {_raw(addon)}"
            for addon in addons
            if _raw(addon) not in allowed
        ]


_default_validator = InputValidator()


def validate(partial_spec) -> ValidationResult:
    """Validate a project description with the default validator."""
    return _default_validator.validate(partial_spec)
