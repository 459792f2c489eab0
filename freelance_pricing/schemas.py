from pydantic import BaseModel
from typing import Optional, List, Union
from .models import (
    ServiceType, PricingModel, Complexity, Language, ContentReadiness,
    DesignType, Urgency, Addon, BreakdownKind,
)


class UserSettings(BaseModel):
    hourly_rate: float = 15.0
    minimum_project_price: float = 100.0
    enable_complexity_multiplier: bool = True
    enable_language_multiplier: bool = True
    enable_content_multiplier: bool = True
    enable_design_multiplier: bool = True
    enable_urgency_multiplier: bool = True
    class Config:
        frozen = True


class ProjectSpecification(BaseModel):
    service_type: ServiceType
    pricing_model: PricingModel
    complexity: Complexity
    pages: int = 0
    products: int = 0
    languages: Language
    addons: List[Addon] = []
    content_ready: ContentReadiness
    design: DesignType
    urgency: Urgency
    currency: str = "USD"
    api_endpoints: Optional[int] = None
    class Config:
        frozen = True


class BreakdownItem(BaseModel):
    label: str
    label_ar: str
    amount: Union[int, float, str]
    kind: BreakdownKind


class Package(BaseModel):
    name: str
    name_ar: str
    price: int
    min_days: int
    max_days: int
    duration_days: str
    includes: List[str] = []
    includes_ar: List[str] = []
    excludes: List[str] = []
    excludes_ar: List[str] = []


class HoursRange(BaseModel):
    min: int
    max: int


class PricingResult(BaseModel):
    typical_price: int
    min_price: int
    max_price: int
    hours: HoursRange
    breakdown: List[BreakdownItem] = []
    packages: List[Package] = []
    pricing_paragraph_en: str
    pricing_paragraph_ar: str


class ValidationResult(BaseModel):
    valid: bool
    errors: List[str] = []
