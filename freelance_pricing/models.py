import enum


# --- Project attribute enums ---
# Values are the wire strings the form collector sends.

class ServiceType(str, enum.Enum):
    LANDING_PAGE = "landing_page"
    WORDPRESS_WEBSITE = "wordpress_website"
    WOOCOMMERCE_STORE = "woocommerce_store"
    UI_FIXES = "ui_fixes"
    API_INTEGRATION = "api_integration"
    MAINTENANCE = "maintenance"
    SEO_BASIC = "seo_basic"


class PricingModel(str, enum.Enum):
    FIXED = "fixed"
    HOURLY = "hourly"


class Complexity(str, enum.Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Language(str, enum.Enum):
    ARABIC = "arabic"
    ENGLISH = "english"
    BOTH = "both"


class ContentReadiness(str, enum.Enum):
    READY = "ready"
    NEEDS_COPYWRITING = "needs_copywriting"


class DesignType(str, enum.Enum):
    TEMPLATE = "template"
    CUSTOM = "custom"


class Urgency(str, enum.Enum):
    NORMAL = "normal"
    RUSH = "rush"
    EXTREME = "extreme"


class Addon(str, enum.Enum):
    PAYMENT_GATEWAY = "payment_gateway"
    SHIPPING_INTEGRATION = "shipping_integration"
    USER_ACCOUNTS = "user_accounts"
    ADMIN_DASHBOARD = "admin_dashboard"
    API_SYNC = "api_sync"
    BLOG_SETUP = "blog_setup"
    PERFORMANCE_OPTIMIZATION = "performance_optimization"
    SEO_SETUP = "seo_setup"


class BreakdownKind(str, enum.Enum):
    BASE = "base"
    ADDON = "addon"
    EXTRA = "extra"
    MULTIPLIER = "multiplier"


# Service types that are priced per page beyond an included count
WEBSITE_SERVICE_TYPES = (
    ServiceType.WORDPRESS_WEBSITE,
    ServiceType.WOOCOMMERCE_STORE,
    ServiceType.LANDING_PAGE,
)
