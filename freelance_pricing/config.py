from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_NAME: str = "Freelance Pricing Estimator"
    # Applied by the HTTP layer when a request omits currency
    DEFAULT_CURRENCY: str = "USD"
    CORS_ALLOW_ORIGINS: List[str] = ["*"]

    class Config:
        env_file = ".env"


settings = Settings()
