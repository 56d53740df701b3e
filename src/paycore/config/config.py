import os
from typing import List

from dotenv import load_dotenv
from pydantic import BaseModel, Field

load_dotenv()


def _split_csv(raw: str) -> List[str]:
    return [item.strip().lower() for item in raw.split(",") if item.strip()]


class PaymentsConfig(BaseModel):
    # Applied by the HTTP layer when the request carries no payType
    default_method: str = Field(
        default_factory=lambda: os.getenv("DEFAULT_PAYMENT_METHOD", "wechat")
        .strip()
        .lower()
    )

    # Empty means every built-in handler is registered
    enabled_methods: List[str] = Field(
        default_factory=lambda: _split_csv(os.getenv("PAYMENT_METHODS_ENABLED", ""))
    )


class AppConfig(BaseModel):
    payments: PaymentsConfig = Field(default_factory=PaymentsConfig)
    log_level: str = Field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))


config = AppConfig()
