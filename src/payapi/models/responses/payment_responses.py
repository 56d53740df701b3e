"""
Payment method response models.
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class PaymentMethodInfo(BaseModel):
    """A registered payment method."""

    payment_method: str = Field(..., description="Selector accepted by /pay/pay")
    handler: str = Field(..., description="Handler serving the payment method")
    description: str = Field(..., description="Human-readable description")


class PaymentMethodListResponse(BaseModel):
    """Response model for the payment method listing."""

    payment_methods: List[PaymentMethodInfo]
    default: str = Field(..., description="Payment method used when payType is absent")
    count: int

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "payment_methods": [
                    {
                        "payment_method": "wechat",
                        "handler": "WechatPaymentHandler",
                        "description": "Pay through WeChat Pay",
                    }
                ],
                "default": "wechat",
                "count": 1,
            }
        }
    )
