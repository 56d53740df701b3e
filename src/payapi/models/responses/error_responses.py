"""
Error response models.
"""

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class ErrorResponse(BaseModel):
    """Standard error response model."""

    error: str = Field(..., description="Error type")
    message: str = Field(..., description="Human-readable error message")
    details: Optional[Dict[str, Any]] = Field(
        None, description="Additional error details"
    )
    timestamp: datetime = Field(default_factory=datetime.now)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "error": "UnsupportedPaymentMethod",
                "message": "Payment method not supported: creditcard",
                "details": {
                    "payment_method": "creditcard",
                    "supported": ["balance", "alipay", "wechat"],
                },
                "timestamp": "2025-01-15T10:30:00",
            }
        }
    )
