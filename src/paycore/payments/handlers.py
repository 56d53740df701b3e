"""
Payment handlers. Each handler serves exactly one payment method.
"""

from abc import ABC, abstractmethod
from typing import Any


class PaymentHandler(ABC):
    """Base class for all payment handlers."""

    def __init__(self, payment_method: str, description: str):
        self.payment_method = payment_method.lower()
        self.description = description

    def support(self, selector: Any) -> bool:
        """Check whether this handler serves the given payment method (case-insensitive)."""
        if not isinstance(selector, str):
            return False
        return selector.lower() == self.payment_method

    @abstractmethod
    def execute(self) -> str:
        """Perform the payment method's unit of work and return its outcome."""
        pass

    @property
    def name(self) -> str:
        return type(self).__name__

    def __str__(self) -> str:
        return f"PaymentHandler({self.payment_method}: {self.name})"

    def __repr__(self) -> str:
        return self.__str__()


class BalancePaymentHandler(PaymentHandler):
    """Pays from the account balance."""

    def __init__(self):
        super().__init__("balance", "Pay from the account balance")

    def execute(self) -> str:
        return "balance pay"


class AlipayPaymentHandler(PaymentHandler):
    """Pays through Alipay."""

    def __init__(self):
        super().__init__("alipay", "Pay through Alipay")

    def execute(self) -> str:
        return "alipay pay"


class WechatPaymentHandler(PaymentHandler):
    """Pays through WeChat Pay."""

    def __init__(self):
        super().__init__("wechat", "Pay through WeChat Pay")

    def execute(self) -> str:
        return "wechat pay"
