"""
Test suite for payment handlers and the payment dispatcher.
"""

from concurrent.futures import ThreadPoolExecutor
from unittest.mock import Mock

import pytest

from paycore.exceptions import (
    ExceptionCode,
    PaymentExecutionError,
    UnsupportedSelectorError,
)
from paycore.observability import metrics_registry
from paycore.payments import (
    AlipayPaymentHandler,
    BalancePaymentHandler,
    PaymentDispatcher,
    PaymentHandler,
    WechatPaymentHandler,
)


class AlternateWechatHandler(PaymentHandler):
    """Second handler claiming the wechat payment method."""

    def __init__(self):
        super().__init__("wechat", "Alternate WeChat handler")

    def execute(self) -> str:
        return "alternate wechat pay"


class FailingHandler(PaymentHandler):
    def __init__(self):
        super().__init__("broken", "Always fails")

    def execute(self) -> str:
        raise RuntimeError("gateway down")


@pytest.fixture
def dispatcher():
    return PaymentDispatcher(
        [BalancePaymentHandler(), AlipayPaymentHandler(), WechatPaymentHandler()]
    )


class TestPaymentHandlers:
    """Test the built-in payment handlers."""

    @pytest.mark.parametrize(
        "handler_class,selector,result",
        [
            (BalancePaymentHandler, "balance", "balance pay"),
            (AlipayPaymentHandler, "alipay", "alipay pay"),
            (WechatPaymentHandler, "wechat", "wechat pay"),
        ],
    )
    def test_handler_supports_its_own_selector(self, handler_class, selector, result):
        """Each handler accepts its selector in any case and returns its result."""
        handler = handler_class()

        assert handler.payment_method == selector
        assert handler.support(selector)
        assert handler.support(selector.upper())
        assert handler.support(selector.capitalize())
        assert handler.execute() == result

    def test_handler_rejects_other_selectors(self):
        """Handlers only claim their own payment method."""
        handler = AlipayPaymentHandler()

        assert not handler.support("wechat")
        assert not handler.support("alipay ")
        assert not handler.support("")

    def test_support_never_raises_on_non_string(self):
        """Non-string selectors are simply unsupported."""
        handler = BalancePaymentHandler()

        assert handler.support(None) is False
        assert handler.support(42) is False

    def test_base_handler_is_abstract(self):
        with pytest.raises(TypeError):
            PaymentHandler("cash", "Cash")


class TestPaymentDispatcherResolve:
    """Test selector resolution."""

    @pytest.mark.parametrize(
        "selector,expected",
        [
            ("balance", "balance pay"),
            ("BALANCE", "balance pay"),
            ("Balance", "balance pay"),
            ("ALIPAY", "alipay pay"),
            ("wechat", "wechat pay"),
            ("WeChat", "wechat pay"),
        ],
    )
    def test_resolve_registered_selectors(self, dispatcher, selector, expected):
        """Registered selectors resolve case-insensitively."""
        assert dispatcher.resolve(selector).execute() == expected

    def test_resolve_unknown_selector(self, dispatcher):
        """Unknown selectors fail with a typed error carrying the selector."""
        with pytest.raises(UnsupportedSelectorError) as exc_info:
            dispatcher.resolve("creditcard")

        error = exc_info.value
        assert error.selector == "creditcard"
        assert error.code == ExceptionCode.PAYMENT_METHOD_NOT_SUPPORTED.value
        assert error.details == {"payment_method": "creditcard"}
        assert "creditcard" in str(error)

    def test_resolve_none_selector(self, dispatcher):
        with pytest.raises(UnsupportedSelectorError) as exc_info:
            dispatcher.resolve(None)

        assert exc_info.value.selector is None

    def test_empty_registry_rejects_everything(self):
        """A dispatcher without handlers fails on any selector."""
        empty = PaymentDispatcher([])

        assert len(empty) == 0
        for selector in ("balance", "alipay", "wechat", "unknown"):
            with pytest.raises(UnsupportedSelectorError):
                empty.resolve(selector)

    def test_resolve_is_repeatable(self, dispatcher):
        """Repeated resolution returns the same handler instance."""
        first = dispatcher.resolve("alipay")

        dispatcher.resolve("balance")
        dispatcher.resolve("wechat")

        assert dispatcher.resolve("alipay") is first
        assert dispatcher.resolve("ALIPAY") is first

    def test_first_registered_handler_wins(self):
        """When two handlers claim a selector, registration order decides."""
        original = WechatPaymentHandler()
        alternate = AlternateWechatHandler()

        assert PaymentDispatcher([original, alternate]).resolve("wechat") is original
        assert PaymentDispatcher([alternate, original]).resolve("wechat") is alternate

    def test_resolve_stops_at_first_match(self):
        """Handlers after the match are never queried."""
        first = Mock(spec=PaymentHandler)
        first.payment_method = "anything"
        first.support.return_value = True
        second = Mock(spec=PaymentHandler)

        assert PaymentDispatcher([first, second]).resolve("anything") is first
        first.support.assert_called_once_with("anything")
        second.support.assert_not_called()

    def test_resolve_records_metrics(self, dispatcher):
        """Resolutions are counted by payment method and result."""

        def sample(payment_method, status):
            return (
                metrics_registry.get_sample_value(
                    "payment_dispatch_total",
                    {"payment_method": payment_method, "status": status},
                )
                or 0.0
            )

        resolved_before = sample("balance", "resolved")
        unsupported_before = sample("unsupported", "unsupported")

        dispatcher.resolve("Balance")
        with pytest.raises(UnsupportedSelectorError):
            dispatcher.resolve("bitcoin")

        assert sample("balance", "resolved") == resolved_before + 1
        assert sample("unsupported", "unsupported") == unsupported_before + 1


class TestPaymentDispatcherRegistry:
    """Test the read-only registry surface."""

    def test_handlers_are_frozen(self):
        """Mutating the source list after construction has no effect."""
        handlers = [BalancePaymentHandler()]
        dispatcher = PaymentDispatcher(handlers)

        handlers.append(WechatPaymentHandler())

        assert isinstance(dispatcher.handlers, tuple)
        assert len(dispatcher) == 1
        with pytest.raises(UnsupportedSelectorError):
            dispatcher.resolve("wechat")

    def test_list_payment_methods_in_registration_order(self, dispatcher):
        assert dispatcher.list_payment_methods() == ["balance", "alipay", "wechat"]

    def test_concurrent_resolution(self, dispatcher):
        """A shared dispatcher serves concurrent callers without locking."""
        selectors = ["balance", "ALIPAY", "wechat"] * 50

        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(dispatcher.pay, selectors))

        assert results == [
            {"balance": "balance pay", "alipay": "alipay pay", "wechat": "wechat pay"}[
                selector.lower()
            ]
            for selector in selectors
        ]


class TestPaymentDispatcherPay:
    """Test resolve-and-execute."""

    def test_pay_returns_handler_result(self, dispatcher):
        assert dispatcher.pay("ALIPAY") == "alipay pay"

    def test_pay_unknown_selector(self, dispatcher):
        with pytest.raises(UnsupportedSelectorError):
            dispatcher.pay("creditcard")

    def test_pay_wraps_handler_failure(self):
        """Unexpected handler failures surface as PaymentExecutionError."""
        dispatcher = PaymentDispatcher([FailingHandler()])

        with pytest.raises(PaymentExecutionError) as exc_info:
            dispatcher.pay("broken")

        error = exc_info.value
        assert error.payment_method == "broken"
        assert error.code == ExceptionCode.PAYMENT_PROCESSING_ERROR.value
        assert isinstance(error.original_exception, RuntimeError)
        assert error.to_dict()["original_exception_type"] == "RuntimeError"

    def test_pay_propagates_payment_execution_error(self):
        """Handler-specific errors pass through unchanged."""
        handler = Mock(spec=PaymentHandler)
        handler.payment_method = "card"
        handler.name = "CardHandler"
        handler.support.return_value = True
        raised = PaymentExecutionError("card", "Card declined")
        handler.execute.side_effect = raised

        with pytest.raises(PaymentExecutionError) as exc_info:
            PaymentDispatcher([handler]).pay("card")

        assert exc_info.value is raised
