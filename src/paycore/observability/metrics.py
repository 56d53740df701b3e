"""
Prometheus metrics for the PayRouter service.
Focus on business metrics and Golden Signals.
"""

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
)

# Create a custom registry for our metrics
metrics_registry = CollectorRegistry()

UNSUPPORTED_PAYMENT_METHOD_LABEL = "unsupported"

# ====== BUSINESS METRICS ======

# Selector resolution results
payment_dispatch_total = Counter(
    "payment_dispatch_total",
    "Payment method resolutions by result",
    ["payment_method", "status"],  # balance, alipay, wechat + resolved/unsupported
    registry=metrics_registry,
)

# Handler execution results
payment_executions_total = Counter(
    "payment_executions_total",
    "Payment handler executions by result",
    ["payment_method", "status"],  # success, failed
    registry=metrics_registry,
)

# ====== GOLDEN SIGNALS ======

# 1. TRAFFIC - Request rate
http_requests_total = Counter(
    "http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status_code"],
    registry=metrics_registry,
)

# 2. LATENCY - Response time distribution
http_request_duration_seconds = Histogram(
    "http_request_duration_seconds",
    "HTTP request duration",
    ["method", "endpoint"],
    buckets=[0.005, 0.01, 0.05, 0.1, 0.5, 1.0],
    registry=metrics_registry,
)

# 3. ERRORS - Error rate by HTTP status class
http_requests_2xx_total = Counter(
    "http_requests_2xx_total",
    "Total 2xx HTTP responses",
    ["method", "endpoint"],
    registry=metrics_registry,
)

http_requests_4xx_total = Counter(
    "http_requests_4xx_total",
    "Total 4xx HTTP responses",
    ["method", "endpoint"],
    registry=metrics_registry,
)

http_requests_5xx_total = Counter(
    "http_requests_5xx_total",
    "Total 5xx HTTP responses",
    ["method", "endpoint"],
    registry=metrics_registry,
)

# ====== BUSINESS METRIC FUNCTIONS ======


def record_payment_dispatch(payment_method: str, status: str) -> None:
    """Record a selector resolution (resolved/unsupported)."""
    payment_dispatch_total.labels(payment_method=payment_method, status=status).inc()


def record_payment_execution(payment_method: str, status: str) -> None:
    """Record a handler execution (success/failed)."""
    payment_executions_total.labels(
        payment_method=payment_method, status=status
    ).inc()


# ====== GOLDEN SIGNALS FUNCTIONS ======


def record_http_request(
    method: str, endpoint: str, status_code: int, duration: float
) -> None:
    """Record HTTP request metrics with golden signals."""
    # Traffic
    http_requests_total.labels(
        method=method, endpoint=endpoint, status_code=str(status_code)
    ).inc()

    # Latency
    http_request_duration_seconds.labels(method=method, endpoint=endpoint).observe(
        duration
    )

    # Errors by status code class
    if 200 <= status_code < 300:
        http_requests_2xx_total.labels(method=method, endpoint=endpoint).inc()
    elif 400 <= status_code < 500:
        http_requests_4xx_total.labels(method=method, endpoint=endpoint).inc()
    elif 500 <= status_code < 600:
        http_requests_5xx_total.labels(method=method, endpoint=endpoint).inc()


def get_metrics_endpoint() -> tuple[bytes, str]:
    """Get metrics for Prometheus scraping."""
    return generate_latest(metrics_registry), CONTENT_TYPE_LATEST
