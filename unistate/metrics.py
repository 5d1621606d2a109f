"""
Prometheus metrics for unistate stores.

Collectors are created lazily by init_metrics(); until then every recording
helper is a no-op, so stores cost nothing extra when metrics are off.

Environment Variables:
    UNISTATE_METRICS_ENABLED: Enable metrics server (true/false) - default: false
    UNISTATE_METRICS_PORT: HTTP port for /metrics endpoint - default: 8080

Usage:
    from unistate.metrics import start_metrics_server, metrics_config

    start_metrics_server(*metrics_config())

    # Track a dispatch
    with track_dispatch("action"):
        ...
"""

import logging
import os
import threading
from contextlib import contextmanager
from typing import Generator, Optional, Tuple

from prometheus_client import Counter, Gauge, Histogram, start_http_server

logger = logging.getLogger(__name__)

DISPATCH_TOTAL: Optional[Counter] = None
DISPATCH_DURATION: Optional[Histogram] = None
SUBSCRIBERS: Optional[Gauge] = None

_metrics_initialized = False
_metrics_lock = threading.Lock()


def metrics_config() -> Tuple[bool, int]:
    """Read (enabled, port) from the environment."""
    enabled = os.getenv("UNISTATE_METRICS_ENABLED", "false").lower() in ("1", "true", "yes")
    port = int(os.getenv("UNISTATE_METRICS_PORT", "8080"))
    return enabled, port


def init_metrics() -> None:
    """
    Initialize Prometheus metrics (call once at startup).

    Thread-safe and idempotent via module-level lock.
    """
    global DISPATCH_TOTAL, DISPATCH_DURATION, SUBSCRIBERS
    global _metrics_initialized

    with _metrics_lock:
        if _metrics_initialized:
            return

        # Dispatch counter (labels: kind = action | thunk)
        DISPATCH_TOTAL = Counter(
            "unistate_dispatch_total",
            "Total number of dispatch calls",
            labelnames=["kind"],
        )

        # Reduce + notify duration for action dispatches
        DISPATCH_DURATION = Histogram(
            "unistate_dispatch_duration_seconds",
            "Duration of action dispatch (reduction and notification) in seconds",
            buckets=(0.0001, 0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0),
        )

        # Live subscriptions across all stores
        SUBSCRIBERS = Gauge(
            "unistate_subscribers",
            "Number of live store subscriptions",
        )

        _metrics_initialized = True
        logger.info("Prometheus metrics initialized")


def start_metrics_server(enabled: bool, port: int) -> None:
    """
    Start Prometheus metrics HTTP server in background thread.

    Args:
        enabled: Whether to start metrics server (from UNISTATE_METRICS_ENABLED)
        port: HTTP port for /metrics endpoint (from UNISTATE_METRICS_PORT)
    """
    if not enabled:
        logger.info("Metrics server disabled (UNISTATE_METRICS_ENABLED=false)")
        return

    init_metrics()

    # start_http_server is non-blocking (starts daemon thread)
    start_http_server(port, addr="0.0.0.0")
    logger.info(f"Metrics server started on http://0.0.0.0:{port}/metrics")


@contextmanager
def track_dispatch(kind: str) -> Generator[None, None, None]:
    """
    Count a dispatch and, for actions, time it.

    Args:
        kind: "action" or "thunk"
    """
    if DISPATCH_TOTAL is None:
        yield
        return

    DISPATCH_TOTAL.labels(kind=kind).inc()
    if kind != "action" or DISPATCH_DURATION is None:
        yield
        return

    with DISPATCH_DURATION.time():
        yield


def subscriber_added() -> None:
    if SUBSCRIBERS is not None:
        SUBSCRIBERS.inc()


def subscriber_removed() -> None:
    if SUBSCRIBERS is not None:
        SUBSCRIBERS.dec()


def subscribers_released(count: int) -> None:
    """Drop entries still live when their store is garbage-collected."""
    if SUBSCRIBERS is not None and count:
        SUBSCRIBERS.dec(count)
