"""
Metrics instrumentation for observability.
Exposes Prometheus-compatible metrics at /metrics endpoint.
"""

from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST
from fastapi import Response

# Booking metrics
booking_attempts = Counter(
    'hotel_booking_attempts_total',
    'Total booking operations',
    ['operation', 'outcome']  # read/create/update x success/not_found/unauthorized/invalid/error
)

booking_latency = Histogram(
    'hotel_booking_latency_seconds',
    'Booking operation latency',
    ['operation'],
    buckets=[0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0]
)

# Cache metrics
cache_operations = Counter(
    'hotel_booking_cache_operations_total',
    'Cache operations',
    ['operation', 'result']  # get, hit/miss
)

redis_connection_errors = Counter(
    'hotel_booking_redis_connection_errors_total',
    'Redis connection errors'
)


def metrics_endpoint() -> Response:
    """Prometheus metrics endpoint."""
    return Response(
        content=generate_latest(),
        media_type=CONTENT_TYPE_LATEST
    )


def record_booking_attempt(operation: str, outcome: str):
    """Record booking operation. Outcome: success, not_found, unauthorized, invalid, error"""
    booking_attempts.labels(operation=operation, outcome=outcome).inc()


def record_cache_operation(operation: str, hit: bool):
    result = "hit" if hit else "miss"
    cache_operations.labels(operation=operation, result=result).inc()
