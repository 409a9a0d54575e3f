"""Self-monitoring metrics for the client using prometheus_client."""
from prometheus_client import CollectorRegistry, Counter, Histogram


class ClientMetrics:
    """Request counters and latencies recorded by the transport."""

    def __init__(self, registry=None, prefix=""):
        if registry is None:
            registry = CollectorRegistry()
        self.registry = registry

        self.requests_total = Counter(
            f"{prefix}influx_requests_total",
            "Total number of requests sent to the server",
            ["operation", "outcome"],
            registry=registry
        )

        self.request_duration_seconds = Histogram(
            f"{prefix}influx_request_duration_seconds",
            "Duration of each HTTP exchange in seconds",
            ["operation"],
            buckets=[0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
            registry=registry
        )

        self.points_written_total = Counter(
            f"{prefix}influx_points_written_total",
            "Total number of points accepted by the server",
            ["series"],
            registry=registry
        )

    def record_request(self, operation: str, outcome: str, duration: float):
        """Record one finished request."""
        self.requests_total.labels(operation=operation, outcome=outcome).inc()
        self.request_duration_seconds.labels(operation=operation).observe(duration)

    def record_points(self, series: str, count: int):
        """Record points written for a series."""
        self.points_written_total.labels(series=series).inc(count)
