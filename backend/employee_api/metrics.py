"""
Prometheus metrics for the Employee Directory API.

The registry is built once per process by ``build_registry`` and kept on
``app.state``; nothing here registers into the global default registry, so
every app instance (and every test) owns its metrics.
"""
import time
from dataclasses import dataclass

from fastapi import Request
from prometheus_client import (
    CollectorRegistry,
    Counter,
    GCCollector,
    Histogram,
    PlatformCollector,
    ProcessCollector,
)


def build_registry() -> CollectorRegistry:
    """Registry carrying the default process, platform and GC collectors."""
    registry = CollectorRegistry()
    ProcessCollector(registry=registry)
    PlatformCollector(registry=registry)
    GCCollector(registry=registry)
    return registry


@dataclass
class RequestMetrics:
    """HTTP middleware counting requests and timing them per route template."""

    requests: Counter
    latency: Histogram

    @classmethod
    def register(cls, registry: CollectorRegistry) -> "RequestMetrics":
        return cls(
            requests=Counter(
                "http_requests_total",
                "Total HTTP requests",
                ["method", "path", "status"],
                registry=registry,
            ),
            latency=Histogram(
                "http_request_duration_seconds",
                "HTTP request latency in seconds",
                ["method", "path"],
                registry=registry,
            ),
        )

    async def __call__(self, request: Request, call_next):
        start = time.perf_counter()
        status = 500
        try:
            response = await call_next(request)
            status = response.status_code
            return response
        finally:
            # the router stores the matched route in the shared scope
            route = request.scope.get("route")
            path = getattr(route, "path", None) or "unmatched"
            self.requests.labels(request.method, path, str(status)).inc()
            self.latency.labels(request.method, path).observe(time.perf_counter() - start)
