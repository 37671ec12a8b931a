"""Employee Directory API: CRUD over the employees table plus Prometheus metrics."""

__version__ = "1.0.0"
