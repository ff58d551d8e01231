"""
Metrics Collection
Prometheus metrics for trigger dispatch tracking
"""

import time
from contextlib import contextmanager
from typing import Callable

from prometheus_client import Counter, Histogram


class MetricsCollector:
    """
    Collects and exposes Prometheus metrics for the binding engine.
    """

    def __init__(self) -> None:
        # Dispatch metrics
        self.dispatches_total = Counter(
            "widgetlink_dispatches_total",
            "Total number of trigger dispatches",
            ["matched"],
        )
        self.dispatch_duration = Histogram(
            "widgetlink_dispatch_duration_seconds",
            "Synchronous part of a dispatch in seconds",
            buckets=[0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0],
        )

        # Action metrics
        self.actions_total = Counter(
            "widgetlink_actions_total",
            "Total number of actions processed, by outcome",
            ["status"],
        )

        # Resolution metrics
        self.unresolved_references = Counter(
            "widgetlink_unresolved_references_total",
            "Template tokens that resolved to nothing",
        )

        # Compilation metrics
        self.rules_compiled = Counter(
            "widgetlink_rules_compiled_total",
            "Total number of rules compiled from binding descriptors",
        )
        self.dead_rules = Counter(
            "widgetlink_dead_rules_total",
            "Compiled rules that can never match a real trigger",
        )

    def record_dispatch(self, matched: int, duration: float) -> None:
        """Record a dispatch call."""
        self.dispatches_total.labels(matched="yes" if matched else "no").inc()
        self.dispatch_duration.observe(duration)

    def record_action(self, status: str) -> None:
        """Record the outcome of one action."""
        self.actions_total.labels(status=status).inc()

    def record_unresolved(self) -> None:
        """Record an unresolved template reference."""
        self.unresolved_references.inc()

    def record_compiled(self, rules: int, dead: int = 0) -> None:
        """Record a compilation pass."""
        self.rules_compiled.inc(rules)
        if dead:
            self.dead_rules.inc(dead)

    @contextmanager
    def measure_duration(self, callback: Callable[[float], None]):
        """Context manager to measure operation duration."""
        start = time.perf_counter()
        try:
            yield
        finally:
            callback(time.perf_counter() - start)


# Global metrics collector instance
metrics_collector = MetricsCollector()
