"""Pytest configuration and fixtures."""

import json
import os
from typing import Any, Dict, List

import pytest
from prometheus_client import REGISTRY

from widgetlink.container import create_container
from widgetlink.core import Settings
from widgetlink.engine import ExpressionResolver, TriggerDispatcher
from widgetlink.registry import HandlerRegistry
from widgetlink.store import ValueStore


# ============================================================================
# Pytest Hooks
# ============================================================================

def pytest_configure(config):
    """Configure pytest with environment variables."""
    os.environ["WIDGETLINK_LOG_LEVEL"] = "DEBUG"
    os.environ["WIDGETLINK_CHART_REFRESH_DELAY"] = "0"


# ============================================================================
# Core Fixtures
# ============================================================================

@pytest.fixture
def settings():
    """Test settings with no chart refresh delay."""
    return Settings(chart_refresh_delay=0.0)


@pytest.fixture
def di_container(settings):
    """Dependency injection container for testing."""
    return create_container(settings)


@pytest.fixture
def store():
    """Empty value store."""
    return ValueStore()


@pytest.fixture
def registry():
    """Empty handler registry."""
    return HandlerRegistry()


@pytest.fixture
def resolver(store):
    """Resolver bound to the test store."""
    return ExpressionResolver(store)


@pytest.fixture
def dispatcher(resolver, registry):
    """Dispatcher with default (unserialized) async handling."""
    return TriggerDispatcher(resolver, registry)


@pytest.fixture
def recorder(registry):
    """
    Register recording handlers.

    Returns a function (widget_id, action_type) -> list that the handler
    appends its resolved args to.
    """
    def install(widget_id: str, action_type: str) -> List[Dict[str, Any]]:
        calls: List[Dict[str, Any]] = []
        registry.register(widget_id, action_type, calls.append)
        return calls

    return install


# ============================================================================
# Metrics Fixtures
# ============================================================================

@pytest.fixture
def metric():
    """Read the current value of a Prometheus sample (0.0 when unset)."""
    def read(name: str, **labels: str) -> float:
        return REGISTRY.get_sample_value(name, labels) or 0.0

    return read


# ============================================================================
# Data Fixtures
# ============================================================================

@pytest.fixture
def sample_config() -> Dict[str, Any]:
    """Page with a direct and an indirect binding chain."""
    return {
        "components": [
            {"id": "calendar-1", "type": "calendar"},
            {"id": "chart-1", "type": "chart"},
            {
                "id": "dropdown-1",
                "type": "dropdown",
                "props": {
                    "placeholder": "Pick a fruit",
                    "options": [
                        {"label": "Apple", "value": "apple"},
                        {"label": "Grape", "value": "grape"},
                    ],
                },
            },
            {"id": "textbox-1", "type": "textbox", "props": {"placeholder": "Fruit"}},
            {"id": "button-1", "type": "button", "props": {"label": "Copy"}},
            {"id": "textbox-2", "type": "textbox"},
        ],
        "bindings": [
            {"source": "calendar-1", "target": "chart-1", "mode": "direct"},
            {
                "source": "dropdown-1",
                "target": "textbox-1",
                "mode": "direct",
                "source-property": "selected_text",
                "target-property": "text",
            },
            {
                "source": "textbox-1",
                "target": "textbox-2",
                "mode": "indirect",
                "via": "button-1",
                "source-property": "text",
            },
        ],
    }


@pytest.fixture
def sample_config_json(sample_config) -> str:
    """Sample page configuration as a JSON document."""
    return json.dumps(sample_config, indent=2)
