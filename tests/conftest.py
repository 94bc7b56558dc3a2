"""
==============================================================================
Pytest Configuration and Fixtures
==============================================================================

Provides settings, a manual scheduler with a fake clock, seeded stores,
catalog services, and an HTTP test client.

==============================================================================
"""

import pytest
from typing import Callable, Generator, List

from fastapi.testclient import TestClient

from catalog_state.catalog.models import ProductData
from catalog_state.catalog.store import ProductStore
from catalog_state.config import Settings
from catalog_state.main import create_app
from catalog_state.services.catalog_service import CatalogService, create_catalog_service


# ============================================================================
# SCHEDULER FIXTURES
# ============================================================================

class ManualTimer:
    """Timer handle for ManualScheduler."""

    def __init__(self, when: float, callback: Callable[[], None]):
        self.when = when
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler:
    """Scheduler driven by an explicit fake clock (seconds)."""

    def __init__(self):
        self.now = 0.0
        self.timers: List[ManualTimer] = []

    def call_later(self, delay: float, callback: Callable[[], None]) -> ManualTimer:
        timer = ManualTimer(self.now + delay, callback)
        self.timers.append(timer)
        return timer

    @property
    def active(self) -> List[ManualTimer]:
        return [t for t in self.timers if not t.cancelled]

    def advance(self, seconds: float) -> None:
        """Move the clock forward, firing due timers in order."""
        self.now += seconds
        while True:
            due = [t for t in self.active if t.when <= self.now + 1e-9]
            if not due:
                break
            timer = min(due, key=lambda t: t.when)
            self.timers.remove(timer)
            timer.callback()


@pytest.fixture
def scheduler() -> ManualScheduler:
    """Manual scheduler starting at t=0."""
    return ManualScheduler()


# ============================================================================
# SETTINGS FIXTURES
# ============================================================================

@pytest.fixture
def settings() -> Settings:
    """Settings isolated from any .env file."""
    return Settings(
        _env_file=None,
        app_env="development",
        page_size=6,
        search_debounce_ms=500,
        default_view_mode="list",
        load_sample_data=True,
    )


# ============================================================================
# CATALOG FIXTURES
# ============================================================================

@pytest.fixture
def store() -> ProductStore:
    """Store seeded with the six sample products."""
    product_store = ProductStore()
    product_store.load_sample_data()
    return product_store


@pytest.fixture
def empty_store() -> ProductStore:
    """Store without products."""
    return ProductStore()


@pytest.fixture
def catalog(settings: Settings, scheduler: ManualScheduler) -> CatalogService:
    """Catalog service over the sample products."""
    return create_catalog_service(settings, scheduler)


@pytest.fixture
def make_product() -> Callable[..., ProductData]:
    """Factory for valid product payloads."""
    def _make(name: str = "Widget", **overrides) -> ProductData:
        fields = {"name": name, "price": 9.5, "category": "Home", "stock": 3}
        fields.update(overrides)
        return ProductData(**fields)
    return _make


# ============================================================================
# HTTP FIXTURES
# ============================================================================

@pytest.fixture
def client(
    settings: Settings,
    scheduler: ManualScheduler
) -> Generator[TestClient, None, None]:
    """Test client for a fresh application with its own catalog."""
    app = create_app(settings, scheduler)
    with TestClient(app) as test_client:
        yield test_client
