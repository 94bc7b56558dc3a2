"""
==============================================================================
API Integration Tests
==============================================================================

Tests for REST API endpoints.

==============================================================================
"""

from fastapi.testclient import TestClient


VALID_FORM = {
    "name": "Desk Chair",
    "price": "149.99",
    "category": "Home",
    "stock": "8",
    "description": "Ergonomic chair",
}


class TestHealthEndpoints:
    """Tests for health check endpoints."""

    def test_health_check(self, client: TestClient):
        """Test health check reports the loaded catalog."""
        response = client.get("/api/v1/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["details"]["products_loaded"] == 6

    def test_readiness_probe(self, client: TestClient):
        """Test readiness probe."""
        response = client.get("/api/v1/health/ready")
        assert response.status_code == 200
        assert response.json()["ready"] is True

    def test_liveness_probe(self, client: TestClient):
        """Test liveness probe."""
        response = client.get("/api/v1/health/live")
        assert response.status_code == 200
        assert response.json()["alive"] is True


class TestCatalogEndpoints:
    """Tests for catalog view, search and paging."""

    def test_get_view(self, client: TestClient):
        """Test the initial view."""
        response = client.get("/api/v1/catalog")
        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["total"] == 6
        assert data["total_pages"] == 1
        assert data["current_page"] == 1
        assert len(data["items"]) == 6
        assert data["view_mode"] == "list"
        assert data["page_numbers"] == [1]

    def test_search_is_debounced(self, client: TestClient, scheduler):
        """Test search input is pending until the quiet period passes."""
        response = client.post("/api/v1/catalog/search", json={"text": "Shirt"})
        assert response.status_code == 200
        data = response.json()
        assert data["pending"] == "shirt"
        assert data["view"]["total"] == 6

        scheduler.advance(0.5)

        data = client.get("/api/v1/catalog").json()
        assert data["search_text"] == "shirt"
        assert [item["name"] for item in data["items"]] == ["T-Shirt"]

    def test_search_immediate(self, client: TestClient):
        """Test immediate search commits at once."""
        response = client.post(
            "/api/v1/catalog/search",
            json={"text": "lamp", "immediate": True}
        )
        data = response.json()
        assert data["pending"] is None
        assert data["view"]["total"] == 1
        assert data["view"]["is_filtered"] is True

    def test_page_out_of_range(self, client: TestClient):
        """Test navigating past the last page changes nothing."""
        response = client.post("/api/v1/catalog/page", json={"page": 2})
        assert response.status_code == 200
        data = response.json()
        assert data["changed"] is False
        assert data["view"]["current_page"] == 1

    def test_page_navigation(self, client: TestClient):
        """Test moving to page 2 after a seventh product."""
        client.post("/api/v1/catalog/submit", json=VALID_FORM)

        response = client.post("/api/v1/catalog/page", json={"page": 2})
        data = response.json()
        assert data["changed"] is True
        assert [item["name"] for item in data["view"]["items"]] == ["Desk Chair"]

    def test_view_mode(self, client: TestClient):
        """Test switching to card view."""
        response = client.post("/api/v1/catalog/view-mode", json={"mode": "card"})
        assert response.status_code == 200
        assert response.json()["view_mode"] == "card"

    def test_invalid_view_mode(self, client: TestClient):
        """Test an unknown view mode is rejected."""
        response = client.post("/api/v1/catalog/view-mode", json={"mode": "grid"})
        assert response.status_code == 422
        assert response.json()["error"]["code"] == "INVALID_VIEW_MODE"


class TestEditEndpoints:
    """Tests for the edit session and form submission."""

    def test_submit_creates_product(self, client: TestClient):
        """Test submitting in create mode adds a product."""
        response = client.post("/api/v1/catalog/submit", json=VALID_FORM)
        assert response.status_code == 200
        data = response.json()
        assert data["mode"] == "create"
        assert data["product"]["id"] == 7
        assert data["product"]["price"] == 149.99
        assert data["view"]["total"] == 7

    def test_submit_validation_errors(self, client: TestClient):
        """Test rejected forms return per-field errors."""
        response = client.post(
            "/api/v1/catalog/submit",
            json={"name": "Pen", "price": "-5", "category": "Books", "stock": ""}
        )
        assert response.status_code == 422
        error = response.json()["error"]
        assert error["code"] == "VALIDATION_ERROR"
        assert error["details"]["errors"] == {
            "price": "Price must be a valid positive number"
        }
        assert client.get("/api/v1/catalog").json()["total"] == 6

    def test_edit_flow(self, client: TestClient):
        """Test begin edit, submit update, and return to create mode."""
        response = client.post("/api/v1/catalog/edit/2")
        assert response.status_code == 200
        data = response.json()
        assert data["mode"] == "edit"
        assert data["form"]["name"] == "T-Shirt"
        assert data["form"]["price"] == "29.99"

        form = dict(data["form"], name="Polo Shirt")
        response = client.post("/api/v1/catalog/submit", json=form)
        assert response.status_code == 200
        assert response.json()["mode"] == "edit"
        assert response.json()["product"]["id"] == 2

        state = client.get("/api/v1/catalog/edit").json()
        assert state["mode"] == "create"
        assert state["product_id"] is None

    def test_edit_missing_product(self, client: TestClient):
        """Test editing an unknown product is a 404."""
        response = client.post("/api/v1/catalog/edit/99")
        assert response.status_code == 404
        assert response.json()["error"]["code"] == "PRODUCT_NOT_FOUND"

    def test_cancel_edit(self, client: TestClient):
        """Test cancelling edit mode."""
        client.post("/api/v1/catalog/edit/3")
        response = client.delete("/api/v1/catalog/edit")
        assert response.status_code == 200
        assert response.json()["mode"] == "create"


class TestProductEndpoints:
    """Tests for product lookup and deletion."""

    def test_get_product(self, client: TestClient):
        """Test reading a product by id."""
        response = client.get("/api/v1/products/1")
        assert response.status_code == 200
        assert response.json()["product"]["name"] == "Laptop"

    def test_get_missing_product(self, client: TestClient):
        """Test a missing product is a 404."""
        response = client.get("/api/v1/products/42")
        assert response.status_code == 404

    def test_delete_product(self, client: TestClient):
        """Test deleting twice reports the second call as a no-op."""
        first = client.delete("/api/v1/products/1").json()
        assert first["deleted"] is True
        assert first["view"]["total"] == 5

        second = client.delete("/api/v1/products/1").json()
        assert second["deleted"] is False
        assert second["view"]["total"] == 5

    def test_delete_clears_edit_target(self, client: TestClient):
        """Test deleting the product being edited ends the edit session."""
        client.post("/api/v1/catalog/edit/4")
        client.delete("/api/v1/products/4")

        state = client.get("/api/v1/catalog/edit").json()
        assert state["mode"] == "create"
