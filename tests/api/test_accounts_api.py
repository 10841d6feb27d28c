"""
API tests for account and category endpoints.

Tests cover:
- Create, list, get, update and delete accounts
- Error responses (400, 404, 422)
- Category CRUD and nesting errors
"""

from fastapi.testclient import TestClient


# =============================================================================
# ACCOUNT TESTS
# =============================================================================


class TestAccountsAPI:
    """Tests for /accounts endpoints."""

    def test_create_account_success(self, client: TestClient):
        """
        GIVEN no accounts exist
        WHEN I POST /accounts with valid data
        THEN response is 201 with the account and its current balance
        """
        response = client.post("/accounts", json={
            "name": "Checking",
            "type": "bank",
            "currency": "usd",
            "initial_balance": "5000",
        })

        assert response.status_code == 201
        data = response.json()
        assert data["id"]
        assert data["name"] == "Checking"
        assert data["currency"] == "USD"
        assert float(data["current_balance"]) == 5000

    def test_create_account_blank_name_returns_400(self, client: TestClient):
        response = client.post("/accounts", json={"name": "  "})

        assert response.status_code == 400
        assert response.json()["error"] == "VALIDATION_ERROR"

    def test_create_account_bad_type_returns_422(self, client: TestClient):
        response = client.post("/accounts", json={"name": "X", "type": "spaceship"})

        assert response.status_code == 422

    def test_list_accounts_with_balances(self, seeded_client: TestClient):
        response = seeded_client.get("/accounts")

        assert response.status_code == 200
        data = response.json()
        assert data["count"] == 2
        balances = {a["id"]: float(a["current_balance"]) for a in data["accounts"]}
        assert balances == {"acc-checking": 3020, "acc-wallet": 250}
        assert float(data["total_balance"]) == 3270

    def test_get_unknown_account_returns_404(self, client: TestClient):
        response = client.get("/accounts/missing")

        assert response.status_code == 404
        assert response.json() == {"error": "NOT_FOUND", "message": "Account not found: missing"}

    def test_update_account(self, seeded_client: TestClient):
        response = seeded_client.put("/accounts/acc-wallet", json={
            "name": "Pocket",
            "type": "cash",
            "initial_balance": "150",
        })

        assert response.status_code == 200
        assert response.json()["name"] == "Pocket"
        assert float(response.json()["current_balance"]) == 300

    def test_delete_account(self, seeded_client: TestClient):
        response = seeded_client.delete("/accounts/acc-wallet")

        assert response.status_code == 204
        assert seeded_client.get("/accounts/acc-wallet").status_code == 404

        # Transactions of the deleted account remain, labelled as unknown
        txn = seeded_client.get("/transactions/t3").json()
        assert txn["account_name"] == "Unknown Account"

    def test_delete_unknown_account_returns_404(self, client: TestClient):
        assert client.delete("/accounts/missing").status_code == 404


# =============================================================================
# CATEGORY TESTS
# =============================================================================


class TestCategoriesAPI:
    """Tests for /categories endpoints."""

    def test_create_and_filter_by_type(self, client: TestClient):
        client.post("/categories", json={"name": "Salary", "type": "income"})
        client.post("/categories", json={"name": "Food", "type": "expense", "color": "#F59E0B"})

        response = client.get("/categories", params={"type": "expense"})

        assert response.status_code == 200
        data = response.json()
        assert data["count"] == 1
        assert data["categories"][0]["name"] == "Food"

    def test_nested_subcategory_returns_400(self, seeded_client: TestClient):
        response = seeded_client.post("/categories", json={
            "name": "Organic",
            "type": "expense",
            "parent_id": "cat-groceries",
        })

        assert response.status_code == 400

    def test_update_and_delete_category(self, seeded_client: TestClient):
        response = seeded_client.put("/categories/cat-rent", json={
            "name": "Housing",
            "type": "expense",
            "color": "#EF4444",
        })
        assert response.status_code == 200
        assert response.json()["name"] == "Housing"

        assert seeded_client.delete("/categories/cat-rent").status_code == 204
        assert seeded_client.get("/categories/cat-rent").status_code == 404
