"""
API tests for report and dashboard endpoints.

Tests cover:
- Summary, income/expense and balance evolution series
- Category distribution and time ranges
- CSV export and PNG charts
- Dashboard and health endpoints
"""

import csv
import io

from fastapi.testclient import TestClient

from ledgerboard.charts import CHART_NAMES

MAY_JUNE = {"start": "2024-05-01T00:00:00", "end": "2024-06-30T23:59:59"}


class TestReportsAPI:
    """Tests for /reports endpoints."""

    def test_summary(self, seeded_client: TestClient):
        data = seeded_client.get("/reports/summary", params={"period": "this_month"}).json()

        assert float(data["total_income"]) == 3000
        assert float(data["total_expenses"]) == 1250
        assert float(data["net_cash_flow"]) == 1750

    def test_income_expense(self, seeded_client: TestClient):
        data = seeded_client.get("/reports/income-expense", params=MAY_JUNE).json()

        assert [m["key"] for m in data["months"]] == ["2024-05", "2024-06"]
        assert float(data["months"][0]["expense"]) == 80
        assert data["months"][1]["label"] == "Jun 2024"

    def test_balance_evolution(self, seeded_client: TestClient):
        data = seeded_client.get(
            "/reports/balance-evolution",
            params={**MAY_JUNE, "account_ids": "acc-checking"},
        ).json()

        assert len(data["series"]) == 1
        points = data["series"][0]["points"]
        assert float(points[0]["balance"]) == 1000
        assert float(points[-1]["balance"]) == 3020

    def test_category_distribution(self, seeded_client: TestClient):
        data = seeded_client.get(
            "/reports/category-distribution", params={"period": "this_month"}
        ).json()

        assert [i["name"] for i in data["items"]] == ["Rent", "Food"]
        assert float(data["total"]) == 1250

    def test_income_distribution(self, seeded_client: TestClient):
        data = seeded_client.get(
            "/reports/category-distribution", params={"category_type": "income"}
        ).json()

        assert [i["name"] for i in data["items"]] == ["Salary"]
        assert float(data["items"][0]["percentage"]) == 100

    def test_time_ranges(self, seeded_client: TestClient):
        data = seeded_client.get("/reports/time-ranges").json()

        assert [r["key"] for r in data] == ["this_month", "last_month", "this_week", "this_year", "custom"]

    def test_export_csv(self, seeded_client: TestClient):
        response = seeded_client.get("/reports/export", params={"types": "income"})

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/csv")
        rows = list(csv.DictReader(io.StringIO(response.text)))
        assert {r["description"] for r in rows} == {"June salary", "Bonus"}

    def test_chart_png(self, seeded_client: TestClient):
        for name in CHART_NAMES:
            response = seeded_client.get(f"/reports/charts/{name}.png", params=MAY_JUNE)

            assert response.status_code == 200
            assert response.headers["content-type"] == "image/png"
            assert response.content.startswith(b"\x89PNG")

    def test_unknown_chart_returns_404(self, seeded_client: TestClient):
        assert seeded_client.get("/reports/charts/radar.png").status_code == 404

    def test_half_open_range_returns_400(self, seeded_client: TestClient):
        response = seeded_client.get("/reports/summary", params={"start": "2024-05-01T00:00:00"})

        assert response.status_code == 400


class TestDashboardAPI:
    """Tests for /dashboard and service endpoints."""

    def test_dashboard(self, seeded_client: TestClient):
        data = seeded_client.get("/dashboard").json()

        assert float(data["total_balance"]) == 3270
        assert float(data["monthly_income"]) == 3000
        assert float(data["monthly_expenses"]) == 1250
        assert len(data["recent_transactions"]) == 5
        assert data["recent_transactions"][0]["id"] == "t4"
        assert data["month"]["key"] == "this_month"

    def test_empty_dashboard(self, client: TestClient):
        data = client.get("/dashboard").json()

        assert float(data["total_balance"]) == 0
        assert data["accounts"] == []
        assert data["expense_distribution"] == []

    def test_health(self, client: TestClient):
        assert client.get("/health").json() == {"status": "healthy"}
