# tests/integration/test_api_campaigns.py
from fastapi.testclient import TestClient

CAMPAIGN = {
    "id": 2,
    "title": "Clean water",
    "goal_amount": "10000",
    "current_amount": "9500",
    "donations_count": 95,
    "status": "active",
    "start_date": "2025-06-01T00:00:00Z",
    "end_date": "2025-07-01T00:00:00Z",
}
NOW = "2025-06-16T00:00:00Z"


def test_campaign_progress_overview(client: TestClient) -> None:
    response = client.post(
        "/api/campaigns/progress",
        json={
            "campaign": CAMPAIGN,
            "donations": {"donor_count": 95, "recent_momentum": "400", "largest_donation": "1500"},
            "now": NOW,
        },
    )
    assert response.status_code == 200
    data = response.json()
    assert data["status"]["label"] == "Active"
    assert data["time_remaining"]["days_remaining"] == 15
    assert data["time_remaining"]["text"] == "15 days remaining"
    assert data["donation_progress"]["raised"]["formatted"] == "€9.500,00"
    assert data["donation_progress"]["momentum_indicator"] == "surging"
    assert data["donation_progress"]["largest_donation"]["formatted"] == "€1.500,00"
    assert data["campaign_progress"]["days_elapsed"] == 15
    assert data["campaign_progress"]["velocity"] == "633.33"
    assert data["milestones_reached"] == [25, 50, 75]
    assert data["health_status"] == "excellent"
    assert len(data["recommendations"]) == 1


def test_donations_default_to_record_totals(client: TestClient) -> None:
    response = client.post("/api/campaigns/progress", json={"campaign": CAMPAIGN, "now": NOW})
    assert response.status_code == 200
    donation = response.json()["donation_progress"]
    assert donation["donor_count"] == 95
    assert donation["average_donation"]["formatted"] == "€100,00"
    assert donation["momentum_indicator"] == "steady"


def test_campaign_without_dates_uses_server_clock(client: TestClient) -> None:
    response = client.post(
        "/api/campaigns/progress",
        json={"campaign": {"goal_amount": "500", "status": "draft"}},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["time_remaining"]["is_expired"] is False
    assert data["time_remaining"]["urgency_level"] == "normal"
    assert data["donation_progress"]["urgency_level"] == "inactive"
    assert data["target"]["requires_approval"] is True


def test_unknown_status_returns_422(client: TestClient) -> None:
    body = {"campaign": {**CAMPAIGN, "status": "archived"}, "now": NOW}
    response = client.post("/api/campaigns/progress", json=body)
    assert response.status_code == 422


def test_unsupported_currency_returns_422(client: TestClient) -> None:
    body = {"campaign": {**CAMPAIGN, "currency": "BRL"}, "now": NOW}
    response = client.post("/api/campaigns/progress", json=body)
    assert response.status_code == 422
    assert response.json()["detail"] == "Invalid currency code"


def test_zero_goal_returns_422(client: TestClient) -> None:
    body = {"campaign": {**CAMPAIGN, "goal_amount": "0"}, "now": NOW}
    response = client.post("/api/campaigns/progress", json=body)
    assert response.status_code == 422
