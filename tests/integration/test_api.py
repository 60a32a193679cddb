"""Integration tests for API endpoints"""

import pytest
from fastapi.testclient import TestClient


def test_health_endpoint(client: TestClient):
    """Test health check endpoint"""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_metrics_endpoint(client: TestClient):
    """Test Prometheus metrics endpoint"""
    client.post(
        "/api/calculate",
        json={"creditType": "Test Range", "loanAmount": 1000, "startDate": "2024-01-01", "endDate": "2024-01-05"},
    )

    response = client.get("/metrics")
    assert response.status_code == 200
    assert "mela_calculation_total" in response.text


def test_request_id_header(client: TestClient):
    response = client.get("/health")
    assert response.headers["X-Request-ID"]


def test_list_credits(client: TestClient):
    """Test GET /api/credits returns both product shapes in camelCase"""
    response = client.get("/api/credits")

    assert response.status_code == 200
    credits = response.json()
    assert [c["type"] for c in credits] == ["Test Range", "Test Capped", "Endekise", "Unlisted Tiered"]

    uncapped, capped, tiered = credits[0], credits[1], credits[2]
    assert uncapped["minLoan"] == 100
    assert uncapped["paymentPeriodDays"] == 30
    assert "dailyFeeMaxPercent" not in uncapped
    assert capped["dailyFeeMaxPercent"] == 3
    assert "minLoan" not in tiered
    assert tiered["amounts"][1] == {
        "amount": 2000,
        "facilitationFeePercent": 3,
        "dailyFeePercent": 0.4,
        "penaltyPercent": 1,
    }


def test_calculate_range_credit(client: TestClient):
    """Test POST /api/calculate within the allowed period"""
    response = client.post(
        "/api/calculate",
        json={"creditType": "Test Range", "loanAmount": 1000, "startDate": "2024-01-01", "endDate": "2024-01-05"},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["creditType"] == "Test Range"
    assert data["loanPeriodDays"] == 5
    assert data["facilitationFee"] == 50.0
    assert data["dailyFee"] == 50.0
    assert data["penaltyFee"] == 0.0
    assert data["totalRepayment"] == 1100.0
    assert data["schedule"][0] == {
        "date": "2024-01-01",
        "outstandingPrincipal": 1000.0,
        "dailyFee": 10.0,
        "penaltyFee": 0.0,
        "subtotal": 1010.0,
    }
    assert data["schedule"][-1]["date"] == "2024-01-05"


def test_calculate_capped_overdue(client: TestClient):
    response = client.post(
        "/api/calculate",
        json={"creditType": "Test Capped", "loanAmount": 1000, "startDate": "2024-01-01", "endDate": "2024-02-04"},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["dailyFee"] == 30.0
    assert data["penaltyFee"] == 100.0
    assert data["totalRepayment"] == 1180.0
    assert len(data["schedule"]) == 35


def test_calculate_accepts_amount_alias(client: TestClient):
    """The web front end posts `amount` instead of `loanAmount`"""
    response = client.post(
        "/api/calculate",
        json={"creditType": "Endekise", "amount": 2000, "startDate": "2024-01-01", "endDate": "2024-01-10"},
    )

    assert response.status_code == 200
    assert response.json()["facilitationFee"] == 60.0


@pytest.mark.parametrize(
    "payload,detail",
    [
        ({"creditType": "Nope", "loanAmount": 1000}, "Unsupported credit type"),
        ({"creditType": "Test Range", "loanAmount": 0}, "positive number"),
        ({"creditType": "Test Range", "loanAmount": 7_000_000}, "cannot exceed"),
        ({"creditType": "Test Range", "loanAmount": 50}, "outside the allowed range"),
        ({"creditType": "Endekise", "loanAmount": 100}, "available ranges"),
        ({"creditType": "Test Range", "loanAmount": 1000, "startDate": "2024-13-01"}, "Invalid date"),
        ({"creditType": "Test Range", "loanAmount": 1000, "startDate": "2024-02-01"}, "on or before"),
    ],
)
def test_calculate_rejections(client: TestClient, payload, detail):
    """Test calculation errors map to 400 with a readable message"""
    body = {"startDate": "2024-01-01", "endDate": "2024-01-05", **payload}

    response = client.post("/api/calculate", json=body)

    assert response.status_code == 400
    assert detail in response.json()["detail"]


def test_calculate_missing_field(client: TestClient):
    response = client.post("/api/calculate", json={"creditType": "Test Range", "loanAmount": 1000})
    assert response.status_code == 422


def test_calculate_on_last_calendar_day(client: TestClient):
    response = client.post(
        "/api/calculate",
        json={"creditType": "Endekise", "loanAmount": 1000, "startDate": "9999-12-31", "endDate": "9999-12-31"},
    )

    assert response.status_code == 200
    assert response.json()["penaltyFee"] == 0.0


def test_request_metrics_use_route_template(client: TestClient):
    """Unknown paths are folded into one label instead of one series each"""
    client.get("/api/credits")
    client.get("/api/no-such-path-4821")

    text = client.get("/metrics").text
    assert 'endpoint="/api/credits"' in text
    assert 'endpoint="unmatched"' in text
    assert "no-such-path-4821" not in text
