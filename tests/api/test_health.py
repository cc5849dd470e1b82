"""
Tests for the health check endpoint.
"""


def test_health_check_returns_200(client):
    response = client.get("/health")
    assert response.status_code == 200


def test_health_check_returns_service_name(client):
    """
    Verify the response includes the correct service name.

    Monitoring systems parse this field, so it must not
    change by accident.
    """
    response = client.get("/health")
    assert response.json()["service"] == "bank-ledger"


def test_health_check_reports_ledger_state(client, ledger):
    ledger.open_account("savings", 100)

    data = client.get("/health").json()
    assert data["accounts"] == 1
    assert data["can_undo"] is False
