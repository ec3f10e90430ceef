"""HTTP tests for offers and their available slots."""

from fastapi.testclient import TestClient

from enrollment_approvals.models import RequestState

from tests.factories import create_discipline, create_offer, create_request


def test_list_offers_with_slots(client: TestClient, db_session, admin_headers):
    offer = create_offer(db_session, capacity=3, discipline=create_discipline(db_session, "Yoga"))
    create_request(db_session, offer, state=RequestState.approved)
    create_request(db_session, offer, state=RequestState.pending)
    create_request(db_session, offer, state=RequestState.rejected, rejection_reason="x")

    response = client.get("/api/v1/offers/", headers=admin_headers)

    assert response.status_code == 200
    [data] = response.json()
    assert data["discipline_name"] == "Yoga"
    assert data["capacity_total"] == 3
    assert data["approved_count"] == 1
    assert data["available_slots"] == 2


def test_get_unknown_offer(client: TestClient, admin_headers):
    assert client.get("/api/v1/offers/999999", headers=admin_headers).status_code == 404
