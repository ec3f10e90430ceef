"""HTTP tests for login and the current user."""

from fastapi.testclient import TestClient

from enrollment_approvals.core.security import hash_password
from enrollment_approvals.core.tokens import create_access_token
from enrollment_approvals.models.user import ROLE_PARTICIPANT, User

from tests.factories import create_offer, create_request, create_user


class TestLogin:
    def test_login_json(self, client: TestClient, db_session):
        create_user(db_session, email="Admin@Test.local", password="senha-123456")

        response = client.post("/api/v1/auth/login", json={"email": " admin@test.local ", "password": "senha-123456"})

        assert response.status_code == 200
        token = response.json()["access_token"]
        me = client.get("/api/v1/auth/me", headers={"Authorization": f"Bearer {token}"})
        assert me.status_code == 200
        assert me.json()["email"] == "admin@test.local"
        assert me.json()["role"] == "Administrador"

    def test_login_form(self, client: TestClient, db_session):
        create_user(db_session, email="form@test.local", password="senha-123456")

        response = client.post(
            "/api/v1/auth/token",
            data={"username": "form@test.local", "password": "senha-123456"},
        )

        assert response.status_code == 200
        assert response.json()["token_type"] == "bearer"

    def test_wrong_password(self, client: TestClient, db_session):
        create_user(db_session, email="x@test.local", password="senha-123456")

        response = client.post("/api/v1/auth/login", json={"email": "x@test.local", "password": "outra"})

        assert response.status_code == 401

    def test_inactive_user(self, client: TestClient, db_session):
        create_user(db_session, email="off@test.local", password="senha-123456", status="disabled")

        response = client.post("/api/v1/auth/login", json={"email": "off@test.local", "password": "senha-123456"})

        assert response.status_code == 401

    def test_token_for_deleted_user(self, client: TestClient):
        from enrollment_approvals.core.tokens import create_access_token

        token = create_access_token(sub="ghost@test.local", role="Administrador")
        response = client.get("/api/v1/auth/me", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401


def test_healthz(client: TestClient):
    response = client.get("/healthz")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_metrics_exposes_decision_counter(client: TestClient, db_session, admin_headers):
    req = create_request(db_session, create_offer(db_session, capacity=1))
    client.post(f"/api/v1/requests/{req.id}/approve", headers=admin_headers)

    response = client.get("/metrics")

    assert response.status_code == 200
    assert 'enrollment_decisions_total{operation="approve",status="success"}' in response.text


def test_new_users_default_to_participant_role(client: TestClient, db_session):
    user = User(name="Nova", email="nova@test.local", hashed_password=hash_password("senha-123456"))
    db_session.add(user)
    db_session.commit()

    assert user.role == ROLE_PARTICIPANT
    token = create_access_token(sub=user.email, role=user.role)
    response = client.get("/api/v1/requests/", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 403
