"""Pytest configuration and shared fixtures."""

import os
import tempfile

# precisa estar no ambiente antes de importar o pacote (Settings lê na importação)
os.environ.setdefault("DATA_DIR", tempfile.mkdtemp(prefix="enrollment-approvals-"))
os.environ["RUN_MIGRATIONS_ON_STARTUP"] = "false"
os.environ["ADMIN_ROLE"] = "Administrador"
os.environ["DEFAULT_REJECTION_REASON"] = "Sin especificar"
os.environ["STORAGE_PUBLIC_URL"] = "/storage"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402

from enrollment_approvals.core.locks import OfferLockRegistry  # noqa: E402
from enrollment_approvals.core.tokens import create_access_token  # noqa: E402
from enrollment_approvals.db.base import Base  # noqa: E402
from enrollment_approvals.db.session import get_db, make_engine  # noqa: E402
from enrollment_approvals.models.user import ROLE_PARTICIPANT  # noqa: E402
from enrollment_approvals.services.approval import EnrollmentApprovalService  # noqa: E402

from tests.factories import create_user  # noqa: E402


@pytest.fixture
def engine(tmp_path):
    """SQLite em arquivo: várias conexões/threads enxergam o mesmo banco."""
    eng = make_engine(f"sqlite:///{tmp_path / 'test.db'}")
    Base.metadata.create_all(eng)
    yield eng
    eng.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def locks():
    """Registro de locks isolado por teste."""
    return OfferLockRegistry()


@pytest.fixture
def service(db_session, locks):
    return EnrollmentApprovalService(db_session, locks=locks, lock_timeout=30)


@pytest.fixture
def client(session_factory):
    from enrollment_approvals.main import api

    def _get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    api.dependency_overrides[get_db] = _get_db
    try:
        yield TestClient(api)
    finally:
        api.dependency_overrides.clear()


@pytest.fixture
def admin_user(db_session):
    return create_user(db_session, email="admin@test.local", role="Administrador")


@pytest.fixture
def admin_headers(admin_user):
    token = create_access_token(sub=admin_user.email, role=admin_user.role)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def participant_headers(db_session):
    user = create_user(db_session, email="aluno@test.local", role=ROLE_PARTICIPANT)
    token = create_access_token(sub=user.email, role=user.role)
    return {"Authorization": f"Bearer {token}"}
