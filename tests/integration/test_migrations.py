"""Alembic migrations and the admin seed against a throwaway SQLite file."""

from alembic import command
from sqlalchemy import inspect, select
from sqlalchemy.orm import sessionmaker

from enrollment_approvals.core.config import settings
from enrollment_approvals.core.security import verify_password
from enrollment_approvals.db.bootstrap import alembic_config
from enrollment_approvals.db.init_db import init_db
from enrollment_approvals.db.session import make_engine
from enrollment_approvals.models import User

EXPECTED_TABLES = {
    "users",
    "disciplines",
    "offers",
    "participants",
    "enrollment_requests",
    "audit_logs",
}


def test_upgrade_and_downgrade(tmp_path):
    url = f"sqlite:///{tmp_path / 'migrated.db'}"
    cfg = alembic_config(url)

    command.upgrade(cfg, "head")
    engine = make_engine(url)
    try:
        tables = set(inspect(engine).get_table_names())
        assert EXPECTED_TABLES <= tables
        columns = {c["name"] for c in inspect(engine).get_columns("enrollment_requests")}
        assert {"state", "rejection_reason", "created_at", "decided_by_id"} <= columns
    finally:
        engine.dispose()

    command.downgrade(cfg, "base")
    engine = make_engine(url)
    try:
        assert not EXPECTED_TABLES & set(inspect(engine).get_table_names())
    finally:
        engine.dispose()


def test_init_db_seeds_admin_once(engine):
    Session = sessionmaker(bind=engine)

    with Session() as db:
        init_db(db)
        init_db(db)
        admins = db.execute(select(User).where(User.email == settings.SEED_ADMIN_EMAIL)).scalars().all()

    assert len(admins) == 1
    assert admins[0].role == "Administrador"
    assert verify_password(settings.SEED_ADMIN_PASSWORD, admins[0].hashed_password)
