# enrollment_approvals/db/bootstrap.py
import os
from alembic import command
from alembic.config import Config

from enrollment_approvals.db.session import SessionLocal, SQLALCHEMY_DATABASE_URL
from enrollment_approvals.db.init_db import init_db

BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))

def alembic_config(database_url: str = SQLALCHEMY_DATABASE_URL) -> Config:
    # Aponta explicitamente para alembic.ini e migrations/
    cfg = Config(os.path.join(BASE_DIR, "alembic.ini"))
    cfg.set_main_option("script_location", os.path.join(BASE_DIR, "migrations"))
    # configparser interpola "%"
    cfg.set_main_option("sqlalchemy.url", database_url.replace("%", "%%"))
    return cfg

def run_migrations_and_seed() -> None:
    command.upgrade(alembic_config(), "head")

    with SessionLocal() as db:
        init_db(db)
