# migrations/env.py
from alembic import context
from sqlalchemy import engine_from_config, pool

# (1) carregar .env
from dotenv import load_dotenv
load_dotenv()

from enrollment_approvals.db.base import Base  # noqa: E402
from enrollment_approvals.db.session import normalize_url  # noqa: E402
from enrollment_approvals.core.config import settings  # noqa: E402

config = context.config

# (2) URL: a do bootstrap (se veio setada) ou a do ambiente
db_url = config.get_main_option("sqlalchemy.url")
if not db_url or db_url.strip() == "":
    db_url = settings.DATABASE_URL
config.set_main_option("sqlalchemy.url", normalize_url(db_url).replace("%", "%%"))

target_metadata = Base.metadata

def run_migrations_offline():
    url = config.get_main_option("sqlalchemy.url")
    context.configure(url=url, target_metadata=target_metadata, literal_binds=True,
                      render_as_batch=url.startswith("sqlite"))
    with context.begin_transaction():
        context.run_migrations()

def run_migrations_online():
    connectable = engine_from_config(config.get_section(config.config_ini_section), prefix="sqlalchemy.", poolclass=pool.NullPool)
    with connectable.connect() as connection:
        context.configure(connection=connection, target_metadata=target_metadata,
                          render_as_batch=connection.dialect.name == "sqlite")
        with context.begin_transaction():
            context.run_migrations()

if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
