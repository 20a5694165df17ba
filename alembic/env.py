import sys
import os
from logging.config import fileConfig

from alembic import context
from sqlalchemy import engine_from_config, pool

# --- project root on sys.path so that bot and db are importable ---
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

# --- alembic config ---
config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

from bot.db import Base, SYNC_DATABASE_URL

target_metadata = Base.metadata

# Alembic always runs synchronously, so async drivers (asyncpg, aiosqlite)
# are swapped for their sync counterparts.
config.set_main_option("sqlalchemy.url", SYNC_DATABASE_URL.replace("%", "%%"))


# -----------------------------------------------------------------------
# OFFLINE (SQL generation without a database connection)
# -----------------------------------------------------------------------
def run_migrations_offline() -> None:
    context.configure(
        url=SYNC_DATABASE_URL,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


# -----------------------------------------------------------------------
# ONLINE
# -----------------------------------------------------------------------
def run_migrations_online() -> None:
    configuration = config.get_section(config.config_ini_section, {})
    connectable = engine_from_config(
        configuration,
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    with connectable.connect() as connection:
        context.configure(
            connection=connection, target_metadata=target_metadata
        )

        with context.begin_transaction():
            context.run_migrations()


# Alembic entrypoint
if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
