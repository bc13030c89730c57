from logging.config import fileConfig
from alembic import context
from sqlalchemy import pool

from app.db import Base, create_db_engine
from app.settings import get_settings
from app import models  # noqa: F401  # ensures all tables are registered

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

def get_url():
    return get_settings().DATABASE_URL

target_metadata = Base.metadata

def run_migrations_offline():
    context.configure(url=get_url(), target_metadata=target_metadata, literal_binds=True, dialect_opts={"paramstyle": "named"})
    with context.begin_transaction():
        context.run_migrations()

def run_migrations_online():
    connectable = create_db_engine(get_url())
    with connectable.connect() as connection:
        context.configure(connection=connection, target_metadata=target_metadata)
        with context.begin_transaction():
            context.run_migrations()
    connectable.dispose()

if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
