import asyncio
from logging.config import fileConfig

from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import async_engine_from_config

from alembic import context

from foundation_api.core.config import settings
from foundation_api.core.database import Base

# Import all models here so they are registered with Base.metadata
from foundation_api.modules.collaborations import models as _collaborations  # noqa: F401
from foundation_api.modules.contact import models as _contact  # noqa: F401
from foundation_api.modules.contact_us import models as _contact_us  # noqa: F401
from foundation_api.modules.donations import models as _donations  # noqa: F401
from foundation_api.modules.events import models as _events  # noqa: F401
from foundation_api.modules.interns import models as _interns  # noqa: F401
from foundation_api.modules.media import models as _media  # noqa: F401
from foundation_api.modules.news_submissions import models as _news  # noqa: F401
from foundation_api.modules.newsletter import models as _newsletter  # noqa: F401
from foundation_api.modules.users import models as _users  # noqa: F401
from foundation_api.modules.volunteers import models as _volunteers  # noqa: F401

config = context.config

# Override sqlalchemy.url with the value from settings
config.set_main_option("sqlalchemy.url", settings.async_database_url)

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def run_migrations_offline() -> None:
    """Run migrations in 'offline' mode, emitting SQL to the script output."""
    url = config.get_main_option("sqlalchemy.url")
    context.configure(
        url=url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection: Connection) -> None:
    context.configure(connection=connection, target_metadata=target_metadata)

    with context.begin_transaction():
        context.run_migrations()


async def run_migrations_online() -> None:
    """Run migrations in 'online' mode against the asyncpg engine."""
    connectable = async_engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    async with connectable.connect() as connection:
        await connection.run_sync(do_run_migrations)

    await connectable.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_migrations_online())
