"""
Async database engine and session management.

Supports PostgreSQL (asyncpg), MySQL (asyncmy) and SQLite (aiosqlite),
selected by ``DATABASE_TYPE``. Request handlers receive a session through the
``CurrentSession`` / ``CurrentSessionTransaction`` dependencies; the latter
wraps the whole request in one transaction that commits on success and rolls
back on any exception.
"""

import sys

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends
from sqlalchemy import URL, event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from slidedeck.common.enums import DataBaseType
from slidedeck.common.log import log
from slidedeck.common.model import MappedBase
from slidedeck.core import path_conf
from slidedeck.core.conf import settings


def create_database_url(*, unittest: bool = False) -> URL | str:
    """
    Build the database connection URL

    :param unittest: use an in-memory SQLite database
    :return:
    """
    if unittest:
        return 'sqlite+aiosqlite:///:memory:'

    if DataBaseType.sqlite == settings.DATABASE_TYPE:
        path_conf.SQLITE_DIR.mkdir(parents=True, exist_ok=True)
        return f'sqlite+aiosqlite:///{path_conf.SQLITE_DIR / settings.DATABASE_SQLITE_FILENAME}'

    url = URL.create(
        drivername='mysql+asyncmy' if DataBaseType.mysql == settings.DATABASE_TYPE else 'postgresql+asyncpg',
        username=settings.DATABASE_USER,
        password=settings.DATABASE_PASSWORD,
        host=settings.DATABASE_HOST,
        port=settings.DATABASE_PORT,
        database=settings.DATABASE_SCHEMA,
    )
    if DataBaseType.mysql == settings.DATABASE_TYPE:
        url = url.update_query_dict({'charset': settings.DATABASE_CHARSET})
    return url


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:  # noqa: ANN001
    cursor = dbapi_connection.cursor()
    cursor.execute('PRAGMA foreign_keys=ON')
    cursor.close()


def create_async_engine_and_session(
    url: str | URL,
) -> tuple[AsyncEngine, async_sessionmaker[AsyncSession]]:
    """
    Create the async engine and session factory

    :param url: database connection URL
    :return:
    """
    is_sqlite = str(url).startswith('sqlite')
    engine_kwargs = {
        'echo': settings.DATABASE_ECHO,
        'echo_pool': settings.DATABASE_POOL_ECHO,
        'future': True,
    }
    if not is_sqlite:
        engine_kwargs.update(
            pool_size=10,
            max_overflow=20,
            pool_timeout=30,
            pool_recycle=3600,
            pool_pre_ping=True,
            pool_use_lifo=False,
        )
    try:
        engine = create_async_engine(url, **engine_kwargs)
    except Exception as e:
        log.error('❌ Database connection failed {}', e)
        sys.exit()
    else:
        if is_sqlite:
            event.listen(engine.sync_engine, 'connect', _enable_sqlite_foreign_keys)
        db_session = async_sessionmaker(
            bind=engine,
            class_=AsyncSession,
            autoflush=False,
            expire_on_commit=False,
        )
        return engine, db_session


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Get a database session"""
    async with async_db_session() as session:
        yield session


async def get_db_transaction() -> AsyncGenerator[AsyncSession, None]:
    """Get a database session wrapped in a transaction"""
    async with async_db_session.begin() as session:
        yield session


async def create_tables() -> None:
    """Create database tables"""
    # Models must be imported so they register with the metadata
    import slidedeck.app.deck.model  # noqa: F401

    async with async_engine.begin() as coon:
        await coon.run_sync(MappedBase.metadata.create_all)


async def drop_tables() -> None:
    """Drop database tables"""
    import slidedeck.app.deck.model  # noqa: F401

    async with async_engine.begin() as conn:
        await conn.run_sync(MappedBase.metadata.drop_all)


SQLALCHEMY_DATABASE_URL = create_database_url()

async_engine, async_db_session = create_async_engine_and_session(SQLALCHEMY_DATABASE_URL)

# Session annotation
CurrentSession = Annotated[AsyncSession, Depends(get_db)]
# Transactional session annotation
CurrentSessionTransaction = Annotated[AsyncSession, Depends(get_db_transaction)]
