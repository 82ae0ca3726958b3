# tests/integration/conftest.py
import os

import pytest
import pytest_asyncio
from dotenv import load_dotenv
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import NullPool

from users_app.db import apply_asyncpg_scheme, create_session_factory
from users_app.infra.unit_of_work import SqlAlchemyUnitOfWork
from users_app.models import Base
from users_app.services.users import UserService

# Load .env.test if available
load_dotenv(".env.test", override=False)
DB_URL = os.getenv("TEST_DATABASE_URL")


@pytest_asyncio.fixture
async def engine():
    # NullPool avoids sharing connections across event loops
    eng = create_async_engine(apply_asyncpg_scheme(DB_URL), poolclass=NullPool)
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    try:
        yield eng
    finally:
        await eng.dispose()


@pytest.fixture
def session_factory(engine):
    return create_session_factory(engine)


@pytest.fixture
def pg_user_service(session_factory) -> UserService:
    return UserService(lambda: SqlAlchemyUnitOfWork(session_factory))
