"""
테스트 공용 픽스처
- 테스트마다 새 in-memory SQLite (aiosqlite) 데이터베이스를 사용
"""
import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from accounts.database import init_db
from accounts.services.user import UserService


@pytest.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await init_db(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
async def session_factory(engine):
    return async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def service(db):
    return UserService(db, legacy_compat=False)


@pytest.fixture
def legacy_service(db):
    return UserService(db, legacy_compat=True)


@pytest.fixture
async def alice(service):
    return await service.create_user({
        "email": "alice@example.com",
        "password": "alice-password",
        "first_name": "Alice",
        "last_name": "Liddell",
    })


@pytest.fixture
async def bob(service):
    return await service.create_user({
        "email": "bob@example.com",
        "password": "bob-password",
        "first_name": "Bob",
        "last_name": "Builder",
    })
