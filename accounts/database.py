import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (AsyncSession, async_sessionmaker,
                                    create_async_engine)
from sqlmodel import SQLModel

from accounts.core.config import settings
from accounts import models  # noqa: F401  (메타데이터에 테이블 등록)

logger = logging.getLogger(__name__)

engine = create_async_engine(
    settings.DATABASE_URL,
    echo=settings.DB_ECHO,
)

# 관계는 비동기 환경에서 지연 로딩하지 않으므로 commit 후에도 객체를 그대로 사용
async_session = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False
)


@asynccontextmanager
async def get_async_session_context():
    """비동기 DB 세션 컨텍스트 매니저"""
    async with async_session() as session:
        yield session


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """비동기 DB 세션 생성 - FastAPI Dependency Injection용"""
    session = async_session()
    try:
        yield session
    finally:
        try:
            await session.close()
        except Exception as e:
            # 이미 닫혔거나 다른 작업 중인 경우
            logger.debug(f"Session close warning (safe to ignore): {e}")


async def init_db(bind=None):
    """SQLModel 메타데이터로 테이블 생성 (bind 생략 시 기본 engine)"""
    async with (bind or engine).begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    logger.info("데이터베이스 테이블 초기화 완료")
