"""
데이터베이스 세션 관리
비동기 엔진, 세션 팩토리, 초기화/종료
"""
import logging

from sqlalchemy import event, text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from virtual_contest.core.config import settings

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """ORM 모델 기본 클래스"""
    pass


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite는 연결마다 FK 제약이 꺼진 상태로 시작함
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(url: str) -> AsyncEngine:
    """
    비동기 엔진 생성

    SQLite는 풀 크기 옵션을 받지 않으므로 PostgreSQL에서만 풀 설정을 적용하고,
    SQLite 연결에는 FK 제약을 켭니다.
    """
    kwargs = {"echo": settings.DB_ECHO, "pool_pre_ping": True}
    if not url.startswith("sqlite"):
        kwargs["pool_size"] = settings.DB_POOL_SIZE
        kwargs["max_overflow"] = settings.DB_MAX_OVERFLOW

    async_engine = create_async_engine(url, **kwargs)
    if url.startswith("sqlite"):
        event.listen(async_engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
    return async_engine


engine = build_engine(settings.DB_URL)

AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def init_db(create_tables: bool = False) -> None:
    """
    DB 초기화

    Args:
        create_tables: True면 ORM 모델 기준으로 테이블 생성 (개발 환경 전용)
    """
    # 모델 등록을 위해 import
    from virtual_contest.infrastructure.persistence import models  # noqa: F401

    async with engine.begin() as conn:
        await conn.execute(text("SELECT 1"))
        if create_tables:
            await conn.run_sync(Base.metadata.create_all)
            logger.info("[DB] 테이블 생성 완료")
    logger.info("[DB] 연결 확인 완료")


async def close_db() -> None:
    """DB 엔진 종료"""
    await engine.dispose()
    logger.info("[DB] 연결 종료")
