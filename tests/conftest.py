"""
Pytest 설정 및 Fixtures
"""
import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import async_sessionmaker

from virtual_contest.domain.contest.adapters.memory import MemoryVirtualContestManager
from virtual_contest.domain.contest.adapters.sql import SqlVirtualContestManager
from virtual_contest.infrastructure.persistence.models import InternalUser
from virtual_contest.infrastructure.persistence.session import Base, build_engine


# 테스트용 환경 변수 설정
@pytest.fixture(autouse=True)
def setup_env(monkeypatch):
    """테스트 환경 변수 설정"""
    monkeypatch.setenv("DEBUG", "true")
    monkeypatch.setenv("POSTGRES_HOST", "localhost")
    monkeypatch.setenv("USE_MEMORY_STORE", "false")


@pytest_asyncio.fixture
async def session_factory(tmp_path):
    """파일 기반 SQLite DB (테스트마다 새로 생성)"""
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'virtual_contest.db'}")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(engine, expire_on_commit=False)

    await engine.dispose()


@pytest_asyncio.fixture
async def sql_manager(session_factory):
    return SqlVirtualContestManager(session_factory)


@pytest.fixture
def memory_manager():
    return MemoryVirtualContestManager()


@pytest_asyncio.fixture(params=["memory", "sql"])
async def manager(request, session_factory):
    """두 구현체에 동일한 계약 테스트를 실행"""
    if request.param == "memory":
        return MemoryVirtualContestManager()
    return SqlVirtualContestManager(session_factory)


@pytest.fixture
def add_user(manager, session_factory):
    """internal_users 테이블에 사용자 등록 (외부 시스템 역할)"""
    async def _add_user(internal_user_id, atcoder_user_id=None):
        if isinstance(manager, MemoryVirtualContestManager):
            manager.add_user(internal_user_id, atcoder_user_id)
            return
        async with session_factory() as db:
            db.add(InternalUser(internal_user_id=internal_user_id, atcoder_user_id=atcoder_user_id))
            await db.commit()

    return _add_user


@pytest.fixture
def contest_kwargs():
    """create_contest 기본 인자"""
    return {
        "title": "ABC 복습",
        "memo": "memo",
        "owner_user_id": "owner",
        "start_epoch_second": 1000,
        "duration_second": 500,
        "mode": None,
        "is_public": True,
        "penalty_second": 300,
    }
