"""
매니저 팩토리 및 설정 테스트
"""
import logging

import pytest

from virtual_contest.core.config import Settings, settings
from virtual_contest.core.logging import setup_logging
from virtual_contest.domain.contest.adapters.memory import MemoryVirtualContestManager
from virtual_contest.domain.contest.adapters.sql import SqlVirtualContestManager
from virtual_contest.domain.contest.factory import create_virtual_contest_manager
from virtual_contest.infrastructure.persistence.session import AsyncSessionLocal


def test_factory_memory_store():
    """USE_MEMORY_STORE=True면 메모리 매니저"""
    original_value = settings.USE_MEMORY_STORE
    settings.USE_MEMORY_STORE = True

    try:
        manager = create_virtual_contest_manager()
        assert isinstance(manager, MemoryVirtualContestManager)
    finally:
        settings.USE_MEMORY_STORE = original_value


@pytest.mark.asyncio
async def test_factory_memory_store_membership_flow(contest_kwargs):
    """팩토리가 만든 메모리 매니저로 참가 → 참가자 조회 → 탈퇴"""
    original_value = settings.USE_MEMORY_STORE
    settings.USE_MEMORY_STORE = True

    try:
        manager = create_virtual_contest_manager()
        contest_id = await manager.create_contest(**contest_kwargs)

        await manager.join_contest(contest_id, "owner")
        participated = await manager.get_participated_contests("owner")
        assert [contest.id for contest in participated] == [contest_id]
        # 사용자 매핑이 없으므로 공개 핸들도 없음
        assert await manager.get_single_contest_participants(contest_id) == []

        await manager.leave_contest(contest_id, "owner")
        assert await manager.get_participated_contests("owner") == []
    finally:
        settings.USE_MEMORY_STORE = original_value


def test_factory_sql_store():
    """USE_MEMORY_STORE=False면 SQL 매니저 (기본 세션 팩토리 사용)"""
    original_value = settings.USE_MEMORY_STORE
    settings.USE_MEMORY_STORE = False

    try:
        manager = create_virtual_contest_manager()
        assert isinstance(manager, SqlVirtualContestManager)
        assert manager.session_factory is AsyncSessionLocal
    finally:
        settings.USE_MEMORY_STORE = original_value


def test_settings_db_url(monkeypatch):
    """DATABASE_URL이 없으면 POSTGRES_* 조합"""
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.setenv("POSTGRES_USER", "contest")
    monkeypatch.setenv("POSTGRES_PASSWORD", "secret")
    monkeypatch.setenv("POSTGRES_HOST", "db")
    monkeypatch.setenv("POSTGRES_DB", "problems")

    configured = Settings(_env_file=None)
    assert configured.DB_URL == "postgresql+asyncpg://contest:secret@db:5432/problems"

    monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite:///./local.db")
    assert Settings(_env_file=None).DB_URL == "sqlite+aiosqlite:///./local.db"


def test_setup_logging_quiets_sql_logger(monkeypatch):
    monkeypatch.setattr(settings, "DB_ECHO", False)
    setup_logging()
    assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING
