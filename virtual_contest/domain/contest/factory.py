"""
가상 콘테스트 매니저 팩토리
환경에 따라 적절한 구현체 생성
"""

from virtual_contest.core.config import settings
from virtual_contest.domain.contest.adapters.base import VirtualContestManager
from virtual_contest.domain.contest.adapters.memory import MemoryVirtualContestManager
from virtual_contest.domain.contest.adapters.sql import SqlVirtualContestManager


def create_virtual_contest_manager() -> VirtualContestManager:
    """
    환경에 따라 적절한 매니저 생성

    설정:
    - USE_MEMORY_STORE=True: 메모리 매니저 사용 (개발/테스트)
    - USE_MEMORY_STORE=False: SQL 매니저 사용 (프로덕션)

    Returns:
        VirtualContestManager 인스턴스
    """
    if settings.USE_MEMORY_STORE:
        return MemoryVirtualContestManager()
    else:
        return SqlVirtualContestManager()
