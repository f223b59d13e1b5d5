"""
가상 콘테스트 매니저 구현체 모듈
"""

from virtual_contest.domain.contest.adapters.base import VirtualContestManager
from virtual_contest.domain.contest.adapters.memory import MemoryVirtualContestManager
from virtual_contest.domain.contest.adapters.sql import SqlVirtualContestManager

__all__ = [
    "VirtualContestManager",
    "MemoryVirtualContestManager",
    "SqlVirtualContestManager",
]
