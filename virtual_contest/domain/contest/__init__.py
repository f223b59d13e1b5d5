"""
가상 콘테스트 모듈
콘테스트 등록, 문제 항목 관리, 참가자 관리
"""
from virtual_contest.domain.contest.factory import create_virtual_contest_manager
from virtual_contest.domain.contest.adapters.base import VirtualContestManager

__all__ = [
    "create_virtual_contest_manager",
    "VirtualContestManager",
]
