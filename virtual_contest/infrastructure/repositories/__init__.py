# Repository 모듈
# 데이터 접근 추상화 계층

from virtual_contest.infrastructure.repositories.virtual_contest_repository import VirtualContestRepository

__all__ = [
    "VirtualContestRepository",
]
