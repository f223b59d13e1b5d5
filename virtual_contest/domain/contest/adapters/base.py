"""
가상 콘테스트 매니저 인터페이스 정의
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from virtual_contest.schemas.virtual_contest import (
    RunningContestProblem,
    VirtualContestInfo,
    VirtualContestItem,
)


class VirtualContestManager(ABC):
    """
    가상 콘테스트 매니저 인터페이스

    [구성]
    - 콘테스트 등록/수정/조회
    - 문제 항목 전체 교체, 진행 중 콘테스트 문제 조회
    - 참가/탈퇴, 참가자 조회

    [동시성]
    - 프로세스 내 락을 사용하지 않음
    - 요청 간 일관성은 저장소의 트랜잭션에 위임
    """

    @abstractmethod
    async def create_contest(
        self,
        title: str,
        memo: str,
        owner_user_id: str,
        start_epoch_second: int,
        duration_second: int,
        mode: Optional[str],
        is_public: bool,
        penalty_second: int,
    ) -> str:
        """
        콘테스트 생성

        제목 중복은 허용합니다.

        Returns:
            새로 발급된 콘테스트 ID

        Raises:
            StorageError: 저장 실패
        """
        pass

    @abstractmethod
    async def update_contest(
        self,
        contest_id: str,
        title: str,
        memo: str,
        start_epoch_second: int,
        duration_second: int,
        mode: Optional[str],
        is_public: bool,
        penalty_second: int,
    ) -> None:
        """
        콘테스트 메타데이터 덮어쓰기

        소유자 확인은 API 계층의 책임이며, 존재하지 않는 ID는 조용히 무시합니다.
        """
        pass

    @abstractmethod
    async def get_single_contest_info(self, contest_id: str) -> VirtualContestInfo:
        """
        콘테스트 단건 조회

        Raises:
            NotFound: 해당 ID의 콘테스트가 없을 때
        """
        pass

    @abstractmethod
    async def get_own_contests(self, owner_user_id: str) -> List[VirtualContestInfo]:
        """사용자가 만든 콘테스트 목록 (순서 보장 없음)"""
        pass

    @abstractmethod
    async def get_participated_contests(self, user_id: str) -> List[VirtualContestInfo]:
        """사용자가 참가한 콘테스트 목록"""
        pass

    @abstractmethod
    async def get_recent_contest_info(self) -> List[VirtualContestInfo]:
        """공개 콘테스트를 종료 시각 내림차순으로 최대 RECENT_CONTEST_NUM개"""
        pass

    @abstractmethod
    async def get_single_contest_problems(self, contest_id: str) -> List[VirtualContestItem]:
        """
        콘테스트 문제 목록

        order 오름차순(NULL 먼저), 같으면 problem_id 오름차순
        """
        pass

    @abstractmethod
    async def update_items(
        self,
        contest_id: str,
        items: Sequence[VirtualContestItem],
        user_id: str,
    ) -> None:
        """
        콘테스트 문제 목록 전체 교체

        [순서]
        1. 개수 확인 (저장소 접근 전)
        2. 소유자 확인
        3. 기존 항목 삭제 + 새 항목 삽입 (하나의 트랜잭션)

        Raises:
            LimitExceeded: 항목이 MAX_PROBLEM_NUM_PER_CONTEST개 초과
            PermissionDenied: 소유자가 아니거나 콘테스트가 없을 때
            StorageError: 저장 실패 (기존 목록은 그대로 유지)
        """
        pass

    @abstractmethod
    async def get_running_contest_problems(self, time: int) -> List[RunningContestProblem]:
        """
        time 시점에 진행 중인 콘테스트의 문제 목록

        start <= time <= start + duration (양 끝 포함)
        """
        pass

    @abstractmethod
    async def join_contest(self, contest_id: str, user_id: str) -> None:
        """참가 (중복/존재 여부는 저장소 제약 조건에 따름)"""
        pass

    @abstractmethod
    async def leave_contest(self, contest_id: str, user_id: str) -> None:
        """탈퇴 (참가 기록이 없으면 아무 일도 하지 않음)"""
        pass

    @abstractmethod
    async def get_single_contest_participants(self, contest_id: str) -> List[str]:
        """참가자 공개 핸들 목록 (핸들 없는 사용자 제외, 오름차순)"""
        pass
