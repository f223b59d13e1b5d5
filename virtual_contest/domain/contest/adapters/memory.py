"""
메모리 기반 가상 콘테스트 매니저 (개발/테스트용)

DB 스키마의 제약 조건을 그대로 흉내냅니다.
- 문제 항목: (콘테스트, problem_id) 유일, 콘테스트 FK
- 참가자: (콘테스트, 사용자) 유일, 콘테스트 FK
- 사용자 FK는 users 매핑이 있을 때만 검사 (매핑이 없으면 모든 사용자가 핸들 없음)
"""

import asyncio
import uuid
from typing import Dict, List, Optional, Sequence, Tuple

from virtual_contest.core.exceptions import (
    LimitExceeded,
    NotFound,
    PermissionDenied,
    StorageError,
)
from virtual_contest.domain.contest.adapters.base import VirtualContestManager
from virtual_contest.schemas.virtual_contest import (
    MAX_PROBLEM_NUM_PER_CONTEST,
    RECENT_CONTEST_NUM,
    RunningContestProblem,
    VirtualContestInfo,
    VirtualContestItem,
)


def _item_sort_key(item: VirtualContestItem) -> Tuple[bool, int, str]:
    # order 오름차순 (NULL 먼저), problem_id 오름차순
    return (item.order is not None, item.order or 0, item.problem_id)


class MemoryVirtualContestManager(VirtualContestManager):
    """메모리 기반 가상 콘테스트 매니저 (개발/테스트용)"""

    def __init__(self, users: Optional[Dict[str, Optional[str]]] = None):
        """
        Args:
            users: 내부 사용자 ID → 공개 핸들 매핑 (internal_users 테이블 대용).
                None이면 사용자 FK를 검사하지 않음
        """
        self.contests: Dict[str, VirtualContestInfo] = {}
        self.items: Dict[str, List[VirtualContestItem]] = {}
        self.participants: List[Tuple[str, str]] = []
        self.users: Optional[Dict[str, Optional[str]]] = dict(users) if users is not None else None
        self.lock = asyncio.Lock()

    def add_user(self, internal_user_id: str, atcoder_user_id: Optional[str] = None) -> None:
        """사용자 등록 (이후 참가 시 사용자 FK 검사)"""
        if self.users is None:
            self.users = {}
        self.users[internal_user_id] = atcoder_user_id

    # ===== 콘테스트 =====

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
        contest_id = str(uuid.uuid4())
        async with self.lock:
            self.contests[contest_id] = VirtualContestInfo(
                id=contest_id,
                title=title,
                memo=memo,
                owner_user_id=owner_user_id,
                start_epoch_second=start_epoch_second,
                duration_second=duration_second,
                mode=mode,
                is_public=is_public,
                penalty_second=penalty_second,
            )
        return contest_id

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
        async with self.lock:
            contest = self.contests.get(contest_id)
            if contest is None:
                return
            self.contests[contest_id] = contest.model_copy(update={
                "title": title,
                "memo": memo,
                "start_epoch_second": start_epoch_second,
                "duration_second": duration_second,
                "mode": mode,
                "is_public": is_public,
                "penalty_second": penalty_second,
            })

    async def get_single_contest_info(self, contest_id: str) -> VirtualContestInfo:
        contest = self.contests.get(contest_id)
        if contest is None:
            raise NotFound(f"virtual contest not found: {contest_id}")
        return contest.model_copy()

    async def get_own_contests(self, owner_user_id: str) -> List[VirtualContestInfo]:
        return [
            contest.model_copy()
            for contest in self.contests.values()
            if contest.owner_user_id == owner_user_id
        ]

    async def get_participated_contests(self, user_id: str) -> List[VirtualContestInfo]:
        return [
            self.contests[contest_id].model_copy()
            for contest_id, participant in self.participants
            if participant == user_id and contest_id in self.contests
        ]

    async def get_recent_contest_info(self) -> List[VirtualContestInfo]:
        public = [contest for contest in self.contests.values() if contest.is_public]
        public.sort(key=lambda contest: contest.end_epoch_second, reverse=True)
        return [contest.model_copy() for contest in public[:RECENT_CONTEST_NUM]]

    # ===== 문제 항목 =====

    async def get_single_contest_problems(self, contest_id: str) -> List[VirtualContestItem]:
        items = self.items.get(contest_id, [])
        return [item.model_copy() for item in sorted(items, key=_item_sort_key)]

    async def update_items(
        self,
        contest_id: str,
        items: Sequence[VirtualContestItem],
        user_id: str,
    ) -> None:
        if len(items) > MAX_PROBLEM_NUM_PER_CONTEST:
            raise LimitExceeded(
                f"The number of problems exceeded: {len(items)} > {MAX_PROBLEM_NUM_PER_CONTEST}"
            )

        async with self.lock:
            contest = self.contests.get(contest_id)
            if contest is None or contest.owner_user_id != user_id:
                raise PermissionDenied(f"The target contest does not exist: {contest_id}")

            problem_ids = [item.problem_id for item in items]
            if len(set(problem_ids)) != len(problem_ids):
                raise StorageError(f"duplicate problem_id in contest: {contest_id}")

            # 새 목록을 완성한 뒤 한 번에 교체
            self.items[contest_id] = [item.model_copy() for item in items]

    async def get_running_contest_problems(self, time: int) -> List[RunningContestProblem]:
        running = []
        for contest_id, items in self.items.items():
            contest = self.contests[contest_id]
            if contest.start_epoch_second <= time <= contest.end_epoch_second:
                running.extend(
                    RunningContestProblem(item.problem_id, contest.end_epoch_second)
                    for item in items
                )
        return running

    # ===== 참가자 =====

    async def join_contest(self, contest_id: str, user_id: str) -> None:
        async with self.lock:
            unknown_user = self.users is not None and user_id not in self.users
            if contest_id not in self.contests or unknown_user:
                raise StorageError(
                    f"foreign key violation: contest_id={contest_id}, user_id={user_id}"
                )
            if (contest_id, user_id) in self.participants:
                raise StorageError(
                    f"duplicate participant: contest_id={contest_id}, user_id={user_id}"
                )
            self.participants.append((contest_id, user_id))

    async def leave_contest(self, contest_id: str, user_id: str) -> None:
        async with self.lock:
            self.participants = [
                edge for edge in self.participants if edge != (contest_id, user_id)
            ]

    async def get_single_contest_participants(self, contest_id: str) -> List[str]:
        users = self.users or {}
        handles = [
            users.get(user_id)
            for participant_contest_id, user_id in self.participants
            if participant_contest_id == contest_id
        ]
        return sorted(handle for handle in handles if handle is not None)
