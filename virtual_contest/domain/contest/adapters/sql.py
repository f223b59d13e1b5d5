"""
SQL 기반 가상 콘테스트 매니저 (프로덕션)

[세션 관리]
- 작업 1회마다 세션을 하나 빌려 쓰고 작업이 끝나면 반환
- 세션/커넥션을 인스턴스에 보관하지 않음

[예외 변환]
- SQLAlchemyError, 드라이버 연결 오류(OSError) → StorageError
- 재시도하지 않고 호출자에게 그대로 전달
"""
import logging
import uuid
from contextlib import asynccontextmanager
from typing import AsyncGenerator, List, Optional, Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from virtual_contest.core.exceptions import (
    LimitExceeded,
    NotFound,
    PermissionDenied,
    StorageError,
)
from virtual_contest.domain.contest.adapters.base import VirtualContestManager
from virtual_contest.infrastructure.persistence.models import (
    InternalVirtualContest,
    InternalVirtualContestItem,
)
from virtual_contest.infrastructure.persistence.session import AsyncSessionLocal
from virtual_contest.infrastructure.repositories.virtual_contest_repository import (
    VirtualContestRepository,
)
from virtual_contest.schemas.virtual_contest import (
    MAX_PROBLEM_NUM_PER_CONTEST,
    RECENT_CONTEST_NUM,
    RunningContestProblem,
    VirtualContestInfo,
    VirtualContestItem,
)

logger = logging.getLogger(__name__)


def _to_info(contest: InternalVirtualContest) -> VirtualContestInfo:
    return VirtualContestInfo(
        id=contest.id,
        title=contest.title,
        memo=contest.memo,
        owner_user_id=contest.internal_user_id,
        start_epoch_second=contest.start_epoch_second,
        duration_second=contest.duration_second,
        mode=contest.mode,
        is_public=contest.is_public,
        penalty_second=contest.penalty_second,
    )


def _to_item(item: InternalVirtualContestItem) -> VirtualContestItem:
    return VirtualContestItem(
        problem_id=item.problem_id,
        point=item.user_defined_point,
        order=item.user_defined_order,
    )


class SqlVirtualContestManager(VirtualContestManager):
    """SQLAlchemy 비동기 세션 기반 가상 콘테스트 매니저"""

    def __init__(self, session_factory: Optional[async_sessionmaker] = None):
        """
        Args:
            session_factory: 세션 팩토리 (기본값: AsyncSessionLocal)
        """
        self.session_factory = session_factory or AsyncSessionLocal

    @asynccontextmanager
    async def _session(self, operation: str) -> AsyncGenerator[AsyncSession, None]:
        """작업 단위 세션 (실패 시 롤백 후 StorageError로 변환)"""
        try:
            async with self.session_factory() as db:
                try:
                    yield db
                except Exception:
                    await db.rollback()
                    raise
        except (SQLAlchemyError, OSError) as e:
            logger.error(
                f"[VirtualContest] {operation} 실패 - error: {str(e)}",
                exc_info=True
            )
            raise StorageError(f"{operation} failed: {e}") from e

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
        async with self._session("create_contest") as db:
            await VirtualContestRepository(db).create_contest(
                contest_id=contest_id,
                title=title,
                memo=memo,
                internal_user_id=owner_user_id,
                start_epoch_second=start_epoch_second,
                duration_second=duration_second,
                mode=mode,
                is_public=is_public,
                penalty_second=penalty_second,
            )
            await db.commit()

        logger.info(
            f"[VirtualContest] 콘테스트 생성 - contest_id: {contest_id}, owner: {owner_user_id}"
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
        async with self._session("update_contest") as db:
            updated = await VirtualContestRepository(db).update_contest(
                contest_id=contest_id,
                title=title,
                memo=memo,
                start_epoch_second=start_epoch_second,
                duration_second=duration_second,
                mode=mode,
                is_public=is_public,
                penalty_second=penalty_second,
            )
            await db.commit()

        if updated:
            logger.info(f"[VirtualContest] 콘테스트 수정 - contest_id: {contest_id}")
        else:
            logger.debug(f"[VirtualContest] 수정 대상 없음 - contest_id: {contest_id}")

    async def get_single_contest_info(self, contest_id: str) -> VirtualContestInfo:
        async with self._session("get_single_contest_info") as db:
            contest = await VirtualContestRepository(db).get_contest_by_id(contest_id)

        if contest is None:
            raise NotFound(f"virtual contest not found: {contest_id}")
        return _to_info(contest)

    async def get_own_contests(self, owner_user_id: str) -> List[VirtualContestInfo]:
        async with self._session("get_own_contests") as db:
            contests = await VirtualContestRepository(db).get_contests_by_owner(owner_user_id)
        return [_to_info(contest) for contest in contests]

    async def get_participated_contests(self, user_id: str) -> List[VirtualContestInfo]:
        async with self._session("get_participated_contests") as db:
            contests = await VirtualContestRepository(db).get_contests_by_participant(user_id)
        return [_to_info(contest) for contest in contests]

    async def get_recent_contest_info(self) -> List[VirtualContestInfo]:
        async with self._session("get_recent_contest_info") as db:
            contests = await VirtualContestRepository(db).get_recent_public_contests(
                RECENT_CONTEST_NUM
            )
        return [_to_info(contest) for contest in contests]

    # ===== 문제 항목 =====

    async def get_single_contest_problems(self, contest_id: str) -> List[VirtualContestItem]:
        async with self._session("get_single_contest_problems") as db:
            items = await VirtualContestRepository(db).get_items(contest_id)
        return [_to_item(item) for item in items]

    async def update_items(
        self,
        contest_id: str,
        items: Sequence[VirtualContestItem],
        user_id: str,
    ) -> None:
        if len(items) > MAX_PROBLEM_NUM_PER_CONTEST:
            logger.warning(
                f"[VirtualContest] 문제 수 초과 - contest_id: {contest_id}, count: {len(items)}"
            )
            raise LimitExceeded(
                f"The number of problems exceeded: {len(items)} > {MAX_PROBLEM_NUM_PER_CONTEST}"
            )

        async with self._session("update_items") as db:
            repo = VirtualContestRepository(db)

            if await repo.get_owned_contest_id(contest_id, user_id) is None:
                logger.warning(
                    f"[VirtualContest] 문제 목록 변경 거부 - contest_id: {contest_id}, user_id: {user_id}"
                )
                raise PermissionDenied(f"The target contest does not exist: {contest_id}")

            # 삭제 + 삽입을 하나의 트랜잭션으로 커밋
            deleted = await repo.delete_items(contest_id)
            await repo.bulk_insert_items(contest_id, items)
            await db.commit()

        logger.info(
            f"[VirtualContest] 문제 목록 교체 - contest_id: {contest_id}, "
            f"deleted: {deleted}, inserted: {len(items)}"
        )

    async def get_running_contest_problems(self, time: int) -> List[RunningContestProblem]:
        async with self._session("get_running_contest_problems") as db:
            rows = await VirtualContestRepository(db).get_running_items(time)
        return [RunningContestProblem(problem_id, end_second) for problem_id, end_second in rows]

    # ===== 참가자 =====

    async def join_contest(self, contest_id: str, user_id: str) -> None:
        async with self._session("join_contest") as db:
            await VirtualContestRepository(db).add_participant(contest_id, user_id)
            await db.commit()

        logger.info(f"[VirtualContest] 참가 - contest_id: {contest_id}, user_id: {user_id}")

    async def leave_contest(self, contest_id: str, user_id: str) -> None:
        async with self._session("leave_contest") as db:
            removed = await VirtualContestRepository(db).remove_participant(contest_id, user_id)
            await db.commit()

        logger.info(
            f"[VirtualContest] 탈퇴 - contest_id: {contest_id}, user_id: {user_id}, removed: {removed}"
        )

    async def get_single_contest_participants(self, contest_id: str) -> List[str]:
        async with self._session("get_single_contest_participants") as db:
            return await VirtualContestRepository(db).get_participant_handles(contest_id)
