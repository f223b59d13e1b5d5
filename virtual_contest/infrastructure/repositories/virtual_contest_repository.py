"""
가상 콘테스트 Repository
PostgreSQL에서 콘테스트/문제 항목/참가자 정보를 조회하고 변경

[역할]
- internal_virtual_contests 테이블 CRUD
- internal_virtual_contest_items 테이블 일괄 삭제/삽입
- internal_virtual_contest_participants 테이블 삽입/삭제
- internal_users 테이블 조회 (읽기 전용)

[트랜잭션]
- Repository는 commit/rollback 하지 않음 (flush까지만)
- 트랜잭션 경계는 호출하는 매니저(SqlVirtualContestManager)가 관리
"""
from typing import List, Optional, Sequence, Tuple

from sqlalchemy import and_, delete, insert, select, text, update
from sqlalchemy.ext.asyncio import AsyncSession

from virtual_contest.infrastructure.persistence.models import (
    InternalUser,
    InternalVirtualContest,
    InternalVirtualContestItem,
    InternalVirtualContestParticipant,
)
from virtual_contest.schemas.virtual_contest import VirtualContestItem


# 컬럼별 배열을 UNNEST로 펼쳐 한 번에 삽입 (PostgreSQL 전용)
_UNNEST_INSERT_ITEMS = text(
    """
    INSERT INTO internal_virtual_contest_items
    (internal_virtual_contest_id, problem_id, user_defined_point, user_defined_order)
    SELECT * FROM UNNEST(
        CAST(:contest_ids AS VARCHAR(255)[]),
        CAST(:problem_ids AS VARCHAR(255)[]),
        CAST(:points AS BIGINT[]),
        CAST(:orders AS BIGINT[])
    )
    """
)


class VirtualContestRepository:
    """가상 콘테스트 데이터 접근 계층"""

    def __init__(self, db: AsyncSession):
        """
        Args:
            db: SQLAlchemy 비동기 세션 (매니저가 작업 단위로 생성)
        """
        self.db = db

    # ===== 콘테스트 =====

    async def create_contest(
        self,
        contest_id: str,
        title: str,
        memo: str,
        internal_user_id: str,
        start_epoch_second: int,
        duration_second: int,
        mode: Optional[str],
        is_public: bool,
        penalty_second: int
    ) -> InternalVirtualContest:
        """콘테스트 생성 (flush까지만 수행)"""
        contest = InternalVirtualContest(
            id=contest_id,
            title=title,
            memo=memo,
            internal_user_id=internal_user_id,
            start_epoch_second=start_epoch_second,
            duration_second=duration_second,
            mode=mode,
            is_public=is_public,
            penalty_second=penalty_second
        )
        self.db.add(contest)
        await self.db.flush()
        return contest

    async def update_contest(
        self,
        contest_id: str,
        title: str,
        memo: str,
        start_epoch_second: int,
        duration_second: int,
        mode: Optional[str],
        is_public: bool,
        penalty_second: int
    ) -> int:
        """
        콘테스트 메타데이터 갱신 (id, 소유자 제외 전체 덮어쓰기)

        Returns:
            갱신된 행 수 (id가 없으면 0)
        """
        query = update(InternalVirtualContest).where(
            InternalVirtualContest.id == contest_id
        ).values(
            title=title,
            memo=memo,
            start_epoch_second=start_epoch_second,
            duration_second=duration_second,
            mode=mode,
            is_public=is_public,
            penalty_second=penalty_second
        )
        result = await self.db.execute(query)
        return result.rowcount

    async def get_contest_by_id(self, contest_id: str) -> Optional[InternalVirtualContest]:
        """콘테스트 ID로 조회"""
        query = select(InternalVirtualContest).where(
            InternalVirtualContest.id == contest_id
        )
        result = await self.db.execute(query)
        return result.scalar_one_or_none()

    async def get_contests_by_owner(self, internal_user_id: str) -> List[InternalVirtualContest]:
        """소유자가 만든 콘테스트 전체 조회 (순서 보장 없음)"""
        query = select(InternalVirtualContest).where(
            InternalVirtualContest.internal_user_id == internal_user_id
        )
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def get_contests_by_participant(self, internal_user_id: str) -> List[InternalVirtualContest]:
        """사용자가 참가한 콘테스트 조회"""
        query = select(InternalVirtualContest).join(
            InternalVirtualContestParticipant,
            InternalVirtualContest.id == InternalVirtualContestParticipant.internal_virtual_contest_id
        ).where(
            InternalVirtualContestParticipant.internal_user_id == internal_user_id
        )
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def get_recent_public_contests(self, limit: int) -> List[InternalVirtualContest]:
        """공개 콘테스트를 종료 시각 내림차순으로 조회"""
        end_second = InternalVirtualContest.start_epoch_second + InternalVirtualContest.duration_second
        query = select(InternalVirtualContest).where(
            InternalVirtualContest.is_public.is_(True)
        ).order_by(end_second.desc()).limit(limit)
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def get_owned_contest_id(
        self,
        contest_id: str,
        internal_user_id: str
    ) -> Optional[str]:
        """소유자 확인 (콘테스트가 없거나 소유자가 다르면 None)"""
        query = select(InternalVirtualContest.id).where(
            and_(
                InternalVirtualContest.id == contest_id,
                InternalVirtualContest.internal_user_id == internal_user_id
            )
        )
        result = await self.db.execute(query)
        return result.scalar_one_or_none()

    # ===== 문제 항목 =====

    async def get_items(self, contest_id: str) -> List[InternalVirtualContestItem]:
        """
        콘테스트 문제 항목 조회

        [정렬]
        - user_defined_order 오름차순, NULL이 먼저
        - 같은 순서 내에서는 problem_id 오름차순
        """
        query = select(InternalVirtualContestItem).where(
            InternalVirtualContestItem.internal_virtual_contest_id == contest_id
        ).order_by(
            InternalVirtualContestItem.user_defined_order.asc().nulls_first(),
            InternalVirtualContestItem.problem_id.asc()
        )
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def delete_items(self, contest_id: str) -> int:
        """콘테스트의 문제 항목 전체 삭제"""
        query = delete(InternalVirtualContestItem).where(
            InternalVirtualContestItem.internal_virtual_contest_id == contest_id
        )
        result = await self.db.execute(query)
        return result.rowcount

    async def bulk_insert_items(
        self,
        contest_id: str,
        items: Sequence[VirtualContestItem]
    ) -> None:
        """
        문제 항목 일괄 삽입 (한 번의 statement)

        [방식]
        - PostgreSQL: 컬럼별 배열 4개를 UNNEST로 펼쳐 INSERT ... SELECT
        - 그 외 DB: 다중 행 INSERT ... VALUES
        """
        if not items:
            return

        if self.db.get_bind().dialect.name == "postgresql":
            await self.db.execute(
                _UNNEST_INSERT_ITEMS,
                {
                    "contest_ids": [contest_id] * len(items),
                    "problem_ids": [item.problem_id for item in items],
                    "points": [item.point for item in items],
                    "orders": [item.order for item in items],
                }
            )
            return

        query = insert(InternalVirtualContestItem).values([
            {
                "internal_virtual_contest_id": contest_id,
                "problem_id": item.problem_id,
                "user_defined_point": item.point,
                "user_defined_order": item.order,
            }
            for item in items
        ])
        await self.db.execute(query)

    async def get_running_items(self, time: int) -> List[Tuple[str, int]]:
        """
        진행 중인 콘테스트의 문제 조회

        start_epoch_second <= time <= start_epoch_second + duration_second (양 끝 포함)

        Returns:
            (problem_id, 콘테스트 종료 시각) 리스트
        """
        end_second = (
            InternalVirtualContest.start_epoch_second + InternalVirtualContest.duration_second
        ).label("end_second")
        query = select(
            InternalVirtualContestItem.problem_id,
            end_second
        ).join(
            InternalVirtualContest,
            InternalVirtualContestItem.internal_virtual_contest_id == InternalVirtualContest.id
        ).where(
            and_(
                InternalVirtualContest.start_epoch_second <= time,
                InternalVirtualContest.start_epoch_second + InternalVirtualContest.duration_second >= time
            )
        )
        result = await self.db.execute(query)
        return [(row.problem_id, row.end_second) for row in result.all()]

    # ===== 참가자 =====

    async def add_participant(self, contest_id: str, internal_user_id: str) -> None:
        """참가자 추가 (중복/존재 여부는 DB 제약 조건에 위임)"""
        query = insert(InternalVirtualContestParticipant).values(
            internal_virtual_contest_id=contest_id,
            internal_user_id=internal_user_id
        )
        await self.db.execute(query)

    async def remove_participant(self, contest_id: str, internal_user_id: str) -> int:
        """참가자 삭제 (없으면 0)"""
        query = delete(InternalVirtualContestParticipant).where(
            and_(
                InternalVirtualContestParticipant.internal_virtual_contest_id == contest_id,
                InternalVirtualContestParticipant.internal_user_id == internal_user_id
            )
        )
        result = await self.db.execute(query)
        return result.rowcount

    async def get_participant_handles(self, contest_id: str) -> List[str]:
        """참가자의 공개 핸들 조회 (핸들 없는 사용자 제외, 오름차순)"""
        query = select(InternalUser.atcoder_user_id).join(
            InternalVirtualContestParticipant,
            InternalVirtualContestParticipant.internal_user_id == InternalUser.internal_user_id
        ).where(
            and_(
                InternalVirtualContestParticipant.internal_virtual_contest_id == contest_id,
                InternalUser.atcoder_user_id.is_not(None)
            )
        ).order_by(InternalUser.atcoder_user_id.asc())
        result = await self.db.execute(query)
        return list(result.scalars().all())
