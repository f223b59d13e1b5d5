"""
가상 콘테스트 테이블 모델
internal_virtual_contests, internal_virtual_contest_items, internal_virtual_contest_participants
"""
from typing import Optional

from sqlalchemy import (
    BigInteger,
    Boolean,
    ForeignKey,
    Index,
    String,
    Text,
)
from sqlalchemy.orm import Mapped, mapped_column

from virtual_contest.infrastructure.persistence.session import Base


class InternalVirtualContest(Base):
    """가상 콘테스트 테이블"""
    __tablename__ = "internal_virtual_contests"

    # UUID 문자열, 애플리케이션에서 생성
    id: Mapped[str] = mapped_column(String(255), primary_key=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    memo: Mapped[str] = mapped_column(Text, nullable=False)
    internal_user_id: Mapped[str] = mapped_column(String(255), nullable=False)
    start_epoch_second: Mapped[int] = mapped_column(BigInteger, nullable=False)
    duration_second: Mapped[int] = mapped_column(BigInteger, nullable=False)
    mode: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    is_public: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    penalty_second: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)

    __table_args__ = (
        # 진행 중 콘테스트 조회 (start_epoch_second <= t) 용
        Index("idx_internal_virtual_contests_start", "start_epoch_second"),
        Index("idx_internal_virtual_contests_user", "internal_user_id"),
    )


class InternalVirtualContestItem(Base):
    """콘테스트 문제 항목 테이블 (콘테스트 내 problem_id 유일)"""
    __tablename__ = "internal_virtual_contest_items"

    internal_virtual_contest_id: Mapped[str] = mapped_column(
        String(255),
        ForeignKey("internal_virtual_contests.id", ondelete="CASCADE", onupdate="CASCADE"),
        primary_key=True
    )
    problem_id: Mapped[str] = mapped_column(String(255), primary_key=True)
    user_defined_point: Mapped[Optional[int]] = mapped_column(BigInteger, nullable=True)
    user_defined_order: Mapped[Optional[int]] = mapped_column(BigInteger, nullable=True)


class InternalVirtualContestParticipant(Base):
    """콘테스트 참가자 테이블"""
    __tablename__ = "internal_virtual_contest_participants"

    internal_virtual_contest_id: Mapped[str] = mapped_column(
        String(255),
        ForeignKey("internal_virtual_contests.id", ondelete="CASCADE", onupdate="CASCADE"),
        primary_key=True
    )
    internal_user_id: Mapped[str] = mapped_column(
        String(255),
        ForeignKey("internal_users.internal_user_id", ondelete="CASCADE", onupdate="CASCADE"),
        primary_key=True
    )
