"""
사용자 테이블 모델 (외부 관리, 읽기 전용)
internal_users
"""
from typing import Optional

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from virtual_contest.infrastructure.persistence.session import Base


class InternalUser(Base):
    """내부 사용자 ID와 공개 핸들(AtCoder ID) 매핑"""
    __tablename__ = "internal_users"

    internal_user_id: Mapped[str] = mapped_column(String(255), primary_key=True)
    # 핸들을 등록하지 않은 사용자는 NULL
    atcoder_user_id: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
