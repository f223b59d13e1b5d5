"""
가상 콘테스트 관련 스키마
"""
from typing import NamedTuple, Optional

from pydantic import BaseModel, Field

# 콘테스트당 최대 문제 수
MAX_PROBLEM_NUM_PER_CONTEST = 300
# 최근 콘테스트 조회 시 최대 개수
RECENT_CONTEST_NUM = 1000


class VirtualContestInfo(BaseModel):
    """가상 콘테스트 메타데이터"""
    id: str = Field(..., description="콘테스트 ID (UUID)")
    title: str = Field(..., description="제목")
    memo: str = Field(..., description="메모")
    owner_user_id: str = Field(..., description="소유자 내부 사용자 ID")
    start_epoch_second: int = Field(..., description="시작 시각 (epoch second)")
    duration_second: int = Field(..., description="진행 시간 (초)")
    mode: Optional[str] = Field(None, description="콘테스트 모드")
    is_public: bool = Field(..., description="공개 여부")
    penalty_second: int = Field(..., description="패널티 (초)")

    @property
    def end_epoch_second(self) -> int:
        return self.start_epoch_second + self.duration_second


class VirtualContestItem(BaseModel):
    """콘테스트 문제 항목"""
    problem_id: str = Field(..., description="문제 ID")
    point: Optional[int] = Field(None, description="사용자 지정 점수")
    order: Optional[int] = Field(None, description="사용자 지정 표시 순서")


class RunningContestProblem(NamedTuple):
    """진행 중인 콘테스트의 문제와 해당 콘테스트 종료 시각"""
    problem_id: str
    end_epoch_second: int
