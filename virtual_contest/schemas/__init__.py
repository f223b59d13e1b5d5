# Schemas 모듈
# Pydantic 모델 (콘테스트 메타데이터/문제 항목)

from virtual_contest.schemas.virtual_contest import (
    MAX_PROBLEM_NUM_PER_CONTEST,
    RECENT_CONTEST_NUM,
    RunningContestProblem,
    VirtualContestInfo,
    VirtualContestItem,
)

__all__ = [
    "MAX_PROBLEM_NUM_PER_CONTEST",
    "RECENT_CONTEST_NUM",
    "RunningContestProblem",
    "VirtualContestInfo",
    "VirtualContestItem",
]
