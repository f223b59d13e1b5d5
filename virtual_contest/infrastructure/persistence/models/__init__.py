# DB 모델 모듈
# API 서버와 공유하는 테이블 스키마 정의

from virtual_contest.infrastructure.persistence.models.users import InternalUser
from virtual_contest.infrastructure.persistence.models.virtual_contests import (
    InternalVirtualContest,
    InternalVirtualContestItem,
    InternalVirtualContestParticipant,
)

__all__ = [
    "InternalUser",
    "InternalVirtualContest",
    "InternalVirtualContestItem",
    "InternalVirtualContestParticipant",
]
