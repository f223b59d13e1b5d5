"""
가상 콘테스트 매니저 예외 정의

[분류]
- StorageError: DB 연결/제약 조건/트랜잭션 실패 (재시도하지 않음)
- NotFound: 단건 조회 결과 없음
- LimitExceeded: 문제 수 상한(300) 초과
- PermissionDenied: 소유자가 아니거나 존재하지 않는 콘테스트의 문제 목록 변경
"""


class VirtualContestError(Exception):
    """가상 콘테스트 매니저 예외의 기본 클래스"""

    pass


class StorageError(VirtualContestError):
    """저장소(DB) 작업이 실패했을 때 발생하는 예외"""

    pass


class NotFound(VirtualContestError):
    """조회 대상 콘테스트가 존재하지 않을 때 발생하는 예외"""

    pass


class LimitExceeded(VirtualContestError):
    """콘테스트 문제 수가 상한을 초과했을 때 발생하는 예외"""

    pass


class PermissionDenied(VirtualContestError):
    """콘테스트 소유자가 아닌 사용자가 변경을 시도했을 때 발생하는 예외"""

    pass
