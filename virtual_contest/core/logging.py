"""
로깅 설정
"""
import logging
from typing import Optional

from virtual_contest.core.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: Optional[int] = None) -> None:
    """
    루트 로거 설정

    이미 핸들러가 있으면 basicConfig는 아무것도 하지 않으므로
    여러 번 호출해도 안전합니다.

    Args:
        level: 로그 레벨 (기본값: DEBUG 설정에 따라 DEBUG/INFO)
    """
    if level is None:
        level = logging.DEBUG if settings.DEBUG else logging.INFO

    logging.basicConfig(level=level, format=LOG_FORMAT)

    # SQL 로그는 DB_ECHO로만 제어
    if not settings.DB_ECHO:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
