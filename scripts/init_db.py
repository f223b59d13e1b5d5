#!/usr/bin/env python
"""
개발용 DB 초기화 스크립트

[사용법]
DATABASE_URL=sqlite+aiosqlite:///./local.db python scripts/init_db.py

ORM 모델 기준으로 테이블을 생성합니다. 운영 DB 스키마는 마이그레이션으로 관리합니다.
"""
import asyncio
import sys
from pathlib import Path

# 프로젝트 루트를 Python 경로에 추가
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from virtual_contest.core.logging import setup_logging
from virtual_contest.infrastructure.persistence.session import close_db, init_db


async def main():
    try:
        await init_db(create_tables=True)
    finally:
        await close_db()


if __name__ == "__main__":
    setup_logging()
    asyncio.run(main())
