"""
Entity 기반으로 스키마 SQL 생성
ORM 모델을 기반으로 PostgreSQL DDL 파일을 생성 (마이그레이션 도구에 반영하기 전 확인용)
"""
import logging
import sys
from pathlib import Path

# 프로젝트 루트를 Python 경로에 추가
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from sqlalchemy.dialects import postgresql
from sqlalchemy.schema import CreateIndex, CreateTable

from virtual_contest.core.config import settings
from virtual_contest.core.logging import setup_logging
from virtual_contest.infrastructure.persistence.session import Base

# 모든 모델 import (테이블 생성에 필요)
from virtual_contest.infrastructure.persistence import models  # noqa: F401

logger = logging.getLogger(__name__)


def build_schema_sql() -> str:
    """Base.metadata의 모든 테이블/인덱스에 대한 DDL 생성 (FK 의존 순서)"""
    dialect = postgresql.dialect()
    statements = []

    for table in Base.metadata.sorted_tables:
        statements.append(str(CreateTable(table).compile(dialect=dialect)).strip() + ";")
        for index in sorted(table.indexes, key=lambda idx: idx.name):
            statements.append(str(CreateIndex(index).compile(dialect=dialect)).strip() + ";")
        logger.info(f"테이블 추가: {table.name}")

    return "\n\n".join(statements) + "\n"


def export_schema_sql(output_file: str = "schema_from_entities.sql") -> Path:
    """Entity 기반으로 스키마 SQL 파일 생성"""
    output_path = Path(output_file)
    with open(output_path, "w", encoding="utf-8") as f:
        f.write("-- Entity 기반 스키마 생성 SQL\n")
        f.write(f"-- 데이터베이스: {settings.POSTGRES_DB}\n")
        f.write("\n")
        f.write(build_schema_sql())

    logger.info(f"SQL 파일 생성 완료: {output_path}")
    logger.info(
        f"사용 방법: psql -h {settings.POSTGRES_HOST} -p {settings.POSTGRES_PORT} "
        f"-U {settings.POSTGRES_USER} -d {settings.POSTGRES_DB} < {output_path}"
    )
    return output_path


if __name__ == "__main__":
    setup_logging()
    export_schema_sql(sys.argv[1] if len(sys.argv) > 1 else "schema_from_entities.sql")
