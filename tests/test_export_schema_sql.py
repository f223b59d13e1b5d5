"""
스키마 SQL 생성 스크립트 테스트
"""
import importlib.util
from pathlib import Path

SCRIPT_PATH = Path(__file__).parent.parent / "scripts" / "export_schema_sql.py"


def _load_script():
    spec = importlib.util.spec_from_file_location("export_schema_sql", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_export_schema_sql(tmp_path):
    """FK 의존 순서대로 테이블과 인덱스 DDL 생성"""
    script = _load_script()

    output = script.export_schema_sql(str(tmp_path / "schema.sql"))
    sql = output.read_text(encoding="utf-8")

    assert "CREATE TABLE internal_virtual_contests" in sql
    assert "CREATE TABLE internal_virtual_contest_items" in sql
    assert "CREATE TABLE internal_virtual_contest_participants" in sql
    assert "CREATE INDEX idx_internal_virtual_contests_start" in sql
    assert "PRIMARY KEY (internal_virtual_contest_id, problem_id)" in sql
    assert sql.index("CREATE TABLE internal_virtual_contests ") < sql.index(
        "CREATE TABLE internal_virtual_contest_items"
    )
