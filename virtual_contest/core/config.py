"""
환경 설정 모듈
PostgreSQL 연결, 커넥션 풀, 저장소 선택 등의 설정을 관리합니다.
"""
from functools import lru_cache
from typing import Optional
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """애플리케이션 환경 설정"""

    # 앱 기본 설정
    APP_NAME: str = "Virtual Contest Manager"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False

    # PostgreSQL 설정 (API 서버와 공유)
    POSTGRES_HOST: str = "localhost"
    POSTGRES_PORT: int = 5432
    POSTGRES_USER: str = "postgres"
    POSTGRES_PASSWORD: str = "postgres"
    POSTGRES_DB: str = "atcoder_problems"

    # 설정 시 POSTGRES_* 대신 사용 (예: sqlite+aiosqlite:///./local.db)
    DATABASE_URL: Optional[str] = None

    @property
    def POSTGRES_URL(self) -> str:
        return f"postgresql+asyncpg://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}@{self.POSTGRES_HOST}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"

    @property
    def DB_URL(self) -> str:
        return self.DATABASE_URL or self.POSTGRES_URL

    # 커넥션 풀 설정
    DB_POOL_SIZE: int = 10
    DB_MAX_OVERFLOW: int = 20
    DB_ECHO: bool = False

    # 저장소 선택 (True면 메모리 저장소, 개발/테스트용)
    USE_MEMORY_STORE: bool = False

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True


@lru_cache()
def get_settings() -> Settings:
    """싱글톤 설정 객체 반환"""
    return Settings()


settings = get_settings()
