# labsvc/core/database.py

"""
애플리케이션의 데이터베이스 연결 및 세션 관리를 담당하는 모듈입니다.

- SQLModel의 비동기 엔진을 설정합니다.
- 비동기 세션 생성을 위한 유틸리티 함수를 제공합니다.
- 애플리케이션 시작 시 데이터베이스 테이블을 생성하는 함수를 포함합니다 (개발용).

SQLite(로컬/테스트)에는 스키마가 없으므로 도메인 스키마(lims, inv, ord)를 별도 DB 파일로
ATTACH 합니다. 파일 DB `dev.db`는 `dev.lims.db` 등을, 인메모리 DB는 인메모리 DB를 붙입니다.
"""

import logging
import os
from typing import Any, AsyncGenerator, Dict, Optional

from sqlalchemy.ext.asyncio import create_async_engine, AsyncEngine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker
from sqlalchemy import event, text

from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from labsvc.core.config import settings

# 모든 도메인 모델을 임포트해야 SQLModel.metadata에 모든 테이블이 등록됩니다.
from labsvc.domains.lims import models  # noqa
from labsvc.domains.inv import models   # noqa
from labsvc.domains.ord import models   # noqa

logger = logging.getLogger(__name__)

# 도메인별 PostgreSQL 스키마
SCHEMA = ["lims", "inv", "ord"]


# =============================================================================
# SQLite 스키마 ATTACH
# =============================================================================
def sqlite_schema_path(database: Optional[str], schema_name: str) -> str:
    """스키마 하나에 대응하는 SQLite DB 경로. 인메모리 DB면 ':memory:'."""
    if not database or database == ":memory:":
        return ":memory:"
    root, _ = os.path.splitext(database)
    return f"{root}.{schema_name}.db"


def _attach_statements(database: Optional[str], attached: Optional[set] = None) -> list:
    attached = attached or set()
    return [
        f"ATTACH DATABASE '{sqlite_schema_path(database, schema_name)}' AS {schema_name}"
        for schema_name in SCHEMA
        if schema_name not in attached
    ]


def attach_sqlite_schemas(target: AsyncEngine) -> None:
    """엔진이 여는 모든 SQLite 연결에 도메인 스키마를 ATTACH 합니다."""
    statements = _attach_statements(target.url.database)

    def _on_connect(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        for statement in statements:
            cursor.execute(statement)
        cursor.close()

    event.listen(target.sync_engine, "connect", _on_connect)


def _engine_options(url: str) -> Dict[str, Any]:
    options: Dict[str, Any] = {"echo": settings.DEBUG_MODE, "future": True}
    # SQLite(테스트/로컬)는 풀 크기 옵션을 지원하지 않습니다.
    if not url.startswith("sqlite"):
        options.update(
            pool_recycle=settings.DB_POOL_RECYCLE,
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=settings.DB_MAX_OVERFLOW,
            pool_pre_ping=True,
        )
    return options


def build_engine(url: str, **overrides: Any) -> AsyncEngine:
    """
    설정된 풀 옵션으로 비동기 엔진을 만듭니다. SQLite 엔진에는 스키마 ATTACH 를 연결합니다.
    """
    options = _engine_options(url)
    options.update(overrides)
    new_engine = create_async_engine(url, **options)
    if make_url(url).get_backend_name() == "sqlite":
        attach_sqlite_schemas(new_engine)
    return new_engine


engine: AsyncEngine = build_engine(settings.DATABASE_URL.get_secret_value())

# 비동기 세션을 생성하는 '세션 공장'을 정의합니다.
AsyncSessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


# =============================================================================
# 데이터베이스 초기화 및 테이블 생성 함수
# =============================================================================
async def create_db_and_tables(target: AsyncEngine = engine) -> None:
    """
    스키마와 테이블을 생성합니다. 개발 환경 전용이며 기존 테이블을 삭제하지 않습니다.
    build_engine 을 거치지 않은 SQLite 엔진이면 이 연결에 스키마를 직접 ATTACH 합니다.
    """
    async with target.begin() as conn:
        if conn.dialect.name == "postgresql":
            for schema_name in SCHEMA:
                await conn.execute(text(f"CREATE SCHEMA IF NOT EXISTS {schema_name}"))
                logger.debug("스키마 '%s' 생성 완료 또는 이미 존재.", schema_name)
        elif conn.dialect.name == "sqlite":
            result = await conn.exec_driver_sql("PRAGMA database_list")
            attached = {row[1] for row in result.fetchall()}
            for statement in _attach_statements(target.url.database, attached):
                await conn.exec_driver_sql(statement)
        await conn.run_sync(SQLModel.metadata.create_all)
    logger.info("데이터베이스 테이블 생성 완료 (또는 이미 존재).")


# =============================================================================
# 비동기 데이터베이스 세션 의존성 주입
# =============================================================================
async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI 의존성 주입을 위한 비동기 데이터베이스 세션 제너레이터입니다.
    요청마다 새로운 세션을 생성하고, 요청 처리 후 세션을 자동으로 닫습니다.
    """
    async with AsyncSessionLocal() as session:
        yield session
