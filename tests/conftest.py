# tests/conftest.py

import os
from typing import AsyncGenerator

# 앱 모듈이 임포트되기 전에 테스트용 설정을 지정합니다 (.env 보다 우선).
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["APP_ENV"] = "testing"
os.environ["RECORD_STORE_BACKEND"] = "sql"

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from sqlalchemy.ext.asyncio import create_async_engine, AsyncEngine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

# labsvc.main을 임포트하여 FastAPI 앱 인스턴스에 접근합니다.
from labsvc.main import app as main_app
from labsvc.core import dependencies as deps
from labsvc.core.database import build_engine, get_session
from labsvc.core.events import RecordingEventSink

# --- 모든 모델 임포트 ---
#  SQLModel.metadata.create_all()이 모든 테이블을 인식하도록 도메인 모델을 임포트합니다.
from labsvc.domains.lims import models as lims_models  # noqa: F401
from labsvc.domains.inv import models as inv_models    # noqa: F401
from labsvc.domains.ord import models as ord_models    # noqa: F401


# --- 테스트용 데이터베이스 설정 ---
# 인메모리 SQLite를 사용합니다. PostgreSQL 스키마(lims, inv, ord)는 build_engine 이 ATTACH 합니다.
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

# 존재하지 않는 디렉터리의 DB 파일: 연결 시 OperationalError가 발생합니다.
UNREACHABLE_DATABASE_URL = "sqlite+aiosqlite:////nonexistent-labsvc-dir/unreachable.db"


def _make_session_factory(engine: AsyncEngine) -> sessionmaker:
    return sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


# --- 데이터베이스 픽스처 ---
@pytest_asyncio.fixture(scope="function")
async def sqlite_engine() -> AsyncGenerator[AsyncEngine, None]:
    """
    테스트 함수마다 새 인메모리 DB를 만들고 모든 테이블을 생성합니다.
    StaticPool로 하나의 연결을 공유하므로 ATTACH 된 스키마가 유지됩니다.
    """
    engine = build_engine(TEST_DATABASE_URL, poolclass=StaticPool)

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def db_session(sqlite_engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """각 테스트 함수에서 사용할 비동기 데이터베이스 세션을 제공합니다."""
    async with _make_session_factory(sqlite_engine)() as session:
        yield session


@pytest_asyncio.fixture(scope="function")
async def unreachable_session() -> AsyncGenerator[AsyncSession, None]:
    """연결할 수 없는 저장소에 바인딩된 세션을 제공합니다."""
    engine = create_async_engine(UNREACHABLE_DATABASE_URL)
    async with _make_session_factory(engine)() as session:
        yield session
    await engine.dispose()


@pytest.fixture(scope="function")
def event_sink() -> RecordingEventSink:
    return RecordingEventSink()


@pytest.fixture(autouse=True)
def clear_memory_stores():
    """memory 백엔드의 프로세스 전역 저장소를 테스트마다 비웁니다."""
    deps.reset_memory_stores()
    yield
    deps.reset_memory_stores()


# --- API 클라이언트 픽스처 ---
async def _client_for(session: AsyncSession, event_sink: RecordingEventSink) -> AsyncGenerator[AsyncClient, None]:
    def override_get_session():
        yield session

    original_overrides = main_app.dependency_overrides.copy()
    try:
        # get_session과 deps.get_db_session 모두 오버라이드
        main_app.dependency_overrides[get_session] = override_get_session
        main_app.dependency_overrides[deps.get_db_session] = override_get_session
        main_app.dependency_overrides[deps.get_event_sink] = lambda: event_sink

        async with AsyncClient(transport=ASGITransport(app=main_app), base_url="http://test") as async_client:
            yield async_client
    finally:
        main_app.dependency_overrides = original_overrides


@pytest_asyncio.fixture(scope="function")
async def client(db_session: AsyncSession, event_sink: RecordingEventSink) -> AsyncGenerator[AsyncClient, None]:
    """
    테스트용 비동기 DB 세션과 이벤트 기록기를 주입한 AsyncClient 인스턴스를 생성합니다.
    """
    async for async_client in _client_for(db_session, event_sink):
        yield async_client


@pytest_asyncio.fixture(scope="function")
async def unreachable_client(unreachable_session: AsyncSession, event_sink: RecordingEventSink) -> AsyncGenerator[AsyncClient, None]:
    """저장소에 연결할 수 없는 상태의 AsyncClient 인스턴스를 생성합니다."""
    async for async_client in _client_for(unreachable_session, event_sink):
        yield async_client


@pytest_asyncio.fixture(scope="function")
async def memory_client(monkeypatch, event_sink: RecordingEventSink) -> AsyncGenerator[AsyncClient, None]:
    """RECORD_STORE_BACKEND=memory 로 동작하는 AsyncClient 인스턴스를 생성합니다."""
    monkeypatch.setattr(deps.settings, "RECORD_STORE_BACKEND", "memory")

    async def override_get_session():
        yield None

    original_overrides = main_app.dependency_overrides.copy()
    try:
        main_app.dependency_overrides[deps.get_db_session] = override_get_session
        main_app.dependency_overrides[deps.get_event_sink] = lambda: event_sink
        async with AsyncClient(transport=ASGITransport(app=main_app), base_url="http://test") as async_client:
            yield async_client
    finally:
        main_app.dependency_overrides = original_overrides
