# labsvc/core/dependencies.py

"""
FastAPI 애플리케이션의 의존성 주입(Dependency Injection)을 정의하는 모듈입니다.

- 데이터베이스 세션 관리 (get_db_session).
- 관측 협력자 주입 (get_event_sink).
- 설정(RECORD_STORE_BACKEND)에 따른 레코드 저장소 선택 (get_store_factory).
"""

import logging
from typing import AsyncGenerator, Callable, Dict, Optional, Type

from fastapi import Depends
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from labsvc.core.config import settings
from labsvc.core.database import get_session as get_main_app_session
from labsvc.core.events import EventSink, LoggingEventSink
from labsvc.core.store import InMemoryRecordStore, RecordStore, SQLModelRecordStore

# (모델 클래스, 보조 키 필드명) -> 저장소
StoreFactory = Callable[[Type[SQLModel], Optional[str]], RecordStore]

# memory 백엔드에서 프로세스 전체가 공유하는 저장소들 (모델별 1개)
_memory_stores: Dict[Type[SQLModel], InMemoryRecordStore] = {}


# --- 데이터베이스 세션 의존성 주입 ---
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    labsvc.core.database.get_session을 래핑한 요청 단위 비동기 세션 제너레이터입니다.
    """
    async for session in get_main_app_session():
        yield session


def get_event_sink() -> EventSink:
    return LoggingEventSink(logging.getLogger("labsvc.events"))


def get_memory_store(model: Type[SQLModel], secondary_key: Optional[str] = None) -> InMemoryRecordStore:
    store = _memory_stores.get(model)
    if store is None:
        store = _memory_stores[model] = InMemoryRecordStore(model, secondary_key=secondary_key)
    return store


def reset_memory_stores() -> None:
    _memory_stores.clear()


async def get_store_factory(db: AsyncSession = Depends(get_db_session)) -> StoreFactory:
    """
    요청에 사용할 저장소 생성 함수를 반환합니다.
    sql 백엔드는 요청 세션에 바인딩된 저장소를, memory 백엔드는 공유 저장소를 돌려줍니다.
    """
    if settings.RECORD_STORE_BACKEND == "memory":
        return get_memory_store

    def _sql_store(model: Type[SQLModel], secondary_key: Optional[str] = None) -> RecordStore:
        return SQLModelRecordStore(db, model, secondary_key=secondary_key)

    return _sql_store
