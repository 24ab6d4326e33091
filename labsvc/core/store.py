# labsvc/core/store.py

"""
레코드 저장소 어댑터(Record Store Adapter) 모듈입니다.

엔티티 서비스는 RecordStore 프로토콜에만 의존하며, 저장 기술마다 하나의 구현을 둡니다.
- SQLModelRecordStore: 요청 단위 AsyncSession(PostgreSQL/asyncpg, 테스트 시 SQLite/aiosqlite) 위에서 동작.
- InMemoryRecordStore: 프로세스 메모리의 dict 위에서 동작.

모든 메서드는 비동기이며, 저장소에 접근할 수 없을 때 StoreUnavailable을 발생시키는 것 외에는
다른 예외를 만들어내지 않습니다.
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Dict, Generic, Iterable, List, Optional, Protocol, Type, TypeVar

from sqlalchemy.exc import DBAPIError, DisconnectionError, InterfaceError, OperationalError
from sqlalchemy.exc import TimeoutError as PoolTimeoutError
from sqlmodel import SQLModel, select
from sqlmodel.ext.asyncio.session import AsyncSession

from labsvc.core.exceptions import StoreUnavailable

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=SQLModel)

# 저장소 매체에 도달하지 못했음을 뜻하는 예외들
_UNREACHABLE_ERRORS = (
    OperationalError,
    InterfaceError,
    DisconnectionError,
    PoolTimeoutError,
    OSError,
    asyncio.TimeoutError,
)


class RecordStore(Protocol[ModelType]):
    """식별자(int)로 키가 지정된 레코드 저장소의 계약."""

    async def find_all(self) -> List[ModelType]: ...

    async def find_by_id(self, id: int) -> Optional[ModelType]: ...

    async def find_by_secondary_key(self, key: object) -> List[ModelType]: ...

    async def find_by_secondary_keys(self, keys: Iterable[object]) -> List[ModelType]: ...

    async def exists_by_id(self, id: int) -> bool: ...

    async def save(self, entity: ModelType) -> ModelType: ...

    async def delete_by_id(self, id: int) -> None: ...


def _require_secondary_key(model: Type[SQLModel], secondary_key: Optional[str]) -> str:
    if secondary_key is None:
        raise ValueError(f"{model.__name__} store has no secondary key configured")
    return secondary_key


# =============================================================================
# 1. SQLModel(AsyncSession) 기반 저장소
# =============================================================================
class SQLModelRecordStore(Generic[ModelType]):
    """
    하나의 SQLModel 테이블 모델에 대한 저장소입니다.
    세션은 요청마다 주입되며, 쓰기 작업은 호출마다 commit 됩니다.
    """

    def __init__(self, session: AsyncSession, model: Type[ModelType], *, secondary_key: Optional[str] = None):
        self.session = session
        self.model = model
        self.secondary_key = secondary_key

    @asynccontextmanager
    async def _guard(self, operation: str) -> AsyncIterator[None]:
        """드라이버/풀 수준의 연결 오류를 StoreUnavailable로 변환합니다."""
        try:
            yield
        except DBAPIError as exc:
            if not (exc.connection_invalidated or isinstance(exc, (OperationalError, InterfaceError))):
                raise
            logger.error("Store unreachable during %s.%s: %s", self.model.__name__, operation, exc)
            raise StoreUnavailable(operation=f"{self.model.__name__}.{operation}") from exc
        except _UNREACHABLE_ERRORS as exc:
            logger.error("Store unreachable during %s.%s: %s", self.model.__name__, operation, exc)
            raise StoreUnavailable(operation=f"{self.model.__name__}.{operation}") from exc

    async def find_all(self) -> List[ModelType]:
        async with self._guard("find_all"):
            result = await self.session.execute(select(self.model))
            return list(result.scalars().all())

    async def find_by_id(self, id: int) -> Optional[ModelType]:
        async with self._guard("find_by_id"):
            return await self.session.get(self.model, id)

    async def find_by_secondary_key(self, key: object) -> List[ModelType]:
        column = getattr(self.model, _require_secondary_key(self.model, self.secondary_key))
        async with self._guard("find_by_secondary_key"):
            result = await self.session.execute(select(self.model).where(column == key))
            return list(result.scalars().all())

    async def find_by_secondary_keys(self, keys: Iterable[object]) -> List[ModelType]:
        column = getattr(self.model, _require_secondary_key(self.model, self.secondary_key))
        keys = list(keys)
        if not keys:
            return []
        async with self._guard("find_by_secondary_keys"):
            result = await self.session.execute(select(self.model).where(column.in_(keys)))
            return list(result.scalars().all())

    async def exists_by_id(self, id: int) -> bool:
        async with self._guard("exists_by_id"):
            result = await self.session.execute(select(self.model.id).where(self.model.id == id))
            return result.first() is not None

    async def save(self, entity: ModelType) -> ModelType:
        """
        id가 없으면 새 레코드를 추가하고(id는 DB가 할당), 있으면 해당 id의 레코드를 통째로 교체합니다.
        """
        async with self._guard("save"):
            if entity.id is None:
                self.session.add(entity)
                stored = entity
            else:
                # merge: 세션에 이미 로드된 동일 id 인스턴스가 있으면 그 상태를 덮어씁니다.
                stored = await self.session.merge(entity)
            await self.session.commit()
            await self.session.refresh(stored)
            return stored

    async def delete_by_id(self, id: int) -> None:
        """레코드를 삭제합니다. 존재하지 않는 id는 아무 일도 하지 않습니다."""
        async with self._guard("delete_by_id"):
            db_obj = await self.session.get(self.model, id)
            if db_obj is not None:
                await self.session.delete(db_obj)
                await self.session.commit()


# =============================================================================
# 2. 인메모리 저장소
# =============================================================================
class InMemoryRecordStore(Generic[ModelType]):
    """
    dict 기반 저장소입니다. id는 1부터 증가하며 할당됩니다.
    저장/조회 시 사본을 주고받으므로 호출자가 저장된 행을 직접 변경할 수 없습니다.
    각 메서드는 await 지점이 없으므로 이벤트 루프 안에서 원자적으로 실행됩니다.
    """

    def __init__(self, model: Type[ModelType], *, secondary_key: Optional[str] = None):
        self.model = model
        self.secondary_key = secondary_key
        self._rows: Dict[int, ModelType] = {}
        self._next_id = 1

    def _clone(self, entity: ModelType) -> ModelType:
        return self.model.model_validate(entity.model_dump())

    async def find_all(self) -> List[ModelType]:
        return [self._clone(row) for row in self._rows.values()]

    async def find_by_id(self, id: int) -> Optional[ModelType]:
        row = self._rows.get(id)
        return self._clone(row) if row is not None else None

    async def find_by_secondary_key(self, key: object) -> List[ModelType]:
        field = _require_secondary_key(self.model, self.secondary_key)
        return [self._clone(row) for row in self._rows.values() if getattr(row, field) == key]

    async def find_by_secondary_keys(self, keys: Iterable[object]) -> List[ModelType]:
        field = _require_secondary_key(self.model, self.secondary_key)
        wanted = set(keys)
        return [self._clone(row) for row in self._rows.values() if getattr(row, field) in wanted]

    async def exists_by_id(self, id: int) -> bool:
        return id in self._rows

    async def save(self, entity: ModelType) -> ModelType:
        stored = self._clone(entity)
        if stored.id is None:
            stored.id = self._next_id
        self._next_id = max(self._next_id, stored.id + 1)
        self._rows[stored.id] = stored
        return self._clone(stored)

    async def delete_by_id(self, id: int) -> None:
        self._rows.pop(id, None)
