# labsvc/core/service.py

"""
존재 여부로 보호되는 변경(existence-gated mutation)을 수행하는 엔티티 서비스의 기본 클래스입니다.

- 조회 계열은 저장소에 그대로 위임합니다.
- get_by_id / update / delete 는 대상이 없으면 NotFound를 발생시킵니다.
- update 는 부분 수정(patch)이 아닌 전체 덮어쓰기입니다. 요청에서 생략된 필드는
  요청 스키마의 기본값으로 저장됩니다.

주의: update/delete 의 "존재 확인 후 쓰기"는 원자적이지 않습니다.
같은 id에 대한 동시 요청은 마지막 쓰기가 이기며, 확인과 쓰기 사이에 삭제된 레코드는
update 에 의해 다시 생성될 수 있습니다. 원자성이 필요하면 저장소의 트랜잭션 격리에 맡깁니다.
"""

from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel
from sqlmodel import SQLModel

from labsvc.core.events import EventSink, LoggingEventSink
from labsvc.core.exceptions import NotFound
from labsvc.core.store import RecordStore

ModelType = TypeVar("ModelType", bound=SQLModel)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)


class EntityService(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    """
    모든 엔티티 서비스의 기본 클래스입니다.
    하위 클래스는 model, update_id_field, event_prefix, secondary_key 를 지정합니다.
    """
    model: Type[ModelType]
    update_id_field: str = "id"     # 수정 요청 스키마에서 대상 레코드의 id를 담는 필드명
    event_prefix: str = "record"
    entity_name: str = "Record"     # NotFound 메시지에 사용할 이름
    secondary_key: Optional[str] = None  # list_by_secondary_key 가 비교할 엔티티 필드명

    def __init__(self, store: RecordStore[ModelType], events: Optional[EventSink] = None):
        self.store = store
        self.events = events or LoggingEventSink()

    def _emit(self, action: str, **fields: Any) -> None:
        self.events.emit(f"{self.event_prefix}.{action}", **fields)

    def _not_found(self, operation: str, id: Any) -> NotFound:
        self._emit("not_found", operation=operation, id=id)
        return NotFound(id, entity_name=self.entity_name)

    # --- 요청 → 엔티티 매핑 ---
    def build_new(self, obj_in: CreateSchemaType) -> ModelType:
        """생성 요청으로 id 없는 새 엔티티를 만듭니다."""
        return self.model.model_validate(obj_in.model_dump(exclude={"id"}))

    def request_id(self, request: UpdateSchemaType) -> int:
        return getattr(request, self.update_id_field)

    def build_replacement(self, request: UpdateSchemaType) -> ModelType:
        """
        수정 요청의 모든 필드를 복사해 완전한 교체용 엔티티를 새로 만듭니다.
        요청에 없는 값은 요청 스키마의 기본값이 됩니다.
        """
        data: Dict[str, Any] = request.model_dump(exclude={self.update_id_field})
        data["id"] = self.request_id(request)
        return self.model.model_validate(data)

    # --- 조회 ---
    async def list_all(self) -> List[ModelType]:
        self._emit("list")
        return await self.store.find_all()

    async def get_by_id(self, id: int) -> ModelType:
        self._emit("get", id=id)
        db_obj = await self.store.find_by_id(id)
        if db_obj is None:
            raise self._not_found("get", id)
        return db_obj

    async def list_by_secondary_key(self, key: Any) -> List[ModelType]:
        self._emit("list_by_key", key=key)
        return await self.store.find_by_secondary_key(key)

    # --- 변경 ---
    async def create(self, obj_in: CreateSchemaType) -> ModelType:
        """새 레코드를 저장합니다. id는 저장소가 할당하므로 존재 확인을 하지 않습니다."""
        stored = await self.store.save(self.build_new(obj_in))
        self._emit("created", id=stored.id)
        return stored

    async def update(self, request: UpdateSchemaType) -> ModelType:
        id = self.request_id(request)
        if not await self.store.exists_by_id(id):
            raise self._not_found("update", id)
        stored = await self.store.save(self.build_replacement(request))
        self._emit("updated", id=id)
        return stored

    async def delete(self, id: int) -> None:
        if not await self.store.exists_by_id(id):
            raise self._not_found("delete", id)
        await self.store.delete_by_id(id)
        self._emit("deleted", id=id)
