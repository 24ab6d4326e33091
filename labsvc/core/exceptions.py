# labsvc/core/exceptions.py

"""
서비스 계층과 레코드 저장소 어댑터가 발생시키는 예외를 정의하는 모듈입니다.

- NotFound: 조회/수정/삭제 대상 레코드가 존재하지 않을 때 (클라이언트 오류, 재시도 없음).
- StoreUnavailable: 저장소(DB)에 접근할 수 없을 때 (서버 오류, 재시도 없음).

HTTP 상태 코드로의 변환은 main.py의 예외 핸들러가 담당합니다.
"""

from typing import Any, Optional


class ServiceError(Exception):
    """서비스 계층에서 예측 가능한 예외의 기본 클래스."""


class NotFound(ServiceError):
    """요청한 식별자의 레코드가 저장소에 존재하지 않습니다."""

    def __init__(self, id: Any, entity_name: str = "Record"):
        self.id = id
        self.entity_name = entity_name
        super().__init__(f"{entity_name} not found with id: {id}")


class StoreUnavailable(ServiceError):
    """저장소 매체(네트워크/디스크)에 접근할 수 없습니다."""

    def __init__(self, message: str = "Record store unavailable", *, operation: Optional[str] = None):
        self.operation = operation
        super().__init__(message if operation is None else f"{message} during {operation}")
