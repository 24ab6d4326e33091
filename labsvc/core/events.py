# labsvc/core/events.py

"""
엔티티 서비스에 주입되는 관측(observability) 협력자를 정의하는 모듈입니다.

서비스는 전역 로거를 직접 사용하지 않고, 생성 시 전달받은 EventSink로
구조화된 이벤트(이름 + 필드)를 내보냅니다.
"""

import logging
from typing import Any, Dict, List, Optional, Protocol, Tuple


class EventSink(Protocol):
    def emit(self, event: str, **fields: Any) -> None: ...


class LoggingEventSink:
    """
    이벤트를 표준 logging으로 기록하는 기본 구현입니다.
    '*.not_found' 이벤트는 WARNING, 나머지는 INFO 레벨로 기록합니다.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger("labsvc.events")

    def emit(self, event: str, **fields: Any) -> None:
        level = logging.WARNING if event.endswith(".not_found") else logging.INFO
        self.logger.log(level, "%s %s", event, fields, extra={"event": event, "fields": fields})


class RecordingEventSink:
    """내보낸 이벤트를 메모리에 보관합니다. 테스트용."""

    def __init__(self) -> None:
        self.events: List[Tuple[str, Dict[str, Any]]] = []

    def emit(self, event: str, **fields: Any) -> None:
        self.events.append((event, dict(fields)))

    def names(self) -> List[str]:
        return [name for name, _ in self.events]
