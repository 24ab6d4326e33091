# labsvc/core/__init__.py

"""
FastAPI 애플리케이션의 핵심 구성 요소 패키지입니다.

주요 서브모듈은 다음과 같습니다:

- `config.py`: 애플리케이션의 설정 및 환경 변수 관리 (Pydantic Settings).
- `database.py`: 데이터베이스 연결, 세션 관리 (SQLModel 및 AsyncSQLAlchemy).
- `store.py`: 레코드 저장소 어댑터 프로토콜과 구현 (SQLModel, 인메모리).
- `service.py`: 존재 여부로 보호되는 CRUD를 수행하는 엔티티 서비스 기본 클래스.
- `events.py`: 서비스에 주입되는 관측 협력자(EventSink).
- `exceptions.py`: NotFound / StoreUnavailable 예외.
- `logging_config.py`: 루트 로거 콘솔 핸들러 설정.
- `dependencies.py`: FastAPI의 의존성 주입 시스템에서 사용될 공통 의존성 함수들.
"""

__title__ = "Lab Services Core"
__description__ = "Core components for the Lab Services FastAPI application."
__version__ = "0.1.0"
__all__ = []
