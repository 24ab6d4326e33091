# tests/__init__.py

"""
Lab Services API 테스트 스위트 패키지입니다.

- `core/`: 레코드 저장소 어댑터와 엔티티 서비스 단위 테스트.
- `domains/`: 도메인(lims, inv, ord)별 API 엔드포인트 통합 테스트.
- `conftest.py`: 인메모리 SQLite 엔진, DB 세션, 테스트 클라이언트 픽스처.
"""

__title__ = "Lab Services API Tests"
__description__ = "Test suite for the Lab Services FastAPI application."
__version__ = "0.1.0"
__all__ = []
