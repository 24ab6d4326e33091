# labsvc/__init__.py

"""
Lab Services FastAPI 애플리케이션의 메인 패키지입니다.

이 패키지는 세 개의 얇은 CRUD 서비스(검사 항목, 재고, 주문)를 하나의 애플리케이션으로 묶습니다.
FastAPI 애플리케이션의 진입점 (main.py)과
공통 설정, 데이터베이스 연결, 레코드 저장소 어댑터, 엔티티 서비스를 담는 core 서브패키지,
그리고 각 서비스를 대표하는 domains 서브패키지로 구성됩니다.
"""

APP_NAME = "Lab Services API"
APP_VERSION = "0.1.0"
API_PREFIX = "/api/v1"  # API 라우트의 공통 접두사 (main.py에서 적용)

__version__ = APP_VERSION
__title__ = APP_NAME
__description__ = "Existence-gated CRUD services for lab tests, inventory and orders."
__all__ = []
