# labsvc/domains/lims/__init__.py

"""
'lims' 도메인 패키지입니다.

PostgreSQL의 'lims' 스키마에 해당하는 검사 항목(LabTest) 데이터와
관련된 서비스 로직 및 API 엔드포인트를 포함합니다.
검사 항목은 실험실(lab_id)별로 조회할 수 있습니다.

주요 서브모듈:
- `models.py`: 'lims' 스키마의 테이블에 매핑되는 SQLModel 정의.
- `schemas.py`: 요청 및 응답 Pydantic 모델.
- `services.py`: 존재 여부로 보호되는 CRUD 서비스.
- `routers.py`: FastAPI API 엔드포인트 정의.
"""

__title__ = "Lab Services LIMS Domain"
__description__ = "Manages lab tests offered by each lab."
__version__ = "0.1.0"
__all__ = []
