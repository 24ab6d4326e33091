# labsvc/domains/__init__.py

"""
비즈니스 도메인 패키지 모음입니다. 도메인마다 PostgreSQL 스키마 하나를 사용합니다.

- `lims`: 검사 항목 (lab tests)
- `inv`: 재고 (inventory)
- `ord`: 주문 (orders)
"""
