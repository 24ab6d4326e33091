# labsvc/domains/inv/__init__.py

"""
'inv' 도메인 패키지입니다.

PostgreSQL의 'inv' 스키마에 해당하는 재고 품목(InventoryItem) 데이터와
SKU 코드별 재고 여부 조회 API를 포함합니다.
"""

__title__ = "Lab Services Inventory Domain"
__description__ = "Manages stock quantities per SKU."
__version__ = "0.1.0"
__all__ = []
