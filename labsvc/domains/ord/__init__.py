# labsvc/domains/ord/__init__.py

"""
'ord' 도메인 패키지입니다.

PostgreSQL의 'ord' 스키마에 해당하는 주문(Order)과 주문 품목(OrderLineItem) 데이터를 다룹니다.
주문 품목은 order_id로, 주문은 order_number로 조회할 수 있습니다.

주문 품목은 주문에 포함된 목록이 아니라 독립된 리소스(/line-items)입니다.
주문을 삭제해도 주문 품목은 함께 삭제되지 않으며(cascade 없음), 필요하면 호출자가 따로 삭제합니다.
"""

__title__ = "Lab Services Order Domain"
__description__ = "Manages orders and their line items."
__version__ = "0.1.0"
__all__ = []
