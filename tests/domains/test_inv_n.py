# tests/domains/test_inv_n.py

"""
'inv' 도메인 (재고 관리) 관련 API 엔드포인트에 대한 통합 테스트 모듈입니다.
"""

from typing import List

import pytest
from httpx import AsyncClient
from sqlmodel.ext.asyncio.session import AsyncSession

from labsvc.domains.inv import models as inv_models


# =================================================================================
# 0. 테스트를 위한 Fixture 설정
# =================================================================================
@pytest.fixture(scope="function")
async def inv_test_items(db_session: AsyncSession) -> List[inv_models.InventoryItem]:
    """재고 있음(iphone_13), 재고 없음(iphone_13_red) 품목 생성 픽스처"""
    items = [
        inv_models.InventoryItem(sku_code="iphone_13", quantity=100),
        inv_models.InventoryItem(sku_code="iphone_13_red", quantity=0),
    ]
    db_session.add_all(items)
    await db_session.commit()
    for item in items:
        await db_session.refresh(item)
    return items


@pytest.mark.asyncio
async def test_working(client: AsyncClient):
    """(성공) 서비스 동작 확인 엔드포인트"""
    response = await client.get("/api/v1/inv/working")
    assert response.status_code == 200
    assert response.json() == "Working"


# =================================================================================
# 1. 재고 확인
# =================================================================================
@pytest.mark.asyncio
async def test_check_stock(client: AsyncClient, inv_test_items):
    """(성공) 요청한 SKU별 재고 여부 반환, 저장소에 없는 SKU는 제외"""
    response = await client.get(
        "/api/v1/inv/stock",
        params=[("sku_code", "iphone_13"), ("sku_code", "iphone_13_red"), ("sku_code", "unknown")],
    )
    assert response.status_code == 200
    result = {s["sku_code"]: s["is_in_stock"] for s in response.json()}
    assert result == {"iphone_13": True, "iphone_13_red": False}


@pytest.mark.asyncio
async def test_check_stock_requires_sku(client: AsyncClient):
    """(실패) sku_code 없이 재고 확인 시 422"""
    response = await client.get("/api/v1/inv/stock")
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_check_stock_store_unavailable(unreachable_client: AsyncClient):
    """(실패) 저장소에 연결할 수 없으면 재고 확인 시 503"""
    response = await unreachable_client.get("/api/v1/inv/stock", params={"sku_code": "iphone_13"})
    assert response.status_code == 503
    assert response.json() == {"detail": "Record store unavailable"}


# =================================================================================
# 2. 재고 품목 CRUD
# =================================================================================
@pytest.mark.asyncio
async def test_read_items_by_sku(client: AsyncClient, inv_test_items):
    """(성공) SKU로 재고 품목 조회"""
    response = await client.get("/api/v1/inv/items/by-sku/iphone_13")
    assert response.status_code == 200
    assert [i["quantity"] for i in response.json()] == [100]


@pytest.mark.asyncio
async def test_item_lifecycle(client: AsyncClient):
    """(성공) 재고 품목 생성 → 조회 → 수정 → 삭제"""
    response = await client.post("/api/v1/inv/items", json={"sku_code": "pixel_8", "quantity": 5})
    assert response.status_code == 201
    item = response.json()

    response = await client.get(f"/api/v1/inv/items/{item['id']}")
    assert response.status_code == 200
    assert response.json() == item

    response = await client.put("/api/v1/inv/items", json={"item_id": item["id"], "sku_code": "pixel_8"})
    assert response.status_code == 200
    assert response.json() == {
        "message": f"Inventory item having item_id : {item['id']} Updated Successfully !!",
        "item": {"id": item["id"], "sku_code": "pixel_8", "quantity": 0},
    }

    response = await client.get("/api/v1/inv/stock", params={"sku_code": "pixel_8"})
    assert response.json() == [{"sku_code": "pixel_8", "is_in_stock": False}]

    response = await client.delete(f"/api/v1/inv/items/{item['id']}")
    assert response.status_code == 200
    assert response.json()["message"] == f"Inventory item having item_id : {item['id']} Deleted Successfully !!"

    response = await client.get("/api/v1/inv/items")
    assert response.json() == []


@pytest.mark.asyncio
async def test_create_item_requires_sku(client: AsyncClient):
    """(실패) sku_code 없이 생성 시 422"""
    response = await client.post("/api/v1/inv/items", json={"quantity": 1})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_update_item_not_found(client: AsyncClient):
    """(실패) 존재하지 않는 재고 품목 수정 시 404"""
    response = await client.put("/api/v1/inv/items", json={"item_id": 555, "sku_code": "ghost", "quantity": 1})
    assert response.status_code == 404
    assert response.json()["detail"] == "Inventory item not found with id: 555"


@pytest.mark.asyncio
async def test_delete_item_not_found(client: AsyncClient):
    """(실패) 존재하지 않는 재고 품목 삭제 시 404"""
    response = await client.delete("/api/v1/inv/items/555")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_check_stock_with_memory_backend(memory_client: AsyncClient):
    """(성공) memory 백엔드에서 재고 확인"""
    await memory_client.post("/api/v1/inv/items", json={"sku_code": "iphone_13", "quantity": 3})
    await memory_client.post("/api/v1/inv/items", json={"sku_code": "iphone_13_red", "quantity": 0})

    response = await memory_client.get(
        "/api/v1/inv/stock", params=[("sku_code", "iphone_13"), ("sku_code", "iphone_13_red")]
    )
    assert response.status_code == 200
    assert sorted(response.json(), key=lambda s: s["sku_code"]) == [
        {"sku_code": "iphone_13", "is_in_stock": True},
        {"sku_code": "iphone_13_red", "is_in_stock": False},
    ]
