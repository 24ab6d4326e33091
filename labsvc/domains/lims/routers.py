# labsvc/domains/lims/routers.py

"""
'lims' 도메인 (검사 항목 관리) 관련 API 엔드포인트를 정의하는 모듈입니다.
NotFound / StoreUnavailable 은 main.py의 예외 핸들러가 HTTP 응답으로 변환합니다.
"""
from typing import List

from fastapi import APIRouter, Depends, status

from . import schemas as lims_schemas
from .services import LabTestService, get_lab_test_service

router = APIRouter(
    tags=["Lab Test Management (검사 항목 관리)"],
    responses={404: {"description": "Not found"}},
)


# =============================================================================
# 1. 검사 항목 (LabTest) 라우터
# =============================================================================
@router.get("/tests", response_model=List[lims_schemas.LabTestResponse], summary="모든 검사 항목 조회")
async def read_lab_tests(service: LabTestService = Depends(get_lab_test_service)):
    return await service.list_all()


@router.get("/tests/{test_id}", response_model=lims_schemas.LabTestResponse, summary="특정 검사 항목 조회")
async def read_lab_test(test_id: int, service: LabTestService = Depends(get_lab_test_service)):
    """ID를 기준으로 검사 항목을 조회합니다. 없으면 404를 반환합니다."""
    return await service.get_by_id(test_id)


@router.get("/labs/{lab_id}/tests", response_model=List[lims_schemas.LabTestResponse], summary="실험실별 검사 항목 조회")
async def read_lab_tests_in_lab(lab_id: int, service: LabTestService = Depends(get_lab_test_service)):
    return await service.list_by_lab(lab_id)


@router.post("/tests", response_model=lims_schemas.LabTestResponse, status_code=status.HTTP_201_CREATED, summary="새 검사 항목 생성")
async def create_lab_test(
    test_in: lims_schemas.LabTestCreate,
    service: LabTestService = Depends(get_lab_test_service),
):
    return await service.create(test_in)


@router.put("/tests", response_model=lims_schemas.LabTestMessageResponse, summary="검사 항목 전체 수정")
async def update_lab_test(
    request: lims_schemas.LabTestUpdateRequest,
    service: LabTestService = Depends(get_lab_test_service),
):
    """
    요청 본문의 test_id 레코드를 요청 내용으로 통째로 교체합니다.
    본문에서 생략한 필드는 기본값으로 초기화됩니다.
    """
    updated = await service.update(request)
    return lims_schemas.LabTestMessageResponse(
        message=f"Lab test having test_id : {request.test_id} Updated Successfully !!",
        test=lims_schemas.LabTestResponse.model_validate(updated),
    )


@router.delete("/tests/{test_id}", response_model=lims_schemas.LabTestMessageResponse, summary="검사 항목 삭제")
async def delete_lab_test(test_id: int, service: LabTestService = Depends(get_lab_test_service)):
    await service.delete(test_id)
    return lims_schemas.LabTestMessageResponse(
        message=f"Lab test having test_id : {test_id} Deleted Successfully !!",
    )
