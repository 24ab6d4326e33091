# labsvc/domains/lims/schemas.py

"""
'lims' 도메인의 Pydantic 스키마를 정의하는 모듈입니다.

수정 요청(LabTestUpdateRequest)은 대상 id(test_id)와 엔티티의 모든 필드를 함께 담으며,
전체 덮어쓰기로 적용됩니다. 생략된 필드는 아래 기본값으로 저장됩니다.
"""

from typing import Optional
from pydantic import BaseModel, Field as PydanticField


# =============================================================================
# 1. 검사 항목 (LabTest) 스키마
# =============================================================================
class LabTestBase(BaseModel):
    test_name: Optional[str] = PydanticField(default=None, max_length=255, description="검사명")
    home_sample: Optional[str] = PydanticField(default=None, max_length=50, description="가정 방문 채취 가능 여부")
    test_description: Optional[str] = PydanticField(default=None, description="검사 설명")
    price: int = PydanticField(default=0, description="검사 비용")
    test_approval: bool = PydanticField(default=False, description="검사 승인 여부")
    gov_approval_cert_path: Optional[str] = PydanticField(default=None, max_length=500, description="정부 승인 인증서 경로")
    lab_id: int = PydanticField(default=0, description="실험실 ID")


class LabTestCreate(LabTestBase):
    pass


class LabTestUpdateRequest(LabTestBase):
    test_id: int = PydanticField(description="수정할 검사 항목 ID")


class LabTestResponse(LabTestBase):
    id: int = PydanticField(description="검사 항목 고유 ID")

    class Config:
        from_attributes = True


class LabTestMessageResponse(BaseModel):
    message: str
    test: Optional[LabTestResponse] = None
