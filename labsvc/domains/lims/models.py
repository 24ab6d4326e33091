# labsvc/domains/lims/models.py

"""
'lims' 도메인 (PostgreSQL 'lims' 스키마)의 데이터베이스 ORM 모델을 정의하는 모듈입니다.
"""

from typing import Optional

from sqlmodel import Field, SQLModel


# =============================================================================
# 1. lims.lab_tests 테이블 모델
# =============================================================================
class LabTestBase(SQLModel):
    test_name: Optional[str] = Field(default=None, max_length=255, description="검사명")
    home_sample: Optional[str] = Field(default=None, max_length=50, description="가정 방문 채취 가능 여부")
    test_description: Optional[str] = Field(default=None, description="검사 설명")
    price: int = Field(default=0, description="검사 비용")
    test_approval: bool = Field(default=False, description="검사 승인 여부")
    gov_approval_cert_path: Optional[str] = Field(default=None, max_length=500, description="정부 승인 인증서 경로")
    lab_id: int = Field(default=0, index=True, description="검사를 수행하는 실험실 ID (다른 서비스 소유, FK 아님)")


class LabTest(LabTestBase, table=True):
    __tablename__ = "lab_tests"
    __table_args__ = {'schema': 'lims'}

    id: Optional[int] = Field(default=None, primary_key=True)
