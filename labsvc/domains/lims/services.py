# labsvc/domains/lims/services.py

"""
'lims' 도메인의 검사 항목(LabTest) 서비스 모듈입니다.
"""

from typing import List

from fastapi import Depends

from labsvc.core import dependencies as deps
from labsvc.core.events import EventSink
from labsvc.core.service import EntityService

from . import models as lims_models
from . import schemas as lims_schemas


class LabTestService(EntityService[lims_models.LabTest, lims_schemas.LabTestCreate, lims_schemas.LabTestUpdateRequest]):
    model = lims_models.LabTest
    update_id_field = "test_id"
    event_prefix = "lab_test"
    entity_name = "Lab test"
    secondary_key = "lab_id"

    def build_replacement(self, request: lims_schemas.LabTestUpdateRequest) -> lims_models.LabTest:
        """수정 요청의 모든 필드를 새 LabTest에 복사합니다 (전체 덮어쓰기)."""
        return lims_models.LabTest(
            id=request.test_id,
            test_name=request.test_name,
            home_sample=request.home_sample,
            test_description=request.test_description,
            price=request.price,
            test_approval=request.test_approval,
            gov_approval_cert_path=request.gov_approval_cert_path,
            lab_id=request.lab_id,
        )

    async def list_by_lab(self, lab_id: int) -> List[lims_models.LabTest]:
        return await self.list_by_secondary_key(lab_id)


def get_lab_test_service(
    stores: deps.StoreFactory = Depends(deps.get_store_factory),
    events: EventSink = Depends(deps.get_event_sink),
) -> LabTestService:
    return LabTestService(stores(LabTestService.model, LabTestService.secondary_key), events)
