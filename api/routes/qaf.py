from fastapi import APIRouter

from api.requests import QafRequest
from api.responses import QafResponse
from api.routes.exception import handle_exceptions
from services import qaf_service

router = APIRouter(tags=["QAF"])


@router.post("/qaf", response_model=QafResponse, summary="Normalize parameters and aggregate daily/monthly QAF")
@handle_exceptions
async def qaf(req: QafRequest) -> QafResponse:
    return await qaf_service.qaf_summary(req)
