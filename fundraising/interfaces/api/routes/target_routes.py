# fundraising/interfaces/api/routes/target_routes.py
from fastapi import APIRouter, Depends, HTTPException

from fundraising.application.dtos.target_dto import TargetEvaluationDTO, TargetEvaluationRequest
from fundraising.application.services.target_service import TargetService
from fundraising.interfaces.api.dependencies import get_target_service

router = APIRouter()


@router.post("/targets/evaluate", response_model=TargetEvaluationDTO)
def evaluate_target(
    body: TargetEvaluationRequest,
    service: TargetService = Depends(get_target_service),  # noqa: B008
) -> TargetEvaluationDTO:
    try:
        return service.evaluate(body.amount, raised=body.raised, currency=body.currency)
    except ValueError as err:
        raise HTTPException(status_code=422, detail=str(err)) from err
