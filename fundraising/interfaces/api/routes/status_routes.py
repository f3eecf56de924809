# fundraising/interfaces/api/routes/status_routes.py
from fastapi import APIRouter, Depends, HTTPException

from fundraising.application.dtos.status_dto import StatusDTO, TransitionCheckDTO
from fundraising.application.services.status_service import StatusService
from fundraising.interfaces.api.dependencies import get_status_service

router = APIRouter()


@router.get("/statuses", response_model=list[StatusDTO])
def list_statuses(
    service: StatusService = Depends(get_status_service),  # noqa: B008
) -> list[StatusDTO]:
    return service.list_statuses()


@router.get("/statuses/{status}/transitions/{target}", response_model=TransitionCheckDTO)
def check_transition(
    status: str,
    target: str,
    service: StatusService = Depends(get_status_service),  # noqa: B008
) -> TransitionCheckDTO:
    try:
        return service.check_transition(status, target)
    except ValueError as err:
        raise HTTPException(status_code=422, detail=str(err)) from err
