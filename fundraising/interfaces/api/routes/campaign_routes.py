# fundraising/interfaces/api/routes/campaign_routes.py
from datetime import UTC, datetime

from fastapi import APIRouter, Depends, HTTPException

from fundraising.application.dtos.campaign_dto import CampaignOverviewRequest
from fundraising.application.dtos.overview_dto import CampaignOverviewDTO
from fundraising.application.services.dto_mapping import record_from_input, signals_from_input
from fundraising.application.services.overview_service import CampaignOverviewService
from fundraising.interfaces.api.dependencies import get_default_currency, get_overview_service

router = APIRouter()


@router.post("/campaigns/progress", response_model=CampaignOverviewDTO)
def campaign_progress(
    body: CampaignOverviewRequest,
    service: CampaignOverviewService = Depends(get_overview_service),  # noqa: B008
    default_currency: str = Depends(get_default_currency),  # noqa: B008
) -> CampaignOverviewDTO:
    # No `now` in the body: server clock, UTC.
    now = body.now or datetime.now(UTC)
    try:
        record = record_from_input(body.campaign, default_currency)
        signals = signals_from_input(body.donations, record)
        return service.overview(record, signals, now)
    except ValueError as err:
        raise HTTPException(status_code=422, detail=str(err)) from err
