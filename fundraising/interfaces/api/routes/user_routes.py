# fundraising/interfaces/api/routes/user_routes.py
from fastapi import APIRouter, Depends, HTTPException

from fundraising.application.dtos.stats_dto import UserCampaignStatsDTO, UserStatsRequest
from fundraising.application.services.dto_mapping import record_from_input
from fundraising.application.services.user_stats_service import build_user_campaign_stats, stats_dto
from fundraising.interfaces.api.dependencies import get_default_currency

router = APIRouter()


@router.post("/users/stats", response_model=UserCampaignStatsDTO)
def user_stats(
    body: UserStatsRequest,
    default_currency: str = Depends(get_default_currency),  # noqa: B008
) -> UserCampaignStatsDTO:
    currency = body.currency or default_currency
    try:
        records = [record_from_input(c, currency) for c in body.campaigns]
        stats = build_user_campaign_stats(records, body.total_donations, currency=currency)
        return stats_dto(stats)
    except ValueError as err:
        raise HTTPException(status_code=422, detail=str(err)) from err
