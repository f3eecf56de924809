# fundraising/application/dtos/stats_dto.py
from pydantic import BaseModel, Field

from .campaign_dto import CampaignInputDTO


class UserStatsRequest(BaseModel):
    campaigns: list[CampaignInputDTO]
    total_donations: int | None = Field(default=None, ge=0)
    currency: str | None = None


class UserCampaignStatsDTO(BaseModel):
    total_campaigns: int
    active_campaigns: int
    completed_campaigns: int
    draft_campaigns: int
    total_published_campaigns: int
    total_amount_raised: str
    total_goal_amount: str
    total_donations: int
    average_success_rate: str
    progress_percentage: float
    formatted_total_raised: str
    formatted_total_goal: str
    formatted_success_rate: str
    has_active_campaigns: bool
    has_drafts: bool
