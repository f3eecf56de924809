# fundraising/application/dtos/overview_dto.py
from pydantic import BaseModel

from .progress_dto import (
    CampaignProgressDTO,
    DonationProgressDTO,
    PerformanceMetricsDTO,
    TimeRemainingDTO,
)
from .status_dto import StatusDTO
from .target_dto import TargetEvaluationDTO


class CampaignOverviewDTO(BaseModel):
    campaign_id: int
    title: str
    status: StatusDTO
    target: TargetEvaluationDTO | None
    milestones_reached: list[int]
    time_remaining: TimeRemainingDTO
    donation_progress: DonationProgressDTO
    campaign_progress: CampaignProgressDTO
    metrics: PerformanceMetricsDTO
    health_status: str
    recommendations: list[str]
