# fundraising/application/dtos/progress_dto.py
from pydantic import BaseModel

from .money_dto import MoneyDTO


class TimeRemainingDTO(BaseModel):
    end_date: str
    days_remaining: int
    hours_remaining: int
    minutes_remaining: int
    is_expired: bool
    is_expiring_soon: bool
    text: str
    urgency_level: str
    urgency_color: str


class DonationProgressDTO(BaseModel):
    raised: MoneyDTO
    goal: MoneyDTO
    remaining: MoneyDTO
    percentage: float
    donor_count: int
    days_remaining: int
    is_active: bool
    has_expired: bool
    is_ending_soon: bool
    is_ending_today: bool
    has_reached_goal: bool
    urgency_level: str
    urgency_color: str
    momentum_indicator: str
    needs_boost: bool
    completion_estimate: int | None
    average_donation: MoneyDTO | None
    largest_donation: MoneyDTO | None


class CampaignProgressDTO(BaseModel):
    campaign_id: int
    goal_amount: str
    current_amount: str
    remaining_amount: str
    percentage: float
    percentage_rounded: int
    total_days: int
    days_elapsed: int
    days_remaining: int
    expected_progress: float
    velocity: str
    projected_final_amount: str
    is_on_track: bool
    is_likely_to_succeed: bool
    is_behind_schedule: bool
    has_reached_goal: bool
    performance_status: str
    donations_count: int


class PerformanceMetricsDTO(BaseModel):
    efficiency: float
    momentum: float
    risk_score: float
    performance_score: float


class BehindScheduleDTO(BaseModel):
    campaign_id: int
    title: str
    current_progress: float
    expected_progress: float
    progress_deficit: float
    days_remaining: int
    status: str


class ApproachingDeadlineDTO(BaseModel):
    campaign_id: int
    title: str
    days_remaining: int
    current_progress: float
    goal_amount: str
    current_amount: str
    remaining_amount: str
    is_likely_to_succeed: bool


class TopPerformerDTO(BaseModel):
    campaign_id: int
    title: str
    progress_percentage: float
    goal_amount: str
    current_amount: str
    donations_count: int
    days_remaining: int
    velocity: str
    projected_final_amount: str


class OrganizationSummaryDTO(BaseModel):
    organization_id: int
    total_campaigns: int
    active_campaigns: int
    completed_campaigns: int
    total_goal_amount: str
    total_raised_amount: str
    overall_progress_percentage: float
    campaigns_progress: list[CampaignProgressDTO]


class LowEngagementDTO(BaseModel):
    campaign_id: int
    title: str
    days_active: int
    donations_count: int
    expected_donations: int
    engagement_ratio: float
    current_progress: float


class StalledCampaignDTO(BaseModel):
    campaign_id: int
    title: str
    days_active: int
    current_progress: float
    current_amount: str
    days_remaining: int


class NeedingAttentionDTO(BaseModel):
    behind_schedule: list[BehindScheduleDTO]
    approaching_deadline: list[ApproachingDeadlineDTO]
    low_engagement: list[LowEngagementDTO]
    stalled_campaigns: list[StalledCampaignDTO]
