# fundraising/application/services/overview_service.py
from __future__ import annotations

from datetime import datetime

from fundraising.domain.campaign.entities import CampaignRecord
from fundraising.domain.campaign.progress import DonationProgress
from fundraising.domain.campaign.repository import CampaignRepository
from fundraising.domain.campaign.services import CampaignProgressCalculator
from fundraising.domain.campaign.value_objects import (
    MILESTONE_PERCENTAGES,
    TARGET_MAXIMUM,
    TARGET_MINIMUM,
    FundraisingTarget,
    TimeRemaining,
)
from fundraising.domain.donation.entities import DonationSignals
from fundraising.domain.donation.repository import DonationRepository

from ..dtos.overview_dto import CampaignOverviewDTO
from .dto_mapping import (
    campaign_progress_dto,
    donation_progress_dto,
    metrics_dto,
    status_dto,
    time_remaining_dto,
)
from .progress_service import CampaignNotFoundError
from .target_service import TargetService


class CampaignOverviewService:
    """Everything the campaign page and the organiser dashboard show, in one DTO."""

    def __init__(
        self,
        calculator: CampaignProgressCalculator | None = None,
        expiring_soon_days: int = 7,
        campaign_repo: CampaignRepository | None = None,
        donation_repo: DonationRepository | None = None,
    ) -> None:
        self._calculator = calculator or CampaignProgressCalculator()
        self._expiring_soon_days = expiring_soon_days
        self._campaign_repo = campaign_repo
        self._donation_repo = donation_repo

    def overview(self, record: CampaignRecord, signals: DonationSignals, now: datetime) -> CampaignOverviewDTO:
        time_remaining = TimeRemaining.from_campaign(record, now)
        days_remaining = time_remaining.days_remaining
        # Truncation turns "ended 5 hours ago" into 0; keep the sign so expiry survives.
        if time_remaining.is_expired and days_remaining == 0:
            days_remaining = -1
        donation_progress = DonationProgress(
            raised=signals.raised,
            goal=record.money_goal,
            donor_count=signals.donor_count,
            days_remaining=days_remaining,
            is_active=record.status.is_active,
            average_donation=signals.average_donation,
            largest_donation=signals.largest_donation,
            recent_momentum=signals.recent_momentum,
        )
        progress = self._calculator.calculate(record, now)
        metrics = self._calculator.metrics_for(progress)

        target_dto = None
        milestones_reached: list[int] = []
        # Goals outside the target range (legacy campaigns) get no target block.
        if TARGET_MINIMUM <= record.goal_amount <= TARGET_MAXIMUM:
            target = FundraisingTarget(record.money_goal)
            target_dto = TargetService.describe(target, signals.raised)
            milestones_reached = [
                pct for pct in MILESTONE_PERCENTAGES
                if target.has_milestone_been_reached(signals.raised, pct)
            ]

        return CampaignOverviewDTO(
            campaign_id=record.id,
            title=record.title,
            status=status_dto(record.status),
            target=target_dto,
            milestones_reached=milestones_reached,
            time_remaining=time_remaining_dto(time_remaining, self._expiring_soon_days),
            donation_progress=donation_progress_dto(donation_progress),
            campaign_progress=campaign_progress_dto(progress),
            metrics=metrics_dto(metrics),
            health_status=self._calculator.health_for(metrics),
            recommendations=self._calculator.recommendations_for(progress),
        )

    def overview_for_campaign(self, campaign_id: int, now: datetime) -> CampaignOverviewDTO:
        """Repository-backed variant. Both repositories must have been injected."""
        if self._campaign_repo is None or self._donation_repo is None:
            raise RuntimeError("CampaignOverviewService was built without repositories")
        record = self._campaign_repo.find_by_id(campaign_id)
        if record is None:
            raise CampaignNotFoundError(campaign_id)
        return self.overview(record, self._donation_repo.signals_for_campaign(campaign_id), now)
