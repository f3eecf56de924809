# fundraising/application/services/progress_service.py
#
# Repository-backed progress queries for dashboards and periodic jobs.
#
# Design decisions:
#   - The reference instant comes from an injected clock, so jobs and tests
#     decide what "now" is. The domain calculator only ever sees a datetime.
#   - Status changes are validated, never persisted: request_transition and
#     suggested_status return a CampaignStatus and the caller stores it.
#   - Only ACTIVE campaigns feed the behind-schedule, deadline, engagement,
#     stalled and top lists.
from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import UTC, datetime
from decimal import Decimal

from fundraising.domain.campaign.entities import CampaignRecord
from fundraising.domain.campaign.enums import CampaignStatus
from fundraising.domain.campaign.progress import CampaignProgress
from fundraising.domain.campaign.repository import CampaignRepository
from fundraising.domain.campaign.services import CampaignProgressCalculator
from fundraising.domain.campaign.value_objects import TimeRemaining

from ..dtos.progress_dto import (
    ApproachingDeadlineDTO,
    BehindScheduleDTO,
    LowEngagementDTO,
    NeedingAttentionDTO,
    OrganizationSummaryDTO,
    StalledCampaignDTO,
    TopPerformerDTO,
)
from .dto_mapping import campaign_progress_dto

# Attention thresholds.
LOW_ENGAGEMENT_MIN_DAYS = 3
DAYS_PER_EXPECTED_DONATION = 3
STALLED_MIN_DAYS = 7
STALLED_MAX_PROGRESS = 10.0


class CampaignNotFoundError(LookupError):
    def __init__(self, campaign_id: int) -> None:
        super().__init__(f"Campaign with ID {campaign_id} not found")
        self.campaign_id = campaign_id


def _utc_now() -> datetime:
    return datetime.now(UTC)


class CampaignProgressService:
    def __init__(
        self,
        campaign_repo: CampaignRepository,
        calculator: CampaignProgressCalculator | None = None,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self._campaign_repo = campaign_repo
        self._calculator = calculator or CampaignProgressCalculator()
        self._clock = clock

    def _get(self, campaign_id: int) -> CampaignRecord:
        record = self._campaign_repo.find_by_id(campaign_id)
        if record is None:
            raise CampaignNotFoundError(campaign_id)
        return record

    def campaign_progress(self, campaign_id: int) -> CampaignProgress:
        return self._calculator.calculate(self._get(campaign_id), self._clock())

    def multiple_campaign_progress(self, campaign_ids: Sequence[int]) -> dict[int, CampaignProgress]:
        now = self._clock()
        return {
            record.id: self._calculator.calculate(record, now)
            for record in self._campaign_repo.find_by_ids(campaign_ids)
        }

    def organization_summary(self, organization_id: int) -> OrganizationSummaryDTO:
        now = self._clock()
        records = self._campaign_repo.find_by_organization_id(organization_id)
        progress = [self._calculator.calculate(r, now) for r in records]

        total_goal = sum((r.goal_amount for r in records), Decimal("0"))
        total_raised = sum((r.current_amount for r in records), Decimal("0"))
        overall = float(total_raised / total_goal * 100) if total_goal > 0 else 0.0

        return OrganizationSummaryDTO(
            organization_id=organization_id,
            total_campaigns=len(records),
            active_campaigns=sum(1 for r in records if r.status is CampaignStatus.ACTIVE),
            completed_campaigns=sum(1 for r in records if r.status is CampaignStatus.COMPLETED),
            total_goal_amount=str(total_goal),
            total_raised_amount=str(total_raised),
            overall_progress_percentage=overall,
            campaigns_progress=[campaign_progress_dto(p) for p in progress],
        )

    def _active_with_progress(self) -> list[tuple[CampaignRecord, CampaignProgress]]:
        now = self._clock()
        records = self._campaign_repo.find_by_status(CampaignStatus.ACTIVE)
        return [(r, self._calculator.calculate(r, now)) for r in records]

    def behind_schedule(self) -> list[BehindScheduleDTO]:
        return [
            BehindScheduleDTO(
                campaign_id=record.id,
                title=record.title,
                current_progress=progress.percentage,
                expected_progress=progress.expected_progress,
                progress_deficit=progress.expected_progress - progress.percentage,
                days_remaining=progress.days_remaining,
                status=record.status.value,
            )
            for record, progress in self._active_with_progress()
            if progress.is_behind_schedule
        ]

    def approaching_deadline(self, days_threshold: int = 7) -> list[ApproachingDeadlineDTO]:
        """Active campaigns ending within `days_threshold` days, soonest first."""
        items = [
            ApproachingDeadlineDTO(
                campaign_id=record.id,
                title=record.title,
                days_remaining=progress.days_remaining,
                current_progress=progress.percentage,
                goal_amount=str(record.goal_amount),
                current_amount=str(record.current_amount),
                remaining_amount=str(progress.remaining_amount),
                is_likely_to_succeed=progress.is_likely_to_succeed,
            )
            for record, progress in self._active_with_progress()
            if 0 < progress.days_remaining <= days_threshold
        ]
        return sorted(items, key=lambda item: item.days_remaining)

    def top_performing(self, limit: int = 10) -> list[TopPerformerDTO]:
        items = [
            TopPerformerDTO(
                campaign_id=record.id,
                title=record.title,
                progress_percentage=progress.percentage,
                goal_amount=str(record.goal_amount),
                current_amount=str(record.current_amount),
                donations_count=record.donations_count,
                days_remaining=progress.days_remaining,
                velocity=str(progress.velocity),
                projected_final_amount=str(progress.projected_final_amount),
            )
            for record, progress in self._active_with_progress()
        ]
        items.sort(key=lambda item: item.progress_percentage, reverse=True)
        return items[:limit]

    def low_engagement(self) -> list[LowEngagementDTO]:
        """Active for more than 3 days with fewer than one donation per 3 days."""
        now = self._clock()
        items: list[LowEngagementDTO] = []
        for record in self._campaign_repo.find_by_status(CampaignStatus.ACTIVE):
            days_active = self._calculator.days_active(record, now)
            expected = max(1.0, days_active / DAYS_PER_EXPECTED_DONATION)
            if days_active <= LOW_ENGAGEMENT_MIN_DAYS or record.donations_count >= expected:
                continue
            progress = self._calculator.calculate(record, now)
            items.append(
                LowEngagementDTO(
                    campaign_id=record.id,
                    title=record.title,
                    days_active=days_active,
                    donations_count=record.donations_count,
                    expected_donations=round(expected),
                    engagement_ratio=round(record.donations_count / expected, 2),
                    current_progress=progress.percentage,
                )
            )
        return items

    def stalled(self) -> list[StalledCampaignDTO]:
        """Active for more than a week and still under 10% of the goal."""
        now = self._clock()
        items: list[StalledCampaignDTO] = []
        for record, progress in self._active_with_progress():
            days_active = self._calculator.days_active(record, now)
            if days_active > STALLED_MIN_DAYS and progress.percentage < STALLED_MAX_PROGRESS:
                items.append(
                    StalledCampaignDTO(
                        campaign_id=record.id,
                        title=record.title,
                        days_active=days_active,
                        current_progress=progress.percentage,
                        current_amount=str(record.current_amount),
                        days_remaining=progress.days_remaining,
                    )
                )
        return items

    def needing_attention(self, days_threshold: int = 7) -> NeedingAttentionDTO:
        return NeedingAttentionDTO(
            behind_schedule=self.behind_schedule(),
            approaching_deadline=self.approaching_deadline(days_threshold),
            low_engagement=self.low_engagement(),
            stalled_campaigns=self.stalled(),
        )

    def request_transition(self, campaign_id: int, target: CampaignStatus | str) -> CampaignStatus:
        """Validate a status change. Raises ValueError with the rejection message."""
        record = self._get(campaign_id)
        if not isinstance(target, CampaignStatus):
            target = CampaignStatus.from_string(target)
        return record.status.ensure_transition(target)

    def suggested_status(self, campaign_id: int) -> CampaignStatus | None:
        """COMPLETED once an active campaign reaches its goal, EXPIRED once its end
        date has passed. None when nothing should change."""
        record = self._get(campaign_id)
        if record.status is not CampaignStatus.ACTIVE:
            return None
        now = self._clock()
        progress = self._calculator.calculate(record, now)
        if progress.has_reached_goal:
            return CampaignStatus.COMPLETED
        if TimeRemaining.from_campaign(record, now).is_expired:
            return CampaignStatus.EXPIRED
        return None
